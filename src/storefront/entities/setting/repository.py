"""Data-access layer for settings."""

from sqlmodel import Session, col, select

from src.storefront.entities._base import utcnow
from src.storefront.entities.setting.entity import Setting
from src.storefront.entities.setting.table import SettingTable


class SettingRepository:
    """Data-access layer for settings."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _row(self, key: str) -> SettingTable | None:
        statement = select(SettingTable).where(SettingTable.key == key)
        return self._session.exec(statement).first()

    def all(self) -> list[Setting]:
        """All settings in insertion order."""
        statement = select(SettingTable).order_by(col(SettingTable.id))
        return [Setting.model_validate(row) for row in self._session.exec(statement).all()]

    def get(self, key: str) -> Setting | None:
        row = self._row(key)
        if row is None:
            return None
        return Setting.model_validate(row)

    def upsert(self, key: str, value: str | None) -> Setting:
        row = self._row(key)
        if row is None:
            row = SettingTable(key=key, value=value)
        else:
            row.value = value
            row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Setting.model_validate(row)

    def insert_if_absent(self, key: str, value: str | None) -> bool:
        """Insert the key unless it already exists. Returns True when inserted."""
        if self._row(key) is not None:
            return False
        self._session.add(SettingTable(key=key, value=value))
        self._session.flush()
        return True
