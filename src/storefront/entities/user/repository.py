"""Data-access layer for admin users."""

from sqlmodel import Session, col, select

from src.storefront.entities.user.entity import AdminUser
from src.storefront.entities.user.table import UserTable


class UserRepository:
    """Data-access layer for admin users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _row(self, username: str) -> UserTable | None:
        statement = select(UserTable).where(UserTable.username == username)
        return self._session.exec(statement).first()

    def get_by_username(self, username: str) -> AdminUser | None:
        row = self._row(username)
        if row is None:
            return None
        return AdminUser.model_validate(row)

    def list_all(self) -> list[AdminUser]:
        statement = select(UserTable).order_by(col(UserTable.id))
        return [AdminUser.model_validate(row) for row in self._session.exec(statement).all()]

    def create_or_replace(self, username: str, password_hash: str, role: str = "admin") -> AdminUser:
        """Insert the account, or replace the hash and role of an existing one."""
        row = self._row(username)
        if row is None:
            row = UserTable(username=username, password=password_hash, role=role)
        else:
            row.password = password_hash
            row.role = role
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return AdminUser.model_validate(row)
