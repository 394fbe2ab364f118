"""Data-access layer for banners."""

from sqlmodel import Session, col, select

from src.storefront.entities._base import utcnow
from src.storefront.entities.banner.entity import Banner, BannerCreate, BannerUpdate
from src.storefront.entities.banner.table import BannerTable


class BannerRepository:
    """Data-access layer for banners."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, banner_id: int) -> Banner | None:
        row = self._session.get(BannerTable, banner_id)
        if row is None:
            return None
        return Banner.model_validate(row)

    def list_all(self, enabled_only: bool = False) -> list[Banner]:
        statement = select(BannerTable)
        if enabled_only:
            statement = statement.where(col(BannerTable.enabled).is_(True))
        statement = statement.order_by(col(BannerTable.display_order), col(BannerTable.id))
        return [Banner.model_validate(row) for row in self._session.exec(statement).all()]

    def create(self, banner: BannerCreate) -> Banner:
        row = BannerTable(**banner.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Banner.model_validate(row)

    def update(self, banner_id: int, changes: BannerUpdate) -> Banner | None:
        row = self._session.get(BannerTable, banner_id)
        if row is None:
            return None
        for key, value in changes.model_dump(exclude_unset=True).items():
            setattr(row, key, value)
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Banner.model_validate(row)

    def delete(self, banner_id: int) -> bool:
        row = self._session.get(BannerTable, banner_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
