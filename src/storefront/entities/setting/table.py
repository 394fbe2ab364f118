"""Setting database table model."""

from datetime import datetime

from sqlmodel import Field

from src.storefront.entities._base import EntityTable, utcnow


class SettingTable(EntityTable, table=True):
    """Database persistence model for the settings key-value store."""

    __tablename__ = "settings"

    key: str = Field(unique=True, index=True, nullable=False)
    value: str | None = None
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)
