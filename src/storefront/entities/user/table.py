"""Admin user database table model."""

from datetime import datetime

from sqlmodel import Field

from src.storefront.entities._base import EntityTable, utcnow


class UserTable(EntityTable, table=True):
    """Database persistence model for admin accounts."""

    __tablename__ = "users"

    username: str = Field(unique=True, index=True, nullable=False)
    password: str = Field(nullable=False)
    role: str = Field(default="admin", nullable=False)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
