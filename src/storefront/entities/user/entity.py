"""Admin user domain entity."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.storefront.entities._base import Entity


class AdminUser(Entity):
    """Stored admin account. ``password`` holds the hash, never plaintext."""

    username: str = Field(description="Unique login name")
    password: str = Field(description="Password hash", repr=False)
    role: str = Field(default="admin", description="Role")
    created_at: datetime | None = None

    def identity(self) -> "AdminIdentity":
        return AdminIdentity(id=self.id, username=self.username, role=self.role)


class AdminIdentity(BaseModel):
    """The public view of an admin: what tokens carry and responses expose."""

    id: int
    username: str
    role: str = "admin"
