"""Entity package: AdminUser."""

from .entity import AdminIdentity, AdminUser
from .repository import UserRepository
from .table import UserTable

__all__ = ["AdminIdentity", "AdminUser", "UserRepository", "UserTable"]
