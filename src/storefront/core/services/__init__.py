"""Core services exports."""

from .auth_service import AuthService, LoginResult
from .catalog_service import ProductCatalogService
from .database import DbManageService, DbSessionService
from .jwt import AuthTokenService
from .settings_registry import SettingsRegistry
from .storage import BlobStore, IncomingFile, UploadPolicy, validate_uploads

__all__ = [
    # Auth
    "AuthService",
    "AuthTokenService",
    "LoginResult",
    # Catalog
    "ProductCatalogService",
    "SettingsRegistry",
    # Storage
    "BlobStore",
    "IncomingFile",
    "UploadPolicy",
    "validate_uploads",
    # Database
    "DbManageService",
    "DbSessionService",
]
