"""Schema creation and first-run seeding."""

from loguru import logger
from sqlmodel import SQLModel

from src.storefront.core.security import hash_password
from src.storefront.core.services.database.db_session import DbSessionService
from src.storefront.entities.setting import DEFAULT_SETTINGS, SettingRepository
from src.storefront.entities.user import UserRepository
from src.storefront.runtime.config.config_data import AdminSeedConfig


class DbManageService:
    def __init__(self, database_service: DbSessionService | None = None):
        self._db = database_service or DbSessionService()

    def create_all(self) -> None:
        """Create all database tables."""
        from src.storefront.entities.banner import BannerTable  # noqa: F401
        from src.storefront.entities.product import ProductTable  # noqa: F401
        from src.storefront.entities.product_image import ProductImageTable  # noqa: F401
        from src.storefront.entities.setting import SettingTable  # noqa: F401
        from src.storefront.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._db.engine)
        logger.info("Database initialized with tables.")

    def seed_defaults(self, admin: AdminSeedConfig | None = None) -> None:
        """Insert default settings that are missing and the configured admin.

        Existing settings are left alone. The admin account is only written
        when a seed password is configured; an existing account gets its
        password hash replaced.
        """
        with self._db.session_scope() as session:
            settings = SettingRepository(session)
            inserted = [
                key
                for key, value in DEFAULT_SETTINGS.items()
                if settings.insert_if_absent(key, value)
            ]
            if inserted:
                logger.info("Seeded {} default settings", len(inserted))

            if admin is None or not admin.password:
                logger.info("No admin seed password configured; skipping admin seed")
                return

            UserRepository(session).create_or_replace(
                admin.username, hash_password(admin.password), admin.role
            )
            logger.info("Admin account '{}' seeded", admin.username)
