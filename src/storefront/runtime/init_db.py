"""Database initialization script."""

from src.storefront.core.services.database import DbManageService, DbSessionService
from src.storefront.runtime.context import get_config


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables and seed the defaults."""
    db_manage_service = DbManageService(database_service)
    db_manage_service.create_all()
    db_manage_service.seed_defaults(get_config().admin)


if __name__ == "__main__":
    init_db()
