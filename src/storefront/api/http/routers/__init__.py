from .auth import router as auth_router
from .banners import router as banners_router
from .health import router as health_router
from .products import router as products_router
from .settings import router as settings_router

__all__ = [
    "auth_router",
    "banners_router",
    "health_router",
    "products_router",
    "settings_router",
]
