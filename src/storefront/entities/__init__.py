"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .banner import Banner, BannerCreate, BannerRepository, BannerTable, BannerUpdate
from .product import Product, ProductDetail, ProductFields, ProductRepository, ProductTable
from .product_image import ProductImage, ProductImageRepository, ProductImageTable
from .setting import DEFAULT_SETTINGS, Setting, SettingRepository, SettingTable
from .user import AdminIdentity, AdminUser, UserRepository, UserTable

__all__ = [
    "AdminIdentity",
    "AdminUser",
    "Banner",
    "BannerCreate",
    "BannerRepository",
    "BannerTable",
    "BannerUpdate",
    "DEFAULT_SETTINGS",
    "Product",
    "ProductDetail",
    "ProductFields",
    "ProductImage",
    "ProductImageRepository",
    "ProductImageTable",
    "ProductRepository",
    "ProductTable",
    "Setting",
    "SettingRepository",
    "SettingTable",
    "UserRepository",
    "UserTable",
]
