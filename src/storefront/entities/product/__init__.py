"""Entity package: Product."""

from .entity import (
    Product,
    ProductDetail,
    ProductFields,
    parse_deleted_image_ids,
    resolve_gallery,
)
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductDetail",
    "ProductFields",
    "ProductRepository",
    "ProductTable",
    "parse_deleted_image_ids",
    "resolve_gallery",
]
