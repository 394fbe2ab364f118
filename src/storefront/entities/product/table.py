"""Product database table model."""

from src.storefront.entities._base import TimestampedTable


class ProductTable(TimestampedTable, table=True):
    """Database persistence model for products.

    Gallery rows live in ``product_images`` and cascade with the product.
    """

    __tablename__ = "products"

    name: str
    name_ar: str | None = None
    description: str | None = None
    description_ar: str | None = None
    price: float
    discount_price: float | None = None
    discount_percentage: float | None = None
    image: str | None = None
