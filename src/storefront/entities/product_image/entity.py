"""Entity: ProductImage."""

from datetime import datetime

from pydantic import Field

from src.storefront.entities._base import Entity


class ProductImage(Entity):
    """One picture in a product's gallery.

    ``image_path`` is a public path into the blob store namespace
    (``/uploads/<name>``); the file it names may be gone, in which case clients
    get a broken reference rather than an error.
    """

    product_id: int | None = Field(default=None, description="Owning product")
    image_path: str = Field(description="Public path of the stored file")
    display_order: int = Field(default=0, ge=0, description="Ascending gallery position")
    created_at: datetime | None = None
