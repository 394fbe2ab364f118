"""ProductImage database table model."""

from datetime import datetime

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field

from src.storefront.entities._base import EntityTable, utcnow


class ProductImageTable(EntityTable, table=True):
    """Gallery rows; deleted by the database when their product is deleted."""

    __tablename__ = "product_images"

    product_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    image_path: str
    display_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
