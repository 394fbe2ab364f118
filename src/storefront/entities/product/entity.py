"""Entity: Product."""

import json
import math
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.storefront.core.exceptions import ValidationError
from src.storefront.entities._base import Entity
from src.storefront.entities.product_image import ProductImage


class Product(Entity):
    """Product entity representing a catalog item.

    Arabic fields fall back to the base-language fields when they are not
    supplied. ``image`` is the legacy single-image field kept for data created
    before galleries existed.
    """

    name: str = Field(description="Product name")
    name_ar: str | None = Field(default=None, description="Arabic product name")
    description: str | None = Field(default=None, description="Product description")
    description_ar: str | None = Field(
        default=None, description="Arabic product description"
    )
    price: float = Field(description="Regular price")
    discount_price: float | None = Field(
        default=None, description="Discounted price, always below price when set"
    )
    discount_percentage: float | None = Field(
        default=None, description="Advertised discount percentage"
    )
    image: str | None = Field(default=None, description="Legacy single image path")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductDetail(Product):
    """A product together with its resolved gallery."""

    images: list[ProductImage] = Field(default_factory=list)


class ProductFields(BaseModel):
    """Validated, normalised fields for writing a product row."""

    name: str
    name_ar: str
    description: str | None = None
    description_ar: str | None = None
    price: float
    discount_price: float | None = None
    discount_percentage: float | None = None

    @classmethod
    def from_form(cls, raw: Mapping[str, Any]) -> "ProductFields":
        """Build fields from submitted form values.

        Raises:
            ValidationError: name missing, price missing/non-numeric/not positive,
                or discount_percentage not a number.
        """
        name = raw.get("name")
        if _is_blank(name):
            raise ValidationError("Product name is required")
        name = str(name).strip()

        price = _parse_number(raw.get("price"))
        if price is None or price <= 0:
            raise ValidationError("Price must be a positive number")

        # An out-of-range discount is dropped, not rejected
        discount_price = _parse_number(raw.get("discount_price"))
        if discount_price is not None and not 0 < discount_price < price:
            discount_price = None

        discount_percentage = None
        if not _is_blank(raw.get("discount_percentage")):
            discount_percentage = _parse_number(raw.get("discount_percentage"))
            if discount_percentage is None:
                raise ValidationError("Discount percentage must be a number")

        description = raw.get("description")
        name_ar = raw.get("name_ar")
        description_ar = raw.get("description_ar")

        return cls(
            name=name,
            name_ar=name if _is_blank(name_ar) else str(name_ar).strip(),
            description=description,
            description_ar=description if _is_blank(description_ar) else description_ar,
            price=price,
            discount_price=discount_price,
            discount_percentage=discount_percentage,
        )


def resolve_gallery(product: Product, gallery: Sequence[ProductImage]) -> list[ProductImage]:
    """Uniform image list for a product regardless of when it was created.

    Products predating the gallery table only have the legacy ``image`` field;
    they get a single synthesized entry with id 0.
    """
    if not gallery and product.image:
        return [
            ProductImage(
                id=0,
                product_id=product.id,
                image_path=product.image,
                display_order=0,
            )
        ]
    return list(gallery)


def parse_deleted_image_ids(raw: str | None) -> list[int]:
    """Decode the ``deleted_images`` form field (a JSON array of image ids)."""
    if _is_blank(raw):
        return []
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError("deleted_images must be a JSON array of image ids") from e
    if not isinstance(decoded, list):
        raise ValidationError("deleted_images must be a JSON array of image ids")

    image_ids: list[int] = []
    for item in decoded:
        if isinstance(item, int) and not isinstance(item, bool):
            image_ids.append(item)
        elif isinstance(item, str) and item.strip().isdigit():
            image_ids.append(int(item))
        else:
            raise ValidationError(f"Invalid image id in deleted_images: {item!r}")
    return image_ids


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: Any) -> float | None:
    """Parse a submitted number; None when absent or not a finite number."""
    if _is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
