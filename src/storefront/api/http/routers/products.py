"""Product catalog router: products and their image galleries."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from src.storefront.api.http.deps import (
    get_catalog_service,
    get_product_upload_policy,
    read_uploads,
    require_admin,
)
from src.storefront.core.services import ProductCatalogService, UploadPolicy
from src.storefront.entities.product import Product, ProductDetail, parse_deleted_image_ids
from src.storefront.entities.user import AdminIdentity

router = APIRouter(prefix="/products", tags=["products"])


def product_form(
    name: Annotated[str | None, Form()] = None,
    name_ar: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    description_ar: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    discount_price: Annotated[str | None, Form()] = None,
    discount_percentage: Annotated[str | None, Form()] = None,
) -> dict[str, str | None]:
    """Collect the raw product fields; parsing happens in the catalog service."""
    return {
        "name": name,
        "name_ar": name_ar,
        "description": description,
        "description_ar": description_ar,
        "price": price,
        "discount_price": discount_price,
        "discount_percentage": discount_percentage,
    }


@router.get("", response_model=list[Product])
def list_products(
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> list[Product]:
    """All products, newest first."""
    return catalog.list_products()


@router.get("/{product_id}", response_model=ProductDetail)
def get_product(
    product_id: int,
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> ProductDetail:
    """A product with its resolved image gallery."""
    return catalog.get_product(product_id)


@router.post("")
async def create_product(
    fields: dict[str, str | None] = Depends(product_form),
    images: Annotated[list[UploadFile] | None, File()] = None,
    _: AdminIdentity = Depends(require_admin),
    policy: UploadPolicy = Depends(get_product_upload_policy),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> dict[str, object]:
    product = await catalog.create_product(fields, await read_uploads(images, policy))
    return {"id": product.id, "message": "Product created successfully"}


@router.put("/{product_id}")
async def update_product(
    product_id: int,
    fields: dict[str, str | None] = Depends(product_form),
    deleted_images: Annotated[str | None, Form()] = None,
    images: Annotated[list[UploadFile] | None, File()] = None,
    _: AdminIdentity = Depends(require_admin),
    policy: UploadPolicy = Depends(get_product_upload_policy),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    await catalog.update_product(
        product_id,
        fields,
        await read_uploads(images, policy),
        parse_deleted_image_ids(deleted_images),
    )
    return {"message": "Product updated successfully"}


@router.delete("/{product_id}/images/{image_id}")
async def delete_product_image(
    product_id: int,
    image_id: int,
    _: AdminIdentity = Depends(require_admin),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    await catalog.delete_image(product_id, image_id)
    return {"message": "Image deleted successfully"}


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    _: AdminIdentity = Depends(require_admin),
    catalog: ProductCatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    await catalog.delete_product(product_id)
    return {"message": "Product deleted successfully"}
