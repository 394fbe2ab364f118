"""Product catalog: products and their image galleries.

Every mutation writes rows first and touches files second. Files are never
removed before the rows that reference them are gone, so a failure can only
leave orphaned files behind, never rows pointing at missing files.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from src.storefront.core.exceptions import NotFoundError, PartialWriteError, StorageError
from src.storefront.core.services.storage import (
    BlobStore,
    IncomingFile,
    UploadPolicy,
    validate_uploads,
)
from src.storefront.entities.product import (
    Product,
    ProductDetail,
    ProductFields,
    ProductRepository,
    resolve_gallery,
)
from src.storefront.entities.product_image import ProductImageRepository


class ProductCatalogService:
    def __init__(self, session: Session, blob_store: BlobStore, upload_policy: UploadPolicy):
        self._session = session
        self._blobs = blob_store
        self._policy = upload_policy
        self._products = ProductRepository(session)
        self._images = ProductImageRepository(session)

    # ------------------------------------------------------------------ reads

    def list_products(self) -> list[Product]:
        return self._products.list_all()

    def get_product(self, product_id: int) -> ProductDetail:
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        gallery = self._images.list_for_product(product_id)
        return ProductDetail(
            **product.model_dump(), images=resolve_gallery(product, gallery)
        )

    # ----------------------------------------------------------------- writes
    # Blocking session work runs in the threadpool; file I/O stays on the loop.

    async def create_product(
        self, raw_fields: Mapping[str, Any], files: Sequence[IncomingFile]
    ) -> ProductDetail:
        """Create a product and its gallery from a submitted form.

        Raises:
            ValidationError: Bad fields or uploads; nothing is written
            StorageError: Files or the product row could not be written
            PartialWriteError: The product exists but its gallery rows failed
        """
        fields = ProductFields.from_form(raw_fields)
        validate_uploads(files, self._policy)
        stored = await self._store_all(files)

        try:
            product_id = await run_in_threadpool(
                self._insert_product, fields, stored[0] if stored else ""
            )
        except StorageError:
            await self._blobs.discard(stored)
            raise

        await run_in_threadpool(self._attach_images, product_id, stored, 0)
        logger.info("Created product {} with {} images", product_id, len(stored))
        return await run_in_threadpool(self.get_product, product_id)

    async def update_product(
        self,
        product_id: int,
        raw_fields: Mapping[str, Any],
        files: Sequence[IncomingFile],
        deleted_image_ids: Sequence[int] = (),
    ) -> ProductDetail:
        """Replace a product's fields, drop selected images and append new ones.

        Image ids that do not belong to this product are ignored.
        """
        existing = await run_in_threadpool(self._products.get, product_id)
        if existing is None:
            raise NotFoundError("Product not found")

        fields = ProductFields.from_form(raw_fields)
        validate_uploads(files, self._policy)
        stored = await self._store_all(files)
        image = stored[0] if stored else existing.image

        try:
            removed_paths = await run_in_threadpool(
                self._apply_update, product_id, fields, image, deleted_image_ids
            )
        except (NotFoundError, StorageError):
            await self._blobs.discard(stored)
            raise

        await self._blobs.discard(removed_paths)

        start = await run_in_threadpool(self._images.count_for_product, product_id)
        await run_in_threadpool(self._attach_images, product_id, stored, start)
        logger.info(
            "Updated product {}: {} images removed, {} added",
            product_id,
            len(removed_paths),
            len(stored),
        )
        return await run_in_threadpool(self.get_product, product_id)

    async def delete_image(self, product_id: int, image_id: int) -> None:
        path = await run_in_threadpool(self._remove_image_row, product_id, image_id)
        await self._blobs.discard([path])
        logger.info("Deleted image {} of product {}", image_id, product_id)

    async def delete_product(self, product_id: int) -> None:
        """Delete a product, its gallery rows and then their files."""
        paths = await run_in_threadpool(self._remove_product_row, product_id)
        await self._blobs.discard(paths)
        logger.info("Deleted product {}", product_id)

    # ---------------------------------------------------------------- helpers

    async def _store_all(self, files: Sequence[IncomingFile]) -> list[str]:
        """Store every file, or none of them."""
        stored: list[str] = []
        try:
            for incoming in files:
                stored.append(
                    await self._blobs.store(
                        incoming.data, incoming.filename, self._policy.name_prefix
                    )
                )
        except StorageError:
            await self._blobs.discard(stored)
            raise
        return stored

    def _insert_product(self, fields: ProductFields, image: str) -> int:
        try:
            product = self._products.create(fields, image=image)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to create product: {}", e)
            raise StorageError("Failed to create product") from e
        if product.id is None:
            raise StorageError("Product row was stored without an id")
        return product.id

    def _apply_update(
        self,
        product_id: int,
        fields: ProductFields,
        image: str | None,
        deleted_image_ids: Sequence[int],
    ) -> list[str]:
        """Update the row and drop the selected gallery rows; returns their paths."""
        removed_paths: list[str] = []
        try:
            if self._products.update(product_id, fields, image=image) is None:
                raise NotFoundError("Product not found")
            for image_id in dict.fromkeys(deleted_image_ids):
                row = self._images.get_for_product(product_id, image_id)
                if row is None:
                    logger.info(
                        "Ignoring image {} which does not belong to product {}",
                        image_id,
                        product_id,
                    )
                    continue
                self._images.delete(image_id)
                removed_paths.append(row.image_path)
            self._session.commit()
        except NotFoundError:
            self._session.rollback()
            raise
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to update product {}: {}", product_id, e)
            raise StorageError("Failed to update product") from e
        return removed_paths

    def _remove_image_row(self, product_id: int, image_id: int) -> str:
        row = self._images.get_for_product(product_id, image_id)
        if row is None:
            raise NotFoundError("Image not found")
        try:
            self._images.delete(image_id)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StorageError("Failed to delete image") from e
        return row.image_path

    def _remove_product_row(self, product_id: int) -> list[str]:
        """Delete the product row and return every file path it referenced."""
        product = self._products.get(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        paths = [image.image_path for image in self._images.list_for_product(product_id)]
        if product.image:
            paths.append(product.image)

        try:
            self._products.delete(product_id)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StorageError("Failed to delete product") from e
        return paths

    def _attach_images(self, product_id: int, paths: Sequence[str], start: int) -> None:
        if not paths:
            return
        try:
            for index, path in enumerate(paths):
                self._images.add(product_id, path, display_order=start + index)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Gallery write failed for product {}: {}", product_id, e)
            raise PartialWriteError(
                "Product saved but its images could not be recorded", product_id
            ) from e
