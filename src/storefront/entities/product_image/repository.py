"""Data-access layer for product gallery rows."""

from sqlalchemy import func
from sqlmodel import Session, select

from src.storefront.entities.product_image.entity import ProductImage
from src.storefront.entities.product_image.table import ProductImageTable


class ProductImageRepository:
    """Data-access layer for product images."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_product(self, product_id: int) -> list[ProductImage]:
        statement = (
            select(ProductImageTable)
            .where(ProductImageTable.product_id == product_id)
            .order_by(ProductImageTable.display_order, ProductImageTable.id)
        )
        rows = self._session.exec(statement).all()
        return [ProductImage.model_validate(row) for row in rows]

    def get_for_product(self, product_id: int, image_id: int) -> ProductImage | None:
        statement = select(ProductImageTable).where(
            (ProductImageTable.id == image_id)
            & (ProductImageTable.product_id == product_id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return ProductImage.model_validate(row)

    def count_for_product(self, product_id: int) -> int:
        statement = select(func.count()).select_from(ProductImageTable).where(
            ProductImageTable.product_id == product_id
        )
        return self._session.exec(statement).one()

    def add(self, product_id: int, image_path: str, display_order: int) -> ProductImage:
        row = ProductImageTable(
            product_id=product_id,
            image_path=image_path,
            display_order=display_order,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return ProductImage.model_validate(row)

    def delete(self, image_id: int) -> bool:
        row = self._session.get(ProductImageTable, image_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
