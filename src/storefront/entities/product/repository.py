"""Data-access layer for products."""

from sqlmodel import Session, col, select

from src.storefront.entities._base import utcnow
from src.storefront.entities.product.entity import Product, ProductFields
from src.storefront.entities.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row)

    def list_all(self) -> list[Product]:
        """All products, newest first."""
        statement = select(ProductTable).order_by(
            col(ProductTable.created_at).desc(), col(ProductTable.id).desc()
        )
        return [Product.model_validate(row) for row in self._session.exec(statement).all()]

    def create(self, fields: ProductFields, image: str | None) -> Product:
        row = ProductTable(**fields.model_dump(), image=image)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row)

    def update(self, product_id: int, fields: ProductFields, image: str | None) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        for key, value in fields.model_dump().items():
            setattr(row, key, value)
        row.image = image
        row.updated_at = utcnow()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row)

    def delete(self, product_id: int) -> bool:
        """Delete the product row; its gallery rows go with it via ON DELETE CASCADE."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
