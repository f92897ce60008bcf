"""Application service (use case) for Product operations."""

from bookkeeper.application.interfaces import RecordRepository
from bookkeeper.application.schemas import InvoiceItemSchema, ProductCreate, ProductUpdate
from bookkeeper.domain.entities import Product
from bookkeeper.domain.exceptions import EntityNotFoundError


class ProductService:
    def __init__(self, repository: RecordRepository[Product]):
        self._repository = repository

    def get_product(self, product_id: str) -> Product:
        product = self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    def list_products(self, user_id: str, *, category: str | None = None) -> list[Product]:
        products = self._repository.get_all(user_id)
        if category is not None:
            products = [p for p in products if p.category == category]
        return products

    def create_product(self, user_id: str, data: ProductCreate) -> Product:
        return self._repository.create({"user_id": user_id, **data.model_dump()})

    def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        updated = self._repository.update(product_id, patch)
        if updated is None:
            raise EntityNotFoundError("Product", product_id)
        return updated

    def delete_product(self, product_id: str) -> bool:
        if not self._repository.delete(product_id):
            raise EntityNotFoundError("Product", product_id)
        return True

    def to_invoice_item(self, product_id: str, quantity: int = 1) -> InvoiceItemSchema:
        """Pre-fill an invoice line from a product's name, price and tax rate."""
        product = self.get_product(product_id)
        return InvoiceItemSchema(
            product_id=product.id,
            name=product.name,
            description=product.description or None,
            quantity=quantity,
            price=product.price,
            tax_rate=product.tax_rate,
        )
