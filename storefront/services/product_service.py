# storefront/services/product_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.domain.errors import NotFound
from storefront.domain.schemas import ProductOut
from storefront.repos.product_repo import ProductRepo


class ProductService:
    """Katalog tylko do odczytu. Publicznie widac wylacznie aktywne produkty."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_active(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products(active_only=True)]

    def get_active(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id, active_only=True)
        if not product:
            raise NotFound("Product not found")
        return ProductOut.model_validate(product)

    def get_any(self, product_id: int) -> ProductOut:
        #takze nieaktywne - koszyk i zamowienia musza pokazac produkty wycofane z katalogu
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound("Product not found")
        return ProductOut.model_validate(product)
