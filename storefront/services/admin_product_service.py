# storefront/services/admin_product_service.py
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from storefront.data.models._time import utcnow
from storefront.data.models.product import ProductModel, ProductState
from storefront.domain.errors import AlreadyActive, NotFound, ValidationFailed
from storefront.domain.schemas import ProductOut, ProductStateChange
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _validate(name: str, price: Decimal):
    if not name or not name.strip():
        raise ValidationFailed("Product name is required")
    if price is None or price < 0:
        raise ValidationFailed("Price must be greater than or equal to 0")


class AdminProductService:
    """
    Pelny CRUD katalogu dla admina.
    Usuwanie to soft delete (is_active = False), produkty nie znikaja z bazy
    bo odwoluja sie do nich historyczne zamowienia.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_all(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products(active_only=False)]

    def create(self, name: str, price: Decimal, description: Optional[str] = None,
               image_url: Optional[str] = None) -> ProductOut:
        _validate(name, price)

        now = utcnow()
        product = self.repo.add_product(
            ProductModel(
                name=name,
                description=description,
                price=price,
                image_url=image_url,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(f"Product {product.id} created")
        return ProductOut.model_validate(product)

    def update(self, product_id: int, name: str, price: Decimal,
               description: Optional[str] = None, image_url: Optional[str] = None) -> ProductOut:
        _validate(name, price)

        product = self._get(product_id)
        product.name = name
        product.description = description
        product.price = price
        product.image_url = image_url
        product.updated_at = utcnow()

        product = self.repo.save(product)
        logger.info(f"Product {product_id} updated")
        return ProductOut.model_validate(product)

    def deactivate(self, product_id: int) -> ProductStateChange:
        product = self._get(product_id)
        #bez sprawdzania stanu - ponowne usuniecie po prostu zapisuje False jeszcze raz
        product.is_active = False
        product.updated_at = utcnow()
        self.repo.save(product)

        logger.info(f"Product {product_id} deactivated")
        return ProductStateChange(message="Product deactivated successfully", product_id=product_id)

    def reactivate(self, product_id: int) -> ProductStateChange:
        product = self._get(product_id)
        if product.state is ProductState.ACTIVE:
            raise AlreadyActive("Product is already active")

        product.is_active = True
        product.updated_at = utcnow()
        self.repo.save(product)

        logger.info(f"Product {product_id} reactivated")
        return ProductStateChange(message="Product reactivated successfully", product_id=product_id)

    def _get(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound("Product not found")
        return product
