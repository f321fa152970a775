# storefront/repos/product_repo.py
from typing import Iterable, List

from sqlalchemy import select

from storefront.data.models.product import ProductModel
from storefront.repos.base import BaseRepo


class ProductRepo(BaseRepo):
    def list_products(self, active_only: bool = True) -> List[ProductModel]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        if active_only:
            stmt = stmt.where(ProductModel.is_active.is_(True))
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: int, active_only: bool = False) -> ProductModel | None:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        if active_only:
            stmt = stmt.where(ProductModel.is_active.is_(True))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active_by_ids(self, product_ids: Iterable[int]) -> dict[int, ProductModel]:
        ids = set(product_ids)
        if not ids:
            return {}
        stmt = select(ProductModel).where(
            ProductModel.id.in_(ids),
            ProductModel.is_active.is_(True),
        )
        return {p.id: p for p in self.db.execute(stmt).scalars().all()}

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def save(self, product: ProductModel) -> ProductModel:
        self.db.commit()
        self.db.refresh(product)
        return product
