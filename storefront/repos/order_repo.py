# storefront/repos/order_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.repos.base import BaseRepo


class OrderRepo(BaseRepo):
    def add_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_items(self, items: List[OrderItemModel]) -> List[OrderItemModel]:
        self.db.add_all(items)
        self.db.flush()
        return items

    def get_order(self, order_id: int, user_id: UUID | None = None) -> OrderModel | None:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        if user_id is not None:
            stmt = stmt.where(OrderModel.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_orders(self, user_id: UUID | None = None) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .order_by(OrderModel.order_date.desc(), OrderModel.id.desc())
        )
        if user_id is not None:
            stmt = stmt.where(OrderModel.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def update_order_status(self, order: OrderModel, status: str, when) -> OrderModel:
        order.status = status
        order.updated_at = when
        self.db.commit()
        self.db.refresh(order)
        return order
