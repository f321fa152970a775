# storefront/repos/cart_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select, update, delete

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.repos.base import BaseRepo


class CartRepo(BaseRepo):
    def get_cart_by_user(self, user_id: UUID) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def touch_cart(self, cart_id: int, when) -> None:
        self.db.execute(
            update(CartModel).where(CartModel.id == cart_id).values(updated_at=when)
        )

    def get_cart_items(self, cart_id: int) -> List[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.cart_id == cart_id)
                .order_by(CartItemModel.id)
            ).scalars().all()
        )

    def get_item(self, item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, item_id)

    def get_cart_item(self, cart_id: int, product_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def increment_quantity(self, item_id: int, delta: int) -> None:
        #UPDATE ... SET quantity = quantity + :delta, bez read-modify-write
        self.db.execute(
            update(CartItemModel)
            .where(CartItemModel.id == item_id)
            .values(quantity=CartItemModel.quantity + delta)
        )

    def set_quantity(self, item_id: int, quantity: int) -> None:
        self.db.execute(
            update(CartItemModel)
            .where(CartItemModel.id == item_id)
            .values(quantity=quantity)
        )

    def delete_item(self, item_id: int) -> None:
        self.db.execute(delete(CartItemModel).where(CartItemModel.id == item_id))

    def refresh(self, obj):
        self.db.refresh(obj)
        return obj
