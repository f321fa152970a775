# storefront/services/order_service.py
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from storefront.data.models._time import utcnow
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import EmptyCart, InvalidTransition, NotFound, ProductsUnavailable
from storefront.domain.schemas import OrderOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.lock_service import LockService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis zamowien klienta: checkout koszyka, podglad i anulowanie.
    Zamowienia uzytkownika sa zawsze filtrowane po id ORAZ user_id.
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service

    def checkout(self, user_id: UUID) -> OrderOut:
        """
        Use Case: zamiana koszyka w zamowienie.

        1. koszyk uzytkownika musi istniec i nie byc pusty
        2. wszystkie produkty w koszyku musza byc aktywne (wszystko albo nic)
        3. zamowienie + pozycje z cena z chwili zakupu
        4. usuniecie pozycji koszyka dopiero po zapisaniu pozycji zamowienia

        Kroki 3-4 to jedna transakcja - przy bledzie rollback zostawia koszyk
        nietkniety i nie zostawia zamowienia.
        """
        with self.lock_service.user_lock(user_id):
            cart = self.carts.get_cart_by_user(user_id)
            if not cart:
                raise EmptyCart("No cart found for user")

            cart_items = self.carts.get_cart_items(cart.id)
            if not cart_items:
                raise EmptyCart("Cart is empty")

            products = self.products.get_active_by_ids(ci.product_id for ci in cart_items)
            unavailable = [ci.product_id for ci in cart_items if ci.product_id not in products]
            if unavailable:
                logger.info(f"Checkout for user {user_id} blocked by inactive products {unavailable}")
                raise ProductsUnavailable(unavailable)

            now = utcnow()
            try:
                order = self.repo.add_order(
                    OrderModel(
                        user_id=user_id,
                        order_date=now,
                        status=OrderStatus.PENDING.value,
                        updated_at=now,
                    )
                )

                self.repo.add_order_items([
                    OrderItemModel(
                        order_id=order.id,
                        product_id=ci.product_id,
                        quantity=ci.quantity,
                        price_at_purchase=products[ci.product_id].price,
                    )
                    for ci in cart_items
                ])

                #pozycje zamowienia sa juz zapisane (flush), teraz czyscimy koszyk
                for ci in cart_items:
                    self.carts.delete_item(ci.id)
                self.carts.touch_cart(cart.id, now)

                self.repo.commit()
            except Exception:
                logger.exception(f"Checkout for user {user_id} failed, rolling back")
                self.repo.rollback()
                raise

            logger.info(
                f"Order {order.id} created from cart {cart.id} with {len(cart_items)} items"
            )
            return OrderOut.model_validate(self.repo.get_order(order.id))

    def list_orders(self, user_id: UUID) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders(user_id)]

    def get_order(self, user_id: UUID, order_id: int) -> OrderOut:
        return OrderOut.model_validate(self._owned_order(user_id, order_id))

    def cancel(self, user_id: UUID, order_id: int) -> OrderOut:
        order = self._owned_order(user_id, order_id)

        #statusy zapisane przez starszy panel admina moga miec wielkie litery
        current = (order.status or "").lower()
        if current == OrderStatus.DELIVERED.value:
            raise InvalidTransition("Cannot cancel a delivered order")
        if current == OrderStatus.CANCELED.value:
            raise InvalidTransition("Order is already canceled")

        order = self.repo.update_order_status(order, OrderStatus.CANCELED.value, utcnow())
        logger.info(f"Order {order_id} canceled by user {user_id}")
        return OrderOut.model_validate(order)

    def _owned_order(self, user_id: UUID, order_id: int) -> OrderModel:
        #jedno zapytanie po id i user_id - cudze zamowienie wyglada jak nieistniejace
        order = self.repo.get_order(order_id, user_id)
        if not order:
            raise NotFound("Order not found")
        return order
