# storefront/services/cart_service.py
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models._time import utcnow
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import Forbidden, NotAvailable, NotFound
from storefront.domain.schemas import CartOut, CartItemOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.lock_service import LockService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka.
    query (get cart, list items) tylko odczyt
    commands (add, update, remove) pod lockiem uzytkownika
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service

    #query - odczyt
    def get_or_create_cart(self, user_id: UUID) -> CartOut:
        return CartOut.model_validate(self._get_or_create(user_id))

    def list_items(self, user_id: UUID) -> List[CartItemOut]:
        #bez koszyka zwracamy pusta liste, nie tworzymy go
        cart = self.repo.get_cart_by_user(user_id)
        if not cart:
            return []
        return [CartItemOut.model_validate(i) for i in self.repo.get_cart_items(cart.id)]

    #commands
    def add_item(self, user_id: UUID, product_id: int, quantity: int = 1) -> CartItemOut:
        with self.lock_service.user_lock(user_id):
            cart = self._get_or_create(user_id)

            product = self.products.get_product(product_id, active_only=True)
            if not product:
                raise NotAvailable("Product is not available or has been deactivated")

            try:
                existing = self.repo.get_cart_item(cart.id, product_id)
                if existing:
                    logger.info(
                        f"Product {product_id} already in cart {cart.id}, "
                        f"increasing quantity by {quantity}"
                    )
                    self.repo.increment_quantity(existing.id, quantity)
                    item = existing
                else:
                    logger.info(f"Adding product {product_id} to cart {cart.id}")
                    item = self.repo.add_cart_item(
                        CartItemModel(cart_id=cart.id, product_id=product_id, quantity=quantity)
                    )

                self.repo.touch_cart(cart.id, utcnow())
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

            return CartItemOut.model_validate(self.repo.refresh(item))

    def update_item_quantity(self, user_id: UUID, item_id: int, quantity: int) -> CartItemOut:
        with self.lock_service.user_lock(user_id):
            item = self._owned_item(user_id, item_id)

            try:
                self.repo.set_quantity(item.id, quantity)
                self.repo.touch_cart(item.cart_id, utcnow())
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

            logger.info(f"Cart item {item_id} quantity set to {quantity}")
            return CartItemOut.model_validate(self.repo.refresh(item))

    def remove_item(self, user_id: UUID, item_id: int) -> None:
        with self.lock_service.user_lock(user_id):
            item = self._owned_item(user_id, item_id)
            cart_id = item.cart_id

            try:
                self.repo.delete_item(item.id)
                self.repo.touch_cart(cart_id, utcnow())
                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

            logger.info(f"Cart item {item_id} removed from cart {cart_id}")

    #helpers
    def _get_or_create(self, user_id: UUID) -> CartModel:
        existing = self.repo.get_cart_by_user(user_id)
        if existing:
            return existing

        try:
            created = self.repo.create_cart(CartModel(user_id=user_id))
        except IntegrityError:
            #rownolegly pierwszy request utworzyl koszyk przed nami
            self.repo.rollback()
            logger.info(f"Cart for user {user_id} created concurrently, reusing it")
            return self.repo.get_cart_by_user(user_id)

        logger.info(f"Created cart {created.id} for user {user_id}")
        return created

    def _owned_item(self, user_id: UUID, item_id: int) -> CartItemModel:
        item = self.repo.get_item(item_id)
        if not item:
            raise NotFound("Cart item not found")

        #osobny odczyt koszyka, nie join - istniejacy cudzy item daje 403
        cart = self.repo.get_cart(item.cart_id)
        if not cart or cart.user_id != user_id:
            raise Forbidden("Cart item belongs to another user")

        return item
