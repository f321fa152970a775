#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from storefront.data.models.product import ProductModel, ProductState
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.user_role import UserRoleModel

__all__ = [
    "ProductModel",
    "ProductState",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderStatus",
    "OrderItemModel",
    "UserRoleModel",
]
