# storefront/services/admin_order_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models._time import utcnow
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.schemas import AdminOrderOut
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _to_admin_dto(order: OrderModel) -> AdminOrderOut:
    dto = AdminOrderOut.model_validate(order)
    dto.total_amount = sum(
        (i.price_at_purchase * i.quantity for i in dto.items), Decimal("0.00")
    )
    return dto


class AdminOrderService:
    """Wszystkie zamowienia, bez filtra po uzytkowniku."""

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def list_all(self) -> List[AdminOrderOut]:
        return [_to_admin_dto(o) for o in self.repo.list_orders()]

    def get(self, order_id: int) -> AdminOrderOut:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound("Order not found")
        return _to_admin_dto(order)

    def update_status(self, order_id: int, status: str) -> AdminOrderOut:
        #tylko lista dozwolonych statusow, bez grafu przejsc
        normalized = (status or "").strip().lower()
        if normalized not in OrderStatus.values():
            raise ValidationFailed(
                f"Invalid status. Valid statuses are: {', '.join(OrderStatus.values())}"
            )

        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound("Order not found")

        previous = order.status
        order = self.repo.update_order_status(order, normalized, utcnow())
        logger.info(f"Order {order_id} status changed {previous} -> {normalized}")
        return _to_admin_dto(order)
