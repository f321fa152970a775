# storefront/data/models/order.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._time import utcnow


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PAYMENT_PENDING = "payment_pending"
    PAYMENT_RECEIVED = "payment_received"
    DELIVERED = "delivered"
    CANCELED = "canceled"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(Uuid, nullable=False, index=True)

    order_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(String, nullable=False, default=OrderStatus.PENDING.value)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        order_by="OrderItemModel.id",
    )
