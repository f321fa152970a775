# storefront/data/models/order_item.py
from sqlalchemy import Column, Integer, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    #cena z momentu zakupu, nie zmienia sie po edycji produktu
    price_at_purchase = Column(Numeric(10, 2), nullable=False)

    order = relationship("OrderModel", back_populates="items")
