# storefront/data/models/cart.py
from sqlalchemy import Column, Integer, DateTime, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._time import utcnow


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    #jeden koszyk na uzytkownika, unique zamyka wyscig przy pierwszym dostepie
    user_id = Column(Uuid, nullable=False, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
