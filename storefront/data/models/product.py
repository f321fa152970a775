# storefront/data/models/product.py
import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, DateTime

from storefront.data.database import Base
from storefront.data.models._time import utcnow


class ProductState(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=True)

    #soft delete - produkt nigdy nie jest fizycznie usuwany
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def state(self) -> ProductState:
        return ProductState.ACTIVE if self.is_active else ProductState.INACTIVE
