# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from uuid import UUID


class ProductOut(BaseModel):
    """Produkt w katalogu (response)."""

    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    image_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Tworzenie / edycja produktu przez admina. Walidacja nazwy i ceny w serwisie."""

    name: str = ""
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    image_url: Optional[str] = None


class ProductStateChange(BaseModel):
    message: str
    product_id: int


class CartOut(BaseModel):
    id: int
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartItemOut(BaseModel):
    id: int
    cart_id: int
    product_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class AddCartItemIn(BaseModel):
    """Dodanie produktu do koszyka. Ilosc domyslnie 1, bez walidacji zakresu."""

    product_id: int
    quantity: int = 1


class UpdateCartItemIn(BaseModel):
    quantity: int


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price_at_purchase: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    user_id: UUID
    order_date: datetime
    status: str
    updated_at: datetime
    items: List[OrderItemOut] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class AdminOrderOut(OrderOut):
    """Zamowienie w widoku admina - z suma i (na razie pustymi) danymi uzytkownika."""

    user_email: Optional[str] = None
    username: Optional[str] = None
    total_amount: Decimal = Decimal("0")


class UpdateOrderStatusIn(BaseModel):
    status: str = ""
