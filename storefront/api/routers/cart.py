# storefront/api/routers/cart.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import AddCartItemIn, CartItemOut, CartOut, UpdateCartItemIn
from storefront.services.cart_service import CartService
from storefront.services.lock_service import LockService, get_lock_service

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session = Depends(get_db), locks: LockService = Depends(get_lock_service)):
    return CartService(db=db, lock_service=locks)


@router.get("", response_model=CartOut)
def get_cart(
    user_id: UUID = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    return svc.get_or_create_cart(user_id)


@router.get("/items", response_model=List[CartItemOut])
def get_cart_items(
    user_id: UUID = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    return svc.list_items(user_id)


@router.post("/items", response_model=CartItemOut, status_code=201)
def add_item(
    payload: AddCartItemIn,
    user_id: UUID = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    return svc.add_item(user_id, payload.product_id, payload.quantity)


@router.put("/items/{item_id}", response_model=CartItemOut)
def update_item(
    item_id: int,
    payload: UpdateCartItemIn,
    user_id: UUID = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    return svc.update_item_quantity(user_id, item_id, payload.quantity)


@router.delete("/items/{item_id}", status_code=204)
def remove_item(
    item_id: int,
    user_id: UUID = Depends(get_current_user_id),
    svc: CartService = Depends(get_service),
):
    svc.remove_item(user_id, item_id)
    return Response(status_code=204)
