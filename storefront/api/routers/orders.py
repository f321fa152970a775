# storefront/api/routers/orders.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import OrderOut
from storefront.services.lock_service import LockService, get_lock_service
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/order", tags=["orders"])


def get_service(db: Session = Depends(get_db), locks: LockService = Depends(get_lock_service)):
    return OrderService(db=db, lock_service=locks)


@router.post("/checkout", response_model=OrderOut, status_code=201)
def checkout(
    user_id: UUID = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z calego koszyka i oproznia koszyk.
    """
    return svc.checkout(user_id)


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: UUID = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    return svc.list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: UUID = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    return svc.get_order(user_id, order_id)


@router.patch("/{order_id}/cancel", response_model=OrderOut)
def cancel_order(
    order_id: int,
    user_id: UUID = Depends(get_current_user_id),
    svc: OrderService = Depends(get_service),
):
    return svc.cancel(user_id, order_id)
