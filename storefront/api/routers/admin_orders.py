# storefront/api/routers/admin_orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.data.database import get_db
from storefront.domain.schemas import AdminOrderOut, UpdateOrderStatusIn
from storefront.services.admin_order_service import AdminOrderService

router = APIRouter(
    prefix="/admin/order",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def get_service(db: Session):
    return AdminOrderService(db)


@router.get("", response_model=List[AdminOrderOut])
def list_all_orders(db: Session = Depends(get_db)):
    return get_service(db).list_all()


@router.get("/{order_id}", response_model=AdminOrderOut)
def get_order(order_id: int, db: Session = Depends(get_db)):
    return get_service(db).get(order_id)


@router.patch("/{order_id}/status", response_model=AdminOrderOut)
def update_order_status(order_id: int, payload: UpdateOrderStatusIn, db: Session = Depends(get_db)):
    return get_service(db).update_status(order_id, payload.status)
