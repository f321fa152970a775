# storefront/api/routers/products.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import ProductOut
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/product", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return get_service(db).list_active()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_active(product_id)


@router.get("/{product_id}/any", response_model=ProductOut)
def get_product_any(
    product_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Produkt niezaleznie od is_active - dla widokow koszyka i zamowien.
    """
    return get_service(db).get_any(product_id)
