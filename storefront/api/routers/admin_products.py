# storefront/api/routers/admin_products.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.data.database import get_db
from storefront.domain.schemas import ProductIn, ProductOut, ProductStateChange
from storefront.services.admin_product_service import AdminProductService
from storefront.utils.settings import API_PREFIX

router = APIRouter(
    prefix="/admin/product",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def get_service(db: Session):
    return AdminProductService(db)


@router.get("", response_model=List[ProductOut])
def list_all_products(db: Session = Depends(get_db)):
    return get_service(db).list_all()


@router.post("", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, response: Response, db: Session = Depends(get_db)):
    product = get_service(db).create(
        name=payload.name,
        price=payload.price,
        description=payload.description,
        image_url=payload.image_url,
    )
    response.headers["Location"] = f"{API_PREFIX}/product/{product.id}"
    return product


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    return get_service(db).update(
        product_id,
        name=payload.name,
        price=payload.price,
        description=payload.description,
        image_url=payload.image_url,
    )


@router.delete("/{product_id}", response_model=ProductStateChange)
def deactivate_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).deactivate(product_id)


@router.patch("/{product_id}/activate", response_model=ProductStateChange)
def reactivate_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).reactivate(product_id)
