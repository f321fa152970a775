# storefront/data/seed.py
import sys
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.database import SessionLocal
from storefront.data.models import ProductModel, UserRoleModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Keyboard", "description": "Mechanical keyboard", "price": Decimal("199.99")},
    {"name": "Mouse", "description": "Wireless mouse", "price": Decimal("49.50")},
    {"name": "Monitor", "description": "27\" IPS monitor", "price": Decimal("899.00")},
]


def seed(db: Session, admin_user_id: UUID | None = None):
    # not forcing: only seed if empty
    if not db.execute(select(ProductModel).limit(1)).first():
        db.add_all(ProductModel(**p) for p in DEMO_PRODUCTS)
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")

    if admin_user_id is not None:
        existing = db.execute(
            select(UserRoleModel).where(UserRoleModel.user_id == admin_user_id)
        ).scalar_one_or_none()
        if existing:
            existing.role = "admin"
        else:
            db.add(UserRoleModel(user_id=admin_user_id, role="admin"))
        logger.info(f"User {admin_user_id} granted admin role")

    db.commit()


if __name__ == "__main__":
    admin = UUID(sys.argv[1]) if len(sys.argv) > 1 else None
    session = SessionLocal()
    try:
        seed(session, admin)
    finally:
        session.close()
