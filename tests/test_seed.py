import uuid

from storefront.data.models import ProductModel, UserRoleModel
from storefront.data.seed import DEMO_PRODUCTS, seed


def test_seed_populates_empty_catalog(db):
    seed(db)
    assert db.query(ProductModel).count() == len(DEMO_PRODUCTS)


def test_seed_is_idempotent(db):
    seed(db)
    seed(db)
    assert db.query(ProductModel).count() == len(DEMO_PRODUCTS)


def test_seed_grants_admin(db):
    admin = uuid.uuid4()
    db.add(UserRoleModel(user_id=admin, role="customer"))
    db.commit()

    seed(db, admin_user_id=admin)

    roles = db.query(UserRoleModel).filter(UserRoleModel.user_id == admin).all()
    assert [r.role for r in roles] == ["admin"]
