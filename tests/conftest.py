import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SUPABASE_JWT_SECRET"] = "test-jwt-secret"
os.environ["API_PREFIX"] = ""

import time
import uuid
from contextlib import contextmanager
from decimal import Decimal

import pytest
from authlib.jose import jwt
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.api import create_app
from storefront.data import models  # noqa: F401
from storefront.data.database import Base, get_db, make_engine
from storefront.data.models import ProductModel, UserRoleModel
from storefront.domain.errors import Conflict
from storefront.services.lock_service import get_lock_service

JWT_SECRET = "test-jwt-secret"


def make_token(sub, secret: str = JWT_SECRET, expires_in: int = 3600, **claims) -> str:
    now = int(time.time())
    payload = {"sub": str(sub), "iat": now, "exp": now + expires_in, "role": "authenticated"}
    payload.update(claims)
    return jwt.encode({"alg": "HS256", "typ": "JWT"}, payload, secret).decode("utf-8")


def bearer(user_id) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


class FakeLockService:
    """In-process stand-in for the redis lock: records usage, can be pre-held."""

    def __init__(self):
        self.held = set()
        self.acquired = []

    @contextmanager
    def user_lock(self, user_id):
        if user_id in self.held:
            raise Conflict("Cart is being modified by another request, try again")
        self.held.add(user_id)
        self.acquired.append(user_id)
        try:
            yield
        finally:
            self.held.discard(user_id)

    def ping(self) -> bool:
        return True


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def locks():
    return FakeLockService()


@pytest.fixture
def app(session_factory, locks):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: locks
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def other_user_id():
    return uuid.uuid4()


@pytest.fixture
def admin_id(db):
    admin = uuid.uuid4()
    db.add(UserRoleModel(user_id=admin, role="admin"))
    db.commit()
    return admin


@pytest.fixture
def make_product(db):
    def _make(name="Keyboard", price="10.00", is_active=True, **kwargs):
        product = ProductModel(name=name, price=Decimal(price), is_active=is_active, **kwargs)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make
