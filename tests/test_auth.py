"""Token verification and the fail-closed admin check."""

import uuid

import pytest

from storefront.domain.errors import Unauthorized
from storefront.services.auth_service import DbRoleResolver, is_admin, verify_token
from tests.conftest import JWT_SECRET, make_token


class TestVerifyToken:
    def test_valid_token_yields_subject(self):
        user = uuid.uuid4()
        assert verify_token(make_token(user), JWT_SECRET) == user

    def test_issuer_and_audience_are_not_checked(self):
        user = uuid.uuid4()
        token = make_token(user, iss="https://anything.supabase.co/auth/v1", aud="whatever")
        assert verify_token(token, JWT_SECRET) == user

    def test_wrong_secret(self):
        with pytest.raises(Unauthorized):
            verify_token(make_token(uuid.uuid4(), secret="other-secret"), JWT_SECRET)

    def test_expired_token(self):
        with pytest.raises(Unauthorized):
            verify_token(make_token(uuid.uuid4(), expires_in=-30), JWT_SECRET)

    def test_garbage_token(self):
        with pytest.raises(Unauthorized):
            verify_token("not-a-jwt", JWT_SECRET)

    def test_subject_must_be_uuid(self):
        with pytest.raises(Unauthorized):
            verify_token(make_token("user-42"), JWT_SECRET)

    def test_missing_token(self):
        with pytest.raises(Unauthorized):
            verify_token("", JWT_SECRET)

    def test_unconfigured_secret(self):
        with pytest.raises(Unauthorized):
            verify_token(make_token(uuid.uuid4()), "")


class TestHttpAuth:
    def test_missing_header(self, client):
        resp = client.get("/order")
        assert resp.status_code == 401
        assert "message" in resp.json()

    def test_non_bearer_scheme(self, client):
        assert client.get("/order", headers={"Authorization": "Basic abc"}).status_code == 401

    def test_expired_bearer(self, client):
        token = make_token(uuid.uuid4(), expires_in=-1)
        assert client.get("/order", headers={"Authorization": f"Bearer {token}"}).status_code == 401


class _ExplodingResolver:
    def get_role(self, user_id):
        raise ConnectionError("store unreachable")


class _StaticResolver:
    def __init__(self, role):
        self.role = role

    def get_role(self, user_id):
        return self.role


class TestIsAdmin:
    @pytest.mark.parametrize("role,expected", [("admin", True), ("Admin", True), ("customer", False), (None, False)])
    def test_role_values(self, role, expected):
        assert is_admin(_StaticResolver(role), uuid.uuid4()) is expected

    def test_lookup_failure_fails_closed(self):
        assert is_admin(_ExplodingResolver(), uuid.uuid4()) is False

    def test_db_resolver(self, db, admin_id, user_id):
        resolver = DbRoleResolver(db)
        assert is_admin(resolver, admin_id) is True
        assert is_admin(resolver, user_id) is False

    def test_failing_lookup_over_http_is_forbidden(self, app, client, admin_id):
        from storefront.api.deps import get_role_resolver

        app.dependency_overrides[get_role_resolver] = lambda: _ExplodingResolver()

        resp = client.get("/admin/order", headers={"Authorization": f"Bearer {make_token(admin_id)}"})

        assert resp.status_code == 403
