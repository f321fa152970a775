"""Public catalog endpoints."""

from decimal import Decimal

from tests.conftest import bearer


class TestListProducts:
    def test_only_active_products_are_listed(self, client, make_product):
        active = make_product(name="Keyboard")
        make_product(name="Old mouse", is_active=False)
        also_active = make_product(name="Monitor", price="899.00")

        resp = client.get("/product")

        assert resp.status_code == 200
        ids = [p["id"] for p in resp.json()]
        assert ids == [active.id, also_active.id]
        assert all(p["is_active"] for p in resp.json())

    def test_empty_catalog(self, client):
        resp = client.get("/product")
        assert resp.status_code == 200
        assert resp.json() == []


class TestGetProduct:
    def test_active_product(self, client, make_product):
        product = make_product(name="Monitor", price="899.00", description="27 inch")

        resp = client.get(f"/product/{product.id}")

        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "Monitor"
        assert body["description"] == "27 inch"
        assert Decimal(str(body["price"])) == Decimal("899.00")

    def test_inactive_product_is_hidden(self, client, make_product):
        product = make_product(is_active=False)
        assert client.get(f"/product/{product.id}").status_code == 404

    def test_missing_product(self, client):
        resp = client.get("/product/999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Product not found"}


class TestGetAnyProduct:
    def test_requires_authentication(self, client, make_product):
        product = make_product()
        assert client.get(f"/product/{product.id}/any").status_code == 401

    def test_returns_inactive_product(self, client, make_product, user_id):
        product = make_product(is_active=False)

        resp = client.get(f"/product/{product.id}/any", headers=bearer(user_id))

        assert resp.status_code == 200
        assert resp.json()["is_active"] is False

    def test_missing_product(self, client, user_id):
        assert client.get("/product/42/any", headers=bearer(user_id)).status_code == 404
