"""Checkout: cart -> order in one all-or-nothing step."""

from decimal import Decimal

from fastapi.testclient import TestClient
from sqlalchemy import select

from storefront.data.models import CartItemModel, OrderItemModel, OrderModel
from storefront.repos.order_repo import OrderRepo
from tests.conftest import bearer


def add_to_cart(client, user_id, product_id, quantity=1):
    resp = client.post(
        "/cart/items", json={"product_id": product_id, "quantity": quantity}, headers=bearer(user_id)
    )
    assert resp.status_code == 201
    return resp.json()


def count(db, model):
    return len(db.execute(select(model)).scalars().all())


class TestCheckoutValidation:
    def test_no_cart(self, client, db, user_id):
        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 400
        assert resp.json()["message"] == "No cart found for user"
        assert count(db, OrderModel) == 0

    def test_empty_cart(self, client, db, user_id):
        client.get("/cart", headers=bearer(user_id))

        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Cart is empty"
        assert count(db, OrderModel) == 0

    def test_inactive_product_blocks_whole_checkout(self, client, db, make_product, user_id):
        keyboard = make_product(name="Keyboard")
        mouse = make_product(name="Mouse")
        add_to_cart(client, user_id, keyboard.id)
        add_to_cart(client, user_id, mouse.id)

        mouse.is_active = False
        db.commit()

        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 400
        assert resp.json()["inactive_product_ids"] == [mouse.id]
        assert count(db, OrderModel) == 0
        assert count(db, CartItemModel) == 2


class TestCheckoutSuccess:
    def test_creates_pending_order_and_empties_cart(self, client, db, make_product, user_id, locks):
        keyboard = make_product(name="Keyboard", price="199.99")
        mouse = make_product(name="Mouse", price="49.50")
        add_to_cart(client, user_id, keyboard.id, quantity=2)
        add_to_cart(client, user_id, mouse.id)

        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "pending"
        assert body["user_id"] == str(user_id)
        items = {i["product_id"]: i for i in body["items"]}
        assert items[keyboard.id]["quantity"] == 2
        assert Decimal(str(items[keyboard.id]["price_at_purchase"])) == Decimal("199.99")
        assert Decimal(str(items[mouse.id]["price_at_purchase"])) == Decimal("49.50")

        assert count(db, OrderModel) == 1
        assert count(db, OrderItemModel) == 2
        assert count(db, CartItemModel) == 0
        assert locks.acquired[-1] == user_id

    def test_later_price_change_does_not_touch_order(self, client, db, make_product, user_id):
        product = make_product(price="10.00")
        add_to_cart(client, user_id, product.id)
        order_id = client.post("/order/checkout", headers=bearer(user_id)).json()["id"]

        product.price = Decimal("99.00")
        db.commit()

        body = client.get(f"/order/{order_id}", headers=bearer(user_id)).json()
        assert Decimal(str(body["items"][0]["price_at_purchase"])) == Decimal("10.00")

    def test_second_checkout_finds_empty_cart(self, client, make_product, user_id):
        add_to_cart(client, user_id, make_product().id)
        assert client.post("/order/checkout", headers=bearer(user_id)).status_code == 201

        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Cart is empty"


class TestCheckoutFailure:
    def test_failure_after_order_insert_leaves_cart_intact(
        self, app, db, make_product, user_id, monkeypatch
    ):
        client = TestClient(app, raise_server_exceptions=False)
        add_to_cart(client, user_id, make_product().id, quantity=3)

        def broken_insert(self, items):
            raise RuntimeError("order_items insert failed")

        monkeypatch.setattr(OrderRepo, "add_order_items", broken_insert)

        resp = client.post("/order/checkout", headers=bearer(user_id))

        assert resp.status_code == 500
        assert resp.json()["detail"] == "order_items insert failed"
        assert count(db, OrderModel) == 0
        remaining = db.execute(select(CartItemModel)).scalars().all()
        assert [i.quantity for i in remaining] == [3]
