"""Order placement and order history endpoints."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from app.models.order import Order
from app.models.product import Product
from app.routers import orders as orders_router


def _order_body(user, address, items, **extra):
    return {
        "user": user["id"],
        "shippingAddress": address["id"],
        "items": items,
        **extra,
    }


class TestPlaceOrder:
    def test_total_is_price_times_quantity(self, client, user, address, make_product):
        p1 = make_product(price=10)

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 2}]),
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Order placed successfully"
        assert body["order"]["totalAmount"] == 20
        assert body["order"]["user"] == user["id"]
        assert body["order"]["shippingAddress"] == address["id"]

    def test_total_sums_all_lines(self, client, user, address, make_product):
        p1 = make_product(title="Print", price=19.99)
        p2 = make_product(title="Frame", price=5.5)

        resp = client.post(
            "/api/orders",
            json=_order_body(
                user,
                address,
                [
                    {"product": p1["id"], "quantity": 3},
                    {"product": p2["id"], "quantity": 2},
                ],
            ),
        )

        assert resp.status_code == 201
        assert resp.json()["order"]["totalAmount"] == 19.99 * 3 + 5.5 * 2

    def test_items_are_kept_as_references_in_input_order(
        self, client, user, address, make_product
    ):
        p1 = make_product(title="A")
        p2 = make_product(title="B")
        items = [
            {"product": p2["id"], "quantity": 1},
            {"product": p1["id"], "quantity": 4},
        ]

        resp = client.post("/api/orders", json=_order_body(user, address, items))

        assert resp.json()["order"]["items"] == items

    def test_client_supplied_total_is_rejected(self, client, user, address, make_product):
        p1 = make_product(price=10)

        resp = client.post(
            "/api/orders",
            json=_order_body(
                user,
                address,
                [{"product": p1["id"], "quantity": 1}],
                totalAmount=1,
            ),
        )

        assert resp.status_code == 400

    def test_payment_method_defaults_to_paid(self, client, user, address, make_product):
        p1 = make_product()

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 1}]),
        )

        assert resp.json()["order"]["paymentMethod"] == "Paid"

    def test_payment_method_is_stored_when_given(self, client, user, address, make_product):
        p1 = make_product()

        resp = client.post(
            "/api/orders",
            json=_order_body(
                user,
                address,
                [{"product": p1["id"], "quantity": 1}],
                paymentMethod="UPI",
            ),
        )

        assert resp.json()["order"]["paymentMethod"] == "UPI"

    def test_price_change_does_not_alter_existing_order(
        self, app, client, user, address, make_product
    ):
        p1 = make_product(price=10)
        client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 2}]),
        )

        with Session(app.state.engine) as session:
            product = session.get(Product, uuid.UUID(p1["id"]))
            product.price = 99
            session.add(product)
            session.commit()

        orders = client.get(f"/api/orders/{user['id']}").json()["data"]["orders"]
        assert orders[0]["totalAmount"] == 20


class TestPlaceOrderValidation:
    def test_empty_items(self, client, user, address):
        resp = client.post("/api/orders", json=_order_body(user, address, []))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Missing required fields"

    @pytest.mark.parametrize("missing", ["user", "shippingAddress", "items"])
    def test_missing_required_field(self, client, user, address, make_product, missing):
        p1 = make_product()
        body = _order_body(user, address, [{"product": p1["id"], "quantity": 1}])
        del body[missing]

        resp = client.post("/api/orders", json=body)

        assert resp.status_code == 400
        assert "message" in resp.json()

    def test_non_positive_quantity(self, client, user, address, make_product):
        p1 = make_product()

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 0}]),
        )

        assert resp.status_code == 400


class TestPlaceOrderMissingProduct:
    def test_missing_product_is_404_and_nothing_changes(
        self, app, client, user, address, make_product
    ):
        p1 = make_product(price=10)
        client.post(
            "/api/cart/update",
            json={"userId": user["id"], "productId": p1["id"], "quantity": 2},
        )
        ghost = str(uuid.uuid4())

        resp = client.post(
            "/api/orders",
            json=_order_body(
                user,
                address,
                [
                    {"product": p1["id"], "quantity": 1},
                    {"product": ghost, "quantity": 1},
                ],
            ),
        )

        assert resp.status_code == 404
        assert resp.json()["message"] == f"Product not found: {ghost}"

        with Session(app.state.engine) as session:
            assert session.exec(select(Order)).all() == []

        cart = client.get(f"/api/cart/{user['id']}").json()["data"]
        assert [(i["product"]["id"], i["quantity"]) for i in cart["items"]] == [
            (p1["id"], 2)
        ]


class TestPlaceOrderUnknownUser:
    def test_unknown_user_is_404_and_nothing_is_written(
        self, app, client, address, make_product
    ):
        p1 = make_product()
        stranger = {"id": str(uuid.uuid4())}

        resp = client.post(
            "/api/orders",
            json=_order_body(stranger, address, [{"product": p1["id"], "quantity": 1}]),
        )

        assert resp.status_code == 404
        assert resp.json()["message"] == "User not found"
        with Session(app.state.engine) as session:
            assert session.exec(select(Order)).all() == []


class TestCartClearing:
    def test_cart_is_empty_after_order(self, client, user, address, make_product):
        p1 = make_product(price=10)
        client.post(
            "/api/cart/update",
            json={"userId": user["id"], "productId": p1["id"], "quantity": 2},
        )

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 2}]),
        )
        assert resp.json()["order"]["totalAmount"] == 20

        cart = client.get(f"/api/cart/{user['id']}")
        assert cart.status_code == 200
        assert cart.json()["data"]["items"] == []
        assert cart.json()["data"]["id"] is not None

    def test_order_without_existing_cart(self, client, user, address, make_product):
        p1 = make_product()

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 1}]),
        )

        assert resp.status_code == 201
        assert client.get(f"/api/cart/{user['id']}").json()["data"]["items"] == []

    def test_failed_order_write_leaves_cart_untouched(
        self, client, user, address, make_product, monkeypatch
    ):
        p1 = make_product()
        client.post(
            "/api/cart/update",
            json={"userId": user["id"], "productId": p1["id"], "quantity": 3},
        )

        def boom(session, order):
            raise OperationalError("INSERT INTO orders", {}, Exception("disk full"))

        monkeypatch.setattr(orders_router.service.order_repo, "create_order", boom)

        resp = client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 3}]),
        )

        assert resp.status_code == 500
        assert resp.json()["message"] == "Failed to place order"
        assert "disk full" in resp.json()["error"]

        items = client.get(f"/api/cart/{user['id']}").json()["data"]["items"]
        assert [i["quantity"] for i in items] == [3]


class TestListOrders:
    def test_no_orders(self, client, user):
        resp = client.get(f"/api/orders/{user['id']}")

        assert resp.status_code == 200
        assert resp.json()["data"]["orders"] == []

    def test_newest_first_with_references_embedded(
        self, client, user, address, make_product
    ):
        p1 = make_product(title="First")
        p2 = make_product(title="Second")
        for product in (p1, p2):
            client.post(
                "/api/orders",
                json=_order_body(user, address, [{"product": product["id"], "quantity": 1}]),
            )

        orders = client.get(f"/api/orders/{user['id']}").json()["data"]["orders"]

        assert [o["items"][0]["product"]["title"] for o in orders] == ["Second", "First"]
        assert orders[0]["shippingAddress"]["city"] == "Pune"
        assert orders[0]["items"][0]["quantity"] == 1

    def test_only_the_users_orders(self, client, user, address, make_product):
        p1 = make_product()
        client.post(
            "/api/orders",
            json=_order_body(user, address, [{"product": p1["id"], "quantity": 1}]),
        )

        resp = client.get(f"/api/orders/{uuid.uuid4()}")

        assert resp.json()["data"]["orders"] == []
