"""ReferenceResolver against a bare in-memory store."""

import uuid

import pytest
from sqlmodel import Session

from app.database import create_db_and_tables, create_db_engine
from app.models.order import Order
from app.models.product import Category, Product
from app.models.user import Address, User
from app.repositories.resolver import ReferenceResolver


@pytest.fixture()
def session():
    engine = create_db_engine("sqlite://")
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture()
def catalog(session):
    category = Category(name="Paintings")
    session.add(category)
    session.commit()
    session.refresh(category)

    products = [
        Product(title=title, price=price, category=category.id)
        for title, price in (("A", 1.0), ("B", 2.0))
    ]
    session.add_all(products)
    session.commit()
    for product in products:
        session.refresh(product)
    return category, products


class TestScalarReference:
    def test_embeds_referenced_record(self, session, catalog):
        category, (product, _) = catalog

        doc = ReferenceResolver(session).expand(product, {"category": Category})

        assert doc["title"] == "A"
        assert doc["category"]["id"] == category.id
        assert doc["category"]["name"] == "Paintings"

    def test_dangling_reference_becomes_none(self, session):
        product = Product(title="Orphan", price=1.0, category=uuid.uuid4())

        doc = ReferenceResolver(session).expand(product, {"category": Category})

        assert doc["category"] is None


class TestListReference:
    def test_keeps_order_and_drops_dangling(self, session, catalog):
        _, (a, b) = catalog
        user = User(
            name="Ada",
            email="ada@example.com",
            password_hash="x",
            wishlist=[str(b.id), str(uuid.uuid4()), str(a.id)],
        )

        doc = ReferenceResolver(session).expand(
            user, {"wishlist": Product, "addresses": Address}
        )

        assert [p["title"] for p in doc["wishlist"]] == ["B", "A"]
        assert doc["addresses"] == []


class TestNestedReference:
    def test_expands_inside_line_items(self, session, catalog):
        _, (a, b) = catalog
        ghost = str(uuid.uuid4())
        order = Order(
            user=uuid.uuid4(),
            items=[
                {"product": str(a.id), "quantity": 2},
                {"product": ghost, "quantity": 1},
                {"product": str(b.id), "quantity": 3},
            ],
            total_amount=0,
            shipping_address=uuid.uuid4(),
        )

        doc = ReferenceResolver(session).expand(order, {"items.product": Product})

        assert [i["quantity"] for i in doc["items"]] == [2, 1, 3]
        assert doc["items"][0]["product"]["title"] == "A"
        assert doc["items"][1]["product"] is None
        assert doc["items"][2]["product"]["title"] == "B"

    def test_expand_many_shares_lookups(self, session, catalog):
        _, (a, b) = catalog
        orders = [
            Order(
                user=uuid.uuid4(),
                items=[{"product": str(p.id), "quantity": 1}],
                total_amount=p.price,
                shipping_address=uuid.uuid4(),
            )
            for p in (a, b)
        ]

        docs = ReferenceResolver(session).expand_many(
            orders, {"items.product": Product, "shipping_address": Address}
        )

        assert [d["items"][0]["product"]["title"] for d in docs] == ["A", "B"]
        assert all(d["shipping_address"] is None for d in docs)

    def test_entities_are_not_mutated(self, session, catalog):
        _, (a, _) = catalog
        order = Order(
            user=uuid.uuid4(),
            items=[{"product": str(a.id), "quantity": 1}],
            total_amount=1.0,
            shipping_address=uuid.uuid4(),
        )

        ReferenceResolver(session).expand(order, {"items.product": Product})

        assert order.items == [{"product": str(a.id), "quantity": 1}]
