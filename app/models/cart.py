# app/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class Cart(SQLModel, table=True):
    """
    Shopping cart, one per user.

    items is an ordered JSON array of {"product": <id str>, "quantity": int}.
    One cart cannot have 2 lines for the same product.
    """

    __tablename__ = "carts"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user: uuid.UUID = Field(
        foreign_key="users.id",
        unique=True,
        index=True,
    )

    items: list[dict] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Bumped on every mutation",
    )


class Wishlist(SQLModel, table=True):
    """
    Saved products, one wishlist per user.

    products is a JSON array of product id strings without duplicates.
    """

    __tablename__ = "wishlists"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user: uuid.UUID = Field(
        foreign_key="users.id",
        unique=True,
        index=True,
    )

    products: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
