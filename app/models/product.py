# app/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Product category (e.g. "Paintings", "Sculptures").
    """

    __tablename__ = "categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        index=True,
        description="Display name of the category",
    )

    description: str = Field(
        default="",
        description="Optional long description",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )


class Product(SQLModel, table=True):
    """
    Catalog entry.

    Referenced by order/cart line items and by wishlists.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    title: str = Field(
        index=True,
        description="Display title of the product",
    )

    description: str | None = None

    price: float = Field(
        description="Current unit price",
    )

    image: str | None = Field(
        default=None,
        description="Main image URL",
    )

    artist: str | None = None
    dimensions: str | None = None
    material: str | None = None

    category: uuid.UUID = Field(
        foreign_key="categories.id",
        index=True,
    )

    stock: int | None = Field(
        default=None,
        description="How many units currently in stock",
    )

    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
