# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Storefront customer (or admin).

    Reference lists are embedded as JSON arrays of id strings:
      - wishlist:  product ids, in the order they were given
      - addresses: address ids owned by this user, in insertion order

    Only a password hash is stored; see app.core.security.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        description="Customer display name",
    )

    email: str = Field(
        unique=True,
        index=True,
    )

    password_hash: str = Field(
        description="passlib hash of the user's password",
    )

    wishlist: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    addresses: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    is_admin: bool = Field(
        default=False,
        description="Application admin flag",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )


class Address(SQLModel, table=True):
    """
    Postal address owned by a user.

    Deleting an address must also pull its id out of User.addresses;
    the store does not do that on its own.
    """

    __tablename__ = "addresses"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
