# app/models/order.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

DEFAULT_PAYMENT_METHOD = "Paid"


class Order(SQLModel, table=True):
    """
    Placed order. Immutable once created.

    items keeps the line items exactly as requested (product reference +
    quantity, input order). total_amount is computed server-side from the
    product prices observed at placement time.
    """

    __tablename__ = "orders"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    items: list[dict] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    total_amount: float = Field(
        description="Σ(price × quantity) at placement time",
    )

    # Plain reference: addresses may be deleted after the order is placed.
    shipping_address: uuid.UUID = Field(
        index=True,
    )

    payment_method: str = Field(
        default=DEFAULT_PAYMENT_METHOD,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )
