# app/schemas/order.py
import uuid
from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import ApiModel, MessageResponse, RequestModel
from app.schemas.product import ProductRead
from app.schemas.user import AddressRead


class OrderItemCreate(RequestModel):
    product: uuid.UUID
    quantity: int = Field(gt=0)


class OrderCreate(RequestModel):
    """
    Payload for placing an order.

    User provides:
      - user, shippingAddress (references)
      - items: product references + quantities
      - paymentMethod (optional)

    Backend derives:
      - totalAmount from current product prices
      - createdAt
    """

    user: uuid.UUID
    shipping_address: uuid.UUID
    payment_method: str | None = None
    items: list[OrderItemCreate]

    @field_validator("payment_method")
    @classmethod
    def normalize_payment_method(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None


class OrderItemRead(ApiModel):
    product: uuid.UUID
    quantity: int


class OrderRead(ApiModel):
    """
    Order as stored (references as ids).
    """

    id: uuid.UUID
    user: uuid.UUID
    items: list[OrderItemRead]
    total_amount: float
    shipping_address: uuid.UUID
    payment_method: str
    created_at: datetime


class OrderItemDetail(ApiModel):
    product: ProductRead | None
    quantity: int


class OrderDetail(OrderRead):
    """
    Order with line-item products and the shipping address embedded.
    """

    items: list[OrderItemDetail]
    shipping_address: AddressRead | None = None


class OrderResponse(MessageResponse):
    order: OrderRead


class OrderListData(ApiModel):
    orders: list[OrderDetail]


class OrderListResponse(MessageResponse):
    data: OrderListData
