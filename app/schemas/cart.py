# app/schemas/cart.py
import uuid
from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel, MessageResponse, RequestModel
from app.schemas.product import ProductRead


class CartItemUpdate(RequestModel):
    """
    Payload for POST /cart/update: set the quantity of one product.
    """

    user_id: uuid.UUID
    product_id: uuid.UUID
    quantity: int = Field(gt=0)


class CartItemRemove(RequestModel):
    user_id: uuid.UUID
    product_id: uuid.UUID


class CartLine(ApiModel):
    product: uuid.UUID
    quantity: int


class CartRead(ApiModel):
    """
    Cart as stored (line items reference products by id).
    """

    id: uuid.UUID
    user: uuid.UUID
    items: list[CartLine]
    created_at: datetime
    updated_at: datetime


class CartLineDetail(ApiModel):
    product: ProductRead | None
    quantity: int


class CartDetail(ApiModel):
    """
    Cart with products embedded and totals computed from live prices.

    id and timestamps are None when the user has no cart yet.
    """

    id: uuid.UUID | None = None
    user: uuid.UUID
    items: list[CartLineDetail] = Field(default_factory=list)
    total_quantity: int = 0
    total_price: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CartResponse(MessageResponse):
    cart: CartRead


class CartDetailResponse(MessageResponse):
    data: CartDetail
