# app/schemas/wishlist.py
import uuid
from datetime import datetime

from pydantic import Field

from app.schemas.common import ApiModel, MessageResponse, RequestModel
from app.schemas.product import ProductRead


class WishlistItem(RequestModel):
    """
    Payload for adding/removing one product to/from a user's wishlist.
    """

    user_id: uuid.UUID
    product_id: uuid.UUID


class WishlistRead(ApiModel):
    id: uuid.UUID
    user: uuid.UUID
    products: list[uuid.UUID]
    created_at: datetime
    updated_at: datetime


class WishlistDetail(ApiModel):
    """
    Wishlist with products embedded. id and timestamps are None when the
    user has no wishlist yet.
    """

    id: uuid.UUID | None = None
    user: uuid.UUID
    products: list[ProductRead] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WishlistResponse(MessageResponse):
    wishlist: WishlistRead


class WishlistDetailResponse(MessageResponse):
    data: WishlistDetail
