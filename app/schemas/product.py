# app/schemas/product.py
import uuid
from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import ApiModel, MessageResponse, RequestModel


def _not_empty(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


# ---- Categories ----


class CategoryCreate(RequestModel):
    """
    Payload for creating a category. Only `name` is required.
    """

    name: str
    description: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _not_empty(v)


class CategoryRead(ApiModel):
    id: uuid.UUID
    name: str
    description: str = ""
    created_at: datetime


class CategoryResponse(MessageResponse):
    category: CategoryRead


class CategoryData(ApiModel):
    category: CategoryRead


class CategoryDetailResponse(MessageResponse):
    data: CategoryData


# ---- Products ----


class ProductCreate(RequestModel):
    """
    Payload for creating a product.

    Required: title, price, category. Everything else is optional.
    """

    title: str
    description: str | None = None
    price: float = Field(gt=0)
    image: str | None = None
    artist: str | None = None
    dimensions: str | None = None
    material: str | None = None
    category: uuid.UUID
    stock: int | None = Field(default=None, ge=0)
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _not_empty(v)


class ProductRead(ApiModel):
    """
    Product representation for clients (category as a reference).
    """

    id: uuid.UUID
    title: str
    description: str | None = None
    price: float
    image: str | None = None
    artist: str | None = None
    dimensions: str | None = None
    material: str | None = None
    category: uuid.UUID
    stock: int | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime


class ProductDetail(ProductRead):
    """
    Product with its category embedded (None if the category is gone).
    """

    category: CategoryRead | None = None


class ProductResponse(MessageResponse):
    product: ProductRead


class ProductListData(ApiModel):
    products: list[ProductDetail]


class ProductListResponse(MessageResponse):
    data: ProductListData


class ProductData(ApiModel):
    product: ProductDetail


class ProductDetailResponse(MessageResponse):
    data: ProductData
