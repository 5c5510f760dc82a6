# app/schemas/user.py
import uuid
from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from app.schemas.common import ApiModel, MessageResponse, RequestModel
from app.schemas.product import ProductRead


# ---- Addresses ----


class AddressFields(RequestModel):
    """
    Postal fields shared by address payloads. All optional.
    """

    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None


class AddressCreate(AddressFields):
    """Address with an explicit owner, for POST /addresses."""

    user: uuid.UUID


class AddressBatchCreate(RequestModel):
    addresses: list[AddressCreate]


class AddressBatchReplace(RequestModel):
    """Full replacement of one user's addresses (owner comes from the path)."""

    addresses: list[AddressFields]


class AddressRead(ApiModel):
    id: uuid.UUID
    user: uuid.UUID
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None
    created_at: datetime


class AddressListResponse(MessageResponse):
    addresses: list[AddressRead]


# ---- Users ----


class UserCreate(RequestModel):
    """
    Payload for one user in a POST /users batch.

    Validation rules:
      - email must be a valid EmailStr
      - name cannot be empty or whitespace
      - password is hashed before it is stored
    """

    name: str = Field(max_length=200)
    email: EmailStr
    password: str = Field(min_length=1)
    wishlist: list[uuid.UUID] = Field(default_factory=list)
    addresses: list[uuid.UUID] = Field(default_factory=list)
    is_admin: bool = False

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class UserRead(ApiModel):
    """Response schema returned to clients. Never carries password material."""

    id: uuid.UUID
    name: str
    email: str
    wishlist: list[uuid.UUID] = Field(default_factory=list)
    addresses: list[uuid.UUID] = Field(default_factory=list)
    is_admin: bool = False
    created_at: datetime


class UserDetail(UserRead):
    """User with wishlist products and addresses embedded."""

    wishlist: list[ProductRead] = Field(default_factory=list)
    addresses: list[AddressRead] = Field(default_factory=list)


class UserListResponse(MessageResponse):
    users: list[UserRead]


class UserData(ApiModel):
    user: UserDetail


class UserDetailResponse(MessageResponse):
    data: UserData
