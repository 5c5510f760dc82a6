# app/routers/users.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.user_repo import AddressRepository, UserRepository
from app.schemas.common import MessageResponse
from app.schemas.user import (
    AddressBatchCreate,
    AddressBatchReplace,
    AddressListResponse,
    AddressRead,
    UserCreate,
    UserDetailResponse,
    UserListResponse,
    UserRead,
)
from app.services.address_service import AddressService
from app.services.user_service import UserService

router = APIRouter(tags=["Users"])

user_repo = UserRepository()
address_repo = AddressRepository()
service = UserService(user_repo)
address_service = AddressService(address_repo, user_repo)


# -------- Users --------


@router.post(
    "/users",
    response_model=UserListResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_users(
    payload: list[UserCreate],
    session: Session = Depends(get_session),
):
    """
    Create one or more users from a JSON array.

    Passwords are hashed; responses never include them.
    """
    users = service.create_users(session, payload)
    return UserListResponse(
        message="Users created",
        users=[UserRead.model_validate(u) for u in users],
    )


@router.get("/users/{user_id}", response_model=UserDetailResponse)
def get_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a user with wishlist products and addresses embedded.
    """
    user = service.get_user(session, user_id)
    return {"message": "User fetched", "data": {"user": user}}


# -------- Addresses --------


@router.post(
    "/addresses",
    response_model=AddressListResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_addresses(
    payload: AddressBatchCreate,
    session: Session = Depends(get_session),
):
    """
    Save addresses and link each one to its owning user.
    """
    addresses = address_service.create_addresses(session, payload.addresses)
    return AddressListResponse(
        message="Addresses saved and linked to user",
        addresses=[AddressRead.model_validate(a) for a in addresses],
    )


@router.put("/users/{user_id}/address", response_model=AddressListResponse)
def replace_addresses(
    user_id: uuid.UUID,
    payload: AddressBatchReplace,
    session: Session = Depends(get_session),
):
    """
    Replace the user's full address set.
    """
    addresses = address_service.replace_addresses(session, user_id, payload.addresses)
    return AddressListResponse(
        message="Addresses updated",
        addresses=[AddressRead.model_validate(a) for a in addresses],
    )


@router.delete("/users/{user_id}/address/{address_id}", response_model=MessageResponse)
def delete_address(
    user_id: uuid.UUID,
    address_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete an address and remove it from the user's address list.
    """
    address_service.delete_address(session, user_id, address_id)
    return {"message": "Address deleted successfully"}
