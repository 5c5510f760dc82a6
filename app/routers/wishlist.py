# app/routers/wishlist.py
import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import WishlistRepository
from app.repositories.user_repo import UserRepository
from app.schemas.wishlist import (
    WishlistDetailResponse,
    WishlistItem,
    WishlistRead,
    WishlistResponse,
)
from app.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])

repo = WishlistRepository()
user_repo = UserRepository()
service = WishlistService(repo, user_repo)


@router.post("", response_model=WishlistResponse)
def add_to_wishlist(
    payload: WishlistItem,
    response: Response,
    session: Session = Depends(get_session),
):
    """
    Add a product to the user's wishlist.

    201 when the wishlist is created by this call, 200 otherwise.
    """
    wishlist, created = service.add_product(session, payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "Wishlist created"
    else:
        message = "Product added to wishlist"
    return WishlistResponse(message=message, wishlist=WishlistRead.model_validate(wishlist))


@router.get("/{user_id}", response_model=WishlistDetailResponse)
def get_wishlist(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    wishlist = service.get_wishlist(session, user_id)
    message = "Wishlist fetched" if wishlist.id is not None else "Empty wishlist"
    return WishlistDetailResponse(message=message, data=wishlist)


@router.post("/remove", response_model=WishlistResponse)
def remove_from_wishlist(
    payload: WishlistItem,
    session: Session = Depends(get_session),
):
    wishlist = service.remove_product(session, payload)
    return WishlistResponse(
        message="Product removed from wishlist",
        wishlist=WishlistRead.model_validate(wishlist),
    )
