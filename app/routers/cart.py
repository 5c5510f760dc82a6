# app/routers/cart.py
import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.user_repo import UserRepository
from app.schemas.cart import (
    CartDetailResponse,
    CartItemRemove,
    CartItemUpdate,
    CartRead,
    CartResponse,
)
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
user_repo = UserRepository()
service = CartService(cart_repo, user_repo)


@router.get("/{user_id}", response_model=CartDetailResponse)
def get_cart(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a user's cart with products embedded and totals.

    Users without a cart get an empty item list.
    """
    cart = service.get_cart(session, user_id)
    message = "Cart fetched" if cart.id is not None else "Empty cart"
    return CartDetailResponse(message=message, data=cart)


@router.post("/update", response_model=CartResponse)
def update_cart(
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
):
    """
    Set the quantity of a product in the user's cart.

    Creates the cart on first use; an existing line's quantity is
    overwritten, not incremented.
    """
    cart = service.update_item(session, payload)
    return CartResponse(message="Cart updated", cart=CartRead.model_validate(cart))


@router.post("/remove", response_model=CartResponse)
def remove_from_cart(
    payload: CartItemRemove,
    session: Session = Depends(get_session),
):
    """
    Remove a product from the user's cart.
    """
    cart = service.remove_item(session, payload)
    return CartResponse(
        message="Product removed from cart",
        cart=CartRead.model_validate(cart),
    )
