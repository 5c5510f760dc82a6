# app/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repo import CartRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.schemas.order import (
    OrderCreate,
    OrderListResponse,
    OrderRead,
    OrderResponse,
)
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

order_repo = OrderRepository()
cart_repo = CartRepository()
product_repo = ProductRepository()
user_repo = UserRepository()
service = OrderService(order_repo, cart_repo, product_repo, user_repo)


@router.get("/{user_id}", response_model=OrderListResponse)
def list_user_orders(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    List a user's orders, newest first, with products and the shipping
    address embedded.
    """
    orders = service.list_user_orders(session, user_id)
    return {"message": "Orders fetched", "data": {"orders": orders}}


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
def place_order(
    payload: OrderCreate,
    session: Session = Depends(get_session),
):
    """
    Place an order and empty the user's cart.

    totalAmount is computed from current product prices; 404 if any
    product does not exist (nothing is written in that case).
    """
    order = service.place_order(session, payload)
    return OrderResponse(
        message="Order placed successfully",
        order=OrderRead.model_validate(order),
    )
