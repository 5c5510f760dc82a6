# app/services/cart_service.py
import uuid

from sqlmodel import Session

from app.core.errors import NotFoundError, persistence_guard
from app.models.cart import Cart
from app.models.product import Product
from app.repositories.cart_repo import CartRepository
from app.repositories.user_repo import UserRepository
from app.repositories.resolver import ReferenceResolver
from app.schemas.cart import CartDetail, CartItemRemove, CartItemUpdate


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - lazily create a user's cart on first write
      - keep at most one line per product (re-adding overwrites quantity)
      - compute line and cart totals from live product prices on read
    """

    def __init__(self, cart_repo: CartRepository, user_repo: UserRepository):
        self.cart_repo = cart_repo
        self.user_repo = user_repo

    def get_cart(self, session: Session, user_id: uuid.UUID) -> CartDetail:
        """
        Return the user's cart with products embedded.

        A user without a cart gets an empty summary.
        """
        cart = self.cart_repo.get_for_user(session, user_id)
        if cart is None:
            return CartDetail(user=user_id)

        doc = ReferenceResolver(session).expand(cart, {"items.product": Product})

        total_qty = 0
        total_price = 0.0
        for line in doc["items"]:
            if line["product"] is None:
                continue
            total_qty += line["quantity"]
            total_price += line["product"]["price"] * line["quantity"]

        return CartDetail.model_validate(
            {**doc, "total_quantity": total_qty, "total_price": total_price}
        )

    def update_item(self, session: Session, payload: CartItemUpdate) -> Cart:
        """
        Add-or-update a single line in the user's cart.

        Rules:
          - the user must exist
          - no cart yet => create one with exactly this line
          - line for this product exists => overwrite its quantity
          - otherwise => append a new line
        """
        if self.user_repo.get_by_id(session, payload.user_id) is None:
            raise NotFoundError("User not found")

        product_key = str(payload.product_id)
        cart = self.cart_repo.get_for_user(session, payload.user_id)

        if cart is None:
            cart = Cart(user=payload.user_id, items=[])

        items = [dict(line) for line in cart.items]
        for line in items:
            if line["product"] == product_key:
                line["quantity"] = payload.quantity
                break
        else:
            items.append({"product": product_key, "quantity": payload.quantity})

        # Reassign so the JSON column is flagged dirty
        cart.items = items

        with persistence_guard(session, "Failed to update cart"):
            return self.cart_repo.save(session, cart)

    def remove_item(self, session: Session, payload: CartItemRemove) -> Cart:
        """
        Remove a product's line from the cart (no-op if it is not there).
        """
        cart = self.cart_repo.get_for_user(session, payload.user_id)
        if cart is None:
            raise NotFoundError("Cart not found")

        product_key = str(payload.product_id)
        cart.items = [line for line in cart.items if line["product"] != product_key]

        with persistence_guard(session, "Failed to remove from cart"):
            return self.cart_repo.save(session, cart)
