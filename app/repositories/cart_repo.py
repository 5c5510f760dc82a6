# app/repositories/cart_repo.py
import uuid
from datetime import datetime, timezone

from sqlmodel import Session, select

from app.models.cart import Cart, Wishlist


class CartRepository:

    # Get the cart for a user
    def get_for_user(self, session: Session, user_id: uuid.UUID) -> Cart | None:
        stmt = select(Cart).where(Cart.user == user_id)
        return session.exec(stmt).first()

    def save(self, session: Session, cart: Cart) -> Cart:
        cart.updated_at = datetime.now(timezone.utc)
        session.add(cart)
        session.commit()
        session.refresh(cart)
        return cart

    def clear_items(self, session: Session, user_id: uuid.UUID) -> Cart | None:
        """
        Overwrite the user's cart items with an empty list.

        No-op when the user has no cart. Does not commit: this runs inside
        the order placement unit of work.
        """
        cart = self.get_for_user(session, user_id)
        if cart is None:
            return None
        cart.items = []
        cart.updated_at = datetime.now(timezone.utc)
        session.add(cart)
        session.flush()
        return cart


class WishlistRepository:

    def get_for_user(self, session: Session, user_id: uuid.UUID) -> Wishlist | None:
        stmt = select(Wishlist).where(Wishlist.user == user_id)
        return session.exec(stmt).first()

    def save(self, session: Session, wishlist: Wishlist) -> Wishlist:
        wishlist.updated_at = datetime.now(timezone.utc)
        session.add(wishlist)
        session.commit()
        session.refresh(wishlist)
        return wishlist
