# app/services/wishlist_service.py
import uuid

from sqlmodel import Session

from app.core.errors import NotFoundError, persistence_guard
from app.models.cart import Wishlist
from app.models.product import Product
from app.repositories.cart_repo import WishlistRepository
from app.repositories.user_repo import UserRepository
from app.repositories.resolver import ReferenceResolver
from app.schemas.wishlist import WishlistDetail, WishlistItem


class WishlistService:
    """
    Business logic for wishlists: one per user, no duplicate products.
    """

    def __init__(self, repo: WishlistRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    def get_wishlist(self, session: Session, user_id: uuid.UUID) -> WishlistDetail:
        wishlist = self.repo.get_for_user(session, user_id)
        if wishlist is None:
            return WishlistDetail(user=user_id)

        doc = ReferenceResolver(session).expand(wishlist, {"products": Product})
        return WishlistDetail.model_validate(doc)

    def add_product(
        self,
        session: Session,
        payload: WishlistItem,
    ) -> tuple[Wishlist, bool]:
        """
        Add a product to the user's wishlist.

        Returns (wishlist, created) where `created` is True when the
        wishlist did not exist before this call. Adding a product that is
        already present changes nothing.

        Raises:
            NotFoundError: if the user does not exist.
        """
        if self.user_repo.get_by_id(session, payload.user_id) is None:
            raise NotFoundError("User not found")

        product_key = str(payload.product_id)
        wishlist = self.repo.get_for_user(session, payload.user_id)

        if wishlist is None:
            wishlist = Wishlist(user=payload.user_id, products=[product_key])
            with persistence_guard(session, "Failed to update wishlist"):
                return self.repo.save(session, wishlist), True

        if product_key in wishlist.products:
            return wishlist, False

        wishlist.products = [*wishlist.products, product_key]
        with persistence_guard(session, "Failed to update wishlist"):
            return self.repo.save(session, wishlist), False

    def remove_product(self, session: Session, payload: WishlistItem) -> Wishlist:
        wishlist = self.repo.get_for_user(session, payload.user_id)
        if wishlist is None:
            raise NotFoundError("Wishlist not found")

        product_key = str(payload.product_id)
        wishlist.products = [p for p in wishlist.products if p != product_key]

        with persistence_guard(session, "Failed to remove from wishlist"):
            return self.repo.save(session, wishlist)
