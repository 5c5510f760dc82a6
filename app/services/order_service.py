# app/services/order_service.py
import logging
import uuid

from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError, persistence_guard
from app.models.order import DEFAULT_PAYMENT_METHOD, Order
from app.models.product import Product
from app.models.user import Address
from app.repositories.cart_repo import CartRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.repositories.resolver import ReferenceResolver
from app.schemas.order import OrderCreate, OrderDetail

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business logic for orders.

    Responsibilities:
      - Validate line items against live products
      - Compute total_amount server-side
      - Persist the order, then empty the user's cart
      - List a user's orders with products/address embedded
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ):
        self.order_repo = order_repo
        self.cart_repo = cart_repo
        self.product_repo = product_repo
        self.user_repo = user_repo

    def place_order(self, session: Session, payload: OrderCreate) -> Order:
        """
        Place an order for payload.user.

        Steps:
          1. Reject an empty item list and an unknown user.
          2. Resolve every product; any missing product aborts the whole
             call before anything is written.
          3. total_amount = Σ(current price × quantity), in input order.
          4. Persist the Order (items kept as references).
          5. Empty the user's cart (no-op if the user has no cart).

        Steps 4 and 5 share one commit: if the order cannot be written the
        cart is left untouched.
        """
        # 1) Shape check beyond the schema
        if not payload.items:
            raise ValidationError("Missing required fields")
        if self.user_repo.get_by_id(session, payload.user) is None:
            raise NotFoundError("User not found")

        # 2) + 3) Resolve products and accumulate the total
        total_amount = 0.0
        for item in payload.items:
            product = self.product_repo.get_by_id(session, item.product)
            if product is None:
                raise NotFoundError(f"Product not found: {item.product}")
            total_amount += product.price * item.quantity

        order = Order(
            user=payload.user,
            items=[
                {"product": str(item.product), "quantity": item.quantity}
                for item in payload.items
            ],
            total_amount=total_amount,
            shipping_address=payload.shipping_address,
            payment_method=payload.payment_method or DEFAULT_PAYMENT_METHOD,
        )

        with persistence_guard(session, "Failed to place order"):
            # 4) Persist the order
            order = self.order_repo.create_order(session, order)

            # 5) Clear cart
            self.cart_repo.clear_items(session, payload.user)

            session.commit()

        session.refresh(order)
        logger.info(
            "Order %s placed for user %s (total %.2f)",
            order.id,
            order.user,
            order.total_amount,
        )
        return order

    def list_user_orders(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> list[OrderDetail]:
        """
        List orders for the given user, newest first, with line-item
        products and the shipping address embedded.
        """
        orders = self.order_repo.list_for_user(session, user_id)
        docs = ReferenceResolver(session).expand_many(
            orders,
            {"items.product": Product, "shipping_address": Address},
        )
        return [OrderDetail.model_validate(doc) for doc in docs]
