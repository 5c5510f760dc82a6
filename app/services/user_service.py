# app/services/user_service.py
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError, persistence_guard
from app.core.security import get_password_hash
from app.models.product import Product
from app.models.user import Address, User
from app.repositories.resolver import ReferenceResolver
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserCreate, UserDetail


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - hash passwords before anything is stored
      - keep e-mail addresses unique
      - embed wishlist products and addresses on read
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def create_users(self, session: Session, payloads: list[UserCreate]) -> list[User]:
        """
        Create a batch of users in one commit.

        Rules:
          - the batch cannot be empty
          - e-mails must be unique within the batch and against existing users
        """
        if not payloads:
            raise ValidationError("No user data provided")

        emails = [p.email.lower() for p in payloads]
        seen: set[str] = set()
        for email in emails:
            if email in seen:
                raise ValidationError(f"Duplicate email in request: {email}")
            seen.add(email)

        existing = self.repo.list_by_emails(session, emails)
        if existing:
            raise ValidationError(f"Email already registered: {existing[0].email}")

        users = [
            User(
                name=p.name,
                email=p.email.lower(),
                password_hash=get_password_hash(p.password),
                wishlist=[str(pid) for pid in p.wishlist],
                addresses=[str(aid) for aid in p.addresses],
                is_admin=p.is_admin,
            )
            for p in payloads
        ]
        with persistence_guard(session, "Failed to create users"):
            try:
                return self.repo.create_many(session, users)
            except IntegrityError as exc:
                # Lost a race with a concurrent batch on users.email
                session.rollback()
                raise ValidationError("Email already registered") from exc

    def get_user(self, session: Session, user_id: uuid.UUID) -> UserDetail:
        """
        Get a user by id with wishlist products and addresses embedded.

        Raises:
            NotFoundError: if not found.
        """
        user = self.repo.get_by_id(session, user_id)
        if not user:
            raise NotFoundError("User not found")
        doc = ReferenceResolver(session).expand(
            user, {"wishlist": Product, "addresses": Address}
        )
        return UserDetail.model_validate(doc)
