# app/repositories/user_repo.py
import uuid

from sqlmodel import Session, select

from app.models.user import Address, User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def list_by_ids(self, session: Session, user_ids: set[uuid.UUID]) -> list[User]:
        """Return the Users whose ids are in `user_ids` (missing ids are skipped)."""
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(list(user_ids)))
        return session.exec(stmt).all()

    def list_by_emails(self, session: Session, emails: list[str]) -> list[User]:
        """Return the Users already registered under any of `emails`."""
        if not emails:
            return []
        stmt = select(User).where(User.email.in_(emails))
        return session.exec(stmt).all()

    def create_many(self, session: Session, users: list[User]) -> list[User]:
        """Insert a batch of Users in one commit and return the persisted rows."""
        session.add_all(users)
        session.commit()
        for user in users:
            session.refresh(user)
        return users


class AddressRepository:
    """
    Data access layer for Address.

    NOTE:
      - No commits here; address writes always go together with an update
        of the owning user's reference list. The service commits.
    """

    def get_by_id(self, session: Session, address_id: uuid.UUID) -> Address | None:
        return session.get(Address, address_id)

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[Address]:
        stmt = select(Address).where(Address.user == user_id)
        return session.exec(stmt).all()

    def create_many(self, session: Session, addresses: list[Address]) -> list[Address]:
        session.add_all(addresses)
        session.flush()
        return addresses

    def delete(self, session: Session, address: Address) -> None:
        session.delete(address)
        session.flush()

    def delete_for_user(self, session: Session, user_id: uuid.UUID) -> None:
        for address in self.list_for_user(session, user_id):
            session.delete(address)
        session.flush()
