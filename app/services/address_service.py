# app/services/address_service.py
import uuid
from collections import defaultdict

from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError, persistence_guard
from app.models.user import Address
from app.repositories.user_repo import AddressRepository, UserRepository
from app.schemas.user import AddressCreate, AddressFields


class AddressService:
    """
    Business logic for addresses.

    Every write keeps User.addresses in step with the Address table:
    the store does not maintain that list on its own.
    """

    def __init__(self, address_repo: AddressRepository, user_repo: UserRepository):
        self.address_repo = address_repo
        self.user_repo = user_repo

    def create_addresses(
        self,
        session: Session,
        payloads: list[AddressCreate],
    ) -> list[Address]:
        """
        Insert addresses and append their ids to each owning user's list.

        All owners must exist; this is checked before anything is written.
        """
        if not payloads:
            raise ValidationError("No address data provided")

        owner_ids = {p.user for p in payloads}
        owners = {u.id: u for u in self.user_repo.list_by_ids(session, owner_ids)}
        for owner_id in owner_ids:
            if owner_id not in owners:
                raise NotFoundError(f"User not found: {owner_id}")

        addresses = [Address(**p.model_dump()) for p in payloads]

        with persistence_guard(session, "Failed to save addresses"):
            addresses = self.address_repo.create_many(session, addresses)

            new_ids: dict[uuid.UUID, list[str]] = defaultdict(list)
            for address in addresses:
                new_ids[address.user].append(str(address.id))

            for owner_id, ids in new_ids.items():
                owner = owners[owner_id]
                owner.addresses = [*owner.addresses, *ids]
                session.add(owner)

            session.commit()

        for address in addresses:
            session.refresh(address)
        return addresses

    def replace_addresses(
        self,
        session: Session,
        user_id: uuid.UUID,
        payloads: list[AddressFields],
    ) -> list[Address]:
        """
        Replace the user's full address set.

        Existing addresses owned by the user are deleted, the new ones are
        inserted, and User.addresses becomes exactly the new ids.
        """
        user = self.user_repo.get_by_id(session, user_id)
        if not user:
            raise NotFoundError("User not found")

        with persistence_guard(session, "Error updating addresses"):
            self.address_repo.delete_for_user(session, user_id)

            addresses = self.address_repo.create_many(
                session,
                [Address(user=user_id, **p.model_dump()) for p in payloads],
            )

            user.addresses = [str(a.id) for a in addresses]
            session.add(user)
            session.commit()

        for address in addresses:
            session.refresh(address)
        return addresses

    def delete_address(
        self,
        session: Session,
        user_id: uuid.UUID,
        address_id: uuid.UUID,
    ) -> None:
        """
        Delete an address and pull its id out of the user's list.

        Missing address or user are not errors.
        """
        with persistence_guard(session, "Failed to delete address"):
            address = self.address_repo.get_by_id(session, address_id)
            if address is not None:
                self.address_repo.delete(session, address)

            user = self.user_repo.get_by_id(session, user_id)
            if user is not None:
                key = str(address_id)
                user.addresses = [a for a in user.addresses if a != key]
                session.add(user)

            session.commit()
