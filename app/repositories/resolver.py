# app/repositories/resolver.py
"""
Reference resolution for response payloads.

Stored records only hold ids of the records they point to. The resolver
turns a record into a plain dict and replaces selected reference fields with
the referenced records themselves:

    resolver.expand(product, {"category": Category})
    resolver.expand(user, {"wishlist": Product, "addresses": Address})
    resolver.expand_many(orders, {"items.product": Product,
                                  "shipping_address": Address})

Field paths:
  - "name"        scalar id        -> embedded dict, or None if dangling
  - "name"        list of ids      -> list of embedded dicts, dangling ids dropped
  - "name.sub"    list of dicts    -> each element's "sub" id replaced by the
                                      embedded dict (None if dangling)

Referenced records are loaded with one query per path, whatever the number
of records being expanded. Expansion is one level deep: embedded records keep
their own references as ids.
"""
import uuid
from typing import Any, Iterable

from sqlmodel import Session, SQLModel, select


def _as_uuid(value: Any) -> uuid.UUID | None:
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _collect(value: Any, sub: str) -> Iterable[uuid.UUID | None]:
    if sub:
        for element in value or []:
            yield _as_uuid(element.get(sub))
    elif isinstance(value, list):
        for element in value:
            yield _as_uuid(element)
    else:
        yield _as_uuid(value)


def _replace(value: Any, sub: str, found: dict[uuid.UUID, dict]) -> Any:
    if sub:
        return [
            {**element, sub: found.get(_as_uuid(element.get(sub)))}
            for element in value or []
        ]
    if isinstance(value, list):
        keys = (_as_uuid(element) for element in value)
        return [found[key] for key in keys if key in found]
    return found.get(_as_uuid(value))


class ReferenceResolver:
    """
    Expands reference fields of stored records into embedded records.
    """

    def __init__(self, session: Session):
        self.session = session

    def expand(
        self,
        entity: SQLModel,
        fields: dict[str, type[SQLModel]],
    ) -> dict[str, Any]:
        return self.expand_many([entity], fields)[0]

    def expand_many(
        self,
        entities: Iterable[SQLModel],
        fields: dict[str, type[SQLModel]],
    ) -> list[dict[str, Any]]:
        docs = [entity.model_dump() for entity in entities]

        for path, model in fields.items():
            head, _, sub = path.partition(".")

            ids: set[uuid.UUID] = set()
            for doc in docs:
                ids.update(key for key in _collect(doc.get(head), sub) if key)

            found = self._load(model, ids)
            for doc in docs:
                doc[head] = _replace(doc.get(head), sub, found)

        return docs

    def _load(
        self,
        model: type[SQLModel],
        ids: set[uuid.UUID],
    ) -> dict[uuid.UUID, dict[str, Any]]:
        if not ids:
            return {}
        stmt = select(model).where(model.id.in_(list(ids)))
        return {row.id: row.model_dump() for row in self.session.exec(stmt).all()}
