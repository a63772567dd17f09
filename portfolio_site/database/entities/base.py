"""
Shared column helpers for the ORM models.

- ``new_uuid`` / ``utc_now`` are column defaults evaluated per insert.
- ``SerializableMixin.to_dict`` turns a row into a plain dict keyed by column
  name, which is what the store hands to the API layer.
"""

import uuid
from datetime import datetime, timezone


def new_uuid() -> uuid.UUID:
    return uuid.uuid4()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SerializableMixin:
    """Adds a column-by-column ``to_dict`` to declarative models."""

    def to_dict(self) -> dict:
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)}>"
