"""
Content DAO (generic repository)

Purpose
-------
One data-access class serving every ordered list entity of the content store
(skills, experiences, patents, projects, companies, testimonials, media
assets, chat prompts, chat context docs). Provides:
- Creation from a field dict
- Retrieval of all rows ordered by `sort_order`
- Retrieval by primary key
- Partial update and delete

Design
------
- Requires an active SQLAlchemy `Session` supplied by the caller (no session
  creation inside the DAO). Transaction boundaries live in the store layer.
- The DAO is bound to one entity class at construction time.
- Business rules (auth, validation) stay in higher layers.

Usage
-----
.. code-block:: python

    from portfolio_site.database.daos.content_dao import ContentDao
    from portfolio_site.database.entities import Patent

    dao = ContentDao(Patent)
    with database.session_factory() as session:
        patent = dao.createRecord(session, {"number": "US 1", "title": "...", ...})
        session.commit()
        patents = dao.fetchAll(session)

Error Handling
--------------
- Methods log the failure and re-raise; the `@transactional` wrapper turns
  driver errors into `StoreReadError` / `StoreWriteError`.
- `fetchById` returns None when the row does not exist; `updateRecord` and
  `deleteRecord` return None / False in that case.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import asc, select
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class ContentDao(Generic[EntityT]):
    """
    Data Access Object (DAO) for an ordered content entity.

    Parameters
    ----------
    entity : type
        Declarative model class. Must expose `id` and, for ordered reads,
        `sort_order`.
    """

    def __init__(self, entity: Type[EntityT]):
        self.entity = entity

    @property
    def name(self) -> str:
        return self.entity.__name__

    def createRecord(self, session: Session, fields: dict) -> EntityT:
        """
        Stage a new row built from `fields`.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        fields : dict
            Column values; unknown keys raise `TypeError` from the model.

        Returns
        -------
        EntityT
            The (flushed) entity, with defaults such as `id` populated.
        """
        try:
            record = self.entity(**fields)
            session.add(record)
            session.flush()
            return record
        except Exception as e:
            logger.error("Error in ContentDao.createRecord (%s). Error Message: %s", self.name, e)
            raise e

    def fetchAll(self, session: Session) -> List[EntityT]:
        """Return every row ordered by `sort_order` ascending."""
        try:
            statement = select(self.entity)
            if hasattr(self.entity, "sort_order"):
                statement = statement.order_by(asc(self.entity.sort_order))
            return list(session.scalars(statement).all())
        except Exception as e:
            logger.error("Error in ContentDao.fetchAll (%s). Error Message: %s", self.name, e)
            raise e

    def fetchById(self, session: Session, record_id: UUID) -> Optional[EntityT]:
        try:
            return session.get(self.entity, record_id)
        except Exception as e:
            logger.error("Error in ContentDao.fetchById (%s, id=%s). Error Message: %s", self.name, record_id, e)
            raise e

    def updateRecord(self, session: Session, record_id: UUID, changes: dict) -> Optional[EntityT]:
        """
        Apply a partial update.

        Returns
        -------
        EntityT | None
            The updated entity, or None if no row has that id.
        """
        try:
            record = session.get(self.entity, record_id)
            if record is None:
                return None
            for key, value in changes.items():
                if not hasattr(self.entity, key):
                    raise TypeError(f"{self.name} has no attribute {key!r}")
                setattr(record, key, value)
            session.flush()
            return record
        except Exception as e:
            logger.error("Error in ContentDao.updateRecord (%s, id=%s). Error Message: %s", self.name, record_id, e)
            raise e

    def deleteRecord(self, session: Session, record_id: UUID) -> bool:
        """Delete a row; returns False when it did not exist."""
        try:
            record = session.get(self.entity, record_id)
            if record is None:
                return False
            session.delete(record)
            return True
        except Exception as e:
            logger.error("Error in ContentDao.deleteRecord (%s, id=%s). Error Message: %s", self.name, record_id, e)
            raise e
