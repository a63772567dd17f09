"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

It allows seamless propagation of a database session across method calls
without explicitly threading it through arguments. Methods of any object that
exposes a ``database`` attribute (a :class:`~portfolio_site.database.config.connection_engine.Database`)
can be decorated with ``@transactional`` to run inside a managed
transactional context.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of existing sessions (nested calls share one transaction)
- Automatic commit and rollback handling
- Clean session closure after execution
- Driver errors translated into ``StoreReadError`` / ``StoreWriteError``

"""

import contextvars
import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from portfolio_site.errors import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy session."""


def transactional(func=None, *, read_only: bool = False):
    """
    Decorator to wrap methods in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is created from ``self.database``, committed,
      and closed.
    - On errors, the session is rolled back and closed.
    - ``SQLAlchemyError`` is re-raised as ``StoreReadError`` when
      ``read_only=True``, ``StoreWriteError`` otherwise.

    Parameters
    ----------
    func : callable
        The method to wrap. It must accept a `session` keyword argument.
    read_only : bool, optional
        Marks the method as a pure read, which selects the error type.

    Returns
    -------
    callable
        The wrapped method, executed within a database transaction.

    Example
    -------
    >>> class Store:
    ...     def __init__(self, database):
    ...         self.database = database
    ...
    ...     @transactional
    ...     def add(self, row, session=None):
    ...         session.add(row)
    ...         return row
    """

    def decorator(method):
        error_type = StoreReadError if read_only else StoreWriteError

        @wraps(method)
        def wrap_func(self, *args, **kwargs):
            session = db_session_context.get()
            if session is not None:
                try:
                    return method(self, *args, session=session, **kwargs)
                except SQLAlchemyError as e:
                    raise error_type(f"{method.__qualname__} failed") from e

            session = self.database.session_factory()
            token = db_session_context.set(session)
            try:
                result = method(self, *args, session=session, **kwargs)
                session.flush()
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.exception("Store operation %s failed", method.__qualname__)
                raise error_type(f"{method.__qualname__} failed") from e
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()
                db_session_context.reset(token)

            return result

        return wrap_func

    if func is not None:
        return decorator(func)
    return decorator
