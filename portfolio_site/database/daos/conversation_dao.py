"""
Conversation DAO

Purpose
-------
Provides a thin data-access layer for the `ChatConversation` ORM entity:
- Create conversations
- Query by id

Design
------
- Requires an active SQLAlchemy `Session` supplied by the caller (no session
  creation inside the DAO). This keeps transaction boundaries in the store
  layer where they belong.
- Conversations are immutable after insert, so there are no update methods.

Usage
-----
.. code-block:: python

    from portfolio_site.database.daos.conversation_dao import ConversationDao

    dao = ConversationDao()
    with database.session_factory() as session:
        conversation = dao.createConversation(session)
        session.commit()
        same = dao.fetchConversationById(session, conversation.id)

Error Handling
--------------
- Methods log the error message and re-raise.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from portfolio_site.database.entities.conversations import ChatConversation

logger = logging.getLogger(__name__)


class ConversationDao:
    """
    Data Access Object (DAO) for managing ChatConversation entities.
    """

    def createConversation(self, session: Session) -> ChatConversation:
        """
        Create a new conversation record.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.

        Returns
        -------
        ChatConversation
            The flushed conversation, with `id` and `created_at` populated.
        """
        try:
            conversation = ChatConversation()
            session.add(conversation)
            session.flush()
            return conversation
        except Exception as e:
            logger.error("Error in ConversationDao.createConversation. Error: %s", e)
            raise e

    def fetchConversationById(self, session: Session, conversation_id: UUID) -> Optional[ChatConversation]:
        """
        Fetch a conversation by id.

        Returns
        -------
        ChatConversation | None
            The conversation, or None if it does not exist.
        """
        try:
            return session.get(ChatConversation, conversation_id)
        except Exception as e:
            logger.error("Error in ConversationDao.fetchConversationById (id=%s). Error: %s", conversation_id, e)
            raise e
