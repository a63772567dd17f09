"""
Chat Messages DAO

Purpose
-------
Data-access layer for the `ChatMessage` ORM entity. Provides:
- Message creation (appended at the next `position`)
- Retrieval by conversation (creation order)
- Retrieval of the latest message of a conversation

Design
------
- Requires an active SQLAlchemy `Session` provided by the caller.
- `position` is computed as "current message count" inside the caller's
  transaction. Callers serialise appends per conversation; the unique
  constraint on (conversation_id, position) rejects any interleaving that
  slips through.
- Messages are immutable: there is no update method.

Error Handling
--------------
- Methods log the failure and re-raise.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session

from portfolio_site.database.entities.messages import ChatMessage

logger = logging.getLogger(__name__)


class ChatMessagesDao:
    """
    Data Access Object (DAO) for managing chat messages.
    Provides methods to append and fetch messages within conversations.
    """

    def createMessage(self, session: Session, conversation_id: UUID, role: str, content: str) -> ChatMessage:
        """
        Append a message to a conversation.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        conversation_id : UUID
            Conversation the message belongs to.
        role : str
            "user" or "assistant".
        content : str
            Message text.

        Returns
        -------
        ChatMessage
            The flushed message, with `id`, `position` and `created_at` set.
        """
        try:
            position = session.scalar(
                select(func.count(ChatMessage.id)).filter(ChatMessage.conversation_id == conversation_id)
            )
            message = ChatMessage(
                conversation_id=conversation_id,
                role=role,
                content=content,
                position=position or 0,
            )
            session.add(message)
            session.flush()
            return message
        except Exception as e:
            logger.error("Error in ChatMessagesDao.createMessage. Error Message: %s", e)
            raise e

    def fetchMessagesByConversationId(self, session: Session, conversation_id: UUID) -> List[ChatMessage]:
        """
        Fetch all messages in a conversation, in creation order.

        Returns
        -------
        list[ChatMessage]
            Messages ordered by `position` (ascending).
        """
        try:
            statement = (
                select(ChatMessage)
                .filter(ChatMessage.conversation_id == conversation_id)
                .order_by(asc(ChatMessage.position))
            )
            return list(session.scalars(statement).all())
        except Exception as e:
            logger.error("Error in ChatMessagesDao.fetchMessagesByConversationId. Error Message: %s", e)
            raise e

    def fetchLastMessage(self, session: Session, conversation_id: UUID) -> Optional[ChatMessage]:
        """Return the most recent message of a conversation, or None if it is empty."""
        try:
            statement = (
                select(ChatMessage)
                .filter(ChatMessage.conversation_id == conversation_id)
                .order_by(desc(ChatMessage.position))
                .limit(1)
            )
            return session.scalars(statement).first()
        except Exception as e:
            logger.error("Error in ChatMessagesDao.fetchLastMessage. Error Message: %s", e)
            raise e
