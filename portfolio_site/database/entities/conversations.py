"""
ChatConversation ORM Model
==========================

The ``ChatConversation`` model represents one visitor's chat with the site
assistant, stored in the ``chat_conversations`` table.

Key features
~~~~~~~~~~~~
- UUID primary key (``id``), generated by the application
- Timezone-aware ``created_at`` timestamp (UTC)
- Never mutated after insert and never deleted by the application; messages
  hang off it through ``ChatMessage.conversation_id``
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid, utc_now


class ChatConversation(SerializableMixin, declarativeBase):
    """
    ORM model for the `chat_conversations` table.

    Attributes
    ----------
    id : UUID
        Primary key. Unique identifier for the conversation.
    created_at : datetime
        Creation timestamp (timezone-aware, UTC).
    """

    __tablename__ = "chat_conversations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    """Primary key. UUID of the conversation."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    """Timestamp when the conversation was created (UTC, timezone-aware)."""

    def __str__(self) -> str:
        return f"Conversation: id:{self.id}, time_created: {self.created_at}"
