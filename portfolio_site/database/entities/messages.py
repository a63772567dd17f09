"""
ChatMessage ORM Model
=====================

The ``ChatMessage`` model represents a single message within a chat
conversation. Each message is tied to a ``ChatConversation`` via a foreign
key that the database enforces.

Key features
~~~~~~~~~~~~
- UUID primary key (``id``)
- Foreign key reference to ``chat_conversations.id`` (``conversation_id``)
- Sender role (``role``): "user" or "assistant"
- ``position``: 0-based sequence number inside the conversation; replay
  order is ``(position)``, which matches creation order because messages are
  appended under a per-conversation lock
- Timezone-aware ``created_at`` timestamp (UTC)
- Immutable once created

"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import TEXT, DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid, utc_now

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"


class ChatMessage(SerializableMixin, declarativeBase):
    """
    ORM model for the `chat_messages` table.

    Attributes
    ----------
    id : UUID
        Primary key. Unique identifier for the message.
    conversation_id : UUID
        Foreign key reference to the `chat_conversations` table.
    role : str
        Role of the sender ("user" or "assistant").
    content : str
        Text content of the message.
    position : int
        Sequence number of the message inside its conversation.
    created_at : datetime
        Timestamp when the message was created (UTC).
    """

    __tablename__ = "chat_messages"
    __table_args__ = (UniqueConstraint("conversation_id", "position", name="uq_chat_messages_position"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    conversation_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("chat_conversations.id"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(TEXT, nullable=False)
    content: Mapped[str] = mapped_column(TEXT, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __str__(self) -> str:
        return (
            f"Conversation: id:{self.conversation_id}, "
            f"role: {self.role}, "
            f"message: {self.content}, "
            f"time_created: {self.created_at}"
        )
