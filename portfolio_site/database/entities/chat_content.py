"""
Chat content ORM Models
=======================

Admin-managed inputs to the chat assistant:

- ``ChatPrompt``      — suggested questions shown before the first message
- ``ChatContextDoc``  — free-form documents appended to the grounding context
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import TEXT, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.database.config.connection_engine import declarativeBase
from portfolio_site.database.entities.base import SerializableMixin, new_uuid


class ChatPrompt(SerializableMixin, declarativeBase):
    """ORM model for the `chat_prompts` table."""

    __tablename__ = "chat_prompts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    prompt: Mapped[str] = mapped_column(TEXT, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ChatContextDoc(SerializableMixin, declarativeBase):
    """
    ORM model for the `chat_context_docs` table.

    Attributes
    ----------
    label : str
        Heading used for the document inside the grounding context.
    body : str
        Document text.
    source : str | None
        Optional provenance (URL, file name) echoed as ``Source:``.
    """

    __tablename__ = "chat_context_docs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    label: Mapped[str] = mapped_column(TEXT, nullable=False)
    body: Mapped[str] = mapped_column(TEXT, nullable=False)
    source: Mapped[Optional[str]] = mapped_column(TEXT, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
