"""
Request/response cycle for one chat turn.

A turn is strictly ordered: the user message is persisted, the history and
grounding context are read, the completion gateway is called, and only then
is the assistant reply persisted. A failed completion leaves the conversation
with an unanswered user message, which `retry_last_turn` can answer without
re-appending it.

Turns on the same conversation are serialised with an in-process lock so a
double-submit cannot interleave the two exchanges.
"""

import asyncio
import logging
import weakref
from typing import Callable, List, Optional
from uuid import UUID

from portfolio_site.chat.completion_gateway import OpenAICompletionGateway
from portfolio_site.chat.context_builder import build_context
from portfolio_site.database.core.content_store import ContentStore
from portfolio_site.database.entities.messages import ROLE_ASSISTANT, ROLE_USER
from portfolio_site.errors import ConversationNotFound, NothingToRetry

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I apologize, but I couldn't generate a response."

SYSTEM_PROMPT_TEMPLATE = (
    "You are an AI assistant helping users learn about {name}. "
    "Here is comprehensive information about {name}'s professional background:\n\n"
    "{context}\n\n"
    "Your role is to answer questions about {name}'s background, skills, projects, and patents. "
    "Be conversational, friendly, and informative. "
    "If you're asked something that isn't covered in the context, politely let the user know "
    "that you don't have that information."
)


def build_system_prompt(context: str, name: Optional[str]) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(name=name or "the site owner", context=context)


class ConversationService:
    """
    Orchestrates store, context builder and completion gateway for chat.

    Parameters
    ----------
    store : ContentStore
        Chat history and grounding content.
    gateway : OpenAICompletionGateway
        Anything with an async ``complete(messages, model, temperature, max_tokens)``.
    model : str
        Completion model identifier.
    temperature : float
        Sampling temperature.
    max_tokens : int
        Output token budget.
    context_builder : callable, optional
        ``store -> str``; defaults to `build_context`.
    """

    def __init__(
        self,
        store: ContentStore,
        gateway: OpenAICompletionGateway,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        context_builder: Callable[[ContentStore], str] = build_context,
    ):
        self.store = store
        self.gateway = gateway
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.context_builder = context_builder
        self._locks: "weakref.WeakValueDictionary[UUID, asyncio.Lock]" = weakref.WeakValueDictionary()

    def _lock_for(self, conversation_id: UUID) -> asyncio.Lock:
        lock = self._locks.get(conversation_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[conversation_id] = lock
        return lock

    async def start_conversation(self) -> dict:
        return await asyncio.to_thread(self.store.create_conversation)

    async def get_conversation(self, conversation_id: UUID) -> dict:
        conversation = await asyncio.to_thread(self.store.get_conversation, conversation_id)
        if conversation is None:
            raise ConversationNotFound(conversation_id)
        return conversation

    async def list_messages(self, conversation_id: UUID) -> List[dict]:
        await self.get_conversation(conversation_id)
        return await asyncio.to_thread(self.store.list_messages, conversation_id)

    async def _generate_reply(self, conversation_id: UUID) -> dict:
        """Read history and context, call the gateway, persist the reply."""
        history = await asyncio.to_thread(self.store.list_messages, conversation_id)
        context = await asyncio.to_thread(self.context_builder, self.store)
        profile = await asyncio.to_thread(self.store.get_profile)

        messages = [{"role": "system", "content": build_system_prompt(context, (profile or {}).get("name"))}]
        messages += [{"role": m["role"], "content": m["content"]} for m in history]

        # CompletionFailed propagates; nothing is persisted for this turn.
        reply = await self.gateway.complete(
            messages,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not reply:
            logger.warning("Empty completion for conversation %s; storing fallback reply", conversation_id)
            reply = FALLBACK_REPLY
        return await asyncio.to_thread(self.store.add_message, conversation_id, ROLE_ASSISTANT, reply)

    async def send_message(self, conversation_id: UUID, user_text: str) -> dict:
        """
        Run one chat turn.

        Returns
        -------
        dict
            ``{"user_message": ..., "assistant_message": ...}``

        Raises
        ------
        ConversationNotFound
            Unknown conversation; nothing is persisted.
        CompletionFailed
            The gateway failed; the user message stays, no reply is stored.
        """
        async with self._lock_for(conversation_id):
            await self.get_conversation(conversation_id)
            user_message = await asyncio.to_thread(self.store.add_message, conversation_id, ROLE_USER, user_text)
            assistant_message = await self._generate_reply(conversation_id)
        return {"user_message": user_message, "assistant_message": assistant_message}

    async def retry_last_turn(self, conversation_id: UUID) -> dict:
        """
        Answer the trailing unanswered user message.

        Raises
        ------
        ConversationNotFound
            Unknown conversation.
        NothingToRetry
            No messages, or the last message is already a reply.
        CompletionFailed
            The gateway failed again.
        """
        async with self._lock_for(conversation_id):
            await self.get_conversation(conversation_id)
            last = await asyncio.to_thread(self.store.get_last_message, conversation_id)
            if last is None or last["role"] != ROLE_USER:
                raise NothingToRetry(f"Conversation {conversation_id} has no unanswered message")
            assistant_message = await self._generate_reply(conversation_id)
        return {"assistant_message": assistant_message}
