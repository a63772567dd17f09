"""
FastAPI Router — Chat assistant • Voice
=======================================

Endpoints
---------
- ``GET  /api/chat/prompts``                         suggested prompt strings
- ``POST /api/chat/conversations``                   start a conversation (201)
- ``GET  /api/chat/conversations/{id}``              conversation metadata
- ``GET  /api/chat/conversations/{id}/messages``     ordered history
- ``POST /api/chat/conversations/{id}/messages``     one chat turn
- ``POST /api/chat/conversations/{id}/retry``        answer a dangling user message
- ``POST /api/chat/text-to-speech``                  ``audio/mpeg`` bytes
- ``GET  /api/chat/voice-status``                    ``{available: bool}``

Application errors are logged with their upstream detail and turned into an
`HTTPException` carrying only the client-safe message.
"""

import asyncio
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from portfolio_site.api.dependencies import get_context
from portfolio_site.api.models import NewChatMessage, TextToSpeechRequest
from portfolio_site.app_context import AppContext
from portfolio_site.errors import PortfolioError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat")
"""Router for the chat assistant and text-to-speech."""


def to_http(e: PortfolioError) -> HTTPException:
    if e.status_code >= 500:
        logger.error("%s: %s", type(e).__name__, e, exc_info=e.__cause__ or e)
    else:
        logger.info("%s: %s", type(e).__name__, e)
    return HTTPException(status_code=e.status_code, detail=e.public_message)


@router.get("/prompts")
async def suggested_prompts(context: AppContext = Depends(get_context)):
    """Suggested prompt strings, in display order."""
    try:
        records = await asyncio.to_thread(context.store.list_records, "chat_prompts")
    except PortfolioError as e:
        raise to_http(e) from e
    return [record["prompt"] for record in records]


@router.post("/conversations", status_code=201)
async def new_conversation(context: AppContext = Depends(get_context)):
    try:
        conversation = await context.conversations.start_conversation()
    except PortfolioError as e:
        raise to_http(e) from e
    return {"id": conversation["id"], "created_at": conversation["created_at"]}


@router.get("/conversations/{conversation_id}")
async def get_conversation(conversation_id: UUID, context: AppContext = Depends(get_context)):
    try:
        return await context.conversations.get_conversation(conversation_id)
    except PortfolioError as e:
        raise to_http(e) from e


@router.get("/conversations/{conversation_id}/messages")
async def get_messages(conversation_id: UUID, context: AppContext = Depends(get_context)):
    """Messages in creation order; [] for a conversation with no turns yet."""
    try:
        return await context.conversations.list_messages(conversation_id)
    except PortfolioError as e:
        raise to_http(e) from e


@router.post("/conversations/{conversation_id}/messages")
async def send_message(conversation_id: UUID, data: NewChatMessage, context: AppContext = Depends(get_context)):
    """Run one chat turn.

    Response:
        200: {'user_message': {...}, 'assistant_message': {...}}
        404: unknown conversation
        502: completion failed (the user message is kept; use /retry)
    """
    try:
        return await context.conversations.send_message(conversation_id, data.content)
    except PortfolioError as e:
        raise to_http(e) from e


@router.post("/conversations/{conversation_id}/retry")
async def retry_last_turn(conversation_id: UUID, context: AppContext = Depends(get_context)):
    """Answer the last user message again without re-appending it (409 if already answered)."""
    try:
        return await context.conversations.retry_last_turn(conversation_id)
    except PortfolioError as e:
        raise to_http(e) from e


@router.post("/text-to-speech")
async def text_to_speech(data: TextToSpeechRequest, context: AppContext = Depends(get_context)):
    try:
        audio = await context.voice.synthesize(
            data.text,
            voice_id=data.voice_id,
            stability=data.stability,
            similarity_boost=data.similarity_boost,
            style=data.style,
            use_speaker_boost=data.use_speaker_boost,
        )
    except PortfolioError as e:
        raise to_http(e) from e
    return Response(content=audio, media_type="audio/mpeg")


@router.get("/voice-status")
async def voice_status(context: AppContext = Depends(get_context)):
    return {"available": context.voice.configured}
