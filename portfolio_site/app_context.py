"""
Application context: every long-lived collaborator, built once per process.

`create_app` builds an `AppContext` in the FastAPI lifespan and stores it on
``app.state.context``; route handlers reach it through
`portfolio_site.api.dependencies.get_context`. Tests inject their own context
(SQLite store, stub gateways) instead.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from portfolio_site.chat.completion_gateway import OpenAICompletionGateway
from portfolio_site.chat.conversation_service import ConversationService
from portfolio_site.chat.voice_gateway import ElevenLabsVoiceGateway
from portfolio_site.crypt.encrypt_decrypt import EncryptionDec
from portfolio_site.database.config.config import Settings
from portfolio_site.database.config.connection_engine import Database
from portfolio_site.database.core.content_store import ContentStore

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    database: Database
    store: ContentStore
    conversations: ConversationService
    voice: ElevenLabsVoiceGateway
    admin_password_hash: str
    completion: Optional[OpenAICompletionGateway] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        """
        Wire the production collaborators.

        Raises
        ------
        MissingCredential
            If `OPENAI_API_KEY` is empty; the app refuses to start without it.
        """
        database = Database.from_settings(settings)
        store = ContentStore(database)
        completion = OpenAICompletionGateway(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.COMPLETION_TIMEOUT_SECONDS,
        )
        conversations = ConversationService(
            store,
            completion,
            model=settings.OPENAI_MODEL,
            temperature=settings.CHAT_TEMPERATURE,
            max_tokens=settings.CHAT_MAX_TOKENS,
        )
        voice = ElevenLabsVoiceGateway(
            api_key=settings.ELEVENLABS_API_KEY,
            voice_id=settings.ELEVENLABS_VOICE_ID,
            model_id=settings.ELEVENLABS_MODEL_ID,
            stability=settings.VOICE_STABILITY,
            similarity_boost=settings.VOICE_SIMILARITY_BOOST,
            style=settings.VOICE_STYLE,
            use_speaker_boost=settings.VOICE_USE_SPEAKER_BOOST,
            base_url=settings.ELEVENLABS_API_URL,
            timeout=settings.VOICE_TIMEOUT_SECONDS,
        )
        if not voice.configured:
            logger.warning("ELEVENLABS_API_KEY is not set; text-to-speech is disabled")
        return cls(
            settings=settings,
            database=database,
            store=store,
            conversations=conversations,
            voice=voice,
            admin_password_hash=EncryptionDec().admin_hash(settings.ADMIN_PASSWORD),
            completion=completion,
        )

    async def aclose(self) -> None:
        """Release HTTP clients and the connection pool."""
        await self.voice.close()
        if self.completion is not None:
            await self.completion.close()
        self.database.dispose()
