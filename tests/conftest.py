"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database, a `ContentStore` on top of
it, a scripted completion gateway and an unconfigured voice gateway. HTTP
tests drive the real FastAPI app through `TestClient` with that context
injected, so nothing ever reaches OpenAI or ElevenLabs.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from portfolio_site.app_context import AppContext
from portfolio_site.chat.conversation_service import ConversationService
from portfolio_site.chat.voice_gateway import ElevenLabsVoiceGateway
from portfolio_site.crypt.encrypt_decrypt import EncryptionDec
from portfolio_site.database.config.config import load_settings
from portfolio_site.database.config.connection_engine import Database
from portfolio_site.database.core.content_store import ContentStore
from portfolio_site.main import create_app

ADMIN_PASSWORD = "letmein"


class ScriptedCompletionGateway:
    """
    Stands in for `OpenAICompletionGateway`.

    Replies are popped from `replies` (default "Stub reply"); `error` is
    raised instead when set; `on_call` is awaited with the message list
    before replying; `delay` simulates a slow upstream.
    """

    def __init__(self):
        self.replies = []
        self.calls = []
        self.error = None
        self.on_call = None
        self.delay = 0.0

    async def complete(self, messages, model, temperature, max_tokens):
        self.calls.append(
            {"messages": messages, "model": model, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.on_call is not None:
            await self.on_call(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.replies.pop(0) if self.replies else "Stub reply"


@pytest.fixture
def settings():
    return load_settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret-key",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        OPENAI_API_KEY="",
        OPENAI_MODEL="test-model",
        ELEVENLABS_API_KEY=None,
        SEED_ON_STARTUP=False,
    )


@pytest.fixture
def database(settings):
    db = Database.from_settings(settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    return ContentStore(database)


@pytest.fixture
def completion():
    return ScriptedCompletionGateway()


@pytest.fixture
def service(store, completion, settings):
    return ConversationService(
        store,
        completion,
        model=settings.OPENAI_MODEL,
        temperature=settings.CHAT_TEMPERATURE,
        max_tokens=settings.CHAT_MAX_TOKENS,
    )


@pytest.fixture
def voice():
    return ElevenLabsVoiceGateway(api_key=None, voice_id="test-voice")


@pytest.fixture
def context(settings, database, store, service, voice):
    return AppContext(
        settings=settings,
        database=database,
        store=store,
        conversations=service,
        voice=voice,
        admin_password_hash=EncryptionDec().hash_password(ADMIN_PASSWORD),
    )


@pytest.fixture
def client(context):
    with TestClient(create_app(context=context)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
