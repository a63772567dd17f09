import pytest
from pydantic import ValidationError

from portfolio_site.app_context import AppContext
from portfolio_site.database.config.config import load_settings
from portfolio_site.database.config.connection_engine import build_connection_url
from portfolio_site.errors import MissingCredential

REQUIRED = {"SECRET_KEY": "s", "ADMIN_PASSWORD": "p"}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SECRET_KEY", "ADMIN_PASSWORD", "OPENAI_API_KEY", "DATABASE_URL", "ELEVENLABS_API_KEY"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings(_env_file=None, **REQUIRED)

    assert settings.OPENAI_MODEL == "gpt-4o-mini"
    assert settings.CHAT_TEMPERATURE == 0.7
    assert settings.CHAT_MAX_TOKENS == 2000
    assert settings.COMPLETION_TIMEOUT_SECONDS == 30
    assert settings.ELEVENLABS_MODEL_ID == "eleven_turbo_v2_5"
    assert settings.ELEVENLABS_API_KEY is None


def test_required_fields():
    with pytest.raises(ValidationError):
        load_settings(_env_file=None)


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("CHAT_MAX_TOKENS", "512")

    assert load_settings(_env_file=None, **REQUIRED).CHAT_MAX_TOKENS == 512


def test_connection_url_from_parts():
    settings = load_settings(
        _env_file=None,
        DB_USERNAME="site",
        DB_PASSWORD="pw",
        DB_HOST="db",
        DB_PORT=5432,
        DB_DATABASE_NAME="portfolio",
        **REQUIRED,
    )

    url = build_connection_url(settings)

    assert url.render_as_string(hide_password=False) == "postgresql+psycopg2://site:pw@db:5432/portfolio"


def test_missing_openai_key_fails_at_startup():
    settings = load_settings(_env_file=None, DATABASE_URL="sqlite://", **REQUIRED)

    with pytest.raises(MissingCredential):
        AppContext.from_settings(settings)


def test_plaintext_admin_password_is_hashed():
    settings = load_settings(_env_file=None, DATABASE_URL="sqlite://", OPENAI_API_KEY="sk-test", **REQUIRED)

    context = AppContext.from_settings(settings)
    try:
        assert context.admin_password_hash.startswith("$2")
        assert context.admin_password_hash != "p"
        assert context.voice.configured is False
    finally:
        context.database.dispose()
