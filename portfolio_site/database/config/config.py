"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Missing required fields raise a validation error when `Settings()` is built.
- `extra="ignore"`: unknown env vars are ignored (not an error).
- A `Settings` object is built once at process start (see `load_settings`)
  and handed to `portfolio_site.main.create_app`; nothing reads settings
  from a module-level global.

Usage
-----
from portfolio_site.database.config.config import load_settings

settings = load_settings()
model = settings.OPENAI_MODEL

Security
--------
- Never commit secrets or the `.env` file to source control.
- Prefer runtime environment variables in production.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Database --------------------------------------------------------
    DATABASE_URL: Optional[str] = Field(None, description="Full SQLAlchemy URL; overrides the DB_* fields when set.")
    DB_DRIVER_NAME: str = Field("postgresql+psycopg2", description="Database driver (e.g., `postgresql+psycopg2`, `sqlite`).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    DB_DATABASE_NAME: Optional[str] = Field(None, description="Name of the application’s database.")

    # -- Web / admin -----------------------------------------------------
    FRONTEND_URL: str = Field("http://localhost:5173", description="Base URL of the frontend client application (CORS origin).")
    FRONTEND_DIST_DIR: Optional[str] = Field(None, description="Directory of the prebuilt SPA bundle to serve, if any.")
    SECRET_KEY: str = Field(..., description="Secret key for signing admin session tokens.")
    ALGORITHM: str = Field("HS256", description="JWT signing algorithm (e.g., `HS256`).")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(24 * 60, description="Duration (in minutes) before admin tokens expire.")
    ADMIN_PASSWORD: str = Field(..., description="Password protecting the admin back-office.")
    COOKIE_SECURE: bool = Field(False, description="Set the `secure` flag on the admin cookie (True in production).")
    SEED_ON_STARTUP: bool = Field(True, description="Populate demo content on startup when the store is empty.")
    LOG_LEVEL: str = Field("INFO", description="Root log level used by `main.run`.")

    # -- Chat completion -------------------------------------------------
    OPENAI_API_KEY: str = Field("", description="OpenAI API key used by the completion gateway.")
    OPENAI_MODEL: str = Field("gpt-4o-mini", description="OpenAI chat model name.")
    CHAT_TEMPERATURE: float = Field(0.7, description="Sampling temperature for chat completions.")
    CHAT_MAX_TOKENS: int = Field(2000, description="Max output tokens per chat completion.")
    COMPLETION_TIMEOUT_SECONDS: float = Field(30.0, description="Timeout applied to every completion call.")

    # -- Voice synthesis -------------------------------------------------
    ELEVENLABS_API_KEY: Optional[str] = Field(None, description="ElevenLabs API key; voice is disabled when unset.")
    ELEVENLABS_API_URL: str = Field("https://api.elevenlabs.io/v1", description="ElevenLabs REST base URL.")
    ELEVENLABS_VOICE_ID: str = Field("pOes13QoIdjnVT9dRau9", description="Default ElevenLabs voice identifier.")
    ELEVENLABS_MODEL_ID: str = Field("eleven_turbo_v2_5", description="Default ElevenLabs synthesis model.")
    VOICE_STABILITY: float = Field(0.5, description="Default voice stability.")
    VOICE_SIMILARITY_BOOST: float = Field(0.75, description="Default voice similarity boost.")
    VOICE_STYLE: float = Field(0.0, description="Default voice style intensity.")
    VOICE_USE_SPEAKER_BOOST: bool = Field(True, description="Default speaker-boost flag.")
    VOICE_TIMEOUT_SECONDS: float = Field(30.0, description="Timeout applied to every synthesis call.")


def load_settings(**overrides) -> Settings:
    """
    Build a `Settings` object from the environment (and `.env`).

    Parameters
    ----------
    **overrides
        Explicit values that take precedence over the environment. Mostly
        useful for tests and scripts.

    Returns
    -------
    Settings
        A fully validated settings object.
    """
    return Settings(**overrides)
