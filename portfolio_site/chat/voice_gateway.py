"""
Voice gateway: text-to-speech through the ElevenLabs REST API.

`synthesize` returns the raw compressed audio (``audio/mpeg``) exactly as the
API sent it. Voice is an optional enhancement: its failures are reported as
`MissingCredential` / `SynthesisFailed` and never touch chat state.
No retries and no caching; identical text is re-synthesised on every call.
"""

import logging
from typing import Optional

import httpx

from portfolio_site.errors import MissingCredential, SynthesisFailed

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.elevenlabs.io/v1"


class ElevenLabsVoiceGateway:
    """
    Async ElevenLabs client.

    Parameters
    ----------
    api_key : str | None
        ElevenLabs key. When missing, every synthesis raises
        `MissingCredential` before any request is built.
    voice_id, model_id : str
        Default voice and synthesis model.
    stability, similarity_boost, style : float
        Default voice settings.
    use_speaker_boost : bool
        Default speaker-boost flag.
    base_url : str
        API root.
    timeout : float
        Per-request timeout in seconds.
    transport : httpx.AsyncBaseTransport, optional
        Custom transport (tests pass an `httpx.MockTransport`).
    """

    def __init__(
        self,
        api_key: Optional[str],
        voice_id: str,
        model_id: str = "eleven_turbo_v2_5",
        stability: float = 0.5,
        similarity_boost: float = 0.75,
        style: float = 0.0,
        use_speaker_boost: bool = True,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.voice_id = voice_id
        self.model_id = model_id
        self.stability = stability
        self.similarity_boost = similarity_boost
        self.style = style
        self.use_speaker_boost = use_speaker_boost
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def _require_key(self) -> str:
        if not self.api_key:
            raise MissingCredential("ELEVENLABS_API_KEY", public_message="Voice synthesis is not configured")
        return self.api_key

    async def synthesize(
        self,
        text: str,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
        stability: Optional[float] = None,
        similarity_boost: Optional[float] = None,
        style: Optional[float] = None,
        use_speaker_boost: Optional[bool] = None,
    ) -> bytes:
        """
        Convert text to speech.

        Omitted parameters fall back to the gateway defaults.

        Returns
        -------
        bytes
            Audio bytes, passed through unmodified.

        Raises
        ------
        MissingCredential
            No API key configured (no network call is made).
        SynthesisFailed
            Transport error, timeout, or non-2xx response (status code and
            body attached for diagnostics).
        """
        api_key = self._require_key()
        voice = voice_id or self.voice_id
        payload = {
            "text": text,
            "model_id": model_id or self.model_id,
            "voice_settings": {
                "stability": self.stability if stability is None else stability,
                "similarity_boost": self.similarity_boost if similarity_boost is None else similarity_boost,
                "style": self.style if style is None else style,
                "use_speaker_boost": self.use_speaker_boost if use_speaker_boost is None else use_speaker_boost,
            },
        }
        headers = {
            "Accept": "audio/mpeg",
            "Content-Type": "application/json",
            "xi-api-key": api_key,
        }

        try:
            response = await self._get_client().post(f"/text-to-speech/{voice}", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("ElevenLabs request failed (voice=%s): %r", voice, e)
            raise SynthesisFailed(f"ElevenLabs request failed: {e}") from e

        if not response.is_success:
            body = response.text
            logger.error(
                "ElevenLabs API error: %s %s - %s", response.status_code, response.reason_phrase, body
            )
            raise SynthesisFailed(
                f"ElevenLabs API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=body,
            )
        return response.content

    async def check_credential(self) -> bool:
        """Return True when a key is configured and accepted by the API."""
        if not self.api_key:
            return False
        try:
            response = await self._get_client().get("/user", headers={"xi-api-key": self.api_key})
        except httpx.HTTPError as e:
            logger.warning("ElevenLabs credential check failed: %r", e)
            return False
        return response.is_success

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
