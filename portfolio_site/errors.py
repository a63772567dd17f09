"""
Error taxonomy shared by the store, the chat services and the HTTP layer.

Every error carries a client-safe ``public_message`` and the HTTP status the
API layer answers with. Upstream detail (API error bodies, driver messages)
stays on the exception (``__cause__``, ``body``) for server-side logging and is
never sent to the client.
"""

from typing import Optional


class PortfolioError(Exception):
    """Base class for application errors."""

    status_code = 500
    public_message = "Internal Server Error"


class ConfigurationError(PortfolioError):
    public_message = "Service is not configured"


class MissingCredential(ConfigurationError):
    """An external API credential is absent; raised before any network call."""

    status_code = 503

    def __init__(self, credential: str, public_message: Optional[str] = None):
        super().__init__(f"{credential} is not configured")
        self.credential = credential
        if public_message:
            self.public_message = public_message


class StoreReadError(PortfolioError):
    """The content store could not be read."""


class StoreWriteError(PortfolioError):
    """The content store could not be written."""


class RecordNotFound(PortfolioError):
    status_code = 404

    def __init__(self, entity: str, record_id=None):
        super().__init__(f"{entity} {record_id} not found" if record_id else f"{entity} not found")
        self.entity = entity
        self.record_id = record_id
        self.public_message = f"{entity} not found"


class ConversationNotFound(RecordNotFound):
    def __init__(self, conversation_id):
        super().__init__("Conversation", conversation_id)


class NothingToRetry(PortfolioError):
    """The conversation has no unanswered user message."""

    status_code = 409
    public_message = "Nothing to retry"


class CompletionFailed(PortfolioError):
    """The chat-completion call failed (transport, API error or malformed reply)."""

    status_code = 502
    public_message = "Couldn't get a response, try again"


class SynthesisFailed(PortfolioError):
    """The text-to-speech call failed."""

    status_code = 502
    public_message = "Voice synthesis failed"

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.upstream_status = status_code
        self.body = body
