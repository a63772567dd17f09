"""
Completion gateway: one OpenAI chat-completion call per request.

Input is an ordered list of ``{"role", "content"}`` dicts (system message
first) plus model, temperature and max-token budget. Output is the generated
text, or None when the API returned no content.

- No automatic retries (`max_retries=0`); each call is bounded by an explicit
  timeout.
- Every transport/API failure and every malformed reply is raised as
  `CompletionFailed` with the original exception chained as ``__cause__``.
- Temperature is passed through unvalidated; the API enforces its own range.
"""

import logging
from typing import List, Optional

from openai import AsyncOpenAI, OpenAIError

from portfolio_site.errors import CompletionFailed, MissingCredential

logger = logging.getLogger(__name__)


class OpenAICompletionGateway:
    """
    Async wrapper around ``client.chat.completions.create``.

    Parameters
    ----------
    api_key : str
        OpenAI API key. An empty key raises `MissingCredential` immediately,
        so a misconfigured deployment fails at startup.
    timeout : float
        Per-call timeout in seconds.
    client : AsyncOpenAI, optional
        Pre-built client (tests inject a fake here).
    """

    def __init__(self, api_key: str, timeout: float = 30.0, client: Optional[AsyncOpenAI] = None):
        if client is None:
            if not api_key:
                raise MissingCredential("OPENAI_API_KEY")
            client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.client = client

    async def complete(
        self,
        messages: List[dict],
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> Optional[str]:
        """
        Request a completion.

        Parameters
        ----------
        messages : list[dict]
            Ordered ``{"role", "content"}`` pairs, system message first.
        model : str
            Chat model identifier.
        temperature : float
            Sampling temperature.
        max_tokens : int
            Output token budget.

        Returns
        -------
        str | None
            Generated text; None (or "") when the reply carried no content.

        Raises
        ------
        CompletionFailed
            On network errors, API errors, timeouts or malformed replies.
        """
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error("Chat completion failed (model=%s): %r", model, e)
            raise CompletionFailed(f"Chat completion failed: {e}") from e

        try:
            choices = response.choices
        except AttributeError as e:
            logger.error("Malformed chat completion response: %r", response)
            raise CompletionFailed("Malformed chat completion response") from e
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)

    async def close(self) -> None:
        await self.client.close()
