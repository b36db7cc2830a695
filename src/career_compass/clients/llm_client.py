"""Claude completion client: system + user message in, raw text out."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic

from career_compass.errors import BackendUnavailable, EmptyCompletion

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


@dataclass
class CompletionUsage:
    """Token usage for one completion call."""

    model: str
    input_tokens: int
    output_tokens: int


class CompletionClient:
    """Async Claude client that returns the raw completion text.

    Retries are left to the caller; the SDK's own retry loop is disabled.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 8192,
    ):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._token_log: list[CompletionUsage] = []

    async def complete(self, system: str, user: str) -> str:
        """Send a system/user message pair and return the completion text.

        Raises:
            BackendUnavailable: transport, auth or API status failure.
            EmptyCompletion: the backend returned no text content.
        """
        logger.debug("Completion call: model=%s", self.model)
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.AnthropicError as exc:
            status = getattr(exc, "status_code", None)
            logger.error("Completion call failed: %s (status=%s)", type(exc).__name__, status)
            raise BackendUnavailable(f"Completion backend failed: {type(exc).__name__}") from exc

        usage = getattr(message, "usage", None)
        if usage is not None:
            self._token_log.append(
                CompletionUsage(self.model, usage.input_tokens, usage.output_tokens)
            )

        text = "".join(
            block.text for block in (message.content or []) if isinstance(getattr(block, "text", None), str)
        )
        if not text.strip():
            logger.warning("Completion backend returned no content")
            raise EmptyCompletion("Completion backend returned no content")
        return text

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(u.input_tokens for u in self._token_log),
            "output": sum(u.output_tokens for u in self._token_log),
            "calls": [(u.model, u.input_tokens, u.output_tokens) for u in self._token_log],
        }
        self._token_log.clear()
        return summary
