"""LLM client wrapper for SFC.

Thin layer over the Anthropic Python SDK used by the LLM-backed analysis
providers. The client is built once at startup from validated configuration;
a missing API key is a configuration error, never a silent stub.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import anthropic

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-haiku-latest"


# ---------------------------------------------------------------------------
# Response dataclass
# ---------------------------------------------------------------------------


@dataclass
class LLMResponse:
    """Structured response from an LLM call."""

    content: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class LLMClient:
    """Synchronous completion client.

    Parameters
    ----------
    api_key : str
        Anthropic API key.
    model : str
        Model identifier to use for completions.
    timeout : float
        Per-request timeout in seconds, enforced by the SDK.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        max_retries: int = 2,
    ) -> None:
        self.model = model
        self._client = anthropic.Anthropic(
            api_key=api_key, timeout=timeout, max_retries=max_retries
        )

    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int = 512,
        temperature: float = 0.0,
    ) -> LLMResponse:
        """Send a completion request and return an :class:`LLMResponse`.

        SDK errors (connection, timeout, throttling, API status) propagate.
        """
        kwargs: dict = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        start = time.monotonic()
        response = self._client.messages.create(**kwargs)
        latency_ms = int((time.monotonic() - start) * 1000)

        content = response.content[0].text if response.content else ""
        result = LLMResponse(
            content=content,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            latency_ms=latency_ms,
        )
        logger.debug(
            "LLM completion model=%s tokens=%d latency_ms=%d",
            result.model, result.total_tokens, result.latency_ms,
        )
        return result
