"""SFC LLM integration module.

Provides a thin wrapper around the Anthropic API and the prompt templates
used by the LLM-backed analysis providers.
"""

from sfc.llm.client import DEFAULT_MODEL, LLMClient, LLMResponse

__all__ = [
    "DEFAULT_MODEL",
    "LLMClient",
    "LLMResponse",
]
