"""Anthropic Completion Client: wraps AsyncAnthropic as the CompletionProvider.

Invariants:
    - One round trip per generate() call: SDK retries disabled (max_retries=0), no streaming
    - Every failure, including an empty completion, maps to CompletionProviderError
    - The model identifier is fixed at construction (settings.completion_model)
    - The prompt is sent verbatim as a single user message

Design Decisions:
    - Wrapper over raw client: routes and services never import the SDK
    - Singleton completion_client initialized on startup, like db_manager
"""

import logging

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
)

from card_assistant.core.errors import CompletionProviderError

logger = logging.getLogger(__name__)


class AnthropicCompletionClient:
    """Single-shot text generation against the Anthropic Messages API."""

    def __init__(self, api_key: str, model: str, max_tokens: int = 1024):
        self.client = anthropic.AsyncAnthropic(api_key=api_key, max_retries=0)
        self.model = model
        self.max_tokens = max_tokens

    async def generate(self, prompt: str) -> str:
        """Return the generated text for prompt."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APITimeoutError as e:
            raise CompletionProviderError(str(e) or "API timeout", "timeout")
        except APIConnectionError as e:
            raise CompletionProviderError(str(e), "connection_error")
        except APIStatusError as e:
            raise CompletionProviderError(
                str(e), f"status_{e.status_code}",
            )
        except APIError as e:
            raise CompletionProviderError(str(e), "client_error")
        except Exception as e:
            logger.error(
                f"Unexpected Anthropic error: {e}", exc_info=True,
            )
            raise CompletionProviderError(str(e), "unknown")

        self._log_success(response)
        text = _join_text(response.content)
        if not text.strip():
            raise CompletionProviderError(
                f"Model returned no text (stop_reason={response.stop_reason})",
                "empty_completion",
            )
        return text

    def _log_success(self, response) -> None:
        usage = response.usage
        logger.info(
            "Anthropic API success",
            extra={
                "model": self.model,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )


def _join_text(content) -> str:
    """Concatenate the text blocks of a Messages API response."""
    return "".join(
        block.text for block in content
        if getattr(block, "type", None) == "text"
    )


# Singleton (initialized on startup)
completion_client: AnthropicCompletionClient | None = None


def init_completion_client(
    api_key: str, model: str, max_tokens: int = 1024,
) -> AnthropicCompletionClient:
    global completion_client
    completion_client = AnthropicCompletionClient(api_key, model, max_tokens)
    return completion_client


def get_completion_client() -> AnthropicCompletionClient:
    """FastAPI dependency for the completion provider."""
    if not completion_client:
        raise RuntimeError("Completion client not initialized")
    return completion_client
