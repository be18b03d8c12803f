"""Chat Gateway: proxies a message to the completion provider and logs the exchange.

Invariants:
    - Blank message raises MissingFieldError before the provider is called
    - Provider failure propagates as CompletionProviderError; the log write is skipped
    - Log write is best-effort: any failure only turns `saved` to False
    - Linear pipeline: validate -> generate -> log -> reply; no retries

Design Decisions:
    - Store unreachable and constraint violation are not distinguished: both are saved=False
    - Whitespace-only messages count as blank and are rejected, same rule as card fields
"""

import logging
from dataclasses import dataclass

from card_assistant.core.card_fields import is_blank
from card_assistant.core.errors import MissingFieldError
from card_assistant.core.repository_protocols import (
    ChatLogRepository, CompletionProvider,
)

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    reply: str
    saved: bool


async def handle_chat(
    message: str | None,
    provider: CompletionProvider,
    chat_log: ChatLogRepository,
) -> ChatResult:
    if is_blank(message):
        raise MissingFieldError("message")

    reply = await provider.generate(message)
    saved = await _save_log(chat_log, message, reply)
    logger.info("Chat completed", extra={"saved": saved})
    return ChatResult(reply=reply, saved=saved)


async def _save_log(
    chat_log: ChatLogRepository, prompt: str, reply: str,
) -> bool:
    try:
        await chat_log.append(prompt, reply)
        return True
    except Exception as e:
        logger.warning(f"Chat log write failed: {e}")
        return False
