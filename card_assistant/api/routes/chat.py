"""Chat Route: POST /api/chat, proxied to the completion provider.

Invariants:
    - Response is always {reply, saved} on success; saved reflects the log write only
"""

from fastapi import APIRouter, Depends

from card_assistant.core.repository_protocols import (
    ChatLogRepository, CompletionProvider,
)
from card_assistant.infrastructure.anthropic_client import get_completion_client
from card_assistant.infrastructure.repositories import get_chat_log_repository
from card_assistant.schemas.chat import ChatRequest, ChatResponse
from card_assistant.services.chat_gateway import handle_chat

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    provider: CompletionProvider = Depends(get_completion_client),
    chat_log: ChatLogRepository = Depends(get_chat_log_repository),
):
    """Send the message to the model and log the exchange (best-effort)."""
    result = await handle_chat(body.message, provider, chat_log)
    return ChatResponse(reply=result.reply, saved=result.saved)
