"""Chat Schemas: request/response models for POST /api/chat."""

from pydantic import BaseModel


class ChatRequest(BaseModel):
    message: str | None = None


class ChatResponse(BaseModel):
    reply: str
    saved: bool
