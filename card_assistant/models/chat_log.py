"""ChatLog ORM: append-only audit table for proxied chat calls.

Invariants:
    - Rows are only ever inserted, never updated or deleted by the API
    - prompt is the caller's message verbatim; response is the generated text

Design Decisions:
    - Logging table, not enforcement: no request outcome depends on it
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from card_assistant.db.base import Base


class ChatLog(Base):
    """Prompt/response pair written after each completion."""
    __tablename__ = "ai_logs"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
