"""CreditCard ORM: one row of the credit_cards table.

Invariants:
    - id is assigned by the store (integer identity)
    - issuer, card_name, spend_category are non-nullable text
    - reward_value is stored exactly as the caller sent it (number or string)

Design Decisions:
    - JSON column for reward_value: issuers quote rewards both as "4%" and as 0.04,
      and a round trip must return the same value
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from card_assistant.db.base import Base


class CreditCard(Base):
    """Credit card record managed through the card registry."""
    __tablename__ = "credit_cards"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    issuer: Mapped[str] = mapped_column(String(200), nullable=False)
    card_name: Mapped[str] = mapped_column(String(200), nullable=False)
    spend_category: Mapped[str] = mapped_column(Text, nullable=False)
    reward_value: Mapped[Any] = mapped_column(JSON, nullable=False)
    region: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "issuer": self.issuer,
            "card_name": self.card_name,
            "spend_category": self.spend_category,
            "reward_value": self.reward_value,
            "region": self.region,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
