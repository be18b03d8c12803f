"""SQL Repositories: row-store adapters implementing the core boundary protocols.

Invariants:
    - Every SQLAlchemyError is rolled back and re-raised as DatabaseError(operation, details)
    - details carries the driver's message (orig) when available
    - Records leave this module as plain dicts (CreditCard.to_dict)
    - Listing and filtering both order by issuer ascending

Design Decisions:
    - One repository instance per request session: no state shared between requests
    - icontains(autoescape=True): user terms match literally, % and _ are not wildcards
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from card_assistant.core.errors import DatabaseError
from card_assistant.infrastructure.database import get_db
from card_assistant.models.card import CreditCard
from card_assistant.models.chat_log import ChatLog

logger = logging.getLogger(__name__)


def _driver_message(e: SQLAlchemyError) -> str:
    orig = getattr(e, "orig", None)
    return str(orig) if orig is not None else str(e)


@asynccontextmanager
async def _store_errors(db: AsyncSession, operation: str):
    """Map SQLAlchemy failures inside the block to DatabaseError."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Row-store {operation} failed: {e}")
        raise DatabaseError(operation, _driver_message(e)) from e


class SqlCardRepository:
    """CardRepository over the credit_cards table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sorted(self) -> list[dict]:
        async with _store_errors(self.db, "select"):
            result = await self.db.execute(
                select(CreditCard).order_by(CreditCard.issuer.asc(), CreditCard.id.asc()),
            )
            return [card.to_dict() for card in result.scalars().all()]

    async def filter(
        self, category: str | None, region: str | None,
    ) -> list[dict]:
        query = select(CreditCard)
        if category:
            query = query.where(
                CreditCard.spend_category.icontains(category, autoescape=True),
            )
        if region:
            query = query.where(
                CreditCard.region.icontains(region, autoescape=True),
            )
        query = query.order_by(CreditCard.issuer.asc(), CreditCard.id.asc())
        async with _store_errors(self.db, "select"):
            result = await self.db.execute(query)
            return [card.to_dict() for card in result.scalars().all()]

    async def insert(self, fields: dict[str, Any]) -> dict:
        async with _store_errors(self.db, "insert"):
            card = CreditCard(**fields)
            self.db.add(card)
            await self.db.commit()
            await self.db.refresh(card)
            return card.to_dict()

    async def update(self, card_id: int, fields: dict[str, Any]) -> dict | None:
        async with _store_errors(self.db, "update"):
            card = await self.db.get(CreditCard, card_id)
            if card is None:
                return None
            for name, value in fields.items():
                setattr(card, name, value)
            await self.db.commit()
            await self.db.refresh(card)
            return card.to_dict()

    async def delete(self, card_id: int) -> bool:
        async with _store_errors(self.db, "delete"):
            card = await self.db.get(CreditCard, card_id)
            if card is None:
                return False
            await self.db.delete(card)
            await self.db.commit()
            return True


class SqlChatLogRepository:
    """ChatLogRepository over the ai_logs table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(self, prompt: str, response: str) -> None:
        async with _store_errors(self.db, "insert"):
            self.db.add(ChatLog(prompt=prompt, response=response))
            await self.db.commit()


def get_card_repository(db: AsyncSession = Depends(get_db)) -> SqlCardRepository:
    """FastAPI dependency for the card repository."""
    return SqlCardRepository(db)


def get_chat_log_repository(db: AsyncSession = Depends(get_db)) -> SqlChatLogRepository:
    """FastAPI dependency for the chat log repository."""
    return SqlChatLogRepository(db)
