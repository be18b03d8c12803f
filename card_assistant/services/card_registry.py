"""Card Registry Gateway: list/filter/create/update/delete passthrough to the row-store.

Invariants:
    - Create validates required fields BEFORE touching the store (nothing persisted on 400)
    - Update/delete on an unknown id raise ResourceNotFoundError (404)
    - Update that would blank a required field raises MissingFieldError (400) before the store
    - Store failures surface as DatabaseError (ServiceError, 500) from the repository
    - No caching: every call goes through the repository

Design Decisions:
    - Plain async functions taking the repository: routes inject it, tests pass doubles
"""

import logging
from typing import Any

from card_assistant.core.card_fields import (
    find_blanked_field, find_missing_field, normalize_term, parse_card_id, pick_updates,
)
from card_assistant.core.errors import MissingFieldError, ResourceNotFoundError
from card_assistant.core.repository_protocols import CardRepository

logger = logging.getLogger(__name__)


async def list_cards(repo: CardRepository) -> list[dict]:
    """All cards, issuer ascending."""
    cards = await repo.list_sorted()
    logger.info("Listed credit cards", extra={"result_count": len(cards)})
    return cards


async def filter_cards(
    repo: CardRepository, category: str | None = None, region: str | None = None,
) -> list[dict]:
    """Cards whose spend_category / region contain the given terms (case-insensitive, AND)."""
    category = normalize_term(category)
    region = normalize_term(region)
    cards = await repo.filter(category, region)
    logger.info(
        f"Filtered credit cards (category={category!r}, region={region!r})",
        extra={"result_count": len(cards)},
    )
    return cards


async def create_card(repo: CardRepository, payload: dict[str, Any]) -> dict:
    missing = find_missing_field(payload)
    if missing:
        raise MissingFieldError(missing)
    card = await repo.insert(pick_updates(payload))
    logger.info("Created credit card", extra={"card_id": card["id"]})
    return card


async def update_card(
    repo: CardRepository, card_id: str, payload: dict[str, Any],
) -> dict:
    """Replace only the fields present in payload."""
    blanked = find_blanked_field(payload)
    if blanked:
        raise MissingFieldError(blanked)
    store_id = parse_card_id(card_id)
    card = await repo.update(store_id, pick_updates(payload)) if store_id else None
    if card is None:
        raise ResourceNotFoundError("Credit card", card_id)
    logger.info("Updated credit card", extra={"card_id": store_id})
    return card


async def delete_card(repo: CardRepository, card_id: str) -> None:
    store_id = parse_card_id(card_id)
    if not store_id or not await repo.delete(store_id):
        raise ResourceNotFoundError("Credit card", card_id)
    logger.info("Deleted credit card", extra={"card_id": store_id})
