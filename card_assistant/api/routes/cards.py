"""Card Routes: HTTP surface of the card registry gateway.

Invariants:
    - Routes never contain business logic (delegate to services.card_registry)
    - /filter is declared before /{card_id} so it is never read as an id
    - Errors propagate as CardAssistantError to the global handlers
"""

import logging

from fastapi import APIRouter, Depends, status

from card_assistant.core.repository_protocols import CardRepository
from card_assistant.infrastructure.repositories import get_card_repository
from card_assistant.schemas.card import (
    CardCreate, CardDeleteResponse, CardMutationResponse, CardRecord, CardUpdate,
)
from card_assistant.services import card_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.get("", response_model=list[CardRecord])
async def list_cards(repo: CardRepository = Depends(get_card_repository)):
    """All credit cards, sorted by issuer."""
    logger.info("GET /api/cards")
    return await card_registry.list_cards(repo)


@router.get("/filter", response_model=list[CardRecord])
async def filter_cards(
    category: str | None = None,
    region: str | None = None,
    repo: CardRepository = Depends(get_card_repository),
):
    """Cards matching every given term, e.g. ?category=dining&region=local."""
    return await card_registry.filter_cards(repo, category, region)


@router.post(
    "", response_model=CardMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    body: CardCreate, repo: CardRepository = Depends(get_card_repository),
):
    card = await card_registry.create_card(
        repo, body.model_dump(exclude_unset=True),
    )
    return {"success": True, "data": card}


@router.put("/{card_id}", response_model=CardMutationResponse)
async def update_card(
    card_id: str,
    body: CardUpdate,
    repo: CardRepository = Depends(get_card_repository),
):
    card = await card_registry.update_card(
        repo, card_id, body.model_dump(exclude_unset=True),
    )
    return {"success": True, "data": card}


@router.delete("/{card_id}", response_model=CardDeleteResponse)
async def delete_card(
    card_id: str, repo: CardRepository = Depends(get_card_repository),
):
    await card_registry.delete_card(repo, card_id)
    return {"success": True, "message": "Credit card deleted"}
