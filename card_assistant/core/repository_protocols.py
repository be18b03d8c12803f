"""Boundary Protocols: contracts between the gateways and their collaborators.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy or the Anthropic SDK
    - Implementations raise DatabaseError / CompletionProviderError, never raw driver errors
    - Card records cross the boundary as plain dicts

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async methods: every implementation does network IO
"""

from typing import Any, Protocol


class CardRepository(Protocol):
    """Contract for credit card persistence in the row-store."""
    async def list_sorted(self) -> list[dict]: ...
    async def filter(
        self, category: str | None, region: str | None,
    ) -> list[dict]: ...
    async def insert(self, fields: dict[str, Any]) -> dict: ...
    async def update(self, card_id: int, fields: dict[str, Any]) -> dict | None: ...
    async def delete(self, card_id: int) -> bool: ...


class ChatLogRepository(Protocol):
    """Contract for the append-only chat audit log."""
    async def append(self, prompt: str, response: str) -> None: ...


class CompletionProvider(Protocol):
    """Contract for the hosted text-generation API."""
    async def generate(self, prompt: str) -> str: ...
