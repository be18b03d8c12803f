"""Card Field Rules: pure checks on incoming card payloads.

Invariants:
    - REQUIRED_CARD_FIELDS order decides which field a create error names
    - None and blank strings count as missing; 0 is a value
    - Filter terms are stripped; blank terms impose no constraint
    - Card ids live in the Integer primary-key range 1..2**31-1
"""

from typing import Any

REQUIRED_CARD_FIELDS: tuple[str, ...] = (
    "issuer", "card_name", "spend_category", "reward_value",
)

UPDATABLE_CARD_FIELDS: tuple[str, ...] = REQUIRED_CARD_FIELDS + ("region",)

MAX_CARD_ID = 2**31 - 1


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def find_missing_field(payload: dict[str, Any]) -> str | None:
    """Return the first required field that is absent or blank, else None."""
    for name in REQUIRED_CARD_FIELDS:
        if is_blank(payload.get(name)):
            return name
    return None


def find_blanked_field(payload: dict[str, Any]) -> str | None:
    """Return the first required field an update would set to blank, else None."""
    for name in REQUIRED_CARD_FIELDS:
        if name in payload and is_blank(payload[name]):
            return name
    return None


def pick_updates(payload: dict[str, Any]) -> dict[str, Any]:
    """Keep only the updatable fields the caller actually sent."""
    return {k: v for k, v in payload.items() if k in UPDATABLE_CARD_FIELDS}


def normalize_term(term: str | None) -> str | None:
    if term is None:
        return None
    term = term.strip()
    return term or None


def parse_card_id(raw: str) -> int | None:
    """Store ids are positive integers; anything else cannot match a record."""
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    card_id = int(raw)
    if not 1 <= card_id <= MAX_CARD_ID:
        return None
    return card_id
