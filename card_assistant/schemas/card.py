"""Card Schemas: request/response models for the card registry endpoints.

Invariants:
    - Request fields are all optional at the schema level: required-field checks
      run in core.card_fields so the error names the first missing field
    - reward_value accepts numbers or strings and is passed through unchanged;
      strict types so booleans are rejected instead of coerced to 1/0
"""

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

RewardValue = StrictInt | StrictFloat | StrictStr


class CardCreate(BaseModel):
    """Body of POST /api/cards."""
    issuer: str | None = None
    card_name: str | None = None
    spend_category: str | None = None
    reward_value: RewardValue | None = None
    region: str | None = None


class CardUpdate(CardCreate):
    """Body of PUT /api/cards/{id}; only the fields sent are replaced."""


class CardRecord(BaseModel):
    id: int
    issuer: str
    card_name: str
    spend_category: str
    reward_value: RewardValue
    region: str | None = None
    created_at: str | None = None


class CardMutationResponse(BaseModel):
    success: bool = True
    data: CardRecord


class CardDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Credit card deleted"
