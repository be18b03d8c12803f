"""ORM Models: SQLAlchemy declarative models for the row-store tables.

Design Decisions:
    - One file per table
    - All models imported here so Base.metadata is complete before create_all
"""

from card_assistant.models.card import CreditCard  # noqa: F401
from card_assistant.models.chat_log import ChatLog  # noqa: F401
