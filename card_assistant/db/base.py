"""SQLAlchemy Declarative Base: shared base class for the row-store tables.

Invariants:
    - All models inherit from Base
    - Base.metadata is what test fixtures create and drop
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass
