"""Pydantic Schemas: request/response contracts for the HTTP surface.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
