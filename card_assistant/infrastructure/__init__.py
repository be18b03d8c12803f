"""Infrastructure Layer: outbound clients (row-store engine, completion API) and logging.

Invariants:
    - Only this layer imports SQLAlchemy engines or the Anthropic SDK
    - Clients are process singletons created in the FastAPI lifespan
"""
