"""Card Assistant API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CardAssistantError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Row-store engine and completion client created once in the lifespan, shared by all requests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from card_assistant.api.error_handlers import register_error_handlers
from card_assistant.api.routes import cards, chat, health
from card_assistant.config import get_settings
from card_assistant.infrastructure.anthropic_client import init_completion_client
from card_assistant.infrastructure.database import close_db, init_db
from card_assistant.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.resolved_database_url(),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_completion_client(
        settings.anthropic_api_key,
        settings.completion_model,
        settings.completion_max_tokens,
    )
    logger.info(f"Card Assistant API started on port {settings.port}")
    yield
    await close_db()
    logger.info("Card Assistant API shutting down")


app = FastAPI(
    title="Card Assistant API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cards.router)
app.include_router(chat.router)

register_error_handlers(app)
