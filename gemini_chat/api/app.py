"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gemini_chat.api.chat import MAX_SESSIONS, ConversationStore
from gemini_chat.api.chat import router as chat_router
from gemini_chat.conversation.controller import ConversationController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Gemini Chat API...")
    yield
    app.state.conversations.close_all()
    logger.info("Shutting down Gemini Chat API...")


def create_app(
    controller_factory: Callable[[], ConversationController] | None = None,
    max_sessions: int = MAX_SESSIONS,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        controller_factory: Builds a controller for each new conversation.
                            Defaults to a Gemini-backed controller.
        max_sessions: Open conversations kept before the least recently
                      used one is closed.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chat API",
        description=(
            "Minimal chat API that forwards messages to a hosted Gemini model "
            "and keeps one in-memory transcript per session."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.state.conversations = ConversationStore(
        controller_factory or ConversationController, max_sessions=max_sessions
    )
    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gemini-chat"}

    return application
