"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - chat_config: Configuration with a fake key and short timeout
    - fake_session: In-process stand-in for the Gemini chat session
    - controller: ConversationController wired to fake_session
    - app: FastAPI app whose conversations use fake_session
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gemini_chat.agent.config import ChatConfig
from gemini_chat.api.app import create_app
from gemini_chat.conversation.controller import ConversationController


class FakeChatSession:
    """Chat session returning a canned reply or raising a canned error."""

    def __init__(self, reply: str = "Hi there", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.sent: list[str] = []

    async def send_message(self, text: str) -> str:
        self.sent.append(text)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return configuration that never touches the network.

    Returns:
        ChatConfig with a fake key and a short request timeout.
    """
    return ChatConfig(api_key="test-key", request_timeout=1.0)


@pytest.fixture
def fake_session() -> FakeChatSession:
    """Return a chat session that answers "Hi there"."""
    return FakeChatSession()


@pytest.fixture
def controller(chat_config: ChatConfig, fake_session: FakeChatSession) -> ConversationController:
    """Return a controller backed by the fake session."""
    return ConversationController(chat_config, session_factory=lambda _: fake_session)


@pytest.fixture
def app(chat_config: ChatConfig, fake_session: FakeChatSession) -> FastAPI:
    """Return an API app whose conversations all use the fake session."""
    return create_app(
        controller_factory=lambda: ConversationController(
            chat_config, session_factory=lambda _: fake_session
        )
    )


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
