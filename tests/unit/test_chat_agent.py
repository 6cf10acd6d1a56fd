"""Unit tests for GeminiChatSession.

The agno Agent and Gemini model are patched; no network access.
"""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gemini_chat.agent.chat_agent import GeminiChatSession, create_chat_session
from gemini_chat.agent.config import ChatConfig


class TestGeminiChatSessionInit:
    """Tests for session initialization."""

    @patch("gemini_chat.agent.chat_agent.InMemoryDb")
    @patch("gemini_chat.agent.chat_agent.Gemini")
    @patch("gemini_chat.agent.chat_agent.Agent")
    def test_model_created_with_config_values(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
        mock_db: MagicMock,
    ) -> None:
        """Gemini model receives id, key and output limit from config."""
        config = ChatConfig(
            api_key="test-key",
            model_name="gemini-2.0-flash",
            max_output_tokens=500,
        )

        GeminiChatSession(config=config)

        mock_gemini.assert_called_once_with(
            id="gemini-2.0-flash",
            api_key="test-key",
            max_output_tokens=500,
        )

    @patch("gemini_chat.agent.chat_agent.InMemoryDb")
    @patch("gemini_chat.agent.chat_agent.Gemini")
    @patch("gemini_chat.agent.chat_agent.Agent")
    def test_empty_key_left_to_client(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
        mock_db: MagicMock,
    ) -> None:
        """An empty key is passed as None so the client resolves it."""
        GeminiChatSession(config=ChatConfig(api_key=""))

        assert mock_gemini.call_args.kwargs["api_key"] is None

    @patch("gemini_chat.agent.chat_agent.InMemoryDb")
    @patch("gemini_chat.agent.chat_agent.Gemini")
    @patch("gemini_chat.agent.chat_agent.Agent")
    def test_agent_created_with_instruction_and_history(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
        mock_db: MagicMock,
    ) -> None:
        """Agent gets the system instruction and in-memory history."""
        config = ChatConfig(api_key="k", system_instruction="Be brief.", history_runs=7)

        GeminiChatSession(config=config)

        call_kwargs = mock_agent_class.call_args.kwargs
        assert call_kwargs["model"] is mock_gemini.return_value
        assert call_kwargs["db"] is mock_db.return_value
        assert call_kwargs["instructions"] == "Be brief."
        assert call_kwargs["add_history_to_context"] is True
        assert call_kwargs["num_history_runs"] == 7

    @patch("gemini_chat.agent.chat_agent.InMemoryDb")
    @patch("gemini_chat.agent.chat_agent.Gemini")
    @patch("gemini_chat.agent.chat_agent.Agent")
    def test_each_session_has_its_own_agent(
        self,
        mock_agent_class: MagicMock,
        mock_gemini: MagicMock,
        mock_db: MagicMock,
    ) -> None:
        """create_chat_session builds a new agent and session id every time."""
        config = ChatConfig(api_key="k")

        first = create_chat_session(config)
        second = create_chat_session(config)

        assert first.session_id != second.session_id
        assert mock_agent_class.call_count == 2


class TestSendMessage:
    """Tests for GeminiChatSession.send_message."""

    @pytest.fixture
    def agent(self) -> Iterator[MagicMock]:
        with (
            patch("gemini_chat.agent.chat_agent.InMemoryDb"),
            patch("gemini_chat.agent.chat_agent.Gemini"),
            patch("gemini_chat.agent.chat_agent.Agent") as mock_agent_class,
        ):
            yield mock_agent_class.return_value

    async def test_returns_reply_text_unmodified(self, agent: MagicMock) -> None:
        """The reply content is returned exactly as received."""
        agent.arun = AsyncMock(return_value=MagicMock(content="  Hi there\n"))
        session = GeminiChatSession(config=ChatConfig(api_key="k"))

        reply = await session.send_message("Hello")

        assert reply == "  Hi there\n"
        agent.arun.assert_awaited_once_with("Hello", session_id=session.session_id)

    async def test_missing_content_becomes_empty_string(self, agent: MagicMock) -> None:
        """A reply without content is returned as an empty string."""
        agent.arun = AsyncMock(return_value=MagicMock(content=None))
        session = GeminiChatSession(config=ChatConfig(api_key="k"))

        assert await session.send_message("Hello") == ""

    async def test_errors_propagate(self, agent: MagicMock) -> None:
        """Model errors are not swallowed by the session."""
        agent.arun = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        session = GeminiChatSession(config=ChatConfig(api_key="k"))

        with pytest.raises(RuntimeError, match="quota exceeded"):
            await session.send_message("Hello")
