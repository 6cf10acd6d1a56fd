"""Conversation controller for a single chat session.

Owns the transcript, the in-flight flag and the last error, and drives one
request at a time through the external chat session. State is exposed as
immutable ConversationState snapshots; UI layers subscribe to changes.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from gemini_chat.agent.chat_agent import create_chat_session
from gemini_chat.agent.config import ChatConfig, get_chat_config
from gemini_chat.models.schemas import ConversationState, Sender, TranscriptEntry

logger = logging.getLogger(__name__)

COMMIT_KEY = "Enter"

StateListener = Callable[[ConversationState], None]


class ChatSession(Protocol):
    """Anything that can answer a single user message."""

    async def send_message(self, text: str) -> str: ...


SessionFactory = Callable[[ChatConfig], ChatSession]


class ChatSessionError(Exception):
    """Raised when no chat session is available to send a message."""

    pass


def is_commit_key(key: str | None, shift_key: bool = False) -> bool:
    """Return True when a key press should submit the input.

    Enter submits; Shift+Enter is left alone so it inserts a line break.
    """
    return key == COMMIT_KEY and not shift_key


class ConversationController:
    """Sequential request/response chat with local error recovery.

    At most one request is in flight. Each accepted submit appends a user
    entry and, once the request settles, exactly one assistant entry: the
    model's reply on success or a fixed fallback on failure.
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        session_factory: SessionFactory | None = None,
    ) -> None:
        """Start a conversation.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            session_factory: Builds the external chat session.
                             Defaults to a Gemini session.
        """
        self._config = config or get_chat_config()
        self._session = self._start_session(session_factory or create_chat_session)
        self._entries: list[TranscriptEntry] = [
            TranscriptEntry(sender=Sender.ASSISTANT, text=self._config.greeting)
        ]
        self._in_flight = False
        self._error: str | None = None
        self._listeners: list[StateListener] = []

    def _start_session(self, factory: SessionFactory) -> ChatSession | None:
        # A missing session is not fatal; each submit then fails and recovers.
        try:
            return factory(self._config)
        except Exception:
            logger.exception("Failed to start chat session")
            return None

    @property
    def state(self) -> ConversationState:
        """Current conversation snapshot."""
        return ConversationState(
            entries=tuple(self._entries),
            in_flight=self._in_flight,
            error=self._error,
        )

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state.

        Args:
            listener: Callable receiving a ConversationState.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")

    async def submit(self, text: str) -> ConversationState:
        """Send a user message and wait for the reply.

        Empty or whitespace-only text, or a submit while another request is
        in flight, is ignored and returns the current state.

        Args:
            text: The user's message.

        Returns:
            The settled conversation state.
        """
        if not text.strip() or self._in_flight:
            return self.state

        self._entries.append(TranscriptEntry(sender=Sender.USER, text=text))
        self._error = None
        self._in_flight = True
        self._notify()

        try:
            reply = await self._send(text)
        except Exception:
            logger.exception("Error sending message")
            self._error = self._config.error_message
            self._entries.append(
                TranscriptEntry(sender=Sender.ASSISTANT, text=self._config.fallback_reply)
            )
        else:
            self._entries.append(TranscriptEntry(sender=Sender.ASSISTANT, text=reply))
        finally:
            self._in_flight = False
            self._notify()

        return self.state

    async def _send(self, message: str) -> str:
        if self._session is None:
            raise ChatSessionError("Chat session not initialized.")
        return await asyncio.wait_for(
            self._session.send_message(message),
            timeout=self._config.request_timeout,
        )

    async def accept_key_commit(
        self, key: str | None, shift_key: bool, text: str
    ) -> ConversationState:
        """Submit ``text`` when the key press is a commit (Enter without Shift)."""
        if not is_commit_key(key, shift_key):
            return self.state
        return await self.submit(text)

    def close(self) -> None:
        """End the conversation and release the chat session."""
        self._listeners.clear()
        self._session = None
