"""Agno-backed Gemini chat session.

Wraps an agno Agent configured with a Gemini model into a single opaque
chat session handle. The conversation controller only ever calls
``send_message`` and reads the returned text; history and the system
instruction live inside the agent.

Architecture Decisions:

1. **In-memory storage** - agno keeps no history without a db. Transcripts
   are never persisted, so InMemoryDb gives multi-turn context that lives
   exactly as long as the session object.

2. **One agent per session** - no module-level singleton. Each controller
   owns its session and drops it when the conversation ends.

3. **Service wrapper** - decouples the controller from agno's interface.
   Errors propagate unchanged; recovery is the controller's job.
"""

import logging
import uuid

from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.models.google import Gemini

from gemini_chat.agent.config import ChatConfig, get_chat_config

logger = logging.getLogger(__name__)


class GeminiChatSession:
    """A single Gemini conversation with its own history."""

    def __init__(self, config: ChatConfig | None = None) -> None:
        """Initialize the chat session.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_chat_config()
        self.session_id: str = str(uuid.uuid4())
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        """Create the agno agent instance.

        Returns:
            Agent with a Gemini model, in-memory history and the configured
            system instruction.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key or None,
            max_output_tokens=self._config.max_output_tokens,
        )

        return Agent(
            model=model,
            db=InMemoryDb(),
            instructions=self._config.system_instruction,
            add_history_to_context=True,
            num_history_runs=self._config.history_runs,
        )

    async def send_message(self, text: str) -> str:
        """Send one user message and wait for the complete reply.

        Args:
            text: The user's message.

        Returns:
            The model's reply text, unmodified.
        """
        logger.debug(f"Sending message in session {self.session_id[:8]}")
        response = await self._agent.arun(text, session_id=self.session_id)
        return response.content or ""


def create_chat_session(config: ChatConfig | None = None) -> GeminiChatSession:
    """Start a new Gemini chat session.

    Args:
        config: Optional chat configuration.

    Returns:
        A fresh session with empty history.
    """
    session = GeminiChatSession(config=config)
    logger.info(f"Started chat session {session.session_id[:8]}")
    return session
