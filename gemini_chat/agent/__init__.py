"""Agno agent logic for the Gemini chat session.

Responsibilities:
    - Configuration loading from environment
    - Agent initialization with a Gemini model
    - Per-session conversation history

Treats the hosted model as an opaque collaborator.
"""

from gemini_chat.agent.chat_agent import GeminiChatSession, create_chat_session
from gemini_chat.agent.config import ChatConfig, get_chat_config

__all__ = ["ChatConfig", "GeminiChatSession", "create_chat_session", "get_chat_config"]
