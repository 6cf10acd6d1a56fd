"""Pydantic models for conversation state and API payloads.

Models:
    - Sender: Transcript entry author
    - TranscriptEntry: Single immutable chat entry
    - ConversationState: Snapshot of transcript, in-flight flag and error
    - ChatRequest: Incoming message payload
    - SessionResponse: Conversation id with its state
"""

from gemini_chat.models.schemas import (
    ChatRequest,
    ConversationState,
    Sender,
    SessionResponse,
    TranscriptEntry,
)

__all__ = [
    "ChatRequest",
    "ConversationState",
    "Sender",
    "SessionResponse",
    "TranscriptEntry",
]
