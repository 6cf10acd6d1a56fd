from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who produced a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"


class TranscriptEntry(BaseModel):
    """A single immutable entry in the conversation transcript.

    Attributes:
        sender: The speaker (user or assistant).
        text: The entry text exactly as sent or received.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class ConversationState(BaseModel):
    """Immutable snapshot of a conversation.

    Attributes:
        entries: Transcript entries in insertion order.
        in_flight: Whether a request to the model is outstanding.
        error: Error message from the last failed request, if any.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[TranscriptEntry, ...] = ()
    in_flight: bool = False
    error: str | None = None


class ChatRequest(BaseModel):
    """Request payload for posting a message to a conversation.

    Attributes:
        message: User's message.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message")
    @classmethod
    def reject_blank_message(cls, v: str) -> str:
        """Reject whitespace-only messages; keep the text as typed."""
        if not v.strip():
            raise ValueError("Message must not be blank")
        return v


class SessionResponse(BaseModel):
    """A conversation and its current state.

    Attributes:
        session_id: Conversation identifier for follow-up requests.
        state: Current conversation snapshot.
    """

    session_id: str
    state: ConversationState
