"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat session and controller.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_SYSTEM_INSTRUCTION = "You are a helpful AI assistant."
DEFAULT_GREETING = "Hello! How can I assist you today?"
DEFAULT_FALLBACK_REPLY = (
    "Sorry, I couldn't process that request right now. Please try again."
)
DEFAULT_ERROR_MESSAGE = "Failed to get response. Please try again."


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat session.

    The API key is deliberately not validated here: a missing key surfaces
    as a failed reply on the first message.

    Attributes:
        api_key: Gemini API key.
        model_name: Gemini model identifier.
        max_output_tokens: Maximum tokens in a generated reply.
        system_instruction: System-level instruction given to the model.
        greeting: Assistant greeting shown when a conversation starts.
        fallback_reply: Assistant entry appended when a request fails.
        error_message: Error banner text shown when a request fails.
        request_timeout: Seconds to wait for a reply before giving up.
        history_runs: Number of previous turns sent back as context.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        description="API key for Gemini",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    max_output_tokens: int = Field(
        default_factory=lambda: int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "500")),
        ge=1,
        le=65536,
        description="Maximum tokens in generated response",
    )
    system_instruction: str = Field(
        default=DEFAULT_SYSTEM_INSTRUCTION,
        description="System-level behavioral instruction",
    )
    greeting: str = Field(default=DEFAULT_GREETING)
    fallback_reply: str = Field(default=DEFAULT_FALLBACK_REPLY)
    error_message: str = Field(default=DEFAULT_ERROR_MESSAGE)
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_REQUEST_TIMEOUT", "60")),
        gt=0.0,
        description="Seconds to wait for a model reply",
    )
    history_runs: int = Field(default=20, ge=0)

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()
