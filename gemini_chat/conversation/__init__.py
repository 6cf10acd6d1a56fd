"""Conversation management - transcript, in-flight flag and error recovery.

Contains the only stateful logic of the application. UI and API layers
call ``submit`` and render the returned snapshots.
"""

from gemini_chat.conversation.controller import (
    ChatSessionError,
    ConversationController,
    is_commit_key,
)

__all__ = ["ChatSessionError", "ConversationController", "is_commit_key"]
