"""FastAPI endpoints for the Gemini chat.

Endpoints:
    - GET /health: Service health status
    - POST /chat/sessions: Start a conversation
    - GET /chat/sessions/{id}: Conversation state
    - POST /chat/sessions/{id}/messages: Send a message
    - DELETE /chat/sessions/{id}: Close a conversation
"""

from gemini_chat.api.app import create_app

__all__ = ["create_app"]
