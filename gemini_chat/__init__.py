"""Gemini Chat - minimal browser chat over a hosted Gemini model.

Combines NiceGUI for the chat page, FastAPI for the HTTP API, Agno for
the model session, and Pydantic for configuration and state snapshots.

Components:
    - agent: Gemini chat session and configuration
    - conversation: Transcript, in-flight flag and error recovery
    - api: HTTP endpoints
    - ui: Web interface for chat interactions
    - models: State and request/response schemas
"""

__version__ = "0.1.0"
