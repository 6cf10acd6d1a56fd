"""Test package for Gemini Chat.

Structure:
    - unit/: Configuration, chat session and controller tests
    - integration/: API tests over the real FastAPI app

The hosted model is never called; sessions are faked in-process.
Uses pytest with pytest-asyncio and pytest-check for soft assertions.
"""
