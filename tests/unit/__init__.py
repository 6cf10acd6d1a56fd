"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Configuration and Gemini session wiring
    - conversation/: Transcript, in-flight and error recovery rules

Uses mocks for the agno agent and a fake chat session.
"""
