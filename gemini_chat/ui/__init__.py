"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with auto-scroll to the newest entry
    - "Thinking" indicator and error banner
    - Input disabled while a request is in flight

Contains no business logic. Renders ConversationController snapshots.
"""
