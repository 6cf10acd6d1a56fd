"""Chat endpoints backed by per-session conversation controllers.

Conversations live in memory on ``app.state`` and disappear on restart.
"""

import logging
import os
import uuid
from collections import OrderedDict
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from gemini_chat.conversation.controller import ConversationController
from gemini_chat.models.schemas import ChatRequest, ConversationState, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

MAX_SESSIONS = int(os.getenv("CHAT_MAX_SESSIONS", "100"))


class ConversationStore:
    """In-memory registry of open conversations keyed by session id.

    Holds at most ``max_sessions`` conversations. Creating one more closes
    and drops the least recently used.
    """

    def __init__(
        self,
        factory: Callable[[], ConversationController],
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._conversations: OrderedDict[str, ConversationController] = OrderedDict()

    def __len__(self) -> int:
        return len(self._conversations)

    def create(self) -> tuple[str, ConversationController]:
        while len(self._conversations) >= self._max_sessions:
            evicted_id, evicted = self._conversations.popitem(last=False)
            evicted.close()
            logger.info(f"Evicted conversation {evicted_id[:8]}")
        session_id = str(uuid.uuid4())
        controller = self._factory()
        self._conversations[session_id] = controller
        return session_id, controller

    def get(self, session_id: str) -> ConversationController | None:
        controller = self._conversations.get(session_id)
        if controller is not None:
            self._conversations.move_to_end(session_id)
        return controller

    def remove(self, session_id: str) -> bool:
        controller = self._conversations.pop(session_id, None)
        if controller is None:
            return False
        controller.close()
        return True

    def close_all(self) -> None:
        for controller in self._conversations.values():
            controller.close()
        self._conversations.clear()


def get_store(request: Request) -> ConversationStore:
    """Return the conversation store attached to the running app."""
    return request.app.state.conversations


def _get_controller(session_id: str, store: ConversationStore) -> ConversationController:
    controller = store.get(session_id)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return controller


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(store: ConversationStore = Depends(get_store)) -> SessionResponse:
    """Start a new conversation seeded with the assistant greeting."""
    session_id, controller = store.create()
    logger.info(f"Created conversation {session_id[:8]}")
    return SessionResponse(session_id=session_id, state=controller.state)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    store: ConversationStore = Depends(get_store),
) -> SessionResponse:
    """Return the current state of a conversation."""
    controller = _get_controller(session_id, store)
    return SessionResponse(session_id=session_id, state=controller.state)


@router.post("/sessions/{session_id}/messages", response_model=ConversationState)
async def post_message(
    session_id: str,
    request: ChatRequest,
    store: ConversationStore = Depends(get_store),
) -> ConversationState:
    """Send a message and return the settled conversation state.

    Raises:
        404: Unknown session.
        409: A request is already in flight for this session.
        422: Empty or whitespace-only message.
    """
    controller = _get_controller(session_id, store)
    if controller.in_flight:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A request is already in progress for this session",
        )
    return await controller.submit(request.message)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    store: ConversationStore = Depends(get_store),
) -> Response:
    """Close a conversation and release its chat session."""
    if not store.remove(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
