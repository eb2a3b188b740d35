"""
FastAPI routes for the Agri Q&A chat.

A session is opened when the chat view mounts and deleted when it unmounts.
Replies are streamed as plain text fragments in the order Gemini produces
them.

Endpoints:
- POST /chat/sessions: Open a session and return the assistant's greeting
- POST /chat/sessions/{session_id}/messages: Send a message, stream the reply
- GET /chat/sessions/{session_id}/turns: Transcript of the session
- DELETE /chat/sessions/{session_id}: Close the session
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from maharishi.schemas.chat import (
    ChatMessageRequest,
    ChatSessionCreateResponse,
    ChatTranscriptResponse,
)
from maharishi.services.chat_service import (
    AgriChatSession,
    ChatSessionNotFoundError,
    ChatSessionRegistry,
    chat_sessions,
)
from maharishi.utils.constants import CHAT_GREETING_PROMPT

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/chat",
    tags=["chat"]
)


def get_chat_registry() -> ChatSessionRegistry:
    """Dependency returning the application-wide session registry."""
    return chat_sessions


def _get_open_session(registry: ChatSessionRegistry, session_id: str) -> AgriChatSession:
    try:
        session = registry.get(session_id)
    except ChatSessionNotFoundError:
        logger.warning(f"Chat session not found: session_id={session_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "session_not_found",
                "details": f"Chat session {session_id} does not exist"
            }
        )
    return session


@router.post(
    "/sessions",
    response_model=ChatSessionCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a chat session",
)
async def create_chat_session(
    registry: ChatSessionRegistry = Depends(get_chat_registry),
) -> ChatSessionCreateResponse:
    """
    Open a session with the Maharishi persona.

    The greeting prompt is sent on the farmer's behalf so the response
    already carries the assistant's welcome message.
    """
    session = registry.create()
    greeting = await session.collect_reply(CHAT_GREETING_PROMPT)

    logger.info(f"POST /chat/sessions opened session_id={session.session_id}")
    return ChatSessionCreateResponse(
        session_id=session.session_id,
        greeting=greeting,
        ai_enabled=session.ai_enabled,
    )


@router.post(
    "/sessions/{session_id}/messages",
    response_class=StreamingResponse,
    summary="Send a message and stream the reply",
    description="""
    Streams the assistant's reply as text/plain chunks. Concatenate the
    chunks in arrival order to get the full reply.

    If Gemini fails mid-reply the stream ends with a fixed apology; if AI is
    disabled the stream holds a single fixed message.
    """
)
async def send_chat_message(
    session_id: str,
    request: ChatMessageRequest,
    registry: ChatSessionRegistry = Depends(get_chat_registry),
) -> StreamingResponse:
    session = _get_open_session(registry, session_id)
    logger.info(f"POST /chat/sessions/{session_id}/messages called")

    return StreamingResponse(
        session.send_message(request.message),
        media_type="text/plain; charset=utf-8",
    )


@router.get(
    "/sessions/{session_id}/turns",
    response_model=ChatTranscriptResponse,
    summary="Get the session transcript",
)
async def get_chat_transcript(
    session_id: str,
    registry: ChatSessionRegistry = Depends(get_chat_registry),
) -> ChatTranscriptResponse:
    session = _get_open_session(registry, session_id)
    return ChatTranscriptResponse(session_id=session.session_id, turns=list(session.turns))


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Close a chat session",
)
async def close_chat_session(
    session_id: str,
    registry: ChatSessionRegistry = Depends(get_chat_registry),
) -> None:
    try:
        registry.close(session_id)
    except ChatSessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "session_not_found",
                "details": f"Chat session {session_id} does not exist"
            }
        )
    logger.info(f"DELETE /chat/sessions/{session_id} closed session")
