"""
Chat Service - Maharishi Agri Q&A sessions

Each AgriChatSession wraps one Gemini chat handle created with the fixed
Maharishi persona. Replies are streamed as text fragments; Gemini keeps the
conversation history used as context, while the session keeps its own
transcript of what the farmer actually saw.

Lifecycle:
- Created: persona and temperature fixed, chat handle created (no network call)
- Awaiting reply / Streaming: inside send_message
- Idle: after the last fragment, exchange appended to the transcript
- Closed: handle dropped, further sends raise ChatSessionClosedError

Failure handling:
- No API key: one fragment with AI_DISABLED_MESSAGE, no network attempt
- Error while starting or iterating the stream: CHAT_ERROR_MESSAGE is
  yielded and recorded for that turn; the session stays usable
- A newer send_message supersedes an older one still streaming: the older
  stream stops yielding and records nothing. A stream that already ran to
  its end is recorded even if a newer call started meanwhile

The registry evicts sessions idle longer than CHAT_SESSION_TTL_SECONDS and
drops the least recently used ones beyond CHAT_MAX_SESSIONS.
"""

import logging
import time
import uuid
from typing import Any, AsyncIterator, Dict, List, Optional

from google.genai import types

from maharishi.agents.advisor.prompts import MAHARISHI_SYSTEM_PROMPT
from maharishi.config import settings
from maharishi.schemas.chat import ChatTurn
from maharishi.services.gemini_client import get_gemini_client
from maharishi.utils.constants import AI_DISABLED_MESSAGE, CHAT_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class ChatStreamError(Exception):
    """The Gemini stream failed to start or broke mid-reply."""


class ChatSessionClosedError(Exception):
    """send_message was called on a closed session."""


class ChatSessionNotFoundError(KeyError):
    """No open session with the given id."""


class AgriChatSession:
    """
    One farmer's conversation with the Maharishi assistant.

    Usage:
        >>> session = AgriChatSession()
        >>> async for fragment in session.send_message("When should I sow wheat?"):
        ...     print(fragment, end="")
    """

    def __init__(self, client: Optional[Any] = None, session_id: Optional[str] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.turns: List[ChatTurn] = []
        self._call_seq = 0
        self._closed = False
        self.last_used = time.monotonic()

        if client is None:
            client = get_gemini_client()

        self._chat = None
        if client is not None:
            self._chat = client.aio.chats.create(
                model=settings.GEMINI_MODEL,
                config=types.GenerateContentConfig(
                    system_instruction=MAHARISHI_SYSTEM_PROMPT,
                    temperature=settings.CHAT_TEMPERATURE,
                ),
            )

        logger.info(f"Chat session created: session_id={self.session_id}, ai_enabled={self.ai_enabled}")

    @property
    def ai_enabled(self) -> bool:
        return self._chat is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def touch(self) -> None:
        self.last_used = time.monotonic()

    def idle_seconds(self, now: Optional[float] = None) -> float:
        if now is None:
            now = time.monotonic()
        return now - self.last_used

    def close(self) -> None:
        """Drop the Gemini chat handle. The transcript stays readable."""
        if self._closed:
            return
        self._closed = True
        self._chat = None
        logger.info(f"Chat session closed: session_id={self.session_id}, turns={len(self.turns)}")

    async def send_message(self, message: str) -> AsyncIterator[str]:
        """
        Send a message and stream the reply.

        Fragments are yielded in the order Gemini produces them; joining
        them gives the full reply. The iterator is single-pass.

        Args:
            message: Farmer's message (must not be blank)

        Yields:
            Text fragments of the assistant's reply

        Raises:
            ValueError: message is blank
            ChatSessionClosedError: session was closed
        """
        if self._closed:
            raise ChatSessionClosedError(f"Chat session {self.session_id} is closed")
        if not message or not message.strip():
            raise ValueError("message must not be blank")

        self._call_seq += 1
        call_id = self._call_seq
        self.touch()

        if self._chat is None:
            logger.warning(f"AI disabled, returning fallback reply: session_id={self.session_id}")
            self._record_exchange(message, AI_DISABLED_MESSAGE)
            yield AI_DISABLED_MESSAGE
            return

        reply_parts: List[str] = []
        try:
            async for fragment in self._stream_reply(message):
                if call_id != self._call_seq:
                    logger.info(
                        f"Dropping superseded reply: session_id={self.session_id}, "
                        f"call_id={call_id}, latest={self._call_seq}"
                    )
                    return
                reply_parts.append(fragment)
                yield fragment
            if not reply_parts:
                raise ChatStreamError("Gemini returned an empty reply")
        except ChatStreamError as e:
            logger.error(f"Chat stream failed: session_id={self.session_id}, call_id={call_id}: {e}")
            if call_id != self._call_seq:
                return
            self._record_exchange(message, CHAT_ERROR_MESSAGE)
            yield CHAT_ERROR_MESSAGE
            return

        # Gemini already holds this exchange in its history once the stream ended
        self._record_exchange(message, "".join(reply_parts))
        logger.info(f"Chat reply streamed: session_id={self.session_id}, fragments={len(reply_parts)}")

    async def collect_reply(self, message: str) -> str:
        """Send a message and return the complete reply as one string."""
        parts = [fragment async for fragment in self.send_message(message)]
        return "".join(parts)

    async def _stream_reply(self, message: str) -> AsyncIterator[str]:
        """Yield non-empty text chunks from Gemini, wrapping failures in ChatStreamError."""
        try:
            stream = await self._chat.send_message_stream(message)
            async for chunk in stream:
                text = chunk.text
                if text:
                    yield text
        except Exception as e:
            raise ChatStreamError(f"{e.__class__.__name__}: {e}") from e

    def _record_exchange(self, message: str, reply: str) -> None:
        self.touch()
        self.turns.append(ChatTurn(role="user", text=message))
        self.turns.append(ChatTurn(role="assistant", text=reply))


class ChatSessionRegistry:
    """
    In-memory owner of open chat sessions, keyed by session id.

    A session is created when the chat view opens and closed when it goes
    away; nothing is persisted. A view that never sends DELETE leaves its
    session behind, so sessions idle longer than ttl_seconds are evicted and
    at most max_sessions are kept (least recently used go first). Eviction
    runs on create() and get().
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        max_sessions: Optional[int] = None,
    ):
        self._sessions: Dict[str, AgriChatSession] = {}
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.CHAT_SESSION_TTL_SECONDS
        self.max_sessions = max_sessions if max_sessions is not None else settings.CHAT_MAX_SESSIONS

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, client: Optional[Any] = None) -> AgriChatSession:
        self.evict_expired()
        # Make room for the new session
        self._evict_least_recently_used(self.max_sessions - 1)

        session = AgriChatSession(client=client)
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> AgriChatSession:
        self.evict_expired()
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise ChatSessionNotFoundError(session_id)
        session.touch()
        return session

    def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise ChatSessionNotFoundError(session_id)
        session.close()

    def close_all(self) -> None:
        for session in list(self._sessions.values()):
            session.close()
        self._sessions.clear()

    def evict_expired(self, now: Optional[float] = None) -> int:
        """Close sessions idle longer than ttl_seconds. Returns how many were evicted."""
        if now is None:
            now = time.monotonic()
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.idle_seconds(now) > self.ttl_seconds
        ]
        for session_id in expired:
            self._sessions.pop(session_id).close()
        if expired:
            logger.info(f"Evicted idle chat sessions: count={len(expired)}, open={len(self._sessions)}")
        return len(expired)

    def _evict_least_recently_used(self, keep: int) -> None:
        excess = len(self._sessions) - keep
        if excess <= 0:
            return
        oldest = sorted(self._sessions.values(), key=lambda s: s.last_used)[:excess]
        for session in oldest:
            self._sessions.pop(session.session_id).close()
        logger.warning(
            f"Chat session limit reached, evicted {len(oldest)} least recently used "
            f"(max_sessions={self.max_sessions})"
        )


# Application-wide registry (see routes/chat.get_chat_registry)
chat_sessions = ChatSessionRegistry()
