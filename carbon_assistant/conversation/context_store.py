"""
In-memory, session-keyed conversation context with bounded history.

Each session keeps the most recent intents and a flattened list of the most
recent entities. Sessions are held in least-recently-used order and evicted
when the store exceeds ``max_sessions`` or when a session has been idle for
longer than ``session_ttl_seconds``.

Usage:
    store = ContextStore()
    store.update(intent_result, entities, "web-42")
    assert store.get("web-42").last_action == intent_result.name
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional

from carbon_assistant.config import settings
from carbon_assistant.conversation.classifier import IntentResult
from carbon_assistant.conversation.entities import Entity
from carbon_assistant.conversation.intents import Intent

logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """Rolling conversation state for one session."""

    session_id: str
    intents: list[IntentResult] = field(default_factory=list)
    entities: list[Entity] = field(default_factory=list)
    last_action: Optional[Intent] = None
    created_at: float = 0.0
    last_access: float = 0.0

    def snapshot(self) -> "SessionContext":
        """Detached copy whose lists can be read without affecting the store."""
        return replace(self, intents=list(self.intents), entities=list(self.entities))


class ContextStore:
    """
    Thread-safe map of session ID -> SessionContext.

    A single lock serializes every read and write, so concurrent updates to
    different sessions cannot corrupt each other and each update's append
    always lands before its truncation.
    """

    def __init__(
        self,
        max_intents: Optional[int] = None,
        max_entities: Optional[int] = None,
        max_sessions: Optional[int] = None,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        cfg = settings.context
        self.max_intents = cfg.max_intent_history if max_intents is None else max_intents
        self.max_entities = cfg.max_entity_history if max_entities is None else max_entities
        self.max_sessions = cfg.max_sessions if max_sessions is None else max_sessions
        self.ttl_seconds = cfg.session_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._sessions: "OrderedDict[str, SessionContext]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get(self, session_id: str) -> SessionContext:
        """Return a snapshot of the session, or an empty context if none exists."""
        with self._lock:
            context = self._sessions.get(session_id)
            if context is None or self._is_expired(context, self._clock()):
                return SessionContext(session_id=session_id)
            context.last_access = self._clock()
            self._sessions.move_to_end(session_id)
            return context.snapshot()

    def update(
        self, intent: IntentResult, entities: Iterable[Entity], session_id: str
    ) -> SessionContext:
        """Append this turn's intent and entities, then trim to the history limits."""
        new_entities = list(entities)
        with self._lock:
            now = self._clock()
            self._evict_expired_locked(now)

            context = self._sessions.get(session_id)
            if context is None:
                context = SessionContext(session_id=session_id, created_at=now)
                self._sessions[session_id] = context
                logger.debug("Created context for session '%s'", session_id)

            context.intents.append(intent)
            context.entities.extend(new_entities)
            context.last_action = intent.name

            if len(context.intents) > self.max_intents:
                context.intents = context.intents[-self.max_intents:]
            if len(context.entities) > self.max_entities:
                context.entities = context.entities[-self.max_entities:]

            context.last_access = now
            self._sessions.move_to_end(session_id)
            self._evict_overflow_locked()
            return context.snapshot()

    def clear(self, session_id: str) -> bool:
        """Forget one session. Returns True if it existed."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def evict_expired(self) -> int:
        """Drop every session idle for longer than the TTL. Returns the count removed."""
        with self._lock:
            return self._evict_expired_locked(self._clock())

    def session_ids(self) -> list[str]:
        """Session IDs from least to most recently used."""
        with self._lock:
            return list(self._sessions)

    def _is_expired(self, context: SessionContext, now: float) -> bool:
        return now - context.last_access > self.ttl_seconds

    def _evict_expired_locked(self, now: float) -> int:
        expired = [
            sid for sid, ctx in self._sessions.items() if self._is_expired(ctx, now)
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Evicted %d idle session(s)", len(expired))
        return len(expired)

    def _evict_overflow_locked(self) -> None:
        while len(self._sessions) > self.max_sessions:
            sid, _ = self._sessions.popitem(last=False)
            logger.info("Evicted least recently used session '%s'", sid)
