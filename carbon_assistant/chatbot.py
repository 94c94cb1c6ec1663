"""
Chat assistant entry point: one call per user message.

Pipeline per message:
    normalize -> classify -> extract (raw text) -> dispatch -> record context
    -> append to the conversation log -> optionally reinforce the keyword table

Usage:
    bot = CarbonChatbot()
    response = bot.process_message("hello", session_id="web-42")
    print(response.text, response.suggestions)
"""

import random
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Optional

from carbon_assistant.config import settings
from carbon_assistant.conversation.classifier import IntentClassifier, IntentResult
from carbon_assistant.conversation.context_store import ContextStore, SessionContext
from carbon_assistant.conversation.dispatcher import ResponseDispatcher
from carbon_assistant.conversation.entities import Entity, EntityExtractor
from carbon_assistant.conversation.intents import Intent
from carbon_assistant.knowledge.knowledge_base import CarbonKnowledgeBase
from carbon_assistant.logging_context import get_session_logger, set_session_id
from carbon_assistant.schemas.conversation_schema import (
    ConversationRecord,
    EntityRecord,
    Response,
)
from carbon_assistant.utils import normalize_utterance

logger = get_session_logger(__name__)


class CarbonChatbot:
    """Wires the classifier, extractor, dispatcher and context store together."""

    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[EntityExtractor] = None,
        knowledge_base: Optional[CarbonKnowledgeBase] = None,
        context_store: Optional[ContextStore] = None,
        rng: Optional[random.Random] = None,
        learning_enabled: Optional[bool] = None,
    ) -> None:
        self._classifier = classifier or IntentClassifier()
        self.extractor = extractor or EntityExtractor()
        self.context_store = context_store or ContextStore()
        self.dispatcher = ResponseDispatcher(
            knowledge_base or CarbonKnowledgeBase(), self.context_store, rng
        )
        self.learning_enabled = (
            settings.nlu.learning_enabled if learning_enabled is None else learning_enabled
        )
        self._history: deque[ConversationRecord] = deque(
            maxlen=settings.assistant.conversation_log_size
        )
        self._lock = threading.Lock()

    @property
    def classifier(self) -> IntentClassifier:
        with self._lock:
            return self._classifier

    def process_message(
        self, message: str, session_id: str = settings.assistant.default_session_id
    ) -> Response:
        """Answer one message. Never raises; failures become the fallback response."""
        set_session_id(session_id)
        try:
            normalized = normalize_utterance(message)
            intent = self.classifier.classify(normalized)
            entities = list(self.extractor.extract(message))

            response = self.dispatcher.generate_response(intent, entities, session_id)
            self.context_store.update(intent, entities, session_id)
            self._record(message, response, intent, entities, session_id)

            logger.info(
                "Answered '%s' (confidence=%.2f, entities=%d)",
                intent.name.value, intent.confidence, len(entities),
            )
        except Exception:
            logger.exception("Failed to process message")
            return self.dispatcher.fallback_response()

        # The answer stands even if learning fails
        try:
            self._learn(message, intent)
        except Exception:
            logger.exception("Failed to reinforce keywords for '%s'", intent.name.value)
        return response

    def get_context(self, session_id: str = settings.assistant.default_session_id) -> SessionContext:
        return self.context_store.get(session_id)

    def get_conversation_history(self, session_id: Optional[str] = None) -> list[ConversationRecord]:
        """Logged turns, oldest first, optionally limited to one session."""
        with self._lock:
            records = list(self._history)
        if session_id is None:
            return records
        return [r for r in records if r.session_id == session_id]

    def _record(
        self,
        message: str,
        response: Response,
        intent: IntentResult,
        entities: list[Entity],
        session_id: str,
    ) -> None:
        record = ConversationRecord(
            timestamp=datetime.now(timezone.utc),
            session_id=session_id,
            user_message=message,
            bot_response=response.text,
            intent=intent.name.value,
            confidence=intent.confidence,
            entities=[
                EntityRecord(type=e.type.value, value=e.value, confidence=e.confidence)
                for e in entities
            ],
        )
        with self._lock:
            self._history.append(record)

    def _learn(self, message: str, intent: IntentResult) -> None:
        """Reinforce the keyword table with a confidently classified message."""
        if not self.learning_enabled or intent.name is Intent.UNKNOWN:
            return
        if intent.confidence <= settings.nlu.learning_min_confidence:
            return
        with self._lock:
            current = self._classifier.table
            table = current.reinforce(normalize_utterance(message), intent.name)
            if table.keywords[intent.name] != current.keywords[intent.name]:
                self._classifier = self._classifier.retrain(table)
