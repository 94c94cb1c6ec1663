from carbon_assistant.conversation.classifier import IntentClassifier, IntentResult
from carbon_assistant.conversation.context_store import ContextStore, SessionContext
from carbon_assistant.conversation.dispatcher import ResponseDispatcher
from carbon_assistant.conversation.entities import Entity, EntityExtractor, EntityType
from carbon_assistant.conversation.intents import DEFAULT_KEYWORD_TABLE, Intent, KeywordTable

__all__ = [
    "IntentClassifier", "IntentResult", "Intent", "KeywordTable", "DEFAULT_KEYWORD_TABLE",
    "EntityExtractor", "Entity", "EntityType",
    "ContextStore", "SessionContext", "ResponseDispatcher",
]
