"""Shared test fixtures and helpers."""

import random

import pytest

from carbon_assistant.chatbot import CarbonChatbot
from carbon_assistant.conversation.classifier import IntentClassifier, IntentResult
from carbon_assistant.conversation.context_store import ContextStore
from carbon_assistant.conversation.dispatcher import ResponseDispatcher
from carbon_assistant.conversation.entities import Entity, EntityExtractor, EntityType
from carbon_assistant.conversation.intents import Intent
from carbon_assistant.knowledge.knowledge_base import CarbonKnowledgeBase


class FakeClock:
    """Manually advanced monotonic clock for eviction tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def classifier():
    return IntentClassifier()


@pytest.fixture
def extractor():
    return EntityExtractor()


@pytest.fixture
def knowledge_base():
    return CarbonKnowledgeBase()


@pytest.fixture
def context_store(clock):
    return ContextStore(
        max_intents=10, max_entities=20, max_sessions=100, ttl_seconds=3600, clock=clock
    )


@pytest.fixture
def dispatcher(knowledge_base, context_store):
    return ResponseDispatcher(knowledge_base, context_store, rng=random.Random(7))


@pytest.fixture
def chatbot(context_store):
    return CarbonChatbot(context_store=context_store, rng=random.Random(7))


def make_intent(name: Intent, confidence: float = 0.9) -> IntentResult:
    """Helper to create an IntentResult without running the classifier."""
    return IntentResult(name=name, confidence=confidence, scores={})


def make_entity(entity_type: EntityType, value: str, confidence: float = 0.9) -> Entity:
    return Entity(type=entity_type, value=value, confidence=confidence)
