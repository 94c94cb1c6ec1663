"""
Keyword-overlap intent classifier.

Scores an utterance against every intent's keyword phrases:
    - whole phrase found in the utterance      -> +3 per word in the phrase
    - utterance token (>2 chars) inside phrase -> +1
Very short greetings and farewells are pinned to a score of 100.

The highest score wins; ties go to the intent declared first in the
keyword table. Confidence is a step function of the winning score.

Usage:
    classifier = IntentClassifier()
    result = classifier.classify("hello")
    assert result.name == Intent.GREETING and result.confidence == 0.95
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from carbon_assistant.config import settings
from carbon_assistant.conversation.intents import DEFAULT_KEYWORD_TABLE, Intent, KeywordTable
from carbon_assistant.utils import clamp_confidence

logger = logging.getLogger(__name__)

# Scoring constants
PHRASE_WORD_WEIGHT = 3
TOKEN_MATCH_WEIGHT = 1
MIN_TOKEN_LENGTH = 3
SHORT_UTTERANCE_TOKENS = 2
PINNED_SCORE = 100

GREETING_WORDS = frozenset({"hello", "hi", "hey", "sup", "howdy"})
FAREWELL_WORDS = frozenset({"bye", "goodbye", "thanks", "thank"})


@dataclass(frozen=True)
class IntentResult:
    """Outcome of classifying one utterance."""

    name: Intent
    confidence: float
    scores: dict[str, int] = field(default_factory=dict)

    @property
    def top_score(self) -> int:
        return max(self.scores.values(), default=0)


def confidence_for_score(score: int) -> float:
    """Map a winning keyword score to a heuristic confidence."""
    if score >= PINNED_SCORE:
        confidence = 0.95
    elif score > 5:
        confidence = min(0.9, 0.7 + score * 0.02)
    elif score > 0:
        confidence = min(0.7, 0.4 + score * 0.1)
    else:
        confidence = 0.2
    return clamp_confidence(confidence)


class IntentClassifier:
    """Pure keyword classifier bound to one immutable keyword table."""

    def __init__(
        self,
        table: KeywordTable = DEFAULT_KEYWORD_TABLE,
        unknown_threshold: Optional[float] = None,
    ) -> None:
        self._table = table
        self._unknown_threshold = (
            settings.nlu.unknown_confidence_threshold
            if unknown_threshold is None
            else unknown_threshold
        )

    @property
    def table(self) -> KeywordTable:
        return self._table

    def retrain(self, table: KeywordTable) -> "IntentClassifier":
        """Return a new classifier using ``table``; this instance is unchanged."""
        logger.info(
            "Classifier retrained: keyword table v%d -> v%d",
            self._table.version, table.version,
        )
        return IntentClassifier(table, unknown_threshold=self._unknown_threshold)

    def score(self, utterance: str) -> dict[str, int]:
        """Raw keyword-overlap score for every intent in the table."""
        text = utterance.lower().strip()
        tokens = text.split()
        scores = {intent.value: 0 for intent in self._table.intents()}

        if tokens and len(tokens) <= SHORT_UTTERANCE_TOKENS:
            first = tokens[0]
            if first in GREETING_WORDS:
                scores[Intent.GREETING.value] = PINNED_SCORE
            if first in FAREWELL_WORDS:
                scores[Intent.GOODBYE.value] = PINNED_SCORE

        long_tokens = [t for t in tokens if len(t) >= MIN_TOKEN_LENGTH]
        for intent, keywords in self._table.keywords.items():
            for keyword in keywords:
                if keyword in text:
                    scores[intent.value] += len(keyword.split(" ")) * PHRASE_WORD_WEIGHT
                for token in long_tokens:
                    if token in keyword:
                        scores[intent.value] += TOKEN_MATCH_WEIGHT

        return scores

    def classify(self, utterance: str) -> IntentResult:
        """Classify an utterance into one intent with a heuristic confidence."""
        scores = self.score(utterance)

        best_name, best_score = Intent.UNKNOWN.value, 0
        for name, value in scores.items():
            if value > best_score:
                best_name, best_score = name, value

        confidence = confidence_for_score(best_score)
        if best_score == 0 or confidence < self._unknown_threshold:
            intent = Intent.UNKNOWN
        else:
            intent = Intent(best_name)

        logger.debug(
            "Classified %r as '%s' (score=%d, confidence=%.2f)",
            utterance[:80], intent.value, best_score, confidence,
        )
        return IntentResult(name=intent, confidence=confidence, scores=scores)
