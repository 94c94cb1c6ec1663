"""
Classification quality metrics over a labelled utterance set.

Each example is run through the same normalize -> classify -> extract path
the chatbot uses, and compared against its expected intent and entities.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from carbon_assistant.config import settings
from carbon_assistant.conversation.classifier import IntentClassifier
from carbon_assistant.conversation.entities import EntityExtractor
from carbon_assistant.conversation.intents import Intent
from carbon_assistant.utils import normalize_utterance

logger = logging.getLogger(__name__)

# Predictions below this confidence count as low-confidence
LOW_CONFIDENCE_THRESHOLD = 0.5


class LabelledUtterance(BaseModel):
    """One evaluation example: text plus the expected classification."""

    text: str
    expected_intent: Intent
    expected_entities: dict[str, str] = Field(default_factory=dict)


@dataclass
class Misclassification:
    text: str
    expected: Intent
    predicted: Intent
    confidence: float


@dataclass
class ClassificationMetrics:
    """Aggregate results for one evaluation run."""

    total: int = 0
    accuracy: float = 0.0
    unknown_rate: float = 0.0
    avg_confidence: float = 0.0
    low_confidence_rate: float = 0.0
    entity_recall: float = 0.0
    per_intent_accuracy: dict[str, float] = field(default_factory=dict)
    misclassified: list[Misclassification] = field(default_factory=list)

    @property
    def meets_targets(self) -> bool:
        targets = settings.evaluation
        return (
            self.accuracy >= targets.target_accuracy
            and self.unknown_rate <= targets.target_unknown_rate
            and self.avg_confidence >= targets.target_avg_confidence
        )


def load_dataset(path: Path) -> list[LabelledUtterance]:
    """Load a JSON list of labelled utterances."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Dataset {path} must contain a JSON list, got {type(data).__name__}")
    return [LabelledUtterance(**item) for item in data]


class ClassifierEvaluator:
    """Scores a classifier and extractor against labelled examples."""

    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[EntityExtractor] = None,
    ) -> None:
        self.classifier = classifier or IntentClassifier()
        self.extractor = extractor or EntityExtractor()

    def evaluate(self, examples: list[LabelledUtterance]) -> ClassificationMetrics:
        if not examples:
            return ClassificationMetrics()

        metrics = ClassificationMetrics(total=len(examples))
        correct = unknown = low_confidence = 0
        confidence_sum = 0.0
        expected_entity_count = found_entity_count = 0
        per_intent: dict[str, list[int]] = {}

        for example in examples:
            result = self.classifier.classify(normalize_utterance(example.text))
            extracted = {e.type.value: e.value for e in self.extractor.extract(example.text)}

            hit = result.name == example.expected_intent
            correct += hit
            unknown += result.name is Intent.UNKNOWN
            low_confidence += result.confidence < LOW_CONFIDENCE_THRESHOLD
            confidence_sum += result.confidence

            tally = per_intent.setdefault(example.expected_intent.value, [0, 0])
            tally[0] += hit
            tally[1] += 1

            if not hit:
                metrics.misclassified.append(Misclassification(
                    text=example.text,
                    expected=example.expected_intent,
                    predicted=result.name,
                    confidence=result.confidence,
                ))

            for entity_type, value in example.expected_entities.items():
                expected_entity_count += 1
                if extracted.get(entity_type) == value:
                    found_entity_count += 1

        n = len(examples)
        metrics.accuracy = correct / n
        metrics.unknown_rate = unknown / n
        metrics.low_confidence_rate = low_confidence / n
        metrics.avg_confidence = confidence_sum / n
        metrics.entity_recall = (
            found_entity_count / expected_entity_count if expected_entity_count else 1.0
        )
        metrics.per_intent_accuracy = {
            intent: hits / seen for intent, (hits, seen) in sorted(per_intent.items())
        }

        logger.info(
            "Evaluated %d example(s): accuracy=%.1f%%, unknown=%.1f%%",
            n, metrics.accuracy * 100, metrics.unknown_rate * 100,
        )
        return metrics

    def format_report(self, metrics: ClassificationMetrics, verbose: bool = False) -> str:
        """Format metrics into a human-readable report."""
        targets = settings.evaluation

        lines = [
            "=" * 60,
            "INTENT CLASSIFIER EVALUATION REPORT",
            "=" * 60,
            "",
            f"Examples evaluated:     {metrics.total}",
            "",
            "CLASSIFICATION",
            f"  Accuracy:             {metrics.accuracy:.1%}  (target: {targets.target_accuracy:.0%})",
            f"  Unknown rate:         {metrics.unknown_rate:.1%}  (target: <{targets.target_unknown_rate:.0%})",
            f"  Avg confidence:       {metrics.avg_confidence:.2f}  (target: {targets.target_avg_confidence:.2f})",
            f"  Low-confidence rate:  {metrics.low_confidence_rate:.1%}",
            "",
            "ENTITIES",
            f"  Entity recall:        {metrics.entity_recall:.1%}",
            "",
            "PER-INTENT ACCURACY",
        ]
        for intent, accuracy in metrics.per_intent_accuracy.items():
            lines.append(f"  {intent:<24}{accuracy:.1%}")

        if verbose and metrics.misclassified:
            lines.extend(["", "MISCLASSIFIED"])
            for miss in metrics.misclassified:
                lines.append(
                    f"  {miss.text!r}: expected {miss.expected.value}, "
                    f"got {miss.predicted.value} ({miss.confidence:.2f})"
                )

        lines.extend([
            "",
            f"Targets met: {'YES' if metrics.meets_targets else 'NO'}",
            "=" * 60,
        ])
        return "\n".join(lines)
