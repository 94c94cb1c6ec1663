from carbon_assistant.evaluation.metrics import (
    ClassificationMetrics,
    ClassifierEvaluator,
    LabelledUtterance,
    load_dataset,
)

__all__ = ["ClassifierEvaluator", "ClassificationMetrics", "LabelledUtterance", "load_dataset"]
