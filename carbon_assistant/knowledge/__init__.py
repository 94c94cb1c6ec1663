from carbon_assistant.knowledge.footprint import (
    FootprintEstimate,
    estimate_footprint,
    estimate_from_entities,
)
from carbon_assistant.knowledge.knowledge_base import CarbonKnowledgeBase

__all__ = [
    "CarbonKnowledgeBase", "FootprintEstimate", "estimate_footprint", "estimate_from_entities",
]
