"""
Intent -> response dispatch.

Every Intent member is routed to exactly one handler. The routing table is
checked when the dispatcher is built, so an intent added to the enum
without a handler fails loudly at startup instead of silently falling
through at runtime.

Handlers read this turn's entities and a snapshot of the session context
taken *before* the turn is recorded. They never mutate either.

Usage:
    dispatcher = ResponseDispatcher(CarbonKnowledgeBase(), ContextStore())
    response = dispatcher.generate_response(result, entities, "web-42")
"""

import random
from dataclasses import asdict
from typing import Callable, Iterable, Optional

from carbon_assistant.config import settings
from carbon_assistant.conversation.classifier import IntentResult
from carbon_assistant.conversation.context_store import ContextStore, SessionContext
from carbon_assistant.conversation.entities import (
    CALCULATION_FIELDS,
    Entity,
    EntityType,
    find_entity,
)
from carbon_assistant.conversation.intents import Intent
from carbon_assistant.knowledge.footprint import estimate_from_entities
from carbon_assistant.knowledge.knowledge_base import CarbonKnowledgeBase
from carbon_assistant.logging_context import get_session_logger
from carbon_assistant.prompts import response_templates as templates
from carbon_assistant.prompts.prompt_templates import (
    build_calculation_text,
    build_recommendation_text,
    build_reduction_text,
    personalize_recommendations,
)
from carbon_assistant.schemas.conversation_schema import Response

logger = get_session_logger(__name__)

# Defaults used when the utterance carries no matching entity
DEFAULT_INDUSTRY = "general"
DEFAULT_EMISSION_LEVEL = "medium"
DEFAULT_CONCEPT = "carbon_footprint"
DEFAULT_QUESTION_TYPE = "general"
DEFAULT_STANDARD = "ghg_protocol"
DEFAULT_REGION = "global"
DEFAULT_ANALYSIS_TYPE = "cost_benefit"
DEFAULT_TIMEFRAME = "5_years"
DEFAULT_TARGET_REDUCTION = 50

Handler = Callable[[list[Entity], SessionContext], Response]


def _entity_value(entities: list[Entity], entity_type: EntityType, default: str) -> str:
    entity = find_entity(entities, entity_type)
    return entity.value if entity else default


def _target_reduction(entities: list[Entity]) -> int:
    entity = find_entity(entities, EntityType.PERCENTAGE)
    if entity is None:
        return DEFAULT_TARGET_REDUCTION
    try:
        return int(float(entity.value))
    except ValueError:
        logger.warning("Unusable reduction target %r, using default", entity.value)
        return DEFAULT_TARGET_REDUCTION


def _reported_sources(entities: list[Entity]) -> list[str]:
    """Calculation fields present in ``entities``, in calculator order."""
    seen = {e.type for e in entities}
    return [f.value for f in CALCULATION_FIELDS if f in seen]


class ResponseDispatcher:
    """Routes a classified intent to its response handler."""

    HANDLERS: dict[Intent, str] = {
        Intent.GREETING: "_handle_greeting",
        Intent.GOODBYE: "_handle_goodbye",
        Intent.BASIC_CONCEPTS: "_handle_basic_concepts",
        Intent.CALCULATOR_USAGE: "_handle_calculator_usage",
        Intent.INDUSTRY_BENCHMARKS: "_handle_industry_benchmarks",
        Intent.RECOMMENDATIONS: "_handle_recommendations",
        Intent.ADVANCED_ANALYTICS: "_handle_advanced_analytics",
        Intent.AI_ML_FEATURES: "_handle_ai_ml_features",
        Intent.REPORTING_TRACKING: "_handle_reporting_tracking",
        Intent.INDUSTRY_SPECIFIC: "_handle_industry_specific",
        Intent.GENERAL_INFO: "_handle_general_info",
        Intent.CALCULATE_CARBON: "_handle_carbon_calculation",
        Intent.GET_RECOMMENDATIONS: "_handle_recommendations",
        Intent.EXPLAIN_CONCEPT: "_handle_concept_explanation",
        Intent.COMPLIANCE_STANDARDS: "_handle_compliance",
        Intent.COST_ANALYSIS: "_handle_cost_analysis",
        Intent.REDUCTION_STRATEGIES: "_handle_reduction_strategies",
        Intent.UNKNOWN: "_handle_unknown",
    }

    def __init__(
        self,
        knowledge_base: CarbonKnowledgeBase,
        context_store: ContextStore,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._kb = knowledge_base
        self._store = context_store
        self._rng = rng or random.Random()
        self._handlers = self._build_handlers()

    def _build_handlers(self) -> dict[Intent, Handler]:
        missing = [i.value for i in Intent if i not in self.HANDLERS]
        if missing:
            raise RuntimeError(f"No response handler for intents: {missing}")
        return {intent: getattr(self, name) for intent, name in self.HANDLERS.items()}

    def generate_response(
        self, intent: IntentResult, entities: Iterable[Entity], session_id: str
    ) -> Response:
        """Build the response for one classified utterance."""
        context = self._store.get(session_id)
        handler = self._handlers[intent.name]
        logger.debug("Dispatching '%s' to %s", intent.name.value, handler.__name__)
        return handler(list(entities), context)

    def fallback_response(self) -> Response:
        """Low-confidence reply used for unknown intents and pipeline errors."""
        return Response(
            text=self._rng.choice(templates.FALLBACKS),
            suggestions=list(templates.FALLBACK_SUGGESTIONS),
            confidence=settings.nlu.fallback_confidence,
            data=None,
        )

    # --- Templated ---

    def _handle_greeting(self, entities: list[Entity], context: SessionContext) -> Response:
        return Response(
            text=self._rng.choice(templates.GREETINGS),
            suggestions=list(templates.GREETING_SUGGESTIONS),
            confidence=0.95,
        )

    def _handle_goodbye(self, entities: list[Entity], context: SessionContext) -> Response:
        return Response(text=self._rng.choice(templates.GOODBYES), suggestions=[], confidence=0.95)

    def _handle_unknown(self, entities: list[Entity], context: SessionContext) -> Response:
        return self.fallback_response()

    # --- Entity-interpolated ---

    def _handle_carbon_calculation(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        mentioned = [e for e in entities if e.type in CALCULATION_FIELDS]
        if not mentioned:
            return Response(
                text=templates.CALCULATION_PROMPT,
                suggestions=list(templates.CALCULATION_SUGGESTIONS),
                confidence=0.85,
                data=None,
            )

        mentioned_fields = [e.type.value for e in mentioned]
        missing_fields = [f.value for f in CALCULATION_FIELDS if f.value not in mentioned_fields]
        estimate = estimate_from_entities(mentioned)
        return Response(
            text=build_calculation_text(mentioned_fields, missing_fields),
            suggestions=list(templates.CALCULATION_SUGGESTIONS),
            confidence=0.9,
            data={
                "has_partial_data": True,
                "mentioned_fields": mentioned_fields,
                "missing_fields": missing_fields,
                "extracted_values": [
                    {"type": e.type.value, "value": e.value, "confidence": e.confidence}
                    for e in mentioned
                ],
                "estimate": estimate.to_dict(),
            },
        )

    def _handle_cost_analysis(self, entities: list[Entity], context: SessionContext) -> Response:
        timeframe = _entity_value(entities, EntityType.TIMEFRAME, DEFAULT_TIMEFRAME)
        cost = self._kb.get_cost_analysis(DEFAULT_ANALYSIS_TYPE, timeframe)
        return Response(
            text=cost.analysis,
            suggestions=list(templates.COST_SUGGESTIONS),
            confidence=0.85,
            data=asdict(cost),
        )

    def _handle_reduction_strategies(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        target = _target_reduction(entities)
        timeframe = _entity_value(entities, EntityType.TIMEFRAME, DEFAULT_TIMEFRAME)
        industry = _entity_value(entities, EntityType.INDUSTRY, DEFAULT_INDUSTRY)
        plan = self._kb.get_reduction_strategies(target, timeframe, industry)
        return Response(
            text=build_reduction_text(target, plan.roadmap),
            suggestions=list(plan.next_steps),
            confidence=0.87,
            data={
                "strategies": asdict(plan),
                "target_reduction": target,
                "timeframe": timeframe,
            },
        )

    # --- Context-personalized ---

    def _handle_recommendations(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        industry = _entity_value(entities, EntityType.INDUSTRY, DEFAULT_INDUSTRY)
        level = DEFAULT_EMISSION_LEVEL
        recommendations = self._kb.get_recommendations(industry, level)

        personalized = context.last_action == Intent.CALCULATE_CARBON
        if personalized:
            recommendations = personalize_recommendations(
                recommendations, _reported_sources(context.entities)
            )
            logger.info("Personalizing recommendations after a footprint calculation")

        return Response(
            text=build_recommendation_text(industry, recommendations),
            suggestions=list(templates.RECOMMENDATION_SUGGESTIONS),
            confidence=0.92,
            data={
                "recommendations": recommendations,
                "industry": industry,
                "emission_level": level,
                "personalized": personalized,
            },
        )

    # --- Knowledge lookups ---

    def _handle_concept_explanation(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        explanation = self._kb.explain_concept(DEFAULT_CONCEPT)
        return Response(
            text=explanation.text,
            suggestions=list(explanation.related_topics),
            confidence=explanation.confidence,
            data={"concept": DEFAULT_CONCEPT, "related_concepts": list(explanation.related)},
        )

    def _handle_compliance(self, entities: list[Entity], context: SessionContext) -> Response:
        info = self._kb.get_compliance_info(DEFAULT_STANDARD, DEFAULT_REGION)
        return Response(
            text=info.information,
            suggestions=list(templates.COMPLIANCE_SUGGESTIONS),
            confidence=0.90,
            data={"standard": DEFAULT_STANDARD, "region": DEFAULT_REGION},
        )

    def _handle_industry_specific(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        industry_entity = find_entity(entities, EntityType.INDUSTRY)
        if industry_entity is None:
            return Response(
                text="\n\n".join(
                    [templates.INDUSTRY_INTRO, *templates.INDUSTRY_ADVICE.values()]
                ),
                suggestions=list(templates.INDUSTRY_SUGGESTIONS),
                confidence=0.87,
            )

        industry = industry_entity.value.lower()
        insight = self._kb.get_industry_insights(industry, DEFAULT_QUESTION_TYPE)
        advice = templates.INDUSTRY_ADVICE.get(industry)
        text = f"{advice}\n\n{insight.answer}" if advice else insight.answer
        return Response(
            text=text,
            suggestions=list(insight.follow_up_questions),
            confidence=0.88,
            data={"industry": industry, "question_type": DEFAULT_QUESTION_TYPE},
        )

    # --- Static ---

    def _handle_basic_concepts(self, entities: list[Entity], context: SessionContext) -> Response:
        return Response(
            text=templates.BASIC_CONCEPT_DEFAULT,
            suggestions=list(templates.BASIC_CONCEPT_SUGGESTIONS),
            confidence=0.9,
        )

    def _handle_calculator_usage(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        sources = _reported_sources(entities) or [EntityType.ENERGY.value]
        guide = templates.CALCULATOR_USAGE_GUIDES[sources[0]]
        return Response(
            text=f"🔧 **Calculator Usage Guide**: {guide}\n\n{templates.CALCULATOR_USAGE_TIP}",
            suggestions=list(templates.CALCULATOR_USAGE_SUGGESTIONS),
            confidence=0.95,
        )

    def _handle_industry_benchmarks(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        return Response(
            text="\n\n".join(
                [templates.BENCHMARK_INTRO, *templates.INDUSTRY_BENCHMARKS.values()]
            ),
            suggestions=list(templates.BENCHMARK_SUGGESTIONS),
            confidence=0.88,
        )

    def _handle_advanced_analytics(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        return Response(
            text=templates.ADVANCED_ANALYTICS_TEXT,
            suggestions=list(templates.ADVANCED_ANALYTICS_SUGGESTIONS),
            confidence=0.92,
        )

    def _handle_ai_ml_features(self, entities: list[Entity], context: SessionContext) -> Response:
        return Response(
            text=templates.AI_ML_FEATURES_TEXT,
            suggestions=list(templates.AI_ML_FEATURES_SUGGESTIONS),
            confidence=0.95,
        )

    def _handle_reporting_tracking(
        self, entities: list[Entity], context: SessionContext
    ) -> Response:
        return Response(
            text=templates.REPORTING_TEXT,
            suggestions=list(templates.REPORTING_SUGGESTIONS),
            confidence=0.90,
        )

    def _handle_general_info(self, entities: list[Entity], context: SessionContext) -> Response:
        return Response(
            text=templates.GENERAL_INFO_TEXT,
            suggestions=list(templates.GENERAL_INFO_SUGGESTIONS),
            confidence=0.88,
        )
