"""Tests for intent -> response dispatch."""

import random

import pytest

from carbon_assistant.conversation.dispatcher import ResponseDispatcher
from carbon_assistant.conversation.entities import EntityType
from carbon_assistant.conversation.intents import Intent
from carbon_assistant.prompts import response_templates as templates
from carbon_assistant.schemas.conversation_schema import Response
from tests.conftest import make_entity, make_intent


def _dispatch(dispatcher, intent: Intent, entities=(), session_id: str = "s1") -> Response:
    return dispatcher.generate_response(make_intent(intent), list(entities), session_id)


class TestExhaustiveness:
    @pytest.mark.parametrize("intent", list(Intent))
    def test_every_intent_produces_a_response(self, dispatcher, intent):
        response = _dispatch(dispatcher, intent)
        assert isinstance(response, Response)
        assert response.text
        assert 0.0 <= response.confidence <= 1.0

    def test_missing_handler_rejected_at_construction(self, knowledge_base, context_store):
        class PartialDispatcher(ResponseDispatcher):
            HANDLERS = {
                k: v for k, v in ResponseDispatcher.HANDLERS.items() if k != Intent.GOODBYE
            }

        with pytest.raises(RuntimeError, match="goodbye"):
            PartialDispatcher(knowledge_base, context_store)


class TestTemplatedResponses:
    def test_greeting(self, dispatcher):
        response = _dispatch(dispatcher, Intent.GREETING)
        assert response.text in templates.GREETINGS
        assert response.suggestions == templates.GREETING_SUGGESTIONS
        assert len(response.suggestions) == 4
        assert response.confidence == pytest.approx(0.95)

    def test_goodbye_has_no_suggestions(self, dispatcher):
        response = _dispatch(dispatcher, Intent.GOODBYE)
        assert response.text in templates.GOODBYES
        assert response.suggestions == []
        assert response.confidence == pytest.approx(0.95)

    def test_unknown_uses_fallback(self, dispatcher):
        response = _dispatch(dispatcher, Intent.UNKNOWN)
        assert response.text in templates.FALLBACKS
        assert response.suggestions == templates.FALLBACK_SUGGESTIONS
        assert response.confidence == pytest.approx(0.5)
        assert response.data is None

    def test_seeded_rng_is_reproducible(self, knowledge_base, context_store):
        first = ResponseDispatcher(knowledge_base, context_store, rng=random.Random(3))
        second = ResponseDispatcher(knowledge_base, context_store, rng=random.Random(3))
        texts_a = [_dispatch(first, Intent.GREETING).text for _ in range(5)]
        texts_b = [_dispatch(second, Intent.GREETING).text for _ in range(5)]
        assert texts_a == texts_b


class TestCarbonCalculation:
    def test_partial_data(self, dispatcher):
        response = _dispatch(dispatcher, Intent.CALCULATE_CARBON, [
            make_entity(EntityType.ENERGY, "50000"),
            make_entity(EntityType.EMPLOYEES, "20"),
            make_entity(EntityType.INDUSTRY, "retail"),
        ])
        assert response.confidence == pytest.approx(0.9)
        assert response.data["mentioned_fields"] == ["energy", "employees"]
        assert response.data["missing_fields"] == ["fuel", "travel", "waste"]
        assert "energy, employees" in response.text
        assert "fuel, travel, waste" in response.text

    def test_partial_estimate_attached(self, dispatcher):
        response = _dispatch(dispatcher, Intent.CALCULATE_CARBON, [
            make_entity(EntityType.ENERGY, "50000"),
            make_entity(EntityType.EMPLOYEES, "20"),
        ])
        estimate = response.data["estimate"]
        assert estimate["scope2_kg"] == pytest.approx(23750.0)
        assert estimate["scope3_kg"] == pytest.approx(24000.0)
        assert estimate["total_tonnes"] == pytest.approx(47.75)
        assert estimate["emissions_per_employee"] == pytest.approx(2.39)
        assert estimate["benchmark_category"] == "Good"

    def test_complete_data(self, dispatcher):
        entities = [
            make_entity(t, "1")
            for t in (EntityType.ENERGY, EntityType.FUEL, EntityType.EMPLOYEES,
                      EntityType.TRAVEL, EntityType.WASTE)
        ]
        response = _dispatch(dispatcher, Intent.CALCULATE_CARBON, entities)
        assert response.data["missing_fields"] == []
        assert "every input" in response.text

    def test_no_data_returns_generic_prompt(self, dispatcher):
        response = _dispatch(dispatcher, Intent.CALCULATE_CARBON)
        assert response.text == templates.CALCULATION_PROMPT
        assert response.confidence == pytest.approx(0.85)
        assert response.data is None


class TestRecommendations:
    def test_generic_business(self, dispatcher):
        response = _dispatch(dispatcher, Intent.GET_RECOMMENDATIONS)
        assert "recommendations for your business" in response.text
        assert response.confidence == pytest.approx(0.92)
        assert response.data["industry"] == "general"
        assert response.data["emission_level"] == "medium"
        assert response.data["personalized"] is False

    def test_industry_entity(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.RECOMMENDATIONS, [make_entity(EntityType.INDUSTRY, "technology")]
        )
        assert "recommendations for technology" in response.text
        assert response.data["recommendations"][0].startswith("☁️")

    def test_personalized_after_calculation(self, dispatcher, context_store):
        context_store.update(
            make_intent(Intent.CALCULATE_CARBON),
            [make_entity(EntityType.ENERGY, "50000"), make_entity(EntityType.EMPLOYEES, "20")],
            "s1",
        )
        response = _dispatch(dispatcher, Intent.GET_RECOMMENDATIONS)
        recommendations = response.data["recommendations"]

        assert response.data["personalized"] is True
        assert recommendations[0] == templates.PERSONALIZED_INTRO
        assert recommendations[1] == templates.SOURCE_TIPS["energy"]
        assert recommendations[2] == templates.SOURCE_TIPS["employees"]
        assert templates.SOURCE_TIPS["fuel"] not in recommendations

    def test_personalized_without_reported_sources(self, dispatcher, context_store):
        context_store.update(make_intent(Intent.CALCULATE_CARBON), [], "s1")
        response = _dispatch(dispatcher, Intent.GET_RECOMMENDATIONS)
        recommendations = response.data["recommendations"]

        assert response.data["personalized"] is True
        assert recommendations[0] == templates.PERSONALIZED_INTRO
        assert not set(templates.SOURCE_TIPS.values()) & set(recommendations)

    def test_not_personalized_after_other_intent(self, dispatcher, context_store):
        context_store.update(
            make_intent(Intent.GREETING), [make_entity(EntityType.ENERGY, "50000")], "s1"
        )
        response = _dispatch(dispatcher, Intent.GET_RECOMMENDATIONS)
        assert response.data["personalized"] is False
        assert templates.PERSONALIZED_INTRO not in response.data["recommendations"]

    def test_dispatch_does_not_touch_context(self, dispatcher, context_store):
        context_store.update(make_intent(Intent.CALCULATE_CARBON), [], "s1")
        _dispatch(dispatcher, Intent.GET_RECOMMENDATIONS)
        context = context_store.get("s1")
        assert len(context.intents) == 1
        assert context.last_action == Intent.CALCULATE_CARBON


class TestKnowledgeLookups:
    def test_concept_explanation(self, dispatcher):
        response = _dispatch(dispatcher, Intent.EXPLAIN_CONCEPT)
        assert response.text.startswith("A carbon footprint is")
        assert response.confidence == pytest.approx(0.95)
        assert "Learn about scope 1" in response.suggestions
        assert response.data["concept"] == "carbon_footprint"

    def test_compliance(self, dispatcher):
        response = _dispatch(dispatcher, Intent.COMPLIANCE_STANDARDS)
        assert "GHG Protocol" in response.text
        assert response.suggestions == templates.COMPLIANCE_SUGGESTIONS
        assert response.confidence == pytest.approx(0.90)
        assert response.data == {"standard": "ghg_protocol", "region": "global"}

    def test_industry_overview_without_entity(self, dispatcher):
        response = _dispatch(dispatcher, Intent.INDUSTRY_SPECIFIC)
        assert response.text.startswith(templates.INDUSTRY_INTRO)
        assert response.confidence == pytest.approx(0.87)
        assert response.data is None

    def test_industry_insight_with_entity(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.INDUSTRY_SPECIFIC, [make_entity(EntityType.INDUSTRY, "Manufacturing")]
        )
        assert response.text.startswith(templates.INDUSTRY_ADVICE["manufacturing"])
        assert "Manufacturing has high direct emissions" in response.text
        assert response.confidence == pytest.approx(0.88)
        assert response.data["industry"] == "manufacturing"

    def test_unlisted_industry_falls_back_to_technology_insight(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.INDUSTRY_SPECIFIC, [make_entity(EntityType.INDUSTRY, "aviation")]
        )
        assert response.text.startswith("Tech companies typically")


class TestInterpolatedValues:
    def test_reduction_default_target(self, dispatcher):
        response = _dispatch(dispatcher, Intent.REDUCTION_STRATEGIES)
        assert "achieving 50% reduction" in response.text
        assert response.confidence == pytest.approx(0.87)
        assert response.data["target_reduction"] == 50
        assert response.data["timeframe"] == "5_years"
        assert response.suggestions == response.data["strategies"]["next_steps"]

    def test_reduction_target_from_percentage(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.REDUCTION_STRATEGIES, [make_entity(EntityType.PERCENTAGE, "30")]
        )
        assert "achieving 30% reduction" in response.text

    def test_fractional_target_truncated(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.REDUCTION_STRATEGIES, [make_entity(EntityType.PERCENTAGE, "12.5")]
        )
        assert response.data["target_reduction"] == 12

    def test_unusable_target_uses_default(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.REDUCTION_STRATEGIES, [make_entity(EntityType.PERCENTAGE, "lots")]
        )
        assert response.data["target_reduction"] == 50

    def test_cost_analysis_timeframe(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.COST_ANALYSIS, [make_entity(EntityType.TIMEFRAME, "3")]
        )
        assert "within 3 years" in response.text
        assert response.confidence == pytest.approx(0.85)
        assert response.data["roi"] == "15-25% annually"

    def test_cost_analysis_month_timeframe(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.COST_ANALYSIS, [make_entity(EntityType.TIMEFRAME, "6 months")]
        )
        assert "within 6 months" in response.text
        assert "6 years" not in response.text


class TestStaticResponses:
    @pytest.mark.parametrize("intent,confidence", [
        (Intent.BASIC_CONCEPTS, 0.9),
        (Intent.CALCULATOR_USAGE, 0.95),
        (Intent.INDUSTRY_BENCHMARKS, 0.88),
        (Intent.ADVANCED_ANALYTICS, 0.92),
        (Intent.AI_ML_FEATURES, 0.95),
        (Intent.REPORTING_TRACKING, 0.90),
        (Intent.GENERAL_INFO, 0.88),
    ])
    def test_fixed_confidence(self, dispatcher, intent, confidence):
        response = _dispatch(dispatcher, intent)
        assert response.confidence == pytest.approx(confidence)
        assert len(response.suggestions) == 4

    def test_calculator_usage_defaults_to_energy_guide(self, dispatcher):
        response = _dispatch(dispatcher, Intent.CALCULATOR_USAGE)
        assert templates.CALCULATOR_USAGE_GUIDES["energy"] in response.text

    def test_calculator_usage_follows_mentioned_source(self, dispatcher):
        response = _dispatch(
            dispatcher, Intent.CALCULATOR_USAGE, [make_entity(EntityType.TRAVEL, "300")]
        )
        assert templates.CALCULATOR_USAGE_GUIDES["travel"] in response.text

    def test_general_info_names_the_assistant(self, dispatcher):
        from carbon_assistant.config import settings

        response = _dispatch(dispatcher, Intent.GENERAL_INFO)
        assert settings.assistant.name in response.text
