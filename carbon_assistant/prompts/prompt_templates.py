"""Dynamic response construction from entities and session context."""

from carbon_assistant.prompts.response_templates import PERSONALIZED_INTRO, SOURCE_TIPS


def build_calculation_text(mentioned: list[str], missing: list[str]) -> str:
    """Acknowledge the supplied calculation fields and ask for the rest."""
    text = (
        "I can help you calculate your carbon footprint! "
        f"I see you mentioned {', '.join(mentioned)}."
    )
    if missing:
        text += f" To get an accurate calculation, I'll also need: {', '.join(missing)}."
    else:
        text += " That covers every input the calculator needs."
    return text + " You can use our calculator above or tell me the values here."


def build_recommendation_text(industry: str, recommendations: list[str]) -> str:
    """Render a recommendation list for an industry ('general' reads as 'your business')."""
    subject = "your business" if industry == "general" else industry
    body = "\n\n".join(recommendations)
    return f"Here are personalized recommendations for {subject}:\n\n{body}"


def personalize_recommendations(recommendations: list[str], sources: list[str]) -> list[str]:
    """Prefix the list with the personal note and tips for the sources the user reported."""
    tips = [SOURCE_TIPS[s] for s in sources if s in SOURCE_TIPS]
    return [PERSONALIZED_INTRO, *tips, *recommendations]


def build_reduction_text(target_reduction: int, roadmap: str) -> str:
    return f"Here's a strategic roadmap for achieving {target_reduction}% reduction:\n\n{roadmap}"
