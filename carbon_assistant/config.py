"""
Centralized configuration with environment variable overrides.

Classifier thresholds, context-window sizes, session eviction limits and
evaluation targets are all configurable here. Nothing is hardcoded in the
classifier, dispatcher, or context store.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from carbon_assistant.logging_context import SessionIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag from an env var (true/false, yes/no, 1/0, on/off)."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class AssistantConfig:
    """Identity and bookkeeping for the chat assistant."""

    name: str = os.getenv("ASSISTANT_NAME", "EcoLeaf Analytics")
    default_session_id: str = os.getenv("DEFAULT_SESSION_ID", "default")
    conversation_log_size: int = _safe_int("CONVERSATION_LOG_SIZE", "500")


@dataclass(frozen=True)
class NLUConfig:
    """Intent classification, entity extraction and fallback settings."""

    unknown_confidence_threshold: float = _safe_float("UNKNOWN_CONFIDENCE_THRESHOLD", "0.3")
    entity_confidence: float = _safe_float("ENTITY_CONFIDENCE", "0.9")
    fallback_confidence: float = _safe_float("FALLBACK_CONFIDENCE", "0.5")
    learning_enabled: bool = _safe_bool("LEARNING_ENABLED", "false")
    learning_min_confidence: float = _safe_float("LEARNING_MIN_CONFIDENCE", "0.8")


@dataclass(frozen=True)
class ContextConfig:
    """Per-session history windows and session eviction limits."""

    max_intent_history: int = _safe_int("MAX_INTENT_HISTORY", "10")
    max_entity_history: int = _safe_int("MAX_ENTITY_HISTORY", "20")
    max_sessions: int = _safe_int("MAX_SESSIONS", "1000")
    session_ttl_seconds: float = _safe_float("SESSION_TTL_SECONDS", "3600")


@dataclass(frozen=True)
class EvalConfig:
    """Classifier evaluation targets."""

    target_accuracy: float = _safe_float("TARGET_ACCURACY", "0.80")
    target_unknown_rate: float = _safe_float("TARGET_UNKNOWN_RATE", "0.15")
    target_avg_confidence: float = _safe_float("TARGET_AVG_CONFIDENCE", "0.70")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    assistant: AssistantConfig = field(default_factory=AssistantConfig)
    nlu: NLUConfig = field(default_factory=NLUConfig)
    context: ContextConfig = field(default_factory=ContextConfig)
    evaluation: EvalConfig = field(default_factory=EvalConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    for rate_name, rate_value in [
        ("UNKNOWN_CONFIDENCE_THRESHOLD", config.nlu.unknown_confidence_threshold),
        ("ENTITY_CONFIDENCE", config.nlu.entity_confidence),
        ("FALLBACK_CONFIDENCE", config.nlu.fallback_confidence),
        ("LEARNING_MIN_CONFIDENCE", config.nlu.learning_min_confidence),
        ("TARGET_ACCURACY", config.evaluation.target_accuracy),
        ("TARGET_UNKNOWN_RATE", config.evaluation.target_unknown_rate),
        ("TARGET_AVG_CONFIDENCE", config.evaluation.target_avg_confidence),
    ]:
        if not 0.0 <= rate_value <= 1.0:
            raise ValueError(f"{rate_name} must be between 0.0 and 1.0, got {rate_value}")

    if config.context.max_intent_history < 1:
        raise ValueError(
            f"MAX_INTENT_HISTORY must be >= 1, got {config.context.max_intent_history}"
        )
    if config.context.max_entity_history < 1:
        raise ValueError(
            f"MAX_ENTITY_HISTORY must be >= 1, got {config.context.max_entity_history}"
        )
    if config.context.max_sessions < 1:
        raise ValueError(f"MAX_SESSIONS must be >= 1, got {config.context.max_sessions}")
    if config.context.session_ttl_seconds <= 0:
        raise ValueError(
            f"SESSION_TTL_SECONDS must be > 0, got {config.context.session_ttl_seconds}"
        )
    if config.assistant.conversation_log_size < 1:
        raise ValueError(
            "CONVERSATION_LOG_SIZE must be >= 1, "
            f"got {config.assistant.conversation_log_size}"
        )


LOG_FORMAT = "%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _log_handler() -> logging.Handler:
    """Console handler whose records always carry a session_id."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler.addFilter(SessionIdFilter())
    return handler


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.assistant.name)
    return config


# Singleton instance
settings = load_config()
