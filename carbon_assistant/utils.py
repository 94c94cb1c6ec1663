"""Shared utilities used across the carbon assistant."""

import re

_STRIP_PATTERN = re.compile(r"[^\w\s.-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def normalize_utterance(message: str) -> str:
    """Lowercase a message and replace punctuation (except '.' and '-') with spaces.

    Examples:
        >>> normalize_utterance("  Hello,   World! ")
        'hello world'
        >>> normalize_utterance("Scope-3 e.g. travel?")
        'scope-3 e.g. travel'
    """
    cleaned = _STRIP_PATTERN.sub(" ", message.lower().strip())
    return _WHITESPACE.sub(" ", cleaned).strip()


def parse_quantity(value: str) -> float:
    """Parse a captured numeric string such as '50,000' or '12.5'.

    Raises:
        ValueError: If the value is not a number once thousands separators are removed.
    """
    return float(value.replace(",", "").strip())


def clamp_confidence(value: float) -> float:
    """Clamp a heuristic confidence score into [0, 1]."""
    return max(0.0, min(1.0, value))
