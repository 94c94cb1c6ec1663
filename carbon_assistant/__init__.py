"""Rule-based carbon accounting chat assistant."""

__version__ = "1.0.0"
