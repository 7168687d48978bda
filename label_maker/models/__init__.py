"""Data models for the label maker."""

from .response import AutomatonStats, CategorizationResponse, MatchResult

__all__ = [
    "AutomatonStats",
    "CategorizationResponse",
    "MatchResult",
]
