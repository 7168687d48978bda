"""Response models for categorization results."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchResult(BaseModel):
    """The winning pattern occurrence."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Category of the matched pattern")
    pattern: str = Field(..., description="Matched slice of the input text")
    start: int = Field(..., ge=0, description="Index of the first matched character")
    end: int = Field(..., ge=0, description="Index one past the last matched character")
    length: int = Field(..., ge=1, description="Pattern length in characters")


class CategorizationResponse(BaseModel):
    """Response for a categorization query."""

    text_length: int = Field(..., ge=0, description="Length of the scanned text")
    category: Optional[str] = Field(None, description="Category of the longest match, if any")
    match: Optional[MatchResult] = Field(None, description="The longest match, if any")
    total_matches: int = Field(..., ge=0, description="Number of pattern occurrences found")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class AutomatonStats(BaseModel):
    """Size statistics of a compiled automaton."""

    model_config = ConfigDict(frozen=True)

    total_nodes: int = Field(..., ge=1, description="Number of trie nodes, root included")
    total_patterns: int = Field(..., ge=0, description="Number of distinct patterns")
    max_depth: int = Field(..., ge=0, description="Length of the longest pattern")
    case_sensitive: bool = Field(..., description="Whether matching is case sensitive")
