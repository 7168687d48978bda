"""Shared default classifier built from settings."""

from functools import lru_cache

from .config import get_settings
from .core.classifier import LabelMaker
from .exceptions import PatternFileError


@lru_cache()
def get_default_classifier() -> LabelMaker:
    """
    Build the classifier configured by ``LABEL_MAKER_PATTERNS_FILE`` once.

    Raises:
        PatternFileError: No patterns file is configured, or it cannot be loaded
    """
    settings = get_settings()
    if not settings.patterns_file:
        raise PatternFileError("No patterns file configured (LABEL_MAKER_PATTERNS_FILE)")
    return LabelMaker.from_file(
        settings.patterns_file,
        case_sensitive=settings.case_sensitive,
        duplicate_policy=settings.duplicate_policy,
    )
