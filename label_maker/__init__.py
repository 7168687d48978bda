"""
Label Maker - categorize text by the longest known pattern it contains.

Patterns are literal substrings, each mapped to a category label. They are
indexed once into an Aho-Corasick automaton, which then scans any number of
texts and reports the category of the longest pattern found.
"""

import logging

__version__ = "1.0.0"

from .core.automaton import Automaton
from .core.classifier import ClassifierState, LabelMaker, build
from .core.scanner import Match
from .engine_instance import get_default_classifier
from .exceptions import (
    AlreadyBuilt,
    ConflictingPattern,
    EmptyCategory,
    EmptyPattern,
    LabelMakerError,
    NotBuilt,
    PatternFileError,
)
from .loader import load_patterns_file

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Automaton",
    "ClassifierState",
    "LabelMaker",
    "Match",
    "build",
    "get_default_classifier",
    "load_patterns_file",
    "AlreadyBuilt",
    "ConflictingPattern",
    "EmptyCategory",
    "EmptyPattern",
    "LabelMakerError",
    "NotBuilt",
    "PatternFileError",
]
