"""Core matching engine."""

from .automaton import Automaton
from .classifier import ClassifierState, LabelMaker, build
from .compiler import compile_automaton
from .node_store import NodeStore
from .normalizer import TextNormalizer
from .scanner import Match, Scanner
from .trie import TrieBuilder

__all__ = [
    "Automaton",
    "ClassifierState",
    "LabelMaker",
    "build",
    "compile_automaton",
    "NodeStore",
    "TextNormalizer",
    "Match",
    "Scanner",
    "TrieBuilder",
]
