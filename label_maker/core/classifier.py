"""Two-phase classifier facade: build the automaton, then categorize."""

import time
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config import get_logger, get_settings
from ..config.settings import DUPLICATE_POLICIES
from ..exceptions import AlreadyBuilt, NotBuilt
from ..loader import load_patterns_file
from ..models.response import CategorizationResponse, MatchResult
from .automaton import Automaton
from .compiler import compile_automaton
from .scanner import Match
from .trie import TrieBuilder

logger = get_logger(__name__)


class ClassifierState(str, Enum):
    """Lifecycle of a classifier."""

    BUILDING = "building"
    READY = "ready"


class LabelMaker:
    """Maps text to the category of the longest pattern it contains.

    A classifier starts out ``BUILDING``: patterns are added with
    :meth:`insert`. :meth:`finalize` compiles them into an immutable
    :class:`Automaton` and moves the classifier to ``READY`` for good;
    only then can text be categorized.
    """

    def __init__(
        self,
        case_sensitive: Optional[bool] = None,
        duplicate_policy: Optional[str] = None,
    ) -> None:
        """
        Initialize an empty classifier.

        Args:
            case_sensitive: Match case exactly (settings default if None)
            duplicate_policy: 'replace' or 'error' (settings default if None)
        """
        settings = get_settings()
        if case_sensitive is None:
            case_sensitive = settings.case_sensitive
        if duplicate_policy is None:
            duplicate_policy = settings.duplicate_policy
        duplicate_policy = duplicate_policy.lower()
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Unknown duplicate policy '{duplicate_policy}', "
                f"expected one of {', '.join(DUPLICATE_POLICIES)}"
            )

        self.case_sensitive = case_sensitive
        self.duplicate_policy = duplicate_policy
        self._builder: Optional[TrieBuilder] = TrieBuilder(case_sensitive, duplicate_policy)
        self._automaton: Optional[Automaton] = None

    @classmethod
    def from_mapping(cls, patterns: Mapping[str, str], **options: Any) -> "LabelMaker":
        """
        Create a ready classifier from a pattern-to-category mapping.

        Patterns are inserted in sorted order so the result does not depend
        on the mapping's iteration order.

        Args:
            patterns: Mapping of pattern to category
            **options: Keyword arguments for the constructor

        Returns:
            A finalized classifier
        """
        classifier = cls(**options)
        for pattern, category in sorted(patterns.items()):
            classifier.insert(pattern, category)
        classifier.finalize()
        return classifier

    @classmethod
    def from_file(cls, path: str, **options: Any) -> "LabelMaker":
        """Create a ready classifier from a JSON patterns file."""
        return cls.from_mapping(load_patterns_file(path), **options)

    @property
    def state(self) -> ClassifierState:
        if self._automaton is None:
            return ClassifierState.BUILDING
        return ClassifierState.READY

    @property
    def automaton(self) -> Automaton:
        """The compiled automaton; raises NotBuilt while building."""
        if self._automaton is None:
            raise NotBuilt()
        return self._automaton

    def insert(self, pattern: str, category: str) -> None:
        """
        Add a pattern and the category it stands for.

        Args:
            pattern: Non-empty literal pattern
            category: Non-empty category label

        Raises:
            AlreadyBuilt: The classifier is already finalized
            EmptyPattern: The pattern is empty
            EmptyCategory: The category is empty
            ConflictingPattern: Relabeling under the 'error' duplicate policy
        """
        if self._builder is None:
            raise AlreadyBuilt("insert")
        self._builder.insert(pattern, category)

    def finalize(self) -> Automaton:
        """
        Compile the inserted patterns and switch to READY.

        Finalizing is a one-time transition.

        Returns:
            The compiled automaton

        Raises:
            AlreadyBuilt: The classifier is already finalized
        """
        if self._builder is None:
            raise AlreadyBuilt("finalize")

        self._automaton = compile_automaton(self._builder)
        # The trie now belongs to the automaton.
        self._builder = None
        return self._automaton

    def categorize(self, text: str) -> Optional[str]:
        """
        Get the category of the longest pattern found in the text.

        Args:
            text: Text to scan

        Returns:
            The category, or None when no pattern occurs in the text

        Raises:
            NotBuilt: The classifier is not finalized yet
        """
        return self.automaton.categorize(text)

    def categorize_many(self, texts: Iterable[str]) -> List[Optional[str]]:
        return self.automaton.categorize_many(texts)

    def find_all(self, text: str) -> List[Match]:
        return self.automaton.find_all(text)

    def longest_match(self, text: str) -> Optional[Match]:
        return self.automaton.longest_match(text)

    def classify(self, text: str) -> CategorizationResponse:
        """
        Categorize text and report how the category was found.

        Args:
            text: Text to scan

        Returns:
            CategorizationResponse with the winning match and timing

        Raises:
            NotBuilt: The classifier is not finalized yet
        """
        automaton = self.automaton
        start_time = time.time()

        best, total_matches = automaton.scan(text)

        execution_time = (time.time() - start_time) * 1000

        match_result = None
        if best is not None:
            match_result = MatchResult(
                category=best.category,
                pattern=text[best.start:best.end + 1],
                start=best.start,
                end=best.end + 1,
                length=best.length,
            )

        logger.debug(
            "text_classified",
            text_length=len(text),
            category=best.category if best else None,
            total_matches=total_matches,
        )

        return CategorizationResponse(
            text_length=len(text),
            category=best.category if best else None,
            match=match_result,
            total_matches=total_matches,
            execution_time_ms=execution_time,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get classifier statistics."""
        if self._automaton is not None:
            stats = self._automaton.get_stats()
            total_nodes = stats.total_nodes
            total_patterns = stats.total_patterns
            max_depth = stats.max_depth
        else:
            total_nodes = len(self._builder.store)
            total_patterns = self._builder.store.terminal_count()
            max_depth = self._builder.max_depth

        return {
            "state": self.state.value,
            "case_sensitive": self.case_sensitive,
            "duplicate_policy": self.duplicate_policy,
            "total_patterns": total_patterns,
            "total_nodes": total_nodes,
            "max_depth": max_depth,
        }


def build(patterns: Mapping[str, str], **options: Any) -> Automaton:
    """
    Compile a pattern-to-category mapping into an automaton in one step.

    Equivalent to inserting every pair into a :class:`LabelMaker` and
    finalizing it.

    Args:
        patterns: Mapping of pattern to category
        **options: ``case_sensitive`` and ``duplicate_policy``

    Returns:
        The compiled automaton
    """
    return LabelMaker.from_mapping(patterns, **options).automaton
