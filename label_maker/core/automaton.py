"""Immutable matching automaton."""

from typing import Iterable, Iterator, List, Optional, Tuple

from ..models.response import AutomatonStats
from .node_store import FrozenNode
from .normalizer import TextNormalizer
from .scanner import Match, Scanner


class Automaton:
    """Compiled trie with failure links.

    Instances are never mutated after construction and can be shared
    across threads for concurrent queries.
    """

    __slots__ = ("_nodes", "_normalizer", "_pattern_count", "_max_depth", "_scanner")

    def __init__(
        self,
        nodes: Tuple[FrozenNode, ...],
        case_sensitive: bool = True,
        pattern_count: int = 0,
        max_depth: int = 0,
    ) -> None:
        self._nodes = nodes
        self._normalizer = TextNormalizer(case_sensitive)
        self._pattern_count = pattern_count
        self._max_depth = max_depth
        self._scanner = Scanner(self)

    @property
    def nodes(self) -> Tuple[FrozenNode, ...]:
        return self._nodes

    @property
    def normalizer(self) -> TextNormalizer:
        return self._normalizer

    @property
    def case_sensitive(self) -> bool:
        return self._normalizer.case_sensitive

    @property
    def pattern_count(self) -> int:
        return self._pattern_count

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Automaton(patterns={self._pattern_count}, nodes={len(self._nodes)})"

    def categorize(self, text: str) -> Optional[str]:
        """
        Categorize text by its longest matching pattern.

        Args:
            text: Text to scan

        Returns:
            Category of the longest pattern found, or None if nothing matched
        """
        return self._scanner.categorize(text)

    def categorize_many(self, texts: Iterable[str]) -> List[Optional[str]]:
        """Categorize each text in turn."""
        return self._scanner.categorize_many(texts)

    def iter_matches(self, text: str) -> Iterator[Match]:
        return self._scanner.iter_matches(text)

    def find_all(self, text: str) -> List[Match]:
        return self._scanner.find_all(text)

    def longest_match(self, text: str) -> Optional[Match]:
        return self._scanner.longest_match(text)

    def scan(self, text: str) -> Tuple[Optional[Match], int]:
        """Get the longest match and the total match count in one pass."""
        return self._scanner.scan(text)

    def get_stats(self) -> AutomatonStats:
        """Get automaton statistics."""
        return AutomatonStats(
            total_nodes=len(self._nodes),
            total_patterns=self._pattern_count,
            max_depth=self._max_depth,
            case_sensitive=self.case_sensitive,
        )
