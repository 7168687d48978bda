"""Prefix tree construction over the node store."""

from typing import Optional

from ..config.logging_setup import get_logger
from ..exceptions import AlreadyBuilt, ConflictingPattern, EmptyCategory, EmptyPattern
from .node_store import ROOT, NodeStore, Terminal
from .normalizer import TextNormalizer

logger = get_logger(__name__)


class TrieBuilder:
    """Inserts patterns into a node store, marking terminal nodes."""

    def __init__(self, case_sensitive: bool = True, duplicate_policy: str = "replace") -> None:
        """
        Initialize the builder.

        Args:
            case_sensitive: Whether patterns are stored verbatim or folded
            duplicate_policy: 'replace' (last write wins) or 'error'
        """
        self.store = NodeStore()
        self.normalizer = TextNormalizer(case_sensitive)
        self.duplicate_policy = duplicate_policy
        self._sealed = False
        self._max_depth = 0

    @property
    def case_sensitive(self) -> bool:
        return self.normalizer.case_sensitive

    @property
    def sealed(self) -> bool:
        """Whether the trie has been handed over to the compiler."""
        return self._sealed

    @property
    def max_depth(self) -> int:
        """Length of the longest inserted pattern."""
        return self._max_depth

    def insert(self, pattern: str, category: str) -> None:
        """
        Insert a pattern and its category.

        Args:
            pattern: Non-empty literal pattern
            category: Non-empty category label

        Raises:
            AlreadyBuilt: The trie has already been compiled
            EmptyPattern: The pattern is empty
            EmptyCategory: The category is empty
            ConflictingPattern: The pattern already maps to another category
                and the duplicate policy is 'error'
        """
        if self._sealed:
            raise AlreadyBuilt("insert")
        if not pattern:
            raise EmptyPattern()
        if not category:
            raise EmptyCategory(pattern)

        key = self.normalizer.normalize(pattern)

        # Check the existing payload before touching the store so that a
        # rejected insert leaves the trie unchanged.
        existing = self._find(key)
        if existing is not None and existing.category != category:
            if self.duplicate_policy == "error":
                logger.warning(
                    "pattern_conflict",
                    pattern=pattern,
                    category=category,
                    existing=existing.category,
                )
                raise ConflictingPattern(pattern, category, existing.category)
            logger.debug(
                "pattern_relabeled",
                pattern=pattern,
                category=category,
                previous=existing.category,
            )

        node = ROOT
        for ch in key:
            node = self.store.get_or_add_child(node, ch)
        self.store[node].terminal = Terminal(category=category, length=len(key))
        self._max_depth = max(self._max_depth, len(key))

        logger.debug("pattern_inserted", pattern=pattern, category=category, node=node)

    def seal(self) -> NodeStore:
        """Hand the store over for compilation; no more inserts afterwards."""
        if self._sealed:
            raise AlreadyBuilt("finalize")
        self._sealed = True
        return self.store

    def _find(self, key: str) -> Optional[Terminal]:
        node = ROOT
        for ch in key:
            node = self.store.child(node, ch)
            if node is None:
                return None
        return self.store[node].terminal
