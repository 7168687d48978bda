"""Scanning text against a compiled automaton."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from .node_store import ROOT

if TYPE_CHECKING:
    from .automaton import Automaton


@dataclass(frozen=True)
class Match:
    """A pattern occurrence found while scanning."""

    category: str
    end: int      # index of the last matched character
    length: int

    @property
    def start(self) -> int:
        """Index of the first matched character."""
        return self.end - self.length + 1


class Scanner:
    """Walks an immutable automaton over input text.

    A scanner holds no state between calls; every scan keeps its own
    current node and best match, so one scanner may serve many threads.
    """

    def __init__(self, automaton: "Automaton") -> None:
        self.automaton = automaton

    def iter_matches(self, text: str) -> Iterator[Match]:
        """
        Yield every match in the text.

        Matches come out ordered by end position; matches sharing an end
        position come longest first, following the failure chain.

        Args:
            text: Text to scan

        Yields:
            Match records
        """
        nodes = self.automaton.nodes
        text = self.automaton.normalizer.normalize(text)

        state = ROOT
        for position, ch in enumerate(text):
            while state != ROOT and ch not in nodes[state].children:
                state = nodes[state].failure
            state = nodes[state].children.get(ch, ROOT)

            # Outputs are not merged at compile time; collect them lazily
            # along the failure chain.
            node = state
            while node != ROOT:
                terminal = nodes[node].terminal
                if terminal is not None:
                    yield Match(terminal.category, position, terminal.length)
                node = nodes[node].failure

    def find_all(self, text: str) -> List[Match]:
        """Collect every match in the text."""
        return list(self.iter_matches(text))

    def scan(self, text: str) -> Tuple[Optional[Match], int]:
        """
        Find the longest match anywhere in the text and count all matches.

        A match replaces the current best only when it is strictly longer,
        so among equally long matches the first one found wins.

        Args:
            text: Text to scan

        Returns:
            Tuple of (winning match or None, total number of matches)
        """
        best = None
        total = 0
        for match in self.iter_matches(text):
            total += 1
            if best is None or match.length > best.length:
                best = match
        return best, total

    def longest_match(self, text: str) -> Optional[Match]:
        """Find the longest match anywhere in the text, or None."""
        best, _ = self.scan(text)
        return best

    def categorize(self, text: str) -> Optional[str]:
        """Get the category of the longest match, or None."""
        best = self.longest_match(text)
        return best.category if best is not None else None

    def categorize_many(self, texts: Iterable[str]) -> List[Optional[str]]:
        """Categorize several texts with the same automaton."""
        return [self.categorize(text) for text in texts]
