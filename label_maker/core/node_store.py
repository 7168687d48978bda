"""Arena of trie nodes addressed by integer index."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

ROOT = 0


@dataclass(frozen=True)
class Terminal:
    """Payload of a node at which some pattern ends."""

    category: str
    length: int


@dataclass
class Node:
    """Mutable trie node used while the trie is being built."""

    children: Dict[str, int] = field(default_factory=dict)
    failure: int = ROOT
    terminal: Optional[Terminal] = None


@dataclass(frozen=True)
class FrozenNode:
    """Read-only trie node of a compiled automaton."""

    children: Mapping[str, int]
    failure: int
    terminal: Optional[Terminal]


class NodeStore:
    """Owns every trie node; nodes refer to each other by index only."""

    def __init__(self) -> None:
        """Initialize the store with a lone root node."""
        self._nodes: List[Node] = [Node()]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def add_node(self) -> int:
        """Append a fresh node and return its index."""
        self._nodes.append(Node())
        return len(self._nodes) - 1

    def child(self, index: int, ch: str) -> Optional[int]:
        """Get the child of node ``index`` on ``ch``, or None."""
        return self._nodes[index].children.get(ch)

    def get_or_add_child(self, index: int, ch: str) -> int:
        """
        Get the child of node ``index`` on ``ch``, creating it if missing.

        Args:
            index: Parent node index
            ch: Edge character

        Returns:
            Index of the child node
        """
        existing = self._nodes[index].children.get(ch)
        if existing is not None:
            return existing
        new_index = self.add_node()
        self._nodes[index].children[ch] = new_index
        return new_index

    def terminal_count(self) -> int:
        """Count nodes carrying a terminal payload."""
        return sum(1 for node in self._nodes if node.terminal is not None)

    def freeze(self) -> Tuple[FrozenNode, ...]:
        """Snapshot every node into its read-only form, preserving indexes."""
        return tuple(
            FrozenNode(
                children=MappingProxyType(dict(node.children)),
                failure=node.failure,
                terminal=node.terminal,
            )
            for node in self._nodes
        )
