"""Failure link construction (Aho-Corasick)."""

from collections import deque

from ..config.logging_setup import get_logger
from .automaton import Automaton
from .node_store import ROOT
from .trie import TrieBuilder

logger = get_logger(__name__)


def compile_automaton(builder: TrieBuilder) -> Automaton:
    """
    Compute failure links for the builder's trie and freeze it.

    The builder is sealed by this call: it accepts no further inserts
    and cannot be compiled a second time.

    Args:
        builder: Trie builder holding every pattern

    Returns:
        The immutable automaton

    Raises:
        AlreadyBuilt: The builder was already compiled
    """
    store = builder.seal()

    queue = deque()
    for child in store[ROOT].children.values():
        store[child].failure = ROOT
        queue.append(child)

    while queue:
        parent = queue.popleft()
        for ch, child in store[parent].children.items():
            queue.append(child)

            fallback = store[parent].failure
            while fallback != ROOT and ch not in store[fallback].children:
                fallback = store[fallback].failure
            store[child].failure = store[fallback].children.get(ch, ROOT)

    pattern_count = store.terminal_count()
    if pattern_count == 0:
        logger.warning("empty_automaton_compiled")

    automaton = Automaton(
        store.freeze(),
        case_sensitive=builder.case_sensitive,
        pattern_count=pattern_count,
        max_depth=builder.max_depth,
    )
    logger.info(
        "automaton_compiled",
        total_patterns=pattern_count,
        total_nodes=len(automaton),
        max_depth=builder.max_depth,
    )
    return automaton
