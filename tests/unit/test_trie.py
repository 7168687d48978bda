"""Unit tests for the trie builder."""

import pytest
from label_maker.core.node_store import ROOT, Terminal
from label_maker.core.trie import TrieBuilder
from label_maker.exceptions import (
    AlreadyBuilt,
    ConflictingPattern,
    EmptyCategory,
    EmptyPattern,
)


def terminal_for(builder, pattern):
    node = ROOT
    for ch in pattern:
        node = builder.store.child(node, ch)
        assert node is not None, f"missing edge '{ch}' for '{pattern}'"
    return builder.store[node].terminal


class TestTrieBuilder:
    """Test cases for the TrieBuilder class."""

    @pytest.fixture
    def builder(self):
        """Create a case sensitive builder with the replace policy."""
        return TrieBuilder()

    def test_insert_creates_path(self, builder):
        """Test that inserting creates one node per character."""
        builder.insert("rex", "Therapod")

        assert len(builder.store) == 4
        assert terminal_for(builder, "rex") == Terminal(category="Therapod", length=3)

    def test_shared_prefixes_share_nodes(self, builder):
        """Test that patterns with a common prefix reuse nodes."""
        builder.insert("rawr", "Sad Noise")
        builder.insert("rawrs", "Fossils Are Cool!")

        assert len(builder.store) == 6
        assert terminal_for(builder, "rawr").category == "Sad Noise"
        assert terminal_for(builder, "rawrs").category == "Fossils Are Cool!"

    def test_prefix_node_keeps_children(self, builder):
        """Test that a terminal node can also have children."""
        builder.insert("rawrs", "Long")
        builder.insert("rawr", "Short")

        node = ROOT
        for ch in "rawr":
            node = builder.store.child(node, ch)
        assert builder.store[node].terminal.category == "Short"
        assert "s" in builder.store[node].children

    def test_intermediate_nodes_are_not_terminal(self, builder):
        """Test that only the final node carries a payload."""
        builder.insert("abc", "X")

        assert terminal_for(builder, "a") is None
        assert terminal_for(builder, "ab") is None

    def test_empty_pattern(self, builder):
        """Test that an empty pattern is rejected."""
        with pytest.raises(EmptyPattern):
            builder.insert("", "Nothing")

        assert len(builder.store) == 1

    def test_empty_category(self, builder):
        """Test that an empty category is rejected without touching the trie."""
        with pytest.raises(EmptyCategory) as exc_info:
            builder.insert("abc", "")

        assert exc_info.value.pattern == "abc"
        assert len(builder.store) == 1

    def test_duplicate_last_write_wins(self, builder):
        """Test that re-inserting a pattern replaces its category."""
        builder.insert("rex", "T")
        builder.insert("rex", "Not-T")

        assert terminal_for(builder, "rex").category == "Not-T"
        assert builder.store.terminal_count() == 1

    def test_duplicate_error_policy(self):
        """Test that relabeling raises under the error policy."""
        builder = TrieBuilder(duplicate_policy="error")
        builder.insert("rex", "T")
        size = len(builder.store)

        with pytest.raises(ConflictingPattern) as exc_info:
            builder.insert("rex", "Not-T")

        assert exc_info.value.existing == "T"
        assert exc_info.value.category == "Not-T"
        assert terminal_for(builder, "rex").category == "T"
        assert len(builder.store) == size

    def test_duplicate_error_policy_same_category(self):
        """Test that repeating an identical insert is allowed under the error policy."""
        builder = TrieBuilder(duplicate_policy="error")
        builder.insert("rex", "T")
        builder.insert("rex", "T")

        assert terminal_for(builder, "rex").category == "T"

    def test_failed_insert_keeps_previous_patterns(self, builder):
        """Test that an error leaves earlier insertions intact."""
        builder.insert("velociraptor", "Therapod")

        with pytest.raises(EmptyPattern):
            builder.insert("", "Therapod")

        assert terminal_for(builder, "velociraptor").category == "Therapod"

    def test_case_insensitive_folds_patterns(self):
        """Test that patterns are stored folded when case insensitive."""
        builder = TrieBuilder(case_sensitive=False)
        builder.insert("Rex", "T")
        builder.insert("REX", "Other")

        assert builder.store.terminal_count() == 1
        assert terminal_for(builder, "rex").category == "Other"

    def test_max_depth(self, builder):
        """Test tracking of the longest pattern."""
        builder.insert("ab", "X")
        builder.insert("abcde", "Y")
        builder.insert("b", "Z")

        assert builder.max_depth == 5

    def test_insert_after_seal(self, builder):
        """Test that a sealed builder refuses inserts."""
        builder.insert("abc", "X")
        builder.seal()

        assert builder.sealed is True
        with pytest.raises(AlreadyBuilt):
            builder.insert("abd", "Y")

    def test_seal_twice(self, builder):
        """Test that a builder can only be sealed once."""
        builder.seal()

        with pytest.raises(AlreadyBuilt):
            builder.seal()
