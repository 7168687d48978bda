"""Unit tests for the text normalizer."""

from label_maker.core.normalizer import TextNormalizer


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""

    def test_case_sensitive_passthrough(self):
        """Test that case sensitive normalization changes nothing."""
        normalizer = TextNormalizer(case_sensitive=True)

        assert normalizer.normalize("Tyrannosaurus REX") == "Tyrannosaurus REX"

    def test_case_insensitive_lowercases(self):
        """Test that case insensitive normalization lowercases."""
        normalizer = TextNormalizer(case_sensitive=False)

        assert normalizer.normalize("Tyrannosaurus REX") == "tyrannosaurus rex"

    def test_empty_text(self):
        """Test normalizing empty text."""
        assert TextNormalizer(case_sensitive=False).normalize("") == ""

    def test_fold_keeps_length(self):
        """Test that folding never changes the text length."""
        text = "İstanbul ÉPQR ß"
        folded = TextNormalizer.fold(text)

        assert len(folded) == len(text)
        assert folded[0] == "İ"
        assert folded[1:] == "stanbul épqr ß"

    def test_fold_does_not_touch_whitespace_or_punctuation(self):
        """Test that folding only affects letter case."""
        assert TextNormalizer.fold("A-B_C d!") == "a-b_c d!"
