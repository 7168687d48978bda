"""Text normalization for case-insensitive matching."""


class TextNormalizer:
    """Folds text so that patterns and input compare consistently."""

    def __init__(self, case_sensitive: bool = True) -> None:
        """
        Initialize the normalizer.

        Args:
            case_sensitive: When True, text is passed through unchanged
        """
        self.case_sensitive = case_sensitive

    def normalize(self, text: str) -> str:
        """
        Normalize text for matching.

        Args:
            text: Input text to normalize

        Returns:
            The text itself when case sensitive, its folded form otherwise
        """
        if self.case_sensitive or not text:
            return text
        return self.fold(text)

    @staticmethod
    def fold(text: str) -> str:
        """
        Lowercase text one character at a time.

        Characters whose lowercase form is longer than one character
        (e.g. 'İ') are kept as is, so the folded text has the same length
        as the input and match positions map back onto it.

        Args:
            text: Input text

        Returns:
            Folded text of the same length
        """
        folded = []
        for ch in text:
            lower = ch.lower()
            folded.append(lower if len(lower) == 1 else ch)
        return "".join(folded)
