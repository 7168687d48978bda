"""Exceptions raised by the label maker."""


class LabelMakerError(Exception):
    """Base class for all label maker errors."""


class EmptyPattern(LabelMakerError, ValueError):
    """Raised when a pattern of zero length is inserted."""

    def __init__(self) -> None:
        super().__init__("Pattern cannot be empty")


class EmptyCategory(LabelMakerError, ValueError):
    """Raised when a pattern is inserted with an empty category."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Category for pattern '{pattern}' cannot be empty")


class NotBuilt(LabelMakerError, RuntimeError):
    """Raised when the classifier is queried before it is finalized."""

    def __init__(self) -> None:
        super().__init__("Classifier is not built yet. Call finalize() first.")


class AlreadyBuilt(LabelMakerError, RuntimeError):
    """Raised when the classifier is mutated after it is finalized."""

    def __init__(self, operation: str = "insert") -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} after finalizing")


class ConflictingPattern(LabelMakerError, ValueError):
    """Raised when a pattern is re-labeled under the ``error`` duplicate policy."""

    def __init__(self, pattern: str, category: str, existing: str) -> None:
        self.pattern = pattern
        self.category = category
        self.existing = existing
        super().__init__(
            f"Pattern '{pattern}' is already labeled '{existing}', "
            f"conflicts with new label '{category}'"
        )


class PatternFileError(LabelMakerError):
    """Raised when a patterns file cannot be loaded."""
