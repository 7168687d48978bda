"""Loading pattern mappings from JSON files."""

import json
from typing import Dict

from .config.logging_setup import get_logger
from .exceptions import PatternFileError

logger = get_logger(__name__)


def load_patterns_file(path: str) -> Dict[str, str]:
    """
    Read a JSON object mapping patterns to categories.

    Args:
        path: Path of the JSON file

    Returns:
        Mapping of pattern to category

    Raises:
        PatternFileError: The file is missing, unreadable, or malformed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise PatternFileError(f"Patterns file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise PatternFileError(f"Patterns file is not valid UTF-8: {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PatternFileError(f"Patterns file is not valid JSON: {path}: {e}") from e
    except OSError as e:
        raise PatternFileError(f"Cannot read patterns file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PatternFileError(f"Patterns file must contain a JSON object: {path}")

    for pattern, category in data.items():
        if not isinstance(category, str):
            raise PatternFileError(
                f"Category for pattern '{pattern}' must be a string, "
                f"got {type(category).__name__}"
            )

    logger.info("patterns_file_loaded", path=path, total_patterns=len(data))
    return data
