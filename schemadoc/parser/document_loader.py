"""Load field-schema documents from JSON files."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

from schemadoc.introspection.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load one JSON document

    Args:
        path: Path to a JSON file whose top level is an object of sections

    Returns:
        Parsed document

    Raises:
        DocumentLoadError: If the file is unreadable, not valid JSON, or not an object
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise DocumentLoadError(str(path), f"error reading file: {e}") from e
    except json.JSONDecodeError as e:
        raise DocumentLoadError(str(path), f"error parsing JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentLoadError(str(path), f"error decoding file: {e}") from e
    except RecursionError as e:
        raise DocumentLoadError(str(path), "JSON nesting too deep") from e

    if not isinstance(document, dict):
        raise DocumentLoadError(str(path), f"top level must be an object, got {type(document).__name__}")

    logger.debug(f"Loaded {path} ({len(document)} sections)")
    return document


def load_documents(
    paths: Iterable[Union[str, Path]],
) -> Iterator[Tuple[Path, Union[Dict[str, Any], DocumentLoadError]]]:
    """
    Load several documents, yielding errors instead of raising them

    Yields:
        (path, document) or (path, DocumentLoadError) pairs
    """
    for path in paths:
        path = Path(path)
        try:
            yield path, load_document(path)
        except DocumentLoadError as e:
            logger.error(str(e))
            yield path, e
