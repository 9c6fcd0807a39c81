"""Document title extraction.

API description documents carry the product in ``info.title``, usually in
the form "Product/Resource" (e.g. "Compute/Instance").
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml


def document_title(document: Mapping[str, Any]) -> str:
    """Return ``info.title`` of a parsed document, or "" when absent."""
    info = document.get("info")
    if not isinstance(info, Mapping):
        return ""
    title = info.get("title")
    return title if isinstance(title, str) else ""


def load_document(path: str | Path) -> dict[str, Any]:
    """Parse a YAML or JSON API document.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"API document not found: {path}")

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Could not parse API document {path}: {e}") from e

    if not isinstance(document, dict):
        raise ValueError(f"API document {path} must be a mapping")
    return document


def load_document_title(path: str | Path) -> str:
    return document_title(load_document(path))
