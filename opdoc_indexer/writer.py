"""
JSON output for the documentation index.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Union

from .errors import IndexSerializationError, IndexWriteError
from .index import IndexedDocumentation

log = logging.getLogger(__name__)


def to_json(doc: IndexedDocumentation, indent: int = 2) -> str:
    """Pretty-printed JSON text. Key order carries no meaning."""
    try:
        return json.dumps(doc.to_dict(), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise IndexSerializationError(f"could not serialize documentation index to JSON: {e}")


def write_index(doc: IndexedDocumentation, path: Union[str, Path]) -> Path:
    """Serialize fully, then write once. The destination directory must exist.

    The text goes to a sibling temp file that replaces the destination only
    after it is completely written.
    """
    path = Path(path)
    text = to_json(doc)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise IndexWriteError(path, e.strerror or str(e))
    log.info("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path
