"""
Exception types raised while building the opcode documentation index.

Every failure is terminal for a run: the CLI catches ``IndexerError``,
reports it, and exits with status 1 without writing any output.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union


class IndexerError(Exception):
    """Base class for all indexer failures."""


class DocSourceError(IndexerError):
    """An input file (documentation, categories, output location) could not be loaded."""


class DocParseError(IndexerError):
    """The documentation file is structurally malformed."""
    def __init__(self, message: str, line_num: int = 0):
        self.line_num = line_num
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class SnippetTypeLookupError(IndexerError):
    """A documented keyword has no entry in the snippet type categories."""
    def __init__(self, keyword: str, line_num: int = 0):
        self.keyword = keyword
        self.line_num = line_num
        message = f"Could not retrieve snippet type for instruction {keyword!r}"
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class IndexSerializationError(IndexerError):
    """The index could not be rendered as JSON."""


class IndexWriteError(IndexerError):
    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        message = f"could not write to JSON file at {path}"
        super().__init__(f"{message} ({reason})" if reason else message)
