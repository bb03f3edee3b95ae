"""
Snippet type categories for the annotated index.

The category file maps a snippet type to the keywords that use it:

    {"no_operand": ["CLC", "NOP"], "branch": ["BRA", "BEQ"]}

It is inverted once into keyword -> snippet type. The lookup has to be
total: every canonical keyword in the documentation file needs a category.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from .errors import DocSourceError, SnippetTypeLookupError
from .index import KeywordInfo

log = logging.getLogger(__name__)


def invert_categories(categories: Dict[str, List[str]]) -> Dict[str, str]:
    """category -> [members] becomes member -> category (later categories win)."""
    return {
        keyword: snippet_type
        for snippet_type, members in categories.items()
        for keyword in members
    }


class SnippetTypeIndex:
    def __init__(self, categories: Dict[str, List[str]]):
        self.by_keyword = invert_categories(categories)

    def __len__(self):
        return len(self.by_keyword)

    def __contains__(self, keyword):
        return keyword in self.by_keyword

    def lookup(self, keyword: str, line_num: int = 0) -> str:
        try:
            return self.by_keyword[keyword]
        except KeyError:
            raise SnippetTypeLookupError(keyword, line_num) from None

    def annotate(self, keyword: str, documentation: str, line_num: int = 0) -> KeywordInfo:
        """Block finalizer for the annotated index."""
        return KeywordInfo(documentation=documentation,
                           snippet_type=self.lookup(keyword, line_num))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SnippetTypeIndex":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocSourceError(f"Could not open snippet type file {path}: {e}")
        try:
            categories = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocSourceError(f"Could not deserialize snippet type json {path}: {e}")
        _check_shape(categories, path)

        index = cls(categories)
        log.info("Loaded %d snippet types covering %d keywords from %s",
                 len(categories), len(index), path)
        return index


def _check_shape(categories, path: Path) -> None:
    if not isinstance(categories, dict):
        raise DocSourceError(f"Snippet type json {path} must be an object of keyword lists")
    for snippet_type, members in categories.items():
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            raise DocSourceError(
                f"Snippet type {snippet_type!r} in {path} must map to a list of strings")
