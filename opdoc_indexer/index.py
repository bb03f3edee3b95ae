"""
Index records produced by the parser and consumed by the JSON writer.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Dict, Union


@dataclass
class KeywordInfo:
    """Documentation for one keyword plus its editor snippet category."""
    documentation: str
    snippet_type: str


DocEntry = Union[str, KeywordInfo]


@dataclass
class IndexedDocumentation:
    keys_to_doc: Dict[str, DocEntry] = field(default_factory=dict)
    keys_with_shared_doc: Dict[str, str] = field(default_factory=dict)   # alias -> canonical

    def to_dict(self) -> dict:
        """JSON-ready form: KeywordInfo entries become plain objects."""
        return {
            "keys_to_doc": {
                key: asdict(entry) if isinstance(entry, KeywordInfo) else entry
                for key, entry in self.keys_to_doc.items()
            },
            "keys_with_shared_doc": dict(self.keys_with_shared_doc),
        }

    def summary(self) -> str:
        return (f"{len(self.keys_to_doc)} documented keywords, "
                f"{len(self.keys_with_shared_doc)} shared aliases")
