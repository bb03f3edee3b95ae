"""
Opcode Documentation Indexer
============================
Turns a plain-text opcode reference into the JSON index an editor
integration reads for hover documentation and completion.

Pipeline:
    ┌──────────────┐    ┌─────────────┐    ┌────────────────┐    ┌──────────┐
    │ opcodes doc  │───>│ BlockParser │───>│ Indexed        │───>│  writer  │
    │ (.md)        │    │ (2 states)  │    │ Documentation  │    │ (.json)  │
    └──────────────┘    └─────────────┘    └────────────────┘    └──────────┘
                               ^
                               │ finalizer
                        ┌──────────────┐
                        │ snippet type │  (annotated variant only)
                        │ categories   │
                        └──────────────┘

    - parser.py:        line source + block state machine
    - snippet_types.py: category file -> keyword lookup, annotating finalizer
    - index.py:         KeywordInfo / IndexedDocumentation records
    - writer.py:        JSON rendering and the single output write
    - config.py:        default inputs and the output location side file
"""

__version__ = "0.2.0"

from pathlib import Path
from typing import Optional, Union

from .errors import (
    IndexerError,
    DocSourceError,
    DocParseError,
    SnippetTypeLookupError,
    IndexSerializationError,
    IndexWriteError,
)
from .index import KeywordInfo, IndexedDocumentation
from .parser import BlockParser, ParserState, parse_lines, plain_entry, read_doc_lines
from .snippet_types import SnippetTypeIndex, invert_categories
from .writer import to_json, write_index


def index_document(doc_path: Union[str, Path],
                   snippet_types: Optional[Union[str, Path, SnippetTypeIndex]] = None,
                   ) -> IndexedDocumentation:
    """Parse a documentation file into an index.

    Args:
        doc_path: Opcode documentation source.
        snippet_types: Category file path or a loaded SnippetTypeIndex.
            None builds the plain index (documentation strings only).
    """
    finalize = plain_entry
    if snippet_types is not None:
        if not isinstance(snippet_types, SnippetTypeIndex):
            snippet_types = SnippetTypeIndex.from_file(snippet_types)
        finalize = snippet_types.annotate
    return parse_lines(read_doc_lines(doc_path), finalize)
