"""
Line-oriented block parser for opcode documentation files.

The documentation source is a sequence of blocks:

    {ADC}
    {ADC.b}
    {:}
    Add with carry.
    ...
    {.}

Alias lines ``{name}`` are collected until the ``{:}`` sentinel, then every
line up to ``{.}`` is documentation text. Closing a block commits the text
under the last alias read (the canonical keyword); the other aliases are
recorded as sharing its documentation.

Anything else outside a description (blank lines, prose, a brace without its
partner) is ignored.
"""

from __future__ import annotations
import enum
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Union

from .errors import DocParseError, DocSourceError
from .index import IndexedDocumentation

log = logging.getLogger(__name__)


DESCRIPTION_START = "{:}"
DESCRIPTION_END = "{.}"

# Builds the keys_to_doc value for a finished block: (keyword, doc, line_num)
Finalizer = Callable[[str, str, int], Any]


class ParserState(enum.Enum):
    OPCODES = "opcodes"
    DESCRIPTION = "description"


def plain_entry(keyword: str, documentation: str, line_num: int = 0) -> str:
    """Finalizer for the unannotated index: store the text as-is."""
    return documentation


def match_alias(line: str) -> str | None:
    """Return ``name`` if the whole line is ``{name}``, else None."""
    if len(line) >= 2 and line.startswith("{") and line.endswith("}"):
        return line[1:-1]
    return None


# ──────────────────────────────────────────────
# Line source
# ──────────────────────────────────────────────

def iter_decoded_lines(raw: bytes) -> Iterator[str]:
    """Split raw bytes into text lines, dropping lines that are not UTF-8."""
    chunks = raw.split(b"\n")
    if chunks and chunks[-1] == b"":
        chunks.pop()  # trailing newline does not start another line
    for num, chunk in enumerate(chunks, 1):
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        try:
            yield chunk.decode("utf-8")
        except UnicodeDecodeError:
            log.debug("Skipping undecodable line %d", num)


def read_doc_lines(path: Union[str, Path]) -> List[str]:
    """Read the documentation file. Failing to open it is fatal."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DocSourceError(f"Could not open opcode documentation file {path}: {e.strerror or e}")
    return list(iter_decoded_lines(raw))


# ──────────────────────────────────────────────
# Parser
# ──────────────────────────────────────────────

class BlockParser:
    """Two-state parser producing an IndexedDocumentation.

    The finalizer decides what gets stored per canonical keyword; see
    ``plain_entry`` and ``SnippetTypeIndex.annotate``.
    """

    def __init__(self, finalize: Finalizer = plain_entry):
        self.finalize = finalize
        self.state = ParserState.OPCODES
        self.opcodes: List[str] = []
        self.description: List[str] = []
        self.line_num = 0
        self.result = IndexedDocumentation()

    def feed(self, line: str) -> None:
        """Consume one line (without its newline)."""
        self.line_num += 1
        if self.state is ParserState.OPCODES:
            if line == DESCRIPTION_START:
                self.state = ParserState.DESCRIPTION
                return
            name = match_alias(line)
            if name is not None:
                self.opcodes.append(name)
        else:
            if line == DESCRIPTION_END:
                self._finish_block()
                self.state = ParserState.OPCODES
            else:
                self.description.append(line + "\n")

    def _finish_block(self) -> None:
        if not self.opcodes:
            raise DocParseError("No opcodes preceded a documentation block", self.line_num)

        # canonical keyword is the most recently pushed alias, not the first.
        # Both maps are last-write-wins, so a keyword that is an alias in one
        # block and canonical in another (or repeated in one block) lands in both.
        keyword = self.opcodes.pop()
        documentation = "".join(self.description)
        self.result.keys_to_doc[keyword] = self.finalize(keyword, documentation, self.line_num)
        log.debug("L%d: documented %s (%d chars)", self.line_num, keyword, len(documentation))

        for alias in self.opcodes:
            self.result.keys_with_shared_doc[alias] = keyword
            log.debug("L%d: %s shares documentation with %s", self.line_num, alias, keyword)

        self.opcodes.clear()
        self.description.clear()

    def parse(self, lines: Iterable[str]) -> IndexedDocumentation:
        """Feed every line and return the finished index."""
        for line in lines:
            self.feed(line)
        if self.state is ParserState.DESCRIPTION:
            log.warning("Documentation file ends inside an unterminated block; its text was dropped")
        return self.result


def parse_lines(lines: Iterable[str], finalize: Finalizer = plain_entry) -> IndexedDocumentation:
    return BlockParser(finalize).parse(lines)
