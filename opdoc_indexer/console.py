"""
Console reporting and logging setup.

Status lines go through rich consoles: failures to stderr behind a red
ERROR tag, the final confirmation to stdout behind a green tag. Log records
from the library modules are rendered by a RichHandler on stderr.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

out = Console(highlight=False)
err = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err.print(Text.assemble(("ERROR", "bold red"), " ", message), soft_wrap=True)


def print_success(path: Union[str, Path]) -> None:
    out.print(Text.assemble(("Successfully wrote JSON to", "green"), " ", str(path)), soft_wrap=True)


def print_info(message: str) -> None:
    out.print(Text(message), soft_wrap=True)


def setup_logging(verbose: int = 0) -> logging.Logger:
    """WARNING by default, INFO with -v, DEBUG with -vv."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err,
        level=level,
        show_time=False,
        show_path=verbose >= 2,
        markup=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)
    return logging.getLogger("opdoc_indexer")
