"""
Build-time configuration.

The bundled input files and the side file naming the output location ship
as package data in opdoc_indexer/data/. Nothing is taken from the environment.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union

from .errors import DocSourceError

DATA_DIR = Path(__file__).resolve().parent / "data"

DOC_FILE = DATA_DIR / "65816-opcodes.md"
SNIPPET_TYPES_FILE = DATA_DIR / "instruction-snippet-types.json"
LOCATION_FILE = DATA_DIR / "instruction-json-location.txt"


def output_path(location_file: Union[str, Path] = LOCATION_FILE) -> Path:
    """Read the JSON destination from the side file.

    Relative paths are taken relative to the current working directory.
    """
    location_file = Path(location_file)
    try:
        text = location_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocSourceError(f"Could not read output location from {location_file}: {e}")

    value = text.strip()
    if not value:
        raise DocSourceError(f"Output location file {location_file} is empty")

    return Path(value).expanduser().resolve()
