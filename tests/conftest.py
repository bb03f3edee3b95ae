import sys
import os

# Allow importing opdoc_indexer / opdocidx from the project root without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest


SAMPLE_DOC = """\
{adc}
{ADC}
{:}
Add with carry.
{.}

{jml}
{jmp.l}
{JML}
{:}
Jump long.

Changes the program bank.
{.}
"""

SAMPLE_CATEGORIES = '{"operand": ["ADC", "JML"], "no_operand": ["NOP"]}'


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A doc file, a category file and a location side file in tmp_path, which is also the cwd."""
    monkeypatch.chdir(tmp_path)
    doc = tmp_path / "opcodes.md"
    doc.write_text(SAMPLE_DOC, encoding="utf-8")
    cats = tmp_path / "snippet-types.json"
    cats.write_text(SAMPLE_CATEGORIES, encoding="utf-8")
    location = tmp_path / "location.txt"
    location.write_text("out/instructions.json\n", encoding="utf-8")
    (tmp_path / "out").mkdir()
    return tmp_path
