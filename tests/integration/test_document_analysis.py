"""End-to-end document analysis tests.

These tests run the full pipeline on a small wordmark document and check
the written output, not individual components.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from pathsplitter import decompose
from pathsplitter.config import SplitterSettings
from pathsplitter.core import DocumentProcessor
from pathsplitter.io import SvgReader, local_name

# Letter "i": stem and dot
LETTER_I = "M10 30 L20 30 L20 90 L10 90 Z M10 5 L20 5 L20 15 L10 15 Z"

# Letter "o": ring with counter
LETTER_O = (
    "M60 30 C80 30 90 45 90 60 C90 75 80 90 60 90 C40 90 30 75 30 60 "
    "C30 45 40 30 60 30 Z M60 45 C52 45 45 52 45 60 C45 68 52 75 60 75 "
    "C68 75 75 68 75 60 C75 52 68 45 60 45 Z"
)

# Same "o" moved 100 units right
LETTER_O_SHIFTED = (
    "M160 30 C180 30 190 45 190 60 C190 75 180 90 160 90 C140 90 130 75 130 60 "
    "C130 45 140 30 160 30 Z M160 45 C152 45 145 52 145 60 C145 68 152 75 160 75 "
    "C168 75 175 68 175 60 C175 52 168 45 160 45 Z"
)

ICON_SVG = f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"
     viewBox="0 0 200 100">
  <!-- wordmark -->
  <g id="wordmark" fill="#222">
    <path id="letter-i" class="glyph" d="{LETTER_I}"/>
    <path class="glyph" d="{LETTER_O}"/>
  </g>
  <g>
    <path id="glyphs" d="{LETTER_I} {LETTER_O_SHIFTED}"/>
  </g>
  <use xlink:href="#wordmark" x="0" y="100"/>
</svg>
"""


@pytest.fixture
def icon_file(tmp_path: Path) -> Path:
    path = tmp_path / "wordmark.svg"
    path.write_text(ICON_SVG, encoding="utf-8")
    return path


@pytest.fixture
def processor() -> DocumentProcessor:
    return DocumentProcessor(SplitterSettings(), logger=Mock())


@pytest.fixture
def output_file(icon_file: Path, processor: DocumentProcessor) -> Path:
    output = icon_file.parent / "out.svg"
    processor.process(icon_file, output)
    return output


def test_letter_shapes():
    """Dot and stem of an i separate, the counter of an o stays."""
    i_parts = decompose(LETTER_I)
    o_parts = decompose(LETTER_O)

    assert len(i_parts) == 2
    assert i_parts[0].startswith("M 10 30")
    assert len(o_parts) == 1


def test_mixed_letters_in_one_path():
    parts = decompose(f"{LETTER_I} {LETTER_O_SHIFTED}")

    assert len(parts) == 3
    assert parts[0].startswith("M 160 30")
    assert parts[0].count("M") == 2
    assert parts[1].startswith("M 10 30")
    assert parts[2].startswith("M 10 5")


def test_full_document(icon_file: Path, processor: DocumentProcessor):
    stats = processor.process(icon_file, icon_file.parent / "out.svg")

    assert stats.error_count == 0
    assert stats.paths_examined == 3
    assert stats.paths_separated == 2
    assert stats.shapes_created == 5


def test_separated_paths_keep_attributes(output_file: Path):
    document = SvgReader(output_file).load()
    paths = list(document.iter_elements(["path"]))

    assert [p.get("id") for p in paths] == [
        "path-1", "path-2", "path-6", "path-3", "path-4", "path-5",
    ]

    glyphs = [p for p in paths if p.get("class") == "glyph"]
    assert len(glyphs) == 3
    assert all(p.getparent().get("fill") == "#222" for p in glyphs)


def test_output_keeps_unrelated_markup(output_file: Path):
    text = output_file.read_text(encoding="utf-8")

    assert "<!-- wordmark -->" in text
    assert 'xlink:href="#wordmark"' in text
    assert text.count('xmlns="http://www.w3.org/2000/svg"') == 1


def test_every_drawable_element_labeled(output_file: Path):
    document = SvgReader(output_file).load()
    drawable = list(document.iter_elements(SplitterSettings().ids.drawable_tags))

    assert all(el.get("id") for el in drawable)
    assert sorted(el.get("id") for el in drawable if local_name(el) == "g") == ["g-1", "wordmark"]
