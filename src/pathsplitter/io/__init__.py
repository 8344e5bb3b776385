"""SVG I/O layer for pathsplitter.

This module handles reading and writing SVG documents using lxml.

Key responsibilities:
- Load SVG files and strings
- Element lookup by tag and identifier
- Write modified documents with the split naming convention

Key classes:
- SvgDocument: In-memory document with lookup helpers
- SvgReader: Load SVG files
- SvgWriter: Save modified documents
"""

from pathsplitter.io.document import SVG_NS, SvgDocument, local_name
from pathsplitter.io.reader import SvgReader, parse_svg
from pathsplitter.io.writer import SvgWriter

__all__ = [
    "SVG_NS",
    "SvgDocument",
    "SvgReader",
    "SvgWriter",
    "local_name",
    "parse_svg",
]
