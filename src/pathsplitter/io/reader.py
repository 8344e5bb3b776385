"""SVG reader for loading documents.

This module provides the SvgReader class for loading SVG files into
SvgDocument objects backed by lxml.
"""

from pathlib import Path

from lxml import etree

from pathsplitter.exceptions import DocumentFormatError, DocumentLoadError
from pathsplitter.io.document import SvgDocument, local_name


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def parse_svg(content: bytes, source: str) -> etree._ElementTree:
    """Parse SVG bytes into an element tree.

    Args:
        content: Raw document bytes
        source: Name used in error messages

    Returns:
        Parsed element tree

    Raises:
        DocumentLoadError: If the content is not well-formed XML
        DocumentFormatError: If the root element is not <svg>
    """
    try:
        root = etree.fromstring(content, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise DocumentLoadError(source, str(e)) from e

    if local_name(root) != "svg":
        raise DocumentFormatError(source, f"root element is <{local_name(root)}>, expected <svg>")

    return root.getroottree()


class SvgReader:
    """Loads SVG files into documents.

    Example:
        reader = SvgReader(Path("icon.svg"))
        document = reader.load()
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._document: SvgDocument | None = None

    def load(self) -> SvgDocument:
        """Load the SVG file.

        Returns:
            The loaded document

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file cannot be read or parsed
            DocumentFormatError: If the file is not an SVG document
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            content = self._svg_path.read_bytes()
        except OSError as e:
            raise DocumentLoadError(str(self._svg_path), str(e)) from e

        self._document = SvgDocument(parse_svg(content, source=str(self._svg_path)))
        return self._document

    @property
    def document(self) -> SvgDocument:
        """The loaded document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    @property
    def path_count(self) -> int:
        """Number of <path> elements in the loaded document."""
        return sum(1 for _ in self.document.iter_elements(["path"]))

    @property
    def element_count(self) -> int:
        """Number of elements in the loaded document."""
        return sum(1 for _ in self.document.iter_all())
