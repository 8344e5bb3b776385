"""SVG writer for saving modified documents.

This module provides the SvgWriter class for writing documents with the
split naming convention.
"""

from pathlib import Path

from pathsplitter.exceptions import DocumentSaveError
from pathsplitter.io.document import SvgDocument


class SvgWriter:
    """Writes modified SVG documents.

    Example:
        writer = SvgWriter(document, Path("icon-split.svg"))
        writer.save()
    """

    def __init__(self, document: SvgDocument, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            document: The document to write
            output_path: Path where the document will be saved
        """
        self._document = document
        self._output_path = output_path

    def save(self) -> None:
        """Save the document to the output path.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        try:
            with open(self._output_path, "wb") as f:
                self._document.tree.write(f, xml_declaration=True, encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_split_path(input_path: Path) -> Path:
        """Generate output path with split naming convention.

        Converts: icon.svg -> icon-split.svg
                  logo.final.svg -> logo.final-split.svg

        Args:
            input_path: Original SVG file path

        Returns:
            Path with -split suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-split{input_path.suffix}"
