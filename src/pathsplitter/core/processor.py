"""Document-level shape separation.

This module applies the decomposition engine to SVG documents:

- separate_shape: Replace one compound <path> with one <path> per shape
- smart_analyze: Separate every compound path, then label unlabeled elements
- add_ids_to_elements: Only label unlabeled drawable elements
- inject_id: Ensure the n-th element of a tag has an identifier

Key components:
- SeparationResult: Outcome of separating one element
- DocumentProcessor: Orchestrates actions, logging, and statistics
"""

import time
import traceback
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from lxml import etree

from pathsplitter.config import SplitterSettings
from pathsplitter.core.decomposer import decompose
from pathsplitter.core.ids import IdAllocator
from pathsplitter.exceptions import ElementNotFoundError, NotAPathError
from pathsplitter.io import SvgDocument, SvgReader, SvgWriter, local_name
from pathsplitter.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass
class SeparationResult:
    """Outcome of separating one path element.

    Attributes:
        element_id: Identifier of the original element (None if unlabeled)
        parts: Path data of each separated shape, in output order
        new_ids: Identifiers given to the new elements (empty if unchanged)
    """

    element_id: str | None
    parts: list[str] = field(default_factory=list)
    new_ids: list[str] = field(default_factory=list)

    @property
    def separated(self) -> bool:
        """True if the element was replaced by new elements."""
        return len(self.new_ids) > 0


def replace_with_parts(
    element: etree._Element,
    parts: list[str],
    allocator: IdAllocator,
    prefix: str,
) -> list[str]:
    """Replace an element with one clone per path-data part.

    Each clone copies every attribute of the original except ``d`` and
    ``id``, receives its part as ``d`` and a freshly allocated identifier,
    and is inserted before the original, which is then removed.

    Args:
        element: The element to replace (must have a parent)
        parts: Path data for each new element, in order
        allocator: Identifier allocator for the document
        prefix: Identifier prefix for the new elements

    Returns:
        Identifiers of the new elements, in order
    """
    parent = element.getparent()
    if parent is None:
        raise ValueError("Cannot replace the document root")

    new_ids: list[str] = []
    for part in parts:
        # Created under the parent so namespace declarations are shared
        clone = etree.SubElement(parent, element.tag)
        for name, value in element.attrib.items():
            if name not in ("d", "id"):
                clone.set(name, value)
        clone.set("d", part)
        new_id = allocator.allocate(prefix)
        clone.set("id", new_id)
        clone.tail = element.tail
        element.addprevious(clone)
        new_ids.append(new_id)

    parent.remove(element)
    return new_ids


class DocumentProcessor:
    """Applies shape separation and identifier assignment to SVG documents.

    Example:
        processor = DocumentProcessor(SplitterSettings())
        document = SvgDocument.from_string(svg_text)
        stats = processor.smart_analyze(document)
        print(document.to_string())
    """

    def __init__(
        self,
        config: SplitterSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings for identifiers, processing, and logging
            logger: Logger to use (configured from settings if None)
        """
        self.config = config
        self.logger = logger or configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def separate_shape(
        self,
        document: SvgDocument,
        element_id: str,
        allocator: IdAllocator | None = None,
    ) -> SeparationResult:
        """Separate one compound path element into its shapes.

        If the path decomposes into a single shape the document is left
        unchanged.

        Args:
            document: Document containing the element
            element_id: Identifier of the <path> to separate
            allocator: Shared allocator (a fresh one over the document if None)

        Returns:
            SeparationResult describing the change

        Raises:
            ElementNotFoundError: If no element has this identifier
            NotAPathError: If the element is not a <path> with path data
        """
        element = document.get_element_by_id(element_id)
        if element is None:
            raise ElementNotFoundError(element_id)

        tag = local_name(element)
        if tag != "path" or not element.get("d"):
            raise NotAPathError(element_id, tag)

        if allocator is None:
            allocator = IdAllocator(document.used_ids())

        return self._separate_element(element, allocator)

    def _separate_element(
        self, element: etree._Element, allocator: IdAllocator
    ) -> SeparationResult:
        element_id = element.get("id")
        start_time = time.perf_counter()
        self.processing_logger.log_path_start(element_id)

        parts = decompose(element.get("d", ""))
        if len(parts) <= 1:
            self.processing_logger.log_path_skipped(element_id, "single shape")
            return SeparationResult(element_id=element_id, parts=parts)

        new_ids = replace_with_parts(element, parts, allocator, self.config.ids.path_prefix)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.processing_logger.log_path_separated(element_id, new_ids, duration_ms)
        return SeparationResult(element_id=element_id, parts=parts, new_ids=new_ids)

    def add_ids_to_elements(
        self,
        document: SvgDocument,
        allocator: IdAllocator | None = None,
    ) -> int:
        """Assign identifiers to every unlabeled drawable element.

        Identifiers use the element's tag as prefix (``rect-1``, ``g-2``).

        Args:
            document: Document to label
            allocator: Shared allocator (a fresh one over the document if None)

        Returns:
            Number of identifiers assigned
        """
        if allocator is None:
            allocator = IdAllocator(document.used_ids())

        tag_counts: dict[str, int] = {}
        for element in list(document.iter_elements(self.config.ids.drawable_tags)):
            if element.get("id"):
                continue
            tag = local_name(element)
            element.set("id", allocator.allocate(tag))
            tag_counts[tag] = tag_counts.get(tag, 0) + 1

        if tag_counts:
            self.processing_logger.log_ids_assigned(tag_counts)
        return sum(tag_counts.values())

    def inject_id(self, document: SvgDocument, tag: str, index: int) -> str | None:
        """Ensure the index-th element with a tag has an identifier.

        Args:
            document: Document to search
            tag: Element tag (local name)
            index: Zero-based position among elements with that tag

        Returns:
            The element's existing or newly assigned identifier, or None if
            there is no such element
        """
        if index < 0:
            return None

        elements = list(document.iter_elements([tag]))
        if index >= len(elements):
            return None

        element = elements[index]
        existing = element.get("id")
        if existing:
            return existing

        new_id = IdAllocator(document.used_ids()).allocate(tag.lower())
        element.set("id", new_id)
        return new_id

    def find_compound_paths(self, document: SvgDocument) -> list[tuple[str | None, int]]:
        """List paths that would be separated, with their shape counts.

        Returns:
            (element id, number of shapes) for each compound path, in
            document order
        """
        found: list[tuple[str | None, int]] = []
        for element in document.iter_elements(["path"]):
            d = element.get("d")
            if not d:
                continue
            count = len(decompose(d))
            if count > 1:
                found.append((element.get("id"), count))
        return found

    def smart_analyze(self, document: SvgDocument) -> ProcessingStats:
        """Separate every compound path and label unlabeled elements.

        Paths are visited in document order. One allocator is shared by
        both passes so identifiers never collide.

        Args:
            document: Document to modify in place

        Returns:
            ProcessingStats for this run
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        allocator = IdAllocator(document.used_ids())

        if self.config.processing.separate_paths:
            for element in list(document.iter_elements(["path"])):
                if not element.get("d"):
                    continue
                try:
                    self._separate_element(element, allocator)
                except Exception as e:
                    self.processing_logger.log_path_error(
                        element.get("id"), e, traceback.format_exc()
                    )

        if self.config.processing.assign_ids:
            self.add_ids_to_elements(document, allocator)

        stats.end_time = time.time()
        self.logger.info(
            "Analysis complete",
            paths_examined=stats.paths_examined,
            paths_separated=stats.paths_separated,
            shapes_created=stats.shapes_created,
            ids_assigned=stats.ids_assigned,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return stats

    def process(self, input_path: Path, output_path: Path | None = None) -> ProcessingStats:
        """Analyze an SVG file and write the result.

        Args:
            input_path: Path to the input SVG
            output_path: Path for the output SVG (auto-generated if None)

        Returns:
            ProcessingStats for the run

        Raises:
            FileNotFoundError: If the input file does not exist
            DocumentLoadError: If the input cannot be parsed
            DocumentSaveError: If the output cannot be written
        """
        if output_path is None:
            output_path = SvgWriter.get_split_path(input_path)

        self.logger.info("Starting analysis", input=str(input_path), output=str(output_path))

        document = SvgReader(input_path).load()
        stats = self.smart_analyze(document)
        SvgWriter(document, output_path).save()

        self.logger.info("Document saved", output=str(output_path))
        return stats
