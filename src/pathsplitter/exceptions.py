"""Exception hierarchy for pathsplitter."""


class PathSplitterError(Exception):
    """Base exception for all pathsplitter errors."""

    pass


class DocumentError(PathSplitterError):
    """Errors related to SVG document loading or saving."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class DocumentFormatError(DocumentError):
    """Document parsed as XML but is not an SVG document."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid SVG document '{path}': {details}")


class ElementError(PathSplitterError):
    """Errors related to a specific document element."""

    pass


class ElementNotFoundError(ElementError):
    """Requested element not found in document."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"Element '{element_id}' not found in document")


class NotAPathError(ElementError):
    """Element cannot be separated because it is not a path with data."""

    def __init__(self, element_id: str, tag: str) -> None:
        self.element_id = element_id
        self.tag = tag
        super().__init__(f"Element '{element_id}' is a <{tag}>, not a <path> with path data")
