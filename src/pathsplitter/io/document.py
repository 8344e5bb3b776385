"""SVG document wrapper.

SvgDocument holds an lxml element tree and provides the small set of
lookups the document actions need: element iteration by tag, lookup by
identifier, and the set of identifiers in use. Both namespaced
(``{http://www.w3.org/2000/svg}path``) and bare (``path``) tags are
handled by comparing local names.
"""

from collections.abc import Iterator

from lxml import etree

SVG_NS = "http://www.w3.org/2000/svg"


def local_name(element: etree._Element) -> str:
    """Return the tag of an element without its namespace, lowercased."""
    return etree.QName(element).localname.lower()


class SvgDocument:
    """An in-memory SVG document.

    Example:
        document = SvgDocument.from_string('<svg xmlns="http://www.w3.org/2000/svg"/>')
        for path in document.iter_elements(["path"]):
            print(path.get("d"))
    """

    def __init__(self, tree: etree._ElementTree) -> None:
        self._tree = tree

    @classmethod
    def from_string(cls, content: str) -> "SvgDocument":
        """Parse a document from SVG text.

        Raises:
            DocumentLoadError: If the text is not well-formed XML
            DocumentFormatError: If the root element is not <svg>
        """
        from pathsplitter.io.reader import parse_svg

        return cls(parse_svg(content.encode("utf-8"), source="<string>"))

    @property
    def tree(self) -> etree._ElementTree:
        return self._tree

    @property
    def root(self) -> etree._Element:
        return self._tree.getroot()

    def iter_all(self) -> Iterator[etree._Element]:
        """Iterate over all elements in document order, skipping comments."""
        for element in self.root.iter():
            if isinstance(element.tag, str):
                yield element

    def iter_elements(self, tags: list[str]) -> Iterator[etree._Element]:
        """Iterate over elements whose local name is in tags, in document order."""
        wanted = {tag.lower() for tag in tags}
        for element in self.iter_all():
            if local_name(element) in wanted:
                yield element

    def get_element_by_id(self, element_id: str) -> etree._Element | None:
        """Find the first element with the given id attribute."""
        for element in self.iter_all():
            if element.get("id") == element_id:
                return element
        return None

    def used_ids(self) -> set[str]:
        """Collect every id attribute value present in the document."""
        return {
            element.get("id")
            for element in self.iter_all()
            if element.get("id") is not None
        }

    def to_string(self) -> str:
        """Serialize the document to SVG text."""
        return etree.tostring(self._tree, encoding="unicode")
