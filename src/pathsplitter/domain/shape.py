"""Subpath and cluster records.

A SubPath is one moveto-delimited contour of a compound path. A Cluster
groups the subpaths that together form one visual shape: an outer contour
followed by the holes nested inside it.
"""

from dataclasses import dataclass, field

from pathsplitter.domain.path import BoundingBox, Point, Token


@dataclass
class SubPath:
    """A single contour extracted from path data.

    Attributes:
        tokens: Tokens of this contour as emitted by the interpreter
        bbox: Bounding box of recorded endpoints and curve control points
        polygon: Endpoint-only polygon approximation of the contour
        start_point: Absolute coordinate of the opening moveto (or of the pen
            if the contour has none)
    """

    tokens: list[Token]
    bbox: BoundingBox
    polygon: list[Point]
    start_point: Point

    @property
    def area(self) -> float:
        """Bounding-box area used for ranking."""
        return self.bbox.area

    def to_path_data(self) -> str:
        """Join the token texts into path-data syntax."""
        return " ".join(token.text for token in self.tokens)


@dataclass
class Cluster:
    """A compound shape: a defining contour plus the contours it encloses.

    The bbox and polygon are those of the first (defining) member and are
    never re-derived when later members are added.

    Attributes:
        members: Subpaths in the order they were added, defining member first
        bbox: Containment reference box, fixed at creation
        polygon: Containment reference polygon, fixed at creation
    """

    members: list[SubPath] = field(default_factory=list)
    bbox: BoundingBox = field(default_factory=BoundingBox)
    polygon: list[Point] = field(default_factory=list)

    @classmethod
    def from_subpath(cls, subpath: SubPath) -> "Cluster":
        """Start a new cluster defined by a single subpath."""
        return cls(members=[subpath], bbox=subpath.bbox, polygon=subpath.polygon)

    @property
    def outer(self) -> SubPath:
        """The defining (largest) member."""
        return self.members[0]

    @property
    def holes(self) -> list[SubPath]:
        """Members nested inside the defining member."""
        return self.members[1:]

    def add(self, subpath: SubPath) -> None:
        self.members.append(subpath)
