"""Domain models for pathsplitter.

This module contains the value types the decomposition engine works on.
All models are created fresh for each decomposition and never shared
between calls.

Key classes:
- Token: A command letter or numeric literal, kept as source text
- Point: A 2D point in path coordinates
- BoundingBox: Axis-aligned bounds of recorded coordinates
- SubPath: One moveto-delimited contour
- Cluster: A compound shape (outer contour plus its holes)
"""

from pathsplitter.domain.path import BoundingBox, Point, Token, TokenKind
from pathsplitter.domain.shape import Cluster, SubPath

__all__: list[str] = [
    # Enums
    "TokenKind",
    # Core types
    "Token",
    "Point",
    "BoundingBox",
    "SubPath",
    "Cluster",
]
