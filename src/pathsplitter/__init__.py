"""Pathsplitter - Split compound SVG paths into separate shapes.

Pathsplitter decomposes a single compound path (one ``d`` attribute holding
several contours) into independently addressable shapes, keeping interior
holes, like the inside of a letter "O", grouped with the outer contour
that encloses them.

Example:
    $ pathsplitter analyze icon.svg

This will create icon-split.svg with every compound path replaced by one
path per shape and identifiers assigned to unlabeled elements.
"""

__version__ = "0.1.0"

from pathsplitter.core.decomposer import decompose

__all__ = ["__version__", "decompose"]
