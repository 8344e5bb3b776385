"""Compound path decomposition.

decompose() is the single entry point of the engine: it takes one
path-data string and returns one path-data string per visually distinct
shape, where a shape is an outer contour together with the holes nested
inside it.

The function is pure and deterministic. It holds no state between calls
and never raises for malformed path data.
"""

from pathsplitter.core.clustering import ClusteringEngine
from pathsplitter.core.interpreter import SegmentInterpreter
from pathsplitter.core.serializer import serialize_clusters
from pathsplitter.core.tokenizer import scan
from pathsplitter.domain import Cluster


def decompose_clusters(path_data: str) -> list[Cluster]:
    """Decompose path data into cluster records.

    Args:
        path_data: Path-data string (value of an SVG ``d`` attribute)

    Returns:
        Clusters in output order; empty if the input has no tokens
    """
    result = scan(path_data)
    if result.is_empty():
        return []

    subpaths = SegmentInterpreter().run(result.tokens)
    return ClusteringEngine().cluster(subpaths)


def decompose(path_data: str) -> list[str]:
    """Split a compound path into independently addressable shapes.

    Args:
        path_data: Path-data string (value of an SVG ``d`` attribute)

    Returns:
        One path-data string per shape, largest shape first. If the input
        contains no tokens, a single-element list holding the input
        unchanged.

    Examples:
        >>> decompose("M0 0 L10 0 L10 10 Z M20 0 L30 0 L30 10 Z")
        ['M 0 0 L 10 0 L 10 10 Z', 'M 20 0 L 30 0 L 30 10 Z']
    """
    clusters = decompose_clusters(path_data)
    if not clusters:
        return [path_data]
    return serialize_clusters(clusters)


def is_compound(path_data: str) -> bool:
    """Check if path data decomposes into more than one shape."""
    return len(decompose(path_data)) > 1
