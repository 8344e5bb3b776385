"""Serialization of clusters back into path data.

Each cluster's member token lists are joined, in member order, with a
single space. Token text is emitted exactly as scanned; nothing is
renumbered or reformatted.
"""

from pathsplitter.domain import Cluster, SubPath

SEPARATOR = " "


def format_number(value: float) -> str:
    """Format a computed coordinate as path-data text.

    Integral values are written without a fractional part; other values
    use the shortest text that round-trips.

    Args:
        value: Coordinate value

    Returns:
        Number text, e.g. "10", "-2.5", "0.30000000000000004"
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def serialize_subpath(subpath: SubPath) -> str:
    return SEPARATOR.join(token.text for token in subpath.tokens)


def serialize_cluster(cluster: Cluster) -> str:
    """Join all member subpaths of a cluster into one path-data string."""
    return SEPARATOR.join(serialize_subpath(member) for member in cluster.members)


def serialize_clusters(clusters: list[Cluster]) -> list[str]:
    """Serialize clusters in order, one path-data string per cluster."""
    return [serialize_cluster(cluster) for cluster in clusters]
