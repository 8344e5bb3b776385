"""Clustering engine for grouping subpaths into compound shapes.

Subpaths are ranked by bounding-box area, largest first, and each one is
assigned to the first existing cluster that encloses it. A cluster
encloses a subpath when:
- the cluster's bounding box contains the subpath's bounding box, and
- the subpath's start point lies inside the cluster's polygon

A cluster's bounding box and polygon are those of its defining (first,
largest) member. Because outer contours are always larger than the holes
nested in them, they are seen first and become the defining member.
"""

from pathsplitter.core.geometry import bbox_area, bbox_contains, point_in_polygon
from pathsplitter.domain import Cluster, SubPath


class ClusteringEngine:
    """Groups subpaths into clusters of outer contours and their holes.

    The engine is stateless and safe for concurrent use.
    """

    def rank(self, subpaths: list[SubPath]) -> list[SubPath]:
        """Order subpaths by bounding-box area, descending.

        The sort is stable: subpaths of equal area keep their input order.

        Args:
            subpaths: Subpaths in order of appearance

        Returns:
            New list sorted largest first
        """
        return sorted(subpaths, key=lambda sp: bbox_area(sp.bbox), reverse=True)

    def find_cluster(self, subpath: SubPath, clusters: list[Cluster]) -> Cluster | None:
        """Find the first cluster, in creation order, that encloses a subpath.

        Args:
            subpath: The subpath to place
            clusters: Existing clusters

        Returns:
            The enclosing cluster, or None if none accepts it
        """
        for cluster in clusters:
            if not bbox_contains(cluster.bbox, subpath.bbox):
                continue
            if point_in_polygon(subpath.start_point, cluster.polygon):
                return cluster
        return None

    def cluster(self, subpaths: list[SubPath]) -> list[Cluster]:
        """Group subpaths into clusters.

        Args:
            subpaths: Subpaths in order of appearance

        Returns:
            Clusters in creation order, each with its defining member first
        """
        clusters: list[Cluster] = []

        for subpath in self.rank(subpaths):
            target = self.find_cluster(subpath, clusters)
            if target is None:
                clusters.append(Cluster.from_subpath(subpath))
            else:
                target.add(subpath)

        return clusters


def cluster_subpaths(subpaths: list[SubPath]) -> list[Cluster]:
    """Convenience wrapper around ClusteringEngine.cluster()."""
    return ClusteringEngine().cluster(subpaths)
