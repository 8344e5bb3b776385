"""Unit tests for geometry predicates and the clustering engine.

Tests cover:
- Ray-casting point-in-polygon
- Bounding-box area and containment
- Area ranking and its stability
- Hole assignment and fixed cluster reference geometry
"""

from pathsplitter.core.clustering import ClusteringEngine, cluster_subpaths
from pathsplitter.core.geometry import bbox_area, bbox_contains, point_in_polygon
from pathsplitter.core.interpreter import collect_subpaths
from pathsplitter.core.tokenizer import tokenize
from pathsplitter.domain import BoundingBox, Point

SQUARE = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]


def subpaths_of(data: str):
    return collect_subpaths(tokenize(data))


def start_points(subpaths) -> list[tuple[float, float]]:
    return [sp.start_point.to_tuple() for sp in subpaths]


class TestPointInPolygon:
    """Tests for the ray-casting test."""

    def test_center_inside(self):
        assert point_in_polygon(Point(1.0, 1.0), SQUARE)

    def test_outside(self):
        assert not point_in_polygon(Point(3.0, 3.0), SQUARE)
        assert not point_in_polygon(Point(-1.0, 1.0), SQUARE)

    def test_open_polygon_treated_as_closed(self):
        triangle = [Point(0, 0), Point(10, 0), Point(0, 10)]
        assert point_in_polygon(Point(2, 2), triangle)
        assert not point_in_polygon(Point(8, 8), triangle)

    def test_concave_polygon(self):
        # U shape opening upward
        u_shape = [
            Point(0, 0), Point(30, 0), Point(30, 30), Point(20, 30),
            Point(20, 10), Point(10, 10), Point(10, 30), Point(0, 30),
        ]
        assert point_in_polygon(Point(5, 20), u_shape)
        assert not point_in_polygon(Point(15, 20), u_shape)

    def test_degenerate_polygons(self):
        assert not point_in_polygon(Point(0, 0), [])
        assert not point_in_polygon(Point(0, 0), [Point(0, 0)])
        assert not point_in_polygon(Point(1, 0), [Point(0, 0), Point(2, 0)])


class TestBoundingBoxPredicates:
    """Tests for area and containment helpers."""

    def test_area(self):
        assert bbox_area(BoundingBox(0, 0, 10, 5)) == 50
        assert bbox_area(BoundingBox.from_point(3, 3)) == 0

    def test_contains(self):
        assert bbox_contains(BoundingBox(0, 0, 10, 10), BoundingBox(2, 2, 8, 8))
        assert bbox_contains(BoundingBox(0, 0, 10, 10), BoundingBox(0, 0, 10, 10))
        assert not bbox_contains(BoundingBox(2, 2, 8, 8), BoundingBox(0, 0, 10, 10))


class TestRanking:
    """Tests for area-descending ordering."""

    def test_largest_first(self):
        subpaths = subpaths_of(
            "M0 0 L5 0 L5 5 Z M100 0 L130 0 L130 30 Z M200 0 L210 0 L210 10 Z"
        )
        ranked = ClusteringEngine().rank(subpaths)
        assert start_points(ranked) == [(100, 0), (200, 0), (0, 0)]

    def test_equal_area_keeps_input_order(self):
        subpaths = subpaths_of("M50 0 L60 0 L60 10 Z M0 0 L10 0 L10 10 Z")
        ranked = ClusteringEngine().rank(subpaths)
        assert start_points(ranked) == [(50, 0), (0, 0)]

    def test_rank_does_not_mutate_input(self):
        subpaths = subpaths_of("M0 0 L1 1 M10 10 L30 30")
        before = list(subpaths)
        ClusteringEngine().rank(subpaths)
        assert subpaths == before


class TestClustering:
    """Tests for assigning subpaths to clusters."""

    def test_disjoint_shapes_get_own_clusters(self):
        clusters = cluster_subpaths(subpaths_of("M0 0 L10 0 L10 10 Z M20 0 L30 0 L30 10 Z"))
        assert len(clusters) == 2
        assert all(len(c.members) == 1 for c in clusters)

    def test_hole_joins_outer(self):
        clusters = cluster_subpaths(
            subpaths_of(
                "M25 25 L75 25 L75 75 L25 75 Z M0 0 L100 0 L100 100 L0 100 Z"
            )
        )

        assert len(clusters) == 1
        assert clusters[0].outer.start_point == Point(0, 0)
        assert [h.start_point for h in clusters[0].holes] == [Point(25, 25)]

    def test_bbox_inside_but_start_point_outside(self):
        """A contour inside the box but outside the outline stays separate."""
        clusters = cluster_subpaths(
            subpaths_of("M0 0 L100 0 L0 100 Z M80 80 L90 80 L90 90 L80 90 Z")
        )
        assert len(clusters) == 2

    def test_start_point_inside_but_bbox_escapes(self):
        clusters = cluster_subpaths(
            subpaths_of("M0 0 L100 0 L100 100 L0 100 Z M50 50 L150 50 L150 60 Z")
        )
        assert len(clusters) == 2

    def test_nested_island_joins_first_enclosing_cluster(self):
        clusters = cluster_subpaths(
            subpaths_of(
                "M45 45 L55 45 L55 55 L45 55 Z "
                "M0 0 L100 0 L100 100 L0 100 Z "
                "M25 25 L75 25 L75 75 L25 75 Z"
            )
        )

        assert len(clusters) == 1
        assert start_points(clusters[0].members) == [(0, 0), (25, 25), (45, 45)]

    def test_cluster_reference_is_defining_member(self):
        clusters = cluster_subpaths(
            subpaths_of("M0 0 L100 0 L100 100 L0 100 Z M25 25 L75 25 L75 75 L25 75 Z")
        )

        cluster = clusters[0]
        assert cluster.bbox is cluster.members[0].bbox
        assert cluster.polygon is cluster.members[0].polygon
        assert cluster.bbox.to_tuple() == (0, 0, 100, 100)

    def test_find_cluster_scans_in_creation_order(self):
        engine = ClusteringEngine()
        clusters = engine.cluster(
            subpaths_of("M0 0 L100 0 L100 100 L0 100 Z M200 0 L300 0 L300 100 L200 100 Z")
        )
        hole = subpaths_of("M210 10 L220 10 L220 20 Z")[0]

        assert engine.find_cluster(hole, clusters) is clusters[1]

    def test_empty_input(self):
        assert cluster_subpaths([]) == []
