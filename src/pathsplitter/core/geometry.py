"""Geometric predicates for subpath clustering.

This module provides the small set of pure functions the clustering
engine needs:
- Bounding-box area
- Bounding-box containment
- Point-in-polygon testing (ray casting algorithm)

All functions are pure and stateless.
"""

from pathsplitter.domain import BoundingBox, Point


def bbox_area(bbox: BoundingBox) -> float:
    """Calculate the area of a bounding box.

    Args:
        bbox: The box to measure

    Returns:
        (max_x - min_x) * (max_y - min_y). Zero for degenerate boxes.

    Examples:
        >>> bbox_area(BoundingBox(0.0, 0.0, 10.0, 5.0))
        50.0
    """
    return (bbox.max_x - bbox.min_x) * (bbox.max_y - bbox.min_y)


def bbox_contains(container: BoundingBox, item: BoundingBox) -> bool:
    """Check if one box fully contains another.

    Bounds are compared inclusively, so a box contains itself.

    Args:
        container: The enclosing candidate
        item: The box being tested

    Returns:
        True if all four bounds of item lie within container
    """
    return container.contains(item)


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.
    The polygon is treated as implicitly closed.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)  # Outside
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Edge (j, i) straddles the ray's y and crosses to the right of x
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside
