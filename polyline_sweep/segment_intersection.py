"""
Pairwise tests between polyline edges.

Two edges are tested only when they are not adjacent, i.e. when they do not
share a drawing vertex of the same polyline.
"""

from typing import Optional

from polyline_sweep.sweep_events import EdgeId, Point, Segment


def segment_intersection(a: Segment, b: Segment) -> Optional[Point]:
    """
    Check intersection between segments P1P2 and P3P4.

    Touching at an endpoint counts as an intersection. Parallel and collinear
    segments never intersect, even when they overlap.

    Args:
        a: Segment (P1, P2).
        b: Segment (P3, P4).

    Returns:
        The intersection point if it exists, None otherwise
    """
    (x1, y1), (x2, y2) = a
    (x3, y3), (x4, y4) = b

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        return None  # Parallel

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom

    if 0 <= ua <= 1 and 0 <= ub <= 1:
        return (x1 + ua * (x2 - x1), y1 + ua * (y2 - y1))
    return None


def are_adjacent(e1: EdgeId, e2: EdgeId) -> bool:
    """Returns True if both edges belong to the same polyline and share a vertex."""
    if e1.line_index != e2.line_index:
        return False
    return abs(e1.vertex_index - e2.vertex_index) <= 1
