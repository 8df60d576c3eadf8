"""Sweep events generated from polylines and the queue that orders them."""

import heapq
from dataclasses import dataclass
from typing import NamedTuple, Sequence

Point = tuple[float, float]
Line = list[Point]
Segment = tuple[Point, Point]


class EdgeId(NamedTuple):
    """
    Identifies one edge of a polyline.

    Attributes:
        line_index: Index of the polyline in the input
        vertex_index: Index of the edge's first vertex within the polyline
    """

    line_index: int
    vertex_index: int


@dataclass
class SweepEvent:
    """
    One endpoint occurrence of an edge.

    Attributes:
        point: Coordinates of the endpoint
        edge: Identity of the edge the endpoint belongs to
        other: Arena index of the event for the edge's other endpoint
        is_start: True if this endpoint is met first by the sweep line
    """

    point: Point
    edge: EdgeId
    other: int
    is_start: bool


def compare_points(p: Point, q: Point) -> int:
    """
    Compares two points in sweep order, x first and then y.

    Args:
        p: First point
        q: Second point

    Returns:
        -1 if p comes before q, 1 if it comes after, 0 if they coincide
    """
    if p[0] != q[0]:
        return -1 if p[0] < q[0] else 1
    if p[1] != q[1]:
        return -1 if p[1] < q[1] else 1
    return 0


def generate_events(lines: Sequence[Sequence[Point]]) -> list[SweepEvent]:
    """
    Turns every edge of every polyline into a pair of linked sweep events.

    The two events of an edge sit next to each other in the returned list and
    reference each other by index. The endpoint ranked lower by compare_points
    is the start event; a zero-length edge starts at its first drawing vertex.

    Args:
        lines: Polylines as sequences of (x, y) points

    Returns:
        The event arena
    """
    events = []
    for line_index, line in enumerate(lines):
        for vertex_index in range(len(line) - 1):
            vertex = tuple(line[vertex_index])
            next_vertex = tuple(line[vertex_index + 1])
            edge = EdgeId(line_index, vertex_index)

            first_starts = compare_points(vertex, next_vertex) <= 0
            index = len(events)
            events.append(SweepEvent(vertex, edge, index + 1, first_starts))
            events.append(SweepEvent(next_vertex, edge, index, not first_starts))

    return events


class EventQueue:
    """Priority queue yielding arena indices of sweep events in sweep order."""

    def __init__(self, events: list[SweepEvent]):
        """
        Initializes the queue with every event of the arena.

        At a coincident coordinate start events come before end events, so
        edges touching at an endpoint are still active together. Remaining
        ties fall back to the arena index, which keeps the order reproducible.

        Parameters:
            events: The event arena produced by generate_events
        """
        self.events = events
        self._heap = [
            (event.point[0], event.point[1], 0 if event.is_start else 1, index)
            for index, event in enumerate(events)
        ]
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def pop(self) -> int:
        """
        Removes the next event from the queue.

        Returns:
            The arena index of the event

        Raises:
            IndexError: If the queue is empty.
        """
        return heapq.heappop(self._heap)[3]
