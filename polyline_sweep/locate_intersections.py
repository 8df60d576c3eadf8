"""Locates the points where the edges of a set of polylines cross, using a plane sweep."""

import time
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

from polyline_sweep.active_segments import ActiveSegment, ActiveSegmentSet
from polyline_sweep.segment_intersection import are_adjacent, segment_intersection
from polyline_sweep.sweep_events import EdgeId, EventQueue, Point, generate_events

REMOVAL_MODES = ("top", "identity")


class InvalidGeometryError(ValueError):
    """Raised when a polyline holds a coordinate that is not a finite number."""


@dataclass
class Intersection:
    """
    A crossing between two polyline edges.

    Attributes:
        point: Coordinates of the crossing
        line1: Edge whose start event discovered the crossing
        line2: Active edge it was found against
    """

    point: Point
    line1: EdgeId
    line2: EdgeId


def validate_lines(lines: Sequence[Sequence[Point]]) -> None:
    """
    Checks that every coordinate of every polyline is finite.

    Args:
        lines: Polylines as sequences of (x, y) points

    Raises:
        InvalidGeometryError: If a coordinate is NaN or infinite.
    """
    for line_index, line in enumerate(lines):
        coords = np.asarray(line, dtype=float)
        if coords.size and not np.isfinite(coords).all():
            raise InvalidGeometryError(
                f"Line {line_index} has non-finite coordinates"
            )


class IntersectionLocator:
    """Sweeps a set of polylines left to right and records where their edges cross."""

    def __init__(
        self, removal: str = "top", validate: bool = True, verbose: bool = False
    ):
        """
        Initializes the IntersectionLocator.

        Parameters:
            removal: How an end event removes from the active set. "top" pops the
                segment with the nearest far endpoint, "identity" removes the
                segment of the edge that ended
            validate: Reject non-finite coordinates before sweeping
            verbose: Display log
        """
        self.set_removal(removal)
        self.validate = validate
        self.verbose = verbose

    def set_removal(self, removal: str) -> None:
        """
        Set the removal mode of the active set.

        Parameters:
            removal: Either "top" or "identity"

        Raises:
            ValueError: If the mode is unknown.
        """
        if removal not in REMOVAL_MODES:
            raise ValueError(
                f"Unknown removal mode {removal!r}, expected one of {REMOVAL_MODES}"
            )
        self.removal = removal

    def set_validate(self, validate: bool) -> None:
        self.validate = validate

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose

    def locate(self, lines: Sequence[Sequence[Point]]) -> list[Intersection]:
        """
        Finds all crossings between non-adjacent edges of the polylines.

        Every new segment is tested against the whole active set, so the cost
        is quadratic in the number of edges in the worst case.

        Parameters:
            lines: Polylines as sequences of (x, y) points

        Returns:
            The intersections, in the order the sweep discovered them
        """
        if self.validate:
            validate_lines(lines)

        events = generate_events(lines)
        queue = EventQueue(events)
        active = ActiveSegmentSet()
        intersections = []

        while len(queue) > 0:
            event = events[queue.pop()]
            other = events[event.other]
            if self.verbose:
                kind = "str" if event.is_start else "end"
                print(f"{event.edge} {kind} {event.point} -> {other.point}")

            if not event.is_start:
                # Unordered (NaN) coordinates can end a segment before it starts
                if self.removal == "top":
                    if active:
                        active.remove_one()
                elif event.edge in active:
                    active.remove(event.edge)
                continue

            segment = ActiveSegment(event.edge, event.point, other.point)
            for other_segment in active:
                if are_adjacent(segment.edge, other_segment.edge):
                    continue
                point = segment_intersection(segment.segment, other_segment.segment)
                if point is not None:
                    intersections.append(
                        Intersection(point, segment.edge, other_segment.edge)
                    )

            active.insert(segment)

        if self.verbose:
            print(
                f"Edges: {len(events) // 2}, intersections: {len(intersections)}"
            )
        return intersections


def locate_intersections(
    lines: Sequence[Sequence[Point]],
    removal: str = "top",
    validate: bool = True,
    verbose: bool = False,
) -> list[Intersection]:
    """
    Finds all crossings between non-adjacent edges of the polylines.

    Args:
        lines: Polylines as sequences of (x, y) points
        removal: Active set removal mode, see IntersectionLocator
        validate: Reject non-finite coordinates before sweeping
        verbose: Display log

    Returns:
        The intersections, in the order the sweep discovered them
    """
    locator = IntersectionLocator(removal=removal, validate=validate, verbose=verbose)
    return locator.locate(lines)


def intersection_points(intersections: list[Intersection]) -> list[Point]:
    """Returns the coordinates of the intersections, keeping their order."""
    return [intersection.point for intersection in intersections]


def plot_intersections(
    lines: Sequence[Sequence[Point]], intersections: list[Intersection]
) -> None:  # pragma: no cover
    """
    Displays the polylines and their crossings in a 2D graph.

    :param lines: Polylines to draw
    :param intersections: Crossings to mark
    """
    fig, ax = plt.subplots()

    for i, line in enumerate(lines):
        coords = np.array(line, dtype=float)
        ax.plot(coords[:, 0], coords[:, 1], marker=".", label=f"Line {i}")

    if intersections:
        points = np.array(intersection_points(intersections))
        ax.scatter(points[:, 0], points[:, 1], c="red", marker="x", zorder=3)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_aspect("equal")
    ax.legend()
    plt.show()


def main() -> None:  # pragma: no cover
    """Main function to locate the crossings of sample polylines, time the sweep and plot the result."""
    lines = [
        [(0.0, 0.0), (400.0, 0.0)],
        [(40.0, 20.0), (90.0, -80.0)],
        [(70.0, -90.0), (110.0, 30.0)],
        [(280.0, -20.0), (320.0, 20.0), (360.0, 40.0)],
    ]
    runs = 10_000

    locator = IntersectionLocator()
    start = time.perf_counter()
    for _ in range(runs):
        locator.locate(lines)
    elapsed = time.perf_counter() - start
    print(f"locate_intersections: {elapsed * 1000:.1f} ms for {runs} runs")

    intersections = locator.locate(lines)
    for intersection in intersections:
        print(
            f"{intersection.point}: {intersection.line1} x {intersection.line2}"
        )

    plot_intersections(lines, intersections)


if __name__ == "__main__":  # pragma: no cover
    main()
