import heapq
from dataclasses import dataclass
from itertools import count
from typing import Iterator

from polyline_sweep.sweep_events import EdgeId, Point, Segment


@dataclass
class ActiveSegment:
    """An edge currently crossed by the sweep line, endpoints in sweep order."""

    edge: EdgeId
    start: Point
    end: Point

    @property
    def far(self) -> Point:
        """Endpoint at which the segment leaves the sweep line."""
        return self.end

    @property
    def segment(self) -> Segment:
        return (self.start, self.end)


class ActiveSegmentSet:
    """
    Priority queue of active segments ranked by their far endpoint.

    The top of the queue is the segment the sweep line will leave next. Equal
    far endpoints are ranked by insertion order.
    """

    def __init__(self):
        self._heap = []
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[ActiveSegment]:
        """Iterates over the active segments in storage order."""
        return (entry[3] for entry in list(self._heap))

    def __contains__(self, edge: EdgeId) -> bool:
        return any(entry[3].edge == edge for entry in self._heap)

    def insert(self, segment: ActiveSegment) -> None:
        """
        Adds a newly started segment.

        Parameters:
            segment: The segment to add
        """
        far = segment.far
        heapq.heappush(self._heap, (far[0], far[1], next(self._counter), segment))

    def peek(self) -> ActiveSegment:
        """Returns the segment that remove_one would remove."""
        return self._heap[0][3]

    def remove_one(self) -> ActiveSegment:
        """
        Removes the segment with the nearest far endpoint.

        The caller's end event is not checked against the removed segment:
        when several active segments share a far endpoint, whichever was
        inserted first goes.

        Returns:
            The removed segment

        Raises:
            IndexError: If no segment is active.
        """
        return heapq.heappop(self._heap)[3]

    def remove(self, edge: EdgeId) -> ActiveSegment:
        """
        Removes the segment belonging to a given edge.

        Parameters:
            edge: Identity of the edge to remove

        Returns:
            The removed segment

        Raises:
            KeyError: If the edge is not active.
        """
        for position, entry in enumerate(self._heap):
            if entry[3].edge == edge:
                last = self._heap.pop()
                if position < len(self._heap):
                    self._heap[position] = last
                    heapq.heapify(self._heap)
                return entry[3]
        raise KeyError(edge)
