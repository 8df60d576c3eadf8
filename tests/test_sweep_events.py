import pytest

from polyline_sweep.sweep_events import (
    EdgeId,
    EventQueue,
    Line,
    Point,
    Segment,
    compare_points,
    generate_events,
)


@pytest.fixture
def lines():
    return [
        [(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)],
        [(5.0, 10.0), (5.0, -10.0)],
    ]


# Test point ordering
def test_compare_points():
    assert compare_points((0, 5), (1, -5)) == -1
    assert compare_points((1, -5), (0, 5)) == 1
    assert compare_points((2, 1), (2, 3)) == -1
    assert compare_points((2, 3), (2, 1)) == 1
    assert compare_points((2.5, 3.5), (2.5, 3.5)) == 0


def test_generate_events_count(lines):
    events = generate_events(lines)
    # Three edges in total, two events each
    assert len(events) == 6


def test_generate_events_are_linked(lines):
    events = generate_events(lines)
    for index, event in enumerate(events):
        other = events[event.other]
        assert other.other == index
        assert other.edge == event.edge
        assert other.is_start != event.is_start


def test_generate_events_edge_ids(lines):
    events = generate_events(lines)
    edges = {event.edge for event in events}
    assert edges == {EdgeId(0, 0), EdgeId(0, 1), EdgeId(1, 0)}


def test_start_event_is_lesser_endpoint(lines):
    events = generate_events(lines)
    for event in events:
        if event.is_start:
            assert compare_points(event.point, events[event.other].point) <= 0

    # The vertical edge is drawn top to bottom but starts at its lower end
    vertical = [e for e in events if e.edge == EdgeId(1, 0) and e.is_start]
    assert vertical[0].point == (5.0, -10.0)


def test_zero_length_edge_starts_at_first_vertex():
    events = generate_events([[(3.0, 3.0), (3.0, 3.0)]])
    assert len(events) == 2
    assert events[0].is_start
    assert not events[1].is_start


def test_short_lines_have_no_edges():
    assert generate_events([]) == []
    assert generate_events([[(1.0, 1.0)], []]) == []


# Test queue ordering
def test_event_queue_sweep_order(lines):
    events = generate_events(lines)
    queue = EventQueue(events)
    assert len(queue) == len(events)

    popped = []
    while len(queue) > 0:
        popped.append(events[queue.pop()])

    points = [event.point for event in popped]
    assert points == sorted(points)


def test_event_queue_starts_before_ends_at_same_point():
    # Edge (0, 0) ends where edge (1, 0) starts
    events = generate_events([[(0.0, 0.0), (10.0, 0.0)], [(10.0, 0.0), (10.0, 10.0)]])
    queue = EventQueue(events)
    order = [events[queue.pop()] for _ in range(len(events))]

    at_shared = [e for e in order if e.point == (10.0, 0.0)]
    assert at_shared[0].is_start
    assert at_shared[0].edge == EdgeId(1, 0)
    assert not at_shared[1].is_start


def test_event_queue_is_reproducible(lines):
    events = generate_events(lines)
    first = EventQueue(events)
    second = EventQueue(events)
    assert [first.pop() for _ in range(len(events))] == [
        second.pop() for _ in range(len(events))
    ]


def test_event_queue_empty_pop():
    queue = EventQueue([])
    with pytest.raises(IndexError):
        queue.pop()


def test_type_aliases_are_builtin_generics():
    assert Point == tuple[float, float]
    assert Line == list[Point]
    assert Segment == tuple[Point, Point]
