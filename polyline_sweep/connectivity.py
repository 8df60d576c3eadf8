"""Groups polylines that are connected through their crossings."""

from typing import Sequence

import networkx as nx

from polyline_sweep.locate_intersections import Intersection
from polyline_sweep.sweep_events import Point


def intersection_graph(
    lines: Sequence[Sequence[Point]], intersections: list[Intersection]
) -> nx.Graph:
    """
    Creates a graph where nodes are polylines and edges connect polylines that cross.

    Nodes carry the polyline's points and the points where it crosses itself.
    Edges carry the crossing points between both polylines, with their count as
    the edge weight.

    Args:
        lines: Polylines the intersections were computed from
        intersections: Result of locate_intersections on the same polylines

    Returns:
        NetworkX graph with one node per polyline index
    """
    G = nx.Graph()
    for i, line in enumerate(lines):
        G.add_node(i, points=list(line), self_intersections=[])

    for intersection in intersections:
        a = intersection.line1.line_index
        b = intersection.line2.line_index
        if a == b:
            G.nodes[a]["self_intersections"].append(intersection.point)
            continue

        if G.has_edge(a, b):
            G.edges[a, b]["points"].append(intersection.point)
            G.edges[a, b]["weight"] += 1
        else:
            G.add_edge(a, b, points=[intersection.point], weight=1)

    return G


def connected_lines(
    lines: Sequence[Sequence[Point]], intersections: list[Intersection]
) -> list[list[int]]:
    """
    Finds the groups of polylines connected through crossings.

    Returns:
        Sorted lists of polyline indices, ordered by their smallest index
    """
    graph = intersection_graph(lines, intersections)
    components = [sorted(component) for component in nx.connected_components(graph)]
    return sorted(components, key=lambda component: component[0])
