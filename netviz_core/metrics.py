"""
Metrics utilities for network generations.

Read-only helpers over a `Graph`, used by the CLI statistics report and
tests:
- visible and marker-carrying edge counts for the current positions
- mean displacement of nodes from their anchors
- rendered radius bounds across all nodes
"""

from __future__ import annotations

from typing import Dict, Tuple

from .config import SimulationConfig
from .graph import Graph


def visible_edge_count(graph: Graph, config: SimulationConfig | None = None) -> int:
    """Number of edges short enough to draw at the current node positions."""
    config = config or SimulationConfig()
    return sum(1 for e in graph.edges if e.should_render(graph.nodes, config))


def marker_edge_count(graph: Graph, config: SimulationConfig | None = None) -> int:
    """Number of drawable edges whose marker gate currently passes."""
    config = config or SimulationConfig()
    return sum(
        1
        for e in graph.edges
        if e.should_render(graph.nodes, config) and e.shows_marker(graph.nodes, config)
    )


def mean_anchor_displacement(graph: Graph) -> float:
    """Average distance between nodes and their anchors (0.0 when empty)."""
    if graph.is_empty():
        return 0.0
    return sum(n.distance_to_origin() for n in graph.nodes) / graph.node_count


def pulse_radius_bounds(graph: Graph) -> Tuple[float, float] | None:
    """(min, max) rendered radius across nodes, or None for an empty graph."""
    if graph.is_empty():
        return None
    radii = [n.rendered_radius for n in graph.nodes]
    return min(radii), max(radii)


def frame_summary(graph: Graph, config: SimulationConfig | None = None) -> Dict[str, float]:
    """Compact per-frame numbers for logging."""
    config = config or SimulationConfig()
    return {
        "nodes": float(graph.node_count),
        "edges": float(graph.edge_count),
        "visible_edges": float(visible_edge_count(graph, config)),
        "marker_edges": float(marker_edge_count(graph, config)),
        "mean_anchor_displacement": mean_anchor_displacement(graph),
    }
