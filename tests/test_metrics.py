"""
Unit tests for generation metrics helpers.
"""

import pytest

from netviz_core.builder import build_graph
from netviz_core.config import SimulationConfig
from netviz_core.graph import Edge, Graph, Node
from netviz_core.metrics import (
    frame_summary,
    marker_edge_count,
    mean_anchor_displacement,
    pulse_radius_bounds,
    visible_edge_count,
)


def _graph():
    g = Graph(500, 500)
    g.add_node(Node(10.0, 0.0, 2.0))
    g.add_node(Node(40.0, 15.0, 4.0))
    g.add_node(Node(400.0, 400.0, 3.0))
    g.add_edge(Edge(0, 1))  # short, marker gate passes (10 + 15)
    g.add_edge(Edge(1, 0))  # short, 40 + 0 also passes
    g.add_edge(Edge(0, 2))  # long
    return g


class TestEdgeCounts:
    def test_visible_and_marker_counts(self):
        g = _graph()
        assert visible_edge_count(g) == 2
        assert marker_edge_count(g) == 2

    def test_counts_follow_config(self):
        g = _graph()
        assert visible_edge_count(g, SimulationConfig(max_distance=1000)) == 3


class TestNodeMetrics:
    def test_mean_anchor_displacement(self):
        g = _graph()
        assert mean_anchor_displacement(g) == 0.0
        g.nodes[0].x += 30.0
        assert mean_anchor_displacement(g) == pytest.approx(10.0)

    def test_pulse_radius_bounds(self):
        g = _graph()
        assert pulse_radius_bounds(g) == (2.0, 4.0)

    def test_empty_graph(self):
        g = build_graph(0, 0)
        assert mean_anchor_displacement(g) == 0.0
        assert pulse_radius_bounds(g) is None
        assert frame_summary(g)["nodes"] == 0.0

    def test_frame_summary_keys(self):
        summary = frame_summary(_graph())
        assert summary["nodes"] == 3.0
        assert summary["edges"] == 3.0
        assert summary["visible_edges"] == 2.0
        assert summary["marker_edges"] == 2.0
