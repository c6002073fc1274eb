"""
Graph data structures for the network visualization.

This module defines the data model of one generation:
- Node: A pulsing point anchored to its construction position
- Edge: A directed pairing of two node indices, drawn only when short enough
- Graph: A dense arena of nodes plus index-pair edges for one surface size

Each entity exposes `advance` (pure state update) and `render` (paint onto a
`Surface`) so the physics can be exercised without a display.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import networkx as nx

from .config import SimulationConfig
from .enums import NodeRole, Palette
from .interaction import InteractionState
from .surface import Surface


def node_pulse_factor(phase: float) -> float:
    """Radius scaling for a node pulse phase, always within [0.8, 1.2]."""
    return min(1.2, max(0.8, 1.0 + 0.2 * math.sin(phase)))


def edge_pulse_factor(phase: float) -> float:
    """Alpha scaling for an edge pulse phase, always within [0, 1]."""
    return min(1.0, max(0.0, (math.sin(phase) + 1.0) * 0.5))


@dataclass
class Node:
    """
    A rendered point in the simulated network.

    Nodes drift with a small constant velocity, bounce off the surface edges,
    get pushed away by the pointer, and are pulled back toward their anchor
    every frame.

    Attributes:
        x: Current x position
        y: Current y position
        radius: Base rendered radius (> 0), scaled by the pulse factor
        color: Palette entry chosen at construction
        opacity: Fill opacity within [0.5, 1.0]
        vx: Drift velocity along x
        vy: Drift velocity along y
        pulse_phase: Current pulse phase in radians
        pulse_speed: Phase increment per frame
        role: GENERAL or HUB
        origin_x: Anchor x (defaults to the initial x)
        origin_y: Anchor y (defaults to the initial y)
        pulse_factor: Radius scale computed by the last `advance`
    """

    x: float
    y: float
    radius: float
    color: Palette = Palette.PRIMARY
    opacity: float = 1.0
    vx: float = 0.0
    vy: float = 0.0
    pulse_phase: float = 0.0
    pulse_speed: float = 0.05
    role: NodeRole = NodeRole.GENERAL
    origin_x: Optional[float] = None
    origin_y: Optional[float] = None
    pulse_factor: float = 1.0

    def __post_init__(self):
        if self.origin_x is None:
            self.origin_x = self.x
        if self.origin_y is None:
            self.origin_y = self.y

    @property
    def rendered_radius(self) -> float:
        return self.radius * self.pulse_factor

    def distance_to_origin(self) -> float:
        return math.hypot(self.x - self.origin_x, self.y - self.origin_y)

    def advance(
        self,
        interaction: InteractionState,
        width: float,
        height: float,
        config: SimulationConfig,
    ) -> None:
        """
        Advance this node by one frame.

        Order: pulse, pointer repulsion (a direct positional nudge), anchor
        pull, drift, wall bounce. Bouncing only flips the velocity sign; the
        position is not clamped, so a node may sit just past an edge for a
        frame.

        Args:
            interaction: Pointer position and ramped strength (read-only here)
            width: Surface width used for the bounce test
            height: Surface height used for the bounce test
            config: Physics constants
        """
        self.pulse_phase += self.pulse_speed
        self.pulse_factor = node_pulse_factor(self.pulse_phase)

        max_distance = config.max_distance
        dx = interaction.pointer_x - self.x
        dy = interaction.pointer_y - self.y
        distance = math.hypot(dx, dy)
        if 0.0 < distance < max_distance and interaction.strength > 0:
            force = (max_distance - distance) / max_distance
            push = force * interaction.strength * config.repulsion_scale
            self.x -= dx / distance * push
            self.y -= dy / distance * push

        self.x += (self.origin_x - self.x) * config.return_speed
        self.y += (self.origin_y - self.y) * config.return_speed

        self.x += self.vx
        self.y += self.vy

        if self.x < 0 or self.x > width:
            self.vx = -self.vx
        if self.y < 0 or self.y > height:
            self.vy = -self.vy

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.rendered_radius, self.color.rgb, self.opacity)


@dataclass
class Edge:
    """
    A directed connection between two nodes of the same generation.

    An edge always exists in its generation; it is only drawn while the live
    distance between its endpoints is below `max_distance`.

    Attributes:
        source: Index of the source node in the graph arena
        target: Index of the target node in the graph arena
        opacity: Base line opacity within [0.05, 0.20]
        pulse_phase: Current pulse phase (advances only while visible)
        pulse_speed: Phase increment per visible frame
        distance: Endpoint distance measured by the last `advance`
        visible: Whether the last `advance` found the edge short enough to draw
        pulse_factor: Alpha scale from the last visible `advance`
        opacity_factor: 1 - distance / max_distance from the last visible `advance`
    """

    source: int
    target: int
    opacity: float = 0.1
    pulse_phase: float = 0.0
    pulse_speed: float = 0.05
    distance: float = field(default=0.0, compare=False)
    visible: bool = field(default=False, compare=False)
    pulse_factor: float = field(default=0.0, compare=False)
    opacity_factor: float = field(default=0.0, compare=False)

    def endpoints(self, nodes: Sequence[Node]) -> Tuple[Node, Node]:
        return nodes[self.source], nodes[self.target]

    def length(self, nodes: Sequence[Node]) -> float:
        """Live Euclidean distance between the endpoints' current positions."""
        a, b = self.endpoints(nodes)
        return math.hypot(b.x - a.x, b.y - a.y)

    def should_render(self, nodes: Sequence[Node], config: SimulationConfig) -> bool:
        """Pure visibility test on the current endpoint positions."""
        return self.length(nodes) < config.max_distance

    def advance(self, nodes: Sequence[Node], config: SimulationConfig) -> bool:
        """
        Re-measure the edge and advance its pulse when visible.

        Returns:
            bool: Whether the edge should be drawn this frame
        """
        self.distance = self.length(nodes)
        self.visible = self.distance < config.max_distance
        if not self.visible:
            return False
        self.pulse_phase += self.pulse_speed
        self.pulse_factor = edge_pulse_factor(self.pulse_phase)
        self.opacity_factor = 1.0 - self.distance / config.max_distance
        return True

    def line_alpha(self) -> float:
        return self.opacity * self.opacity_factor * self.pulse_factor

    def marker_point(self, nodes: Sequence[Node], now: float, period: float) -> Tuple[float, float]:
        """
        Position of the traveling marker at wall-clock time `now`.

        The marker loops from source to target once every `period` seconds.
        """
        t = (now % period) / period
        a, b = self.endpoints(nodes)
        return a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t

    def shows_marker(self, nodes: Sequence[Node], config: SimulationConfig) -> bool:
        """
        Sparse marker gate derived from the endpoints' current coordinates.

        Deterministic for fixed positions; as nodes drift the set of edges
        passing the gate changes, giving a flickering subset.
        """
        a, b = self.endpoints(nodes)
        return (int(round(a.x)) + int(round(b.y))) % config.marker_modulus == 0

    def render(self, surface: Surface, nodes: Sequence[Node], now: float, config: SimulationConfig) -> None:
        if not self.visible:
            return
        a, b = self.endpoints(nodes)
        surface.stroke_line(
            a.x,
            a.y,
            b.x,
            b.y,
            Palette.PRIMARY.rgb,
            self.line_alpha(),
            self.opacity_factor * config.edge_width_scale,
        )
        if self.shows_marker(nodes, config):
            mx, my = self.marker_point(nodes, now, config.marker_period)
            surface.fill_circle(
                mx,
                my,
                config.marker_radius,
                Palette.SECONDARY.rgb,
                config.marker_alpha * self.pulse_factor,
            )


class Graph:
    """
    One generation of nodes and edges for a single surface size.

    Nodes live in a dense list; edges reference them by index, so discarding a
    generation never leaves dangling references. The whole generation is
    replaced on resize rather than edited in place.

    Attributes:
        width: Surface width this generation was built for
        height: Surface height this generation was built for
        nodes: Node arena in creation order
        edges: Edges in creation order (also the per-frame update order)
        out_edges: Node index -> outgoing edges
        in_edges: Node index -> incoming edges
    """

    def __init__(self, width: float = 0.0, height: float = 0.0):
        self.width = width
        self.height = height
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []
        self.out_edges: Dict[int, List[Edge]] = {}
        self.in_edges: Dict[int, List[Edge]] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    def add_node(self, node: Node) -> int:
        """
        Append a node to the arena.

        Returns:
            int: Index of the new node
        """
        idx = len(self.nodes)
        self.nodes.append(node)
        self.out_edges.setdefault(idx, [])
        self.in_edges.setdefault(idx, [])
        return idx

    def add_edge(self, e: Edge) -> None:
        """
        Add a directed edge between existing nodes.

        Raises:
            AssertionError: If either index is outside the node arena
        """
        assert (
            0 <= e.source < len(self.nodes) and 0 <= e.target < len(self.nodes)
        ), "Both source and target nodes must exist"
        self.edges.append(e)
        self.out_edges[e.source].append(e)
        self.in_edges[e.target].append(e)

    def neighbors(self, idx: int, direction: str = "out") -> List[Edge]:
        return (self.out_edges if direction == "out" else self.in_edges).get(idx, [])

    def nodes_by_role(self, role: NodeRole) -> List[Node]:
        return [n for n in self.nodes if n.role == role]

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Convert the generation to a NetworkX MultiDiGraph.

        Parallel edges are kept (the generation is a multigraph); node keys
        are arena indices.
        """
        G = nx.MultiDiGraph(width=float(self.width), height=float(self.height))

        for idx, node in enumerate(self.nodes):
            G.add_node(
                idx,
                role=node.role.name,
                color=node.color.name,
                x=float(node.x),
                y=float(node.y),
                origin_x=float(node.origin_x),
                origin_y=float(node.origin_y),
                radius=float(node.radius),
                opacity=float(node.opacity),
            )

        for edge in self.edges:
            G.add_edge(
                edge.source,
                edge.target,
                opacity=float(edge.opacity),
                pulse_speed=float(edge.pulse_speed),
            )

        return G

    def export_graphml(self, filepath: str) -> None:
        """Write the generation to a GraphML file."""
        nx.write_graphml(self.to_networkx(), filepath)

    def get_graph_statistics(self) -> Dict[str, Any]:
        """
        Structural statistics for monitoring and the CLI report.

        Returns:
            Dictionary with counts, degree summary and connectivity
        """
        G = self.to_networkx()
        node_total = len(self.nodes)
        edge_total = len(self.edges)
        unique_pairs = {(e.source, e.target) for e in self.edges}

        out_degrees = [len(self.neighbors(i, "out")) for i in range(node_total)]
        in_degrees = [len(self.neighbors(i, "in")) for i in range(node_total)]

        stats = {
            "basic_stats": {
                "nodes": node_total,
                "edges": edge_total,
                "roles": {
                    "general": len(self.nodes_by_role(NodeRole.GENERAL)),
                    "hubs": len(self.nodes_by_role(NodeRole.HUB)),
                },
                "size": {"width": self.width, "height": self.height},
            },
            "degree": {
                "max_out": max(out_degrees, default=0),
                "min_out": min(out_degrees, default=0),
                "max_in": max(in_degrees, default=0),
                "mean_out": edge_total / node_total if node_total > 0 else 0.0,
            },
            "structure": {
                "self_loops": nx.number_of_selfloops(G),
                "parallel_edges": edge_total - len(unique_pairs),
                "weak_components": (
                    nx.number_weakly_connected_components(G) if node_total > 0 else 0
                ),
                "density": nx.density(G) if node_total > 1 else 0.0,
            },
        }
        return stats
