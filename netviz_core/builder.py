"""
Graph builder for the network visualization.

Builds one generation for a given surface size:

- General nodes, `min(floor(width / node_spacing), max_general_nodes)` of them,
  scattered over `layer_count` concentric layers around the center. Each node
  picks a layer and an angle uniformly; its distance from the center is
  `(layer + 1) * (max_radius / layer_count) * U(jitter_min, jitter_max)` with
  `max_radius = layout_radius_ratio * min(width, height)`.
- Exactly `hub_count` hub nodes at evenly spaced angles on an inner ring of
  radius `hub_radius_ratio * max_radius`.
- For every node in creation order, between `min_edges_per_node` and
  `max_edges_per_node` edges to targets drawn uniformly from the other nodes.
  Parallel edges are allowed, so the result is a directed multigraph.

Layouts are random on every call unless a seeded generator (or
`config.seed`) is supplied.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .config import SimulationConfig
from .enums import NodeRole, Palette
from .graph import Edge, Graph, Node

logger = logging.getLogger(__name__)

_COLORS = (Palette.PRIMARY, Palette.SECONDARY, Palette.WHITE)


def general_node_count(width: float, height: float, config: SimulationConfig) -> int:
    """Number of layered (non-hub) nodes for a surface size."""
    if not _usable_size(width, height):
        return 0
    return min(int(math.floor(width / config.node_spacing)), config.max_general_nodes)


def expected_node_count(width: float, height: float, config: SimulationConfig | None = None) -> int:
    """Total node count `build_graph` produces for a surface size."""
    config = config or SimulationConfig()
    if not _usable_size(width, height):
        return 0
    return general_node_count(width, height, config) + config.hub_count


def make_rng(config: SimulationConfig) -> np.random.Generator:
    return np.random.default_rng(config.seed)


def _usable_size(width: float, height: float) -> bool:
    return (
        math.isfinite(width)
        and math.isfinite(height)
        and width > 0
        and height > 0
    )


def _make_node(
    x: float,
    y: float,
    radius: float,
    role: NodeRole,
    rng: np.random.Generator,
    config: SimulationConfig,
) -> Node:
    drift = config.drift_speed
    return Node(
        x=x,
        y=y,
        radius=radius,
        color=_COLORS[int(rng.integers(len(_COLORS)))],
        opacity=float(rng.uniform(0.5, 1.0)),
        vx=float((rng.random() - 0.5) * drift),
        vy=float((rng.random() - 0.5) * drift),
        pulse_phase=float(rng.uniform(0.0, 2 * math.pi)),
        pulse_speed=float(rng.uniform(config.node_pulse_speed_min, config.node_pulse_speed_max)),
        role=role,
    )


def _add_general_nodes(g: Graph, count: int, cx: float, cy: float, max_radius: float,
                       rng: np.random.Generator, config: SimulationConfig) -> None:
    layer_width = max_radius / config.layer_count
    for _ in range(count):
        layer = int(rng.integers(config.layer_count))
        angle = float(rng.uniform(0.0, 2 * math.pi))
        jitter = float(rng.uniform(config.layer_jitter_min, config.layer_jitter_max))
        distance = (layer + 1) * layer_width * jitter
        radius = float(rng.uniform(config.node_radius_min, config.node_radius_max))
        g.add_node(
            _make_node(
                cx + math.cos(angle) * distance,
                cy + math.sin(angle) * distance,
                radius,
                NodeRole.GENERAL,
                rng,
                config,
            )
        )


def _add_hubs(g: Graph, cx: float, cy: float, max_radius: float,
              rng: np.random.Generator, config: SimulationConfig) -> None:
    distance = max_radius * config.hub_radius_ratio
    for i in range(config.hub_count):
        angle = 2 * math.pi * i / config.hub_count
        radius = float(rng.uniform(config.hub_radius_min, config.hub_radius_max))
        g.add_node(
            _make_node(
                cx + math.cos(angle) * distance,
                cy + math.sin(angle) * distance,
                radius,
                NodeRole.HUB,
                rng,
                config,
            )
        )


def _add_edges(g: Graph, rng: np.random.Generator, config: SimulationConfig) -> None:
    n = g.node_count
    if n < 2:
        return
    for source in range(n):
        k = int(rng.integers(config.min_edges_per_node, config.max_edges_per_node + 1))
        for _ in range(k):
            # draw from the n - 1 other nodes
            target = int(rng.integers(n - 1))
            if target >= source:
                target += 1
            g.add_edge(
                Edge(
                    source=source,
                    target=target,
                    opacity=float(rng.uniform(config.edge_opacity_min, config.edge_opacity_max)),
                    pulse_phase=float(rng.uniform(0.0, 2 * math.pi)),
                    pulse_speed=float(
                        rng.uniform(config.edge_pulse_speed_min, config.edge_pulse_speed_max)
                    ),
                )
            )


def build_graph(
    width: float,
    height: float,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> Graph:
    """
    Build a fresh generation for a surface of `width` x `height` pixels.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        config: Layout constants (defaults to `SimulationConfig()`)
        rng: Random generator; defaults to one seeded from `config.seed`

    Returns:
        Graph: A new generation. Empty when either dimension is not a
        positive finite number.
    """
    config = config or SimulationConfig()
    g = Graph(width, height)
    if not _usable_size(width, height):
        logger.debug("Surface %sx%s has no drawable area; building empty graph", width, height)
        return g

    rng = rng if rng is not None else make_rng(config)
    cx, cy = width / 2, height / 2
    max_radius = min(width, height) * config.layout_radius_ratio

    _add_general_nodes(g, general_node_count(width, height, config), cx, cy, max_radius, rng, config)
    _add_hubs(g, cx, cy, max_radius, rng, config)
    _add_edges(g, rng, config)

    logger.debug(
        "Built graph for %sx%s: %d nodes, %d edges",
        width,
        height,
        g.node_count,
        g.edge_count,
    )
    return g
