"""
Simulation engine for the network visualization.

The engine owns the current generation and advances it one frame at a time:

1. Edges, in edge-set order: re-measure, advance pulse, paint line and marker
2. Nodes, in creation order: pulse, repulsion, anchor pull, drift, bounce, paint

Edges are handled first so node circles are painted on top of lines and
markers. `step` runs the same update order without a surface, which is what
tests and offline analysis use.

Configuration: all constants come from `SimulationConfig` in
`netviz_core.config`.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict

import numpy as np

from .builder import build_graph, make_rng
from .config import SimulationConfig
from .graph import Graph
from .interaction import InteractionState
from .surface import Surface

logger = logging.getLogger(__name__)


class Simulation:
    """
    Per-frame driver for one network generation.

    Attributes:
        config: Physics, layout and rendering constants
        graph: Current generation (replaced wholesale by `resize`)
        t: Frames advanced since the last rebuild or reset
        generation: Number of generations built so far
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        clock: Callable[[], float] | None = None,
        rng: np.random.Generator | None = None,
    ):
        """
        Initialize an engine with an empty generation.

        Args:
            config: Constants (defaults to `SimulationConfig()`)
            clock: Wall-clock source in seconds for traveling markers
            rng: Random generator shared by every rebuild
        """
        self.config = config or SimulationConfig()
        self.clock = clock or time.monotonic
        self.rng = rng if rng is not None else make_rng(self.config)
        self.graph = Graph()
        self.t = 0
        self.generation = 0

    @property
    def width(self) -> float:
        return self.graph.width

    @property
    def height(self) -> float:
        return self.graph.height

    def resize(self, width: float, height: float) -> Graph:
        """
        Discard the current generation and build a new one for the new size.

        No node survives a resize; there is no incremental repositioning.

        Returns:
            Graph: The new generation
        """
        self.graph = build_graph(width, height, self.config, self.rng)
        self.generation += 1
        self.t = 0
        logger.info(
            "Generation %d for %sx%s: %d nodes, %d edges",
            self.generation,
            width,
            height,
            self.graph.node_count,
            self.graph.edge_count,
        )
        return self.graph

    def reset(self) -> None:
        """Move every node back to its anchor and restart the frame counter."""
        for node in self.graph.nodes:
            node.x = node.origin_x
            node.y = node.origin_y
            node.pulse_factor = 1.0
        for edge in self.graph.edges:
            edge.visible = False
        self.t = 0

    def _advance_edges(self) -> None:
        nodes = self.graph.nodes
        for edge in self.graph.edges:
            edge.advance(nodes, self.config)

    def _advance_nodes(self, interaction: InteractionState) -> None:
        g = self.graph
        for node in g.nodes:
            node.advance(interaction, g.width, g.height, self.config)

    def step(self, interaction: InteractionState | None = None, n: int = 1) -> Dict[str, Any]:
        """
        Advance the simulation by `n` frames without painting.

        Args:
            interaction: Pointer state; a neutral state when omitted
            n: Number of frames to advance (default: 1)

        Returns:
            dict: Snapshot of the generation after stepping
        """
        interaction = interaction or InteractionState()
        for _ in range(n):
            self._advance_edges()
            self._advance_nodes(interaction)
            self.t += 1
        return self.snapshot()

    def frame(self, surface: Surface, interaction: InteractionState) -> None:
        """
        Advance and paint one frame onto `surface`.

        The surface is cleared first and presented last; each edge is
        advanced and painted before any node moves.
        """
        g = self.graph
        cfg = self.config
        now = self.clock()

        surface.clear()
        for edge in g.edges:
            if edge.advance(g.nodes, cfg):
                edge.render(surface, g.nodes, now, cfg)
        for node in g.nodes:
            node.advance(interaction, g.width, g.height, cfg)
            node.render(surface)
        surface.present()
        self.t += 1

    def snapshot(self) -> Dict[str, Any]:
        """
        Capture the current generation for debugging and analysis.

        Returns:
            dict: Dictionary containing:
                - 't': Frames since the last rebuild
                - 'generation': Generation counter
                - 'size': (width, height)
                - 'nodes': Per-node position, anchor and rendered radius
                - 'edges': Per-edge endpoints, distance and visibility
                - 'visible_edges': Count of edges drawn on the last frame
        """
        g = self.graph
        return {
            "t": self.t,
            "generation": self.generation,
            "size": (g.width, g.height),
            "nodes": [
                {
                    "x": n.x,
                    "y": n.y,
                    "origin": (n.origin_x, n.origin_y),
                    "radius": n.rendered_radius,
                    "role": n.role.name,
                }
                for n in g.nodes
            ],
            "edges": [
                {
                    "source": e.source,
                    "target": e.target,
                    "distance": e.distance,
                    "visible": e.visible,
                }
                for e in g.edges
            ],
            "visible_edges": sum(1 for e in g.edges if e.visible),
        }
