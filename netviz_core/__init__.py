"""
netviz Core Package.

This package contains the host-independent engine of the animated network
background, including:

- Core data structures (Graph, Node, Edge)
- Graph generation for a given surface size (builder)
- Per-frame physics and rendering order (Simulation)
- Pointer tracking with a ramped interaction strength
- A cancellable cooperative animation scheduler

Hosts provide a drawable `Surface` and a `TickSource`; see the `viz` package
for the matplotlib host.
"""

__version__ = "0.1.0"

from .enums import NodeRole, Palette
from .config import SimulationConfig, config_from_dict, config_from_yaml, load_config
from .graph import Edge, Graph, Node
from .interaction import InteractionState, PointerTracker, Rect
from .builder import build_graph, expected_node_count
from .engine import Simulation
from .scheduler import AnimationScheduler, TickSource
from .metrics import (
    frame_summary,
    marker_edge_count,
    mean_anchor_displacement,
    pulse_radius_bounds,
    visible_edge_count,
)
