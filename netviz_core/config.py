"""
Configuration objects for the network visualization engine.

Exposes every tunable distance, rate and layout constant so experiments and
alternative page themes do not require editing the physics. Configuration can
be loaded from YAML:

max_distance: 150
return_speed: 0.02
interaction_step: 0.05
node_spacing: 30
max_general_nodes: 40
hub_count: 5
seed: 7

Unknown keys are rejected so typos fail at load time instead of silently
falling back to defaults.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

import yaml


@dataclass
class SimulationConfig:
    """
    Configuration for graph generation, per-frame physics and rendering.

    Defaults reproduce the landing page animation.
    """

    # Distance thresholds (surface pixels)
    max_distance: float = 150.0
    """Pointer repulsion radius and edge visibility threshold."""

    repulsion_scale: float = 2.0
    return_speed: float = 0.02
    """Fraction of the remaining distance to the anchor recovered per frame."""

    # Pointer ramp
    interaction_step: float = 0.05
    ramp_every_frame: bool = False
    """Also ramp interaction strength once per frame, not only per pointer event."""

    # Layout
    node_spacing: float = 30.0
    max_general_nodes: int = 40
    layer_count: int = 3
    layout_radius_ratio: float = 0.4
    layer_jitter_min: float = 0.7
    layer_jitter_max: float = 1.3
    hub_count: int = 5
    hub_radius_ratio: float = 0.2
    min_edges_per_node: int = 1
    max_edges_per_node: int = 3

    # Node appearance and motion
    node_radius_min: float = 3.0
    node_radius_max: float = 6.0
    hub_radius_min: float = 4.0
    hub_radius_max: float = 6.0
    drift_speed: float = 0.5
    node_pulse_speed_min: float = 0.05
    node_pulse_speed_max: float = 0.10

    # Edge appearance
    edge_opacity_min: float = 0.05
    edge_opacity_max: float = 0.20
    edge_pulse_speed_min: float = 0.04
    edge_pulse_speed_max: float = 0.07
    edge_width_scale: float = 2.0

    # Traveling markers
    marker_period: float = 3.0
    """Seconds for a marker to travel from source to target."""
    marker_modulus: int = 5
    marker_radius: float = 2.0
    marker_alpha: float = 0.8

    # Host
    frame_interval_ms: int = 16
    background: str = "#0f172a"
    seed: Optional[int] = None

    def validate(self) -> None:
        """
        Check value ranges.

        Raises:
            ValueError: If any distance, rate or count is out of range
        """
        positive = (
            "max_distance",
            "interaction_step",
            "node_spacing",
            "marker_period",
            "marker_radius",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)!r}")
        if not 0.0 <= self.return_speed <= 1.0:
            raise ValueError(f"return_speed must be within [0, 1], got {self.return_speed!r}")
        if self.interaction_step > 1.0:
            raise ValueError("interaction_step must be <= 1")
        if self.layer_count < 1:
            raise ValueError("layer_count must be >= 1")
        if self.max_general_nodes < 0 or self.hub_count < 0:
            raise ValueError("node counts must be >= 0")
        if not 1 <= self.min_edges_per_node <= self.max_edges_per_node:
            raise ValueError("edges per node must satisfy 1 <= min <= max")
        if self.marker_modulus < 1:
            raise ValueError("marker_modulus must be >= 1")
        if self.frame_interval_ms < 1:
            raise ValueError("frame_interval_ms must be >= 1")
        ranges = (
            ("layer_jitter_min", "layer_jitter_max"),
            ("node_radius_min", "node_radius_max"),
            ("hub_radius_min", "hub_radius_max"),
            ("edge_opacity_min", "edge_opacity_max"),
            ("node_pulse_speed_min", "node_pulse_speed_max"),
            ("edge_pulse_speed_min", "edge_pulse_speed_max"),
        )
        for lo, hi in ranges:
            if getattr(self, lo) > getattr(self, hi):
                raise ValueError(f"{lo} must not exceed {hi}")
        if self.node_radius_min <= 0 or self.hub_radius_min <= 0:
            raise ValueError("node radii must be > 0")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def config_from_dict(spec: Dict[str, Any] | None) -> SimulationConfig:
    """
    Build a validated `SimulationConfig` from a parsed mapping.

    Args:
        spec: Mapping of field name to value (e.g. parsed YAML)

    Returns:
        SimulationConfig: Validated configuration

    Raises:
        ValueError: On unknown keys or out-of-range values
    """
    spec = dict(spec or {})
    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(spec) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
    cfg = SimulationConfig(**spec)
    cfg.validate()
    return cfg


def config_from_yaml(yaml_text: str) -> SimulationConfig:
    """Parse YAML text into a `SimulationConfig`."""
    data = yaml.safe_load(yaml_text) or {}
    if not isinstance(data, dict):
        raise ValueError("Configuration YAML must be a mapping")
    return config_from_dict(data)


def load_config(path: str) -> SimulationConfig:
    """Load a `SimulationConfig` from a YAML file path."""
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return config_from_yaml(txt)
