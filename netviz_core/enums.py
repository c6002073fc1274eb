"""
Core enumerations for the network visualization.

This module defines the fixed color palette shared by nodes, edges and
traveling markers, and the roles a node can play inside one generation.
"""

from enum import Enum, auto
from typing import Tuple


class Palette(Enum):
    """
    Fixed RGB palette used for every painted element.

    - PRIMARY: Indigo, used for all edge lines and a third of the nodes
    - SECONDARY: Pink, used for traveling markers and a third of the nodes
    - WHITE: Neutral highlight nodes
    """

    PRIMARY = (99, 102, 241)
    """Indigo (brand primary)."""

    SECONDARY = (236, 72, 153)
    """Pink (brand secondary)."""

    WHITE = (255, 255, 255)
    """Plain white."""

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value

    def rgba(self, alpha: float) -> Tuple[float, float, float, float]:
        """Return a matplotlib-style RGBA tuple with channels in [0, 1]."""
        r, g, b = self.value
        return (r / 255.0, g / 255.0, b / 255.0, float(alpha))


class NodeRole(Enum):
    """
    Placement role of a node inside a generation.

    - GENERAL: Randomly placed on one of the concentric layers
    - HUB: One of the evenly spaced inner nodes around the center
    """

    GENERAL = auto()
    """Layered ring node."""

    HUB = auto()
    """Inner hub node with a slightly larger base radius."""
