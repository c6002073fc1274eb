"""
Pointer tracking for the network visualization.

The pointer influences node motion through a single ramped scalar,
`InteractionState.strength`, which rises while the pointer is over the
surface and decays once it leaves. Only `PointerTracker` mutates the state;
node updates read it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SimulationConfig

logger = logging.getLogger(__name__)

# Ramp values are rounded to this many decimals so repeated steps stay on the
# step grid (20 * 0.05 == 1.0 exactly).
_RAMP_DECIMALS = 9


@dataclass(frozen=True)
class Rect:
    """
    Bounding rectangle of the drawable surface in host coordinates.

    Attributes:
        left: Host x of the surface's left edge
        top: Host y of the surface's top edge (y grows downward)
        width: Surface width in pixels
        height: Surface height in pixels
    """

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return True when surface-local (x, y) lies inside, edges included."""
        return 0 <= x <= self.width and 0 <= y <= self.height


@dataclass
class InteractionState:
    """
    Pointer state read by node updates.

    Attributes:
        pointer_x: Last pointer x in surface-local coordinates
        pointer_y: Last pointer y in surface-local coordinates
        strength: Ramped repulsion influence, always within [0, 1]
    """

    pointer_x: float = 0.0
    pointer_y: float = 0.0
    strength: float = 0.0


class PointerTracker:
    """
    Translate raw pointer events into `InteractionState` updates.

    Events carry host (window) coordinates; the tracker subtracts the
    surface's bounding rectangle to get surface-local coordinates, then ramps
    the interaction strength up when the pointer is inside the surface and
    down otherwise. Positions outside the surface are expected and never
    raise.
    """

    def __init__(self, state: InteractionState, config: SimulationConfig | None = None):
        self.state = state
        self.config = config or SimulationConfig()
        self._inside = False

    @property
    def inside(self) -> bool:
        """Whether the last observed pointer position was over the surface."""
        return self._inside

    def move(self, client_x: float, client_y: float, bounds: Rect) -> None:
        """
        Record a pointer move and ramp the interaction strength once.

        Args:
            client_x: Pointer x in host coordinates
            client_y: Pointer y in host coordinates (y grows downward)
            bounds: Current bounding rectangle of the surface
        """
        x = client_x - bounds.left
        y = client_y - bounds.top
        self.state.pointer_x = x
        self.state.pointer_y = y
        self._inside = bounds.contains(x, y)
        self.ramp()

    def leave(self) -> None:
        """The pointer left the host entirely; treat it as outside and decay."""
        self._inside = False
        self.ramp()

    def ramp(self) -> float:
        """
        Apply one ramp step based on the last observed position.

        Returns:
            float: The new interaction strength
        """
        step = self.config.interaction_step
        if self._inside:
            value = min(self.state.strength + step, 1.0)
        else:
            value = max(self.state.strength - step, 0.0)
        self.state.strength = min(1.0, max(0.0, round(value, _RAMP_DECIMALS)))
        return self.state.strength

    def tick(self) -> float:
        """
        Per-frame update driven by the refresh loop.

        Hosts stop delivering pointer events once the pointer leaves the
        window, so while outside the strength keeps decaying every frame until
        it reaches 0. With `ramp_every_frame` the ramp runs every frame in
        either direction.

        Returns:
            float: The interaction strength after this frame
        """
        if self.config.ramp_every_frame or not self._inside:
            return self.ramp()
        return self.state.strength
