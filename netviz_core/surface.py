"""
Drawable surface contract consumed by the engine.

Any host that can clear itself, fill circles and stroke lines with a color,
alpha and width can display the network. The engine never imports a GUI
toolkit; hosts live in the `viz` package.
"""

from __future__ import annotations

from typing import Protocol, Tuple

RGB = Tuple[int, int, int]


class Surface(Protocol):
    """2D drawable with pixel coordinates, origin top-left, y growing downward."""

    def size(self) -> Tuple[float, float]:
        """Current (width, height) in pixels."""
        ...

    def clear(self) -> None:
        ...

    def fill_circle(self, x: float, y: float, radius: float, rgb: RGB, alpha: float) -> None:
        ...

    def stroke_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        rgb: RGB,
        alpha: float,
        width: float,
    ) -> None:
        ...

    def present(self) -> None:
        """Flush everything drawn since the last `clear` to the display."""
        ...
