"""
matplotlib implementation of the engine's drawable surface.

The axes fill the whole figure and use pixel data coordinates with the origin
at the top-left, so engine coordinates map one-to-one onto the canvas. Draw
calls are batched per frame into two collections: a `LineCollection` for
edges and an `EllipseCollection` for node and marker circles, kept in call
order so circles drawn later sit on top.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import EllipseCollection, LineCollection

RGB = Tuple[int, int, int]


def _rgba(rgb: RGB, alpha: float) -> Tuple[float, float, float, float]:
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0, float(np.clip(alpha, 0.0, 1.0)))


class MatplotlibSurface:
    """
    Batched 2D surface drawing into a full-bleed matplotlib `Axes`.

    Attributes:
        ax: Target axes (resized to cover the whole figure)
        auto_draw: Request a canvas redraw from `present`
    """

    def __init__(self, ax: Axes, background: str = "#0f172a", auto_draw: bool = True):
        self.ax = ax
        self.figure = ax.figure
        self.auto_draw = auto_draw

        self.figure.set_facecolor(background)
        ax.set_position([0.0, 0.0, 1.0, 1.0])
        ax.set_facecolor(background)
        ax.set_axis_off()
        ax.set_autoscale_on(False)

        self._lines = LineCollection([], zorder=1, capstyle="round")
        ax.add_collection(self._lines, autolim=False)
        self._circles: EllipseCollection | None = None

        self._segments: List[List[Tuple[float, float]]] = []
        self._line_colors: List[Tuple[float, float, float, float]] = []
        self._line_widths: List[float] = []
        self._centers: List[Tuple[float, float]] = []
        self._diameters: List[float] = []
        self._circle_colors: List[Tuple[float, float, float, float]] = []

        self.lines_drawn = 0
        self.circles_drawn = 0
        self.sync_size()

    # ----- surface contract -----
    def size(self) -> Tuple[float, float]:
        bbox = self.ax.bbox
        return float(bbox.width), float(bbox.height)

    def clear(self) -> None:
        self._segments = []
        self._line_colors = []
        self._line_widths = []
        self._centers = []
        self._diameters = []
        self._circle_colors = []

    def fill_circle(self, x: float, y: float, radius: float, rgb: RGB, alpha: float) -> None:
        self._centers.append((x, y))
        self._diameters.append(2.0 * radius)
        self._circle_colors.append(_rgba(rgb, alpha))

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
        self._segments.append([(x0, y0), (x1, y1)])
        self._line_colors.append(_rgba(rgb, alpha))
        # LineCollection widths are in points; engine widths are pixels
        self._line_widths.append(max(width, 0.0) * 72.0 / self.figure.dpi)

    def present(self) -> None:
        """Push the batched frame into the axes and schedule a redraw."""
        self._lines.set_segments(self._segments)
        if self._segments:
            self._lines.set_color(self._line_colors)
            self._lines.set_linewidths(self._line_widths)

        if self._circles is not None:
            self._circles.remove()
            self._circles = None
        if self._centers:
            diameters = np.asarray(self._diameters, dtype=float)
            self._circles = EllipseCollection(
                diameters,
                diameters,
                np.zeros_like(diameters),
                units="xy",
                offsets=np.asarray(self._centers, dtype=float),
                offset_transform=self.ax.transData,
                facecolors=self._circle_colors,
                edgecolors="none",
                zorder=2,
            )
            self.ax.add_collection(self._circles, autolim=False)

        self.lines_drawn = len(self._segments)
        self.circles_drawn = len(self._centers)
        if self.auto_draw:
            self.figure.canvas.draw_idle()

    # ----- host helpers -----
    def sync_size(self) -> Tuple[float, float]:
        """Match the data limits to the current pixel size (y axis downward)."""
        width, height = self.size()
        self.ax.set_xlim(0.0, max(width, 1.0))
        self.ax.set_ylim(max(height, 1.0), 0.0)
        return width, height
