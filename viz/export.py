"""
Offline rendering of the network animation to an animated GIF.

Runs the same `Simulation` and `MatplotlibSurface` as the interactive window,
but drives frames from `FuncAnimation` and uses frame time instead of wall
time for the traveling markers, so exports are independent of machine speed.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

import numpy as np
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from netviz_core.config import SimulationConfig
from netviz_core.engine import Simulation
from netviz_core.interaction import InteractionState, PointerTracker, Rect

from viz.surface import MatplotlibSurface

logger = logging.getLogger(__name__)

PointerPath = Callable[[int], Optional[Tuple[float, float]]]


def orbit_pointer_path(width: float, height: float, frames: int, radius_ratio: float = 0.25) -> PointerPath:
    """Pointer path circling the surface center once over `frames` frames."""
    cx, cy = width / 2, height / 2
    r = min(width, height) * radius_ratio

    def path(i: int) -> Tuple[float, float]:
        angle = 2 * np.pi * i / max(frames, 1)
        return cx + r * float(np.cos(angle)), cy + r * float(np.sin(angle))

    return path


def render_animation(
    path: str,
    width: int = 800,
    height: int = 450,
    frames: int = 90,
    fps: int = 30,
    config: SimulationConfig | None = None,
    pointer_path: PointerPath | None = None,
    dpi: int = 100,
) -> Simulation:
    """
    Render `frames` frames of the animation to a GIF at `path`.

    Args:
        path: Output file path (GIF)
        width: Surface width in pixels
        height: Surface height in pixels
        frames: Number of frames to render
        fps: Playback rate; also sets the marker clock (frame / fps seconds)
        config: Engine constants
        pointer_path: Optional frame -> pointer position (surface-local);
            returning None counts as the pointer being away
        dpi: Figure resolution

    Returns:
        Simulation: The engine after the last frame (for inspection)
    """
    if frames < 1 or fps < 1:
        raise ValueError("frames and fps must be >= 1")
    config = config or SimulationConfig()

    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    surface = MatplotlibSurface(ax, background=config.background, auto_draw=False)

    frame_index = [0]
    simulation = Simulation(config, clock=lambda: frame_index[0] / fps)
    w, h = surface.sync_size()
    simulation.resize(w, h)

    interaction = InteractionState()
    tracker = PointerTracker(interaction, config)
    bounds = Rect(0.0, 0.0, w, h)

    def init():
        return []

    def update(i: int):
        frame_index[0] = i
        if pointer_path is not None:
            point = pointer_path(i)
            if point is None:
                tracker.leave()
            else:
                tracker.move(point[0], point[1], bounds)
        simulation.frame(surface, interaction)
        return []

    anim = FuncAnimation(
        fig,
        update,
        frames=frames,
        init_func=init,
        interval=1000.0 / fps,
        blit=False,
        repeat=False,
    )
    logger.info("Rendering %d frames at %dx%d to %s", frames, width, height, path)
    anim.save(path, writer=PillowWriter(fps=fps), dpi=dpi)
    return simulation
