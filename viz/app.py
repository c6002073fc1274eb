"""
Interactive matplotlib host for the network visualization.

Wires the host-independent engine to a matplotlib figure:

- the figure's full-bleed axes act as the drawable surface
- a single-shot canvas timer, re-armed every tick, acts as the refresh source
- `motion_notify_event` / `figure_leave_event` feed the pointer tracker
- `resize_event` rebuilds the generation for the new size
- `close_event` tears the scheduler down
- space pauses/resumes, `n` rebuilds a new layout
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from matplotlib.figure import Figure

from netviz_core.config import SimulationConfig
from netviz_core.engine import Simulation
from netviz_core.interaction import InteractionState, PointerTracker, Rect
from netviz_core.scheduler import AnimationScheduler, TickSource

from viz.surface import MatplotlibSurface

logger = logging.getLogger(__name__)

PAUSE_KEYS = (" ", "space")
REBUILD_KEY = "n"


class MatplotlibTickSource:
    """Refresh source backed by a single-shot matplotlib canvas timer."""

    def __init__(self, canvas, interval_ms: int = 16):
        self._timer = canvas.new_timer(interval=interval_ms)
        self._timer.single_shot = True
        self._timer.add_callback(self._fire)
        self._callback: Optional[Callable[[], None]] = None

    def request(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def cancel(self) -> None:
        self._callback = None
        self._timer.stop()

    def _fire(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class NetworkVisualization:
    """
    One animated network bound to a matplotlib figure.

    Attributes:
        figure: Host figure
        config: Engine constants
        surface: Batched drawing surface over the figure
        simulation: Engine holding the current generation
        scheduler: Refresh loop; owns the interaction state
        tracker: Pointer tracker mutating the scheduler's interaction state
    """

    def __init__(
        self,
        figure: Figure,
        config: SimulationConfig | None = None,
        tick_source: TickSource | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.figure = figure
        self.config = config or SimulationConfig()
        ax = figure.add_axes([0.0, 0.0, 1.0, 1.0])
        self.surface = MatplotlibSurface(ax, background=self.config.background)
        self.simulation = Simulation(self.config, clock=clock)
        self.scheduler = AnimationScheduler(
            tick_source or MatplotlibTickSource(figure.canvas, self.config.frame_interval_ms),
            self._frame,
            InteractionState(),
        )
        self.tracker = PointerTracker(self.scheduler.interaction, self.config)
        self._cids: List[int] = []
        self.rebuild()

    @property
    def interaction(self) -> InteractionState:
        return self.scheduler.interaction

    # ----- lifecycle -----
    def connect(self) -> None:
        """Subscribe to the canvas events driving the visualization."""
        if self._cids:
            return
        canvas = self.figure.canvas
        self._cids = [
            canvas.mpl_connect("motion_notify_event", self.on_motion),
            canvas.mpl_connect("figure_leave_event", self.on_leave),
            canvas.mpl_connect("resize_event", self.on_resize),
            canvas.mpl_connect("close_event", self.on_close),
            canvas.mpl_connect("key_press_event", self.on_key),
        ]

    def disconnect(self) -> None:
        for cid in self._cids:
            self.figure.canvas.mpl_disconnect(cid)
        self._cids = []

    def start(self) -> None:
        self.scheduler.start()

    def teardown(self) -> None:
        """Stop ticking and drop event subscriptions."""
        self.scheduler.stop()
        self.disconnect()
        logger.debug("Visualization torn down")

    def rebuild(self) -> None:
        """Re-read the surface size and build a fresh generation."""
        width, height = self.surface.sync_size()
        self.simulation.resize(width, height)

    def _frame(self, interaction: InteractionState) -> None:
        self.tracker.tick()
        self.simulation.frame(self.surface, interaction)

    # ----- coordinates -----
    def surface_rect(self) -> Rect:
        """Surface bounds in host coordinates (origin top-left, y downward)."""
        fig_height = self.figure.bbox.height
        bbox = self.surface.ax.bbox
        return Rect(
            left=float(bbox.x0),
            top=float(fig_height - bbox.y1),
            width=float(bbox.width),
            height=float(bbox.height),
        )

    # ----- event handlers -----
    def on_motion(self, event: Any) -> None:
        if event.x is None or event.y is None:
            return
        client_x = float(event.x)
        client_y = float(self.figure.bbox.height - event.y)
        self.tracker.move(client_x, client_y, self.surface_rect())

    def on_leave(self, event: Any) -> None:
        self.tracker.leave()

    def on_resize(self, event: Any) -> None:
        self.rebuild()

    def on_close(self, event: Any) -> None:
        self.teardown()

    def on_key(self, event: Any) -> None:
        if event.key in PAUSE_KEYS:
            paused = self.scheduler.toggle_pause()
            logger.info("Animation %s", "paused" if paused else "resumed")
        elif event.key == REBUILD_KEY:
            self.rebuild()


def mount(
    figure: Figure | None,
    config: SimulationConfig | None = None,
    autostart: bool = True,
    tick_source: TickSource | None = None,
) -> NetworkVisualization | None:
    """
    Attach an animated network to `figure`.

    Returns:
        NetworkVisualization | None: The running visualization, or None when
        there is no figure to draw on (nothing is raised).
    """
    if figure is None:
        logger.debug("No host figure; network visualization disabled")
        return None
    vis = NetworkVisualization(figure, config, tick_source=tick_source)
    vis.connect()
    if autostart:
        vis.start()
    return vis


def run_window(config: SimulationConfig | None = None, width: int = 1200, height: int = 700,
               dpi: int = 100) -> None:
    """Open an interactive window and block until it is closed."""
    import matplotlib.pyplot as plt

    plt.rcParams["toolbar"] = "None"
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    manager = getattr(fig.canvas, "manager", None)
    if manager is not None:
        manager.set_window_title("netviz")
    vis = mount(fig, config)
    try:
        plt.show()
    finally:
        if vis is not None:
            vis.teardown()
