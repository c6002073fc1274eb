"""Shared test fixtures for netviz tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from netviz_core.config import SimulationConfig


class RecordingSurface:
    """Surface double that records every draw call in order."""

    def __init__(self, width=300.0, height=300.0):
        self.width = width
        self.height = height
        self.calls = []
        self.frames = 0

    def size(self):
        return self.width, self.height

    def clear(self):
        self.calls = []

    def fill_circle(self, x, y, radius, rgb, alpha):
        self.calls.append(("circle", x, y, radius, rgb, alpha))

    def stroke_line(self, x0, y0, x1, y1, rgb, alpha, width):
        self.calls.append(("line", x0, y0, x1, y1, rgb, alpha, width))

    def present(self):
        self.frames += 1

    def kinds(self):
        return [c[0] for c in self.calls]


class ManualTickSource:
    """Tick source that only fires when the test calls `fire`."""

    def __init__(self):
        self.pending = None
        self.requests = 0
        self.cancels = 0

    def request(self, callback):
        self.pending = callback
        self.requests += 1

    def cancel(self):
        self.pending = None
        self.cancels += 1

    def fire(self, n=1):
        for _ in range(n):
            callback, self.pending = self.pending, None
            if callback is None:
                return
            callback()


@pytest.fixture()
def config():
    return SimulationConfig()


@pytest.fixture()
def rng():
    return np.random.default_rng(1234)


@pytest.fixture()
def surface():
    return RecordingSurface()


@pytest.fixture()
def ticks():
    return ManualTickSource()
