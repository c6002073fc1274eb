"""
Tests for offline GIF rendering.
"""

import pytest

from netviz_core.config import SimulationConfig
from viz.export import orbit_pointer_path, render_animation


class TestOrbitPointerPath:
    def test_circles_the_center(self):
        path = orbit_pointer_path(200, 100, frames=4)
        assert path(0) == pytest.approx((125.0, 50.0))
        assert path(1) == pytest.approx((100.0, 75.0))
        assert path(4) == pytest.approx(path(0))


class TestRenderAnimation:
    def test_writes_gif(self, tmp_path):
        out = tmp_path / "net.gif"
        sim = render_animation(
            str(out),
            width=160,
            height=120,
            frames=4,
            fps=10,
            config=SimulationConfig(seed=2),
            pointer_path=orbit_pointer_path(160, 120, 4),
        )
        assert out.exists()
        assert out.stat().st_size > 0
        assert out.read_bytes()[:3] == b"GIF"
        assert sim.t >= 4
        assert sim.graph.node_count == 5 + 5

    def test_pointer_path_may_report_absence(self, tmp_path):
        out = tmp_path / "away.gif"
        sim = render_animation(
            str(out), width=120, height=90, frames=2, fps=5,
            config=SimulationConfig(seed=2), pointer_path=lambda i: None,
        )
        assert out.exists()
        assert sim.t >= 2

    @pytest.mark.parametrize("frames,fps", [(0, 10), (5, 0)])
    def test_rejects_empty_output(self, tmp_path, frames, fps):
        with pytest.raises(ValueError):
            render_animation(str(tmp_path / "x.gif"), frames=frames, fps=fps)
