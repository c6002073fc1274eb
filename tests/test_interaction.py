"""
Unit tests for pointer tracking and the ramped interaction strength.
"""

import pytest

from netviz_core.config import SimulationConfig
from netviz_core.interaction import InteractionState, PointerTracker, Rect


BOUNDS = Rect(left=100.0, top=50.0, width=300.0, height=200.0)


class TestRect:
    def test_contains_inclusive(self):
        r = Rect(0, 0, 10, 5)
        assert r.contains(0, 0)
        assert r.contains(10, 5)
        assert not r.contains(-0.1, 2)
        assert not r.contains(5, 5.1)


class TestPointerTracker:
    def test_translates_to_surface_local(self):
        state = InteractionState()
        tracker = PointerTracker(state)
        tracker.move(150.0, 80.0, BOUNDS)
        assert (state.pointer_x, state.pointer_y) == (50.0, 30.0)
        assert tracker.inside

    def test_outside_bounds_is_tolerated(self):
        state = InteractionState(strength=0.5)
        tracker = PointerTracker(state)
        tracker.move(-5000.0, 9000.0, BOUNDS)
        assert not tracker.inside
        assert state.strength == pytest.approx(0.45)

    def test_twenty_steps_reach_exactly_one(self):
        """Twenty consecutive in-bounds updates at step 0.05 land on 1.0."""
        state = InteractionState()
        tracker = PointerTracker(state, SimulationConfig(interaction_step=0.05))
        for i in range(19):
            tracker.move(200.0, 100.0, BOUNDS)
            assert state.strength < 1.0
        tracker.move(200.0, 100.0, BOUNDS)
        assert state.strength == 1.0

    def test_strength_never_exceeds_one(self):
        state = InteractionState()
        tracker = PointerTracker(state)
        for _ in range(500):
            tracker.move(200.0, 100.0, BOUNDS)
            assert 0.0 <= state.strength <= 1.0
        assert state.strength == 1.0

    def test_strength_never_below_zero(self):
        state = InteractionState(strength=0.2)
        tracker = PointerTracker(state)
        for _ in range(500):
            tracker.move(0.0, 0.0, BOUNDS)
            assert 0.0 <= state.strength <= 1.0
        assert state.strength == 0.0

    def test_mixed_sequence_stays_clamped(self, rng):
        state = InteractionState()
        tracker = PointerTracker(state, SimulationConfig(interaction_step=0.3))
        for inside in rng.integers(0, 2, size=400):
            if inside:
                tracker.move(150.0, 100.0, BOUNDS)
            else:
                tracker.leave()
            assert 0.0 <= state.strength <= 1.0

    def test_leave_then_frames_decay_to_zero(self):
        """No events arrive after the pointer leaves; frames finish the decay."""
        state = InteractionState()
        tracker = PointerTracker(state)
        for _ in range(20):
            tracker.move(105.0, 150.0, BOUNDS)
        assert state.strength == 1.0
        tracker.leave()
        assert state.strength == pytest.approx(0.95)
        assert not tracker.inside
        for _ in range(19):
            tracker.tick()
        assert state.strength == 0.0
        tracker.tick()
        assert state.strength == 0.0

    def test_tick_holds_strength_while_inside(self):
        state = InteractionState()
        tracker = PointerTracker(state)
        tracker.move(200.0, 100.0, BOUNDS)
        for _ in range(5):
            tracker.tick()
        assert state.strength == pytest.approx(0.05)

    def test_tick_ramps_up_with_ramp_every_frame(self):
        state = InteractionState()
        tracker = PointerTracker(state, SimulationConfig(ramp_every_frame=True))
        tracker.move(200.0, 100.0, BOUNDS)
        for _ in range(3):
            tracker.tick()
        assert state.strength == pytest.approx(0.2)

    def test_ramp_uses_last_position(self):
        state = InteractionState()
        tracker = PointerTracker(state)
        tracker.move(200.0, 100.0, BOUNDS)
        tracker.ramp()
        tracker.ramp()
        assert state.strength == pytest.approx(0.15)
