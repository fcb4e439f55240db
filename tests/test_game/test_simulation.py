"""
Tests for the frame loop in dodgefall.simulation.

Tests cover:
- Initial and reset state
- Grab / move / release commands
- Spawning only while a round is active
- Advance, collision and cull ordering
- Countdown, speed ramp and win
- Playfield invariants over long random runs
"""

import random

import pytest
from pydantic import ValidationError

from dodgefall import simulation
from dodgefall.entities import FallingObject
from dodgefall.input import InputEvent
from dodgefall.models import Point2D, PointerAction, RoundOutcome
from dodgefall.spawner import ObjectSpawner


def command(action: PointerAction, x: float, y: float) -> InputEvent:
    return InputEvent(action=action, position=Point2D(x=x, y=y), timestamp=0.0)


def grab(state, x=200.0, y=270.0):
    simulation.apply_input(state, command(PointerAction.GRAB, x, y))


# ============================================================================
# Creation and reset
# ============================================================================


class TestInitialState:
    """A new state waits at bottom-center for the first grab."""

    def test_avatar_at_bottom_center(self, state):
        """Avatar sits centered, 10px above the bottom edge."""
        assert state.avatar.x == 180.0
        assert state.avatar.y == 250.0
        assert state.avatar.size == 40.0

    def test_round_values(self, state):
        """Timer full, multiplier 1, nothing falling, not started."""
        assert state.time_remaining == 30.0
        assert state.speed_multiplier == 1.0
        assert state.objects == []
        assert state.started is False
        assert state.is_active is False

    def test_custom_duration(self):
        """Duration is configurable and restored on reset."""
        state = simulation.create_state(400, 300, duration=5.0)
        state.time_remaining = 1.0
        simulation.reset(state)
        assert state.time_remaining == 5.0

    def test_rejects_empty_playfield(self):
        """A zero-sized playfield is invalid."""
        with pytest.raises(ValidationError):
            simulation.create_state(0, 300)

    @pytest.mark.parametrize("duration", [0.0, -5.0])
    def test_rejects_non_positive_duration(self, duration):
        """The countdown must start above zero."""
        with pytest.raises(ValueError, match="duration must be positive"):
            simulation.create_state(400, 300, duration=duration)


class TestReset:
    """Reset restores everything the round changed."""

    def test_reset_restores_round(self, state):
        grab(state)
        state.time_remaining = 12.5
        state.speed_multiplier = 3.0
        state.objects.append(FallingObject(x=0.0, y=0.0, speed=2.0))
        state.avatar.x, state.avatar.y = 0.0, 0.0

        simulation.reset(state)

        assert state.time_remaining == 30.0
        assert state.speed_multiplier == 1.0
        assert state.objects == []
        assert state.started is False
        assert state.avatar.dragging is False
        assert (state.avatar.x, state.avatar.y) == (180.0, 250.0)


# ============================================================================
# Input commands
# ============================================================================


class TestGrab:
    """GRAB only takes hold on the avatar."""

    def test_grab_inside_starts_round(self, state):
        grab(state, 200.0, 270.0)
        assert state.avatar.dragging is True
        assert state.started is True

    def test_grab_on_edge_counts(self, state):
        """Bounding box edges are inclusive."""
        grab(state, 180.0, 250.0)
        assert state.avatar.dragging is True

        state2 = simulation.create_state(400, 300)
        grab(state2, 220.0, 290.0)
        assert state2.avatar.dragging is True

    def test_grab_outside_ignored(self, state):
        grab(state, 10.0, 10.0)
        assert state.avatar.dragging is False
        assert state.started is False

    def test_started_survives_release(self, state):
        """Once started, the round stays active until reset."""
        grab(state)
        simulation.apply_input(state, command(PointerAction.RELEASE, 0.0, 0.0))
        assert state.avatar.dragging is False
        assert state.started is True

        grab(state, 5.0, 5.0)  # miss
        assert state.started is True


class TestMoveAndRelease:
    """MOVE centres the avatar on the pointer while dragging."""

    def test_move_centres_avatar(self, state):
        grab(state)
        simulation.apply_input(state, command(PointerAction.MOVE, 100.0, 100.0))
        assert (state.avatar.x, state.avatar.y) == (80.0, 80.0)

    def test_move_clamped_to_top_left(self, state):
        grab(state)
        simulation.apply_input(state, command(PointerAction.MOVE, -50.0, -50.0))
        assert (state.avatar.x, state.avatar.y) == (0.0, 0.0)

    def test_move_clamped_to_bottom_right(self, state):
        grab(state)
        simulation.apply_input(state, command(PointerAction.MOVE, 1000.0, 1000.0))
        assert (state.avatar.x, state.avatar.y) == (360.0, 260.0)

    def test_move_without_drag_ignored(self, state):
        simulation.apply_input(state, command(PointerAction.MOVE, 100.0, 100.0))
        assert (state.avatar.x, state.avatar.y) == (180.0, 250.0)

    def test_move_after_release_ignored(self, state):
        grab(state)
        simulation.apply_input(state, command(PointerAction.RELEASE, 200.0, 270.0))
        simulation.apply_input(state, command(PointerAction.MOVE, 100.0, 100.0))
        assert (state.avatar.x, state.avatar.y) == (180.0, 250.0)


class TestResize:
    """Resizing keeps the avatar on the playfield."""

    def test_shrink_clamps_avatar(self, state):
        simulation.resize(state, 100, 100)
        assert state.width == 100
        assert state.height == 100
        assert (state.avatar.x, state.avatar.y) == (60.0, 60.0)

    def test_grow_keeps_position(self, state):
        simulation.resize(state, 800, 600)
        assert (state.avatar.x, state.avatar.y) == (180.0, 250.0)

    def test_invalid_size_rejected(self, state):
        with pytest.raises(ValidationError):
            simulation.resize(state, 0, 100)


# ============================================================================
# Spawning
# ============================================================================


class TestSpawning:
    """Objects only appear during an active round."""

    def test_no_spawn_before_grab(self, state, always_spawn):
        """Inactive round never spawns, however high the multiplier."""
        state.speed_multiplier = 50.0
        for _ in range(200):
            simulation.step_frame(state, always_spawn)
        assert state.objects == []

    def test_spawn_when_active(self, state, always_spawn):
        grab(state)
        simulation.step_frame(state, always_spawn)

        assert len(state.objects) == 1
        obj = state.objects[0]
        assert obj.x == 0.0
        assert obj.y == -20.0
        assert obj.size == 20.0
        assert obj.speed == pytest.approx(2.0)

    def test_spawn_speed_uses_current_multiplier(self, state, always_spawn):
        grab(state)
        state.speed_multiplier = 2.5
        obj = simulation.spawn_objects(state, always_spawn)
        assert obj.speed == pytest.approx(5.0)

    def test_existing_objects_keep_their_speed(self, state, always_spawn):
        grab(state)
        first = simulation.spawn_objects(state, always_spawn)
        state.speed_multiplier = 4.0
        simulation.spawn_objects(state, always_spawn)
        assert first.speed == pytest.approx(2.0)

    def test_failed_roll_spawns_nothing(self, state, never_spawn):
        grab(state)
        assert simulation.spawn_objects(state, never_spawn) is None
        assert state.objects == []


# ============================================================================
# Advance, collision, cull
# ============================================================================


class TestAdvance:
    """Objects fall by their own speed every frame."""

    def test_objects_fall_by_speed(self, state, never_spawn):
        state.objects.append(FallingObject(x=0.0, y=10.0, speed=3.0))
        state.objects.append(FallingObject(x=50.0, y=0.0, speed=1.5))
        simulation.step_frame(state, never_spawn)
        assert state.objects[0].y == 13.0
        assert state.objects[1].y == 1.5

    def test_objects_fall_even_when_inactive(self, state, never_spawn):
        state.objects.append(FallingObject(x=0.0, y=0.0, speed=2.0))
        simulation.step_frame(state, never_spawn)
        assert state.objects[0].y == 2.0


class TestCollision:
    """Any overlap with the avatar loses the round."""

    def test_overlap_loses_and_resets(self, state, never_spawn):
        grab(state)
        state.speed_multiplier = 2.0
        state.time_remaining = 10.0
        state.objects.append(FallingObject(x=190.0, y=235.0, speed=2.0))

        outcome = simulation.step_frame(state, never_spawn)

        assert outcome == RoundOutcome.LOST
        assert state.time_remaining == 30.0
        assert state.speed_multiplier == 1.0
        assert state.objects == []
        assert state.started is False

    def test_touching_edges_do_not_collide(self, state, never_spawn):
        """Object bottom landing exactly on avatar top is not a hit."""
        grab(state)
        state.objects.append(FallingObject(x=190.0, y=228.0, speed=2.0))

        outcome = simulation.step_frame(state, never_spawn)

        assert outcome == RoundOutcome.NONE
        assert state.objects[0].y == 230.0

    def test_side_by_side_do_not_collide(self, state, never_spawn):
        state.objects.append(FallingObject(x=160.0, y=258.0, speed=2.0))
        assert simulation.step_frame(state, never_spawn) == RoundOutcome.NONE

    def test_first_hit_stops_the_frame(self, state):
        """Newest object is checked first; older ones are not advanced."""
        older = FallingObject(x=0.0, y=0.0, speed=2.0)
        newest = FallingObject(x=190.0, y=240.0, speed=2.0)
        state.objects.extend([older, newest])

        assert simulation.advance_objects(state) is True
        assert newest.y == 242.0
        assert older.y == 0.0

    def test_collision_skips_spawn_and_timer(self, state, always_spawn):
        """A losing frame neither spawns nor ticks the clock after reset."""
        grab(state)
        state.objects.append(FallingObject(x=190.0, y=240.0, speed=2.0))

        simulation.step_frame(state, always_spawn)

        assert state.objects == []
        assert state.time_remaining == 30.0

    def test_collision_while_inactive_still_resets(self, state, never_spawn):
        state.objects.append(FallingObject(x=190.0, y=240.0, speed=2.0))
        assert simulation.step_frame(state, never_spawn) == RoundOutcome.LOST
        assert state.objects == []


class TestCull:
    """Objects that fall past the bottom edge are removed."""

    def test_removed_once_top_passes_bottom(self, state, never_spawn):
        state.objects.append(FallingObject(x=0.0, y=299.0, speed=2.0))
        simulation.step_frame(state, never_spawn)
        assert state.objects == []

    def test_kept_while_top_on_bottom_edge(self, state, never_spawn):
        obj = FallingObject(x=0.0, y=298.0, speed=2.0)
        state.objects.append(obj)

        simulation.step_frame(state, never_spawn)
        assert state.objects == [obj]
        assert obj.y == 300.0

        simulation.step_frame(state, never_spawn)
        assert state.objects == []

    def test_removal_skips_nothing(self, state, never_spawn):
        """Removing several neighbours in one frame keeps the survivors in order."""
        a = FallingObject(x=0.0, y=299.0, speed=2.0)
        b = FallingObject(x=30.0, y=10.0, speed=2.0)
        c = FallingObject(x=60.0, y=299.0, speed=2.0)
        d = FallingObject(x=90.0, y=299.0, speed=2.0)
        e = FallingObject(x=120.0, y=20.0, speed=2.0)
        state.objects.extend([a, b, c, d, e])

        simulation.step_frame(state, never_spawn)

        assert state.objects == [b, e]
        assert b.y == 12.0
        assert e.y == 22.0


# ============================================================================
# Timer and speed ramp
# ============================================================================


class TestTimer:
    """Countdown and speed ramp only run during a round."""

    def test_frozen_while_inactive(self, state, never_spawn):
        for _ in range(100):
            simulation.step_frame(state, never_spawn)
        assert state.time_remaining == 30.0
        assert state.speed_multiplier == 1.0

    def test_ticks_per_frame(self, state, never_spawn):
        grab(state)
        simulation.step_frame(state, never_spawn)
        assert state.time_remaining == pytest.approx(30.0 - 1.0 / 60.0)
        assert state.speed_multiplier == pytest.approx(1.005)

    def test_sixty_frames_is_one_unit(self, state, never_spawn):
        grab(state)
        for _ in range(60):
            simulation.step_frame(state, never_spawn)
        assert state.time_remaining == pytest.approx(29.0)
        assert state.speed_multiplier == pytest.approx(1.3)

    def test_multiplier_never_decreases(self, state, never_spawn):
        grab(state)
        values = [state.speed_multiplier]
        for _ in range(300):
            simulation.step_frame(state, never_spawn)
            values.append(state.speed_multiplier)
        assert all(b > a for a, b in zip(values, values[1:]))

    def test_time_clamped_at_zero(self, state):
        grab(state)
        state.time_remaining = 0.001
        assert simulation.tick_timer(state) is True
        assert state.time_remaining == 0.0

    def test_countdown_reaching_zero_wins(self, state, never_spawn):
        grab(state)
        state.time_remaining = 0.01
        state.speed_multiplier = 3.0

        outcome = simulation.step_frame(state, never_spawn)

        assert outcome == RoundOutcome.WON
        assert state.time_remaining == 30.0
        assert state.speed_multiplier == 1.0
        assert state.objects == []
        assert state.started is False

    def test_full_round_wins(self, never_spawn):
        """With nothing falling, a short round is won exactly once."""
        state = simulation.create_state(400, 300, duration=1.0)
        grab(state)
        outcomes = [simulation.step_frame(state, never_spawn) for _ in range(200)]

        assert outcomes.count(RoundOutcome.WON) == 1
        assert outcomes.index(RoundOutcome.WON) in (59, 60)


# ============================================================================
# Long-run properties
# ============================================================================


class TestInvariants:
    """Properties that hold for every frame of a random session."""

    def test_random_session(self):
        rng = random.Random(1234)
        state = simulation.create_state(320, 240)
        spawner = ObjectSpawner(rng=random.Random(99))

        last_multiplier = state.speed_multiplier
        for frame in range(3000):
            if not state.avatar.dragging:
                cx = state.avatar.x + state.avatar.size / 2
                cy = state.avatar.y + state.avatar.size / 2
                grab(state, cx, cy)
            simulation.apply_input(state, command(
                PointerAction.MOVE, rng.uniform(-100, 420), rng.uniform(-100, 340)))

            outcome = simulation.step_frame(state, spawner)

            assert 0.0 <= state.avatar.x <= 320 - 40
            assert 0.0 <= state.avatar.y <= 240 - 40
            assert all(obj.y <= state.height for obj in state.objects)
            assert state.time_remaining >= 0.0

            if outcome == RoundOutcome.NONE:
                assert state.speed_multiplier >= last_multiplier
            else:
                assert state.speed_multiplier == 1.0
                assert state.objects == []
            last_multiplier = state.speed_multiplier
