"""Tests for type definitions."""

from __future__ import annotations

import random

import pytest

from tile_edit.types import (
    Animation,
    ButtonEvent,
    ButtonState,
    ContractViolationError,
    InvalidConfigurationError,
    MouseButton,
    Rect,
    TextureUnavailableError,
    TileEditError,
    Vec2,
)


class TestAnimationConstruction:
    """Tests for creating animations."""

    def test_immediate_starts_running(self):
        """Test immediate animations are not paused."""
        anim = Animation.immediate(0, 3, 10.0)
        assert anim.paused is False
        assert anim.current_frame == 0
        assert anim.elapsed == 0.0

    def test_dormant_starts_paused(self):
        """Test dormant animations start paused."""
        anim = Animation.dormant(2, 5, 10.0, looping=True)
        assert anim.paused is True
        assert anim.looping is True
        assert anim.current_frame == 2

    @pytest.mark.parametrize("fps", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_fps_rejected(self, fps):
        """Test non-positive or non-finite fps is a configuration error."""
        with pytest.raises(InvalidConfigurationError):
            Animation.immediate(0, 3, fps)

    def test_invalid_fps_is_value_error(self):
        """Test configuration errors are also ValueErrors."""
        with pytest.raises(ValueError):
            Animation.dormant(0, 3, 0.0)

    @pytest.mark.parametrize("bounds", [(-1, 3), (0, -2), (1.5, 3), (True, 3)])
    def test_invalid_frame_bounds_rejected(self, bounds):
        """Test frame bounds must be non-negative integers."""
        with pytest.raises(InvalidConfigurationError):
            Animation.immediate(bounds[0], bounds[1], 10.0)

    def test_span_and_direction(self):
        """Test span counts both ends and direction follows the bounds."""
        forward = Animation.immediate(2, 5, 1.0)
        backward = Animation.immediate(5, 2, 1.0)
        assert forward.span == 4
        assert backward.span == 4
        assert forward.reversed is False
        assert backward.reversed is True

    def test_frame_range_follows_play_order(self):
        """Test frame_range lists frames in the order they are shown."""
        assert list(Animation.immediate(2, 4, 1.0).frame_range()) == [2, 3, 4]
        assert list(Animation.immediate(4, 2, 1.0).frame_range()) == [4, 3, 2]
        assert list(Animation.immediate(1, 1, 1.0).frame_range()) == [1]


class TestAnimationUpdate:
    """Tests for advancing animations."""

    def test_forward_non_looping_scenario(self):
        """Test frames advance by floor(elapsed * fps) and stop on the last."""
        anim = Animation.immediate(0, 3, 10.0, False)

        assert anim.update(0.25) == 2
        assert anim.current_frame == 2
        assert anim.finished() is False

        assert anim.update(0.10) == 3
        assert anim.current_frame == 3
        assert anim.finished() is True
        assert anim.finished_with_last() is False

        assert anim.update(0.10) is None
        assert anim.finished_with_last() is True
        assert anim.update(1.0) is None
        assert anim.current_frame == 3

    def test_no_update_after_finished_with_last(self):
        """Test time stops accumulating once the last frame was fully shown."""
        anim = Animation.immediate(0, 1, 4.0)
        anim.update(0.5)
        assert anim.finished_with_last() is True
        elapsed = anim.elapsed
        anim.update(10.0)
        assert anim.elapsed == elapsed

    def test_unchanged_frame_returns_none(self):
        """Test update only reports frame changes."""
        anim = Animation.immediate(0, 3, 10.0)
        assert anim.update(0.05) is None
        assert anim.current_frame == 0

    def test_backward_non_looping_clamps_at_end(self):
        """Test backward animations count down and clamp on to_frame."""
        anim = Animation.immediate(5, 2, 10.0)
        assert anim.update(0.15) == 4
        assert anim.update(1.0) == 2
        assert anim.current_frame == 2
        assert anim.finished() is True
        assert anim.finished_with_last() is True

    def test_looping_wraps_after_full_cycle(self):
        """Test looping animations wrap exactly after a full cycle."""
        anim = Animation.immediate(0, 2, 1.0, True)
        assert anim.update(3.5) is None
        assert anim.current_frame == 0

    def test_looping_wraps_during_play(self):
        """Test looping animations cycle through the range."""
        anim = Animation.immediate(0, 2, 1.0, True)
        frames = [anim.update(1.0) for _ in range(4)]
        assert frames == [1, 2, 0, 1]

    def test_backward_looping(self):
        """Test backward looping animations wrap to from_frame."""
        anim = Animation.immediate(3, 1, 2.0, True)
        frames = [anim.update(0.5) for _ in range(4)]
        assert frames == [2, 1, 3, 2]

    def test_looping_never_finishes(self):
        """Test finished checks are always false when looping."""
        anim = Animation.immediate(0, 2, 5.0, True)
        for _ in range(20):
            anim.update(0.37)
            assert anim.finished() is False
            assert anim.finished_with_last() is False

    def test_paused_animation_does_not_advance(self):
        """Test paused animations ignore time."""
        anim = Animation.dormant(0, 3, 10.0)
        assert anim.update(1.0) is None
        assert anim.elapsed == 0.0
        assert anim.current_frame == 0

        anim.paused = False
        assert anim.update(0.15) == 1

    def test_negative_dt_is_contract_violation(self):
        """Test negative time steps fail loudly."""
        anim = Animation.immediate(0, 3, 10.0)
        with pytest.raises(ContractViolationError):
            anim.update(-0.1)
        assert anim.elapsed == 0.0

    def test_negative_dt_rejected_while_paused(self):
        """Test the dt check does not depend on the paused state."""
        anim = Animation.dormant(0, 3, 10.0)
        with pytest.raises(AssertionError):
            anim.update(-1.0)

    @pytest.mark.parametrize("dt", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_dt_is_contract_violation(self, dt):
        """Test non-finite time steps fail without touching the state."""
        anim = Animation.immediate(0, 3, 10.0)
        anim.update(0.15)
        with pytest.raises(ContractViolationError):
            anim.update(dt)
        assert anim.elapsed == pytest.approx(0.15)
        assert anim.current_frame == 1
        assert anim.update(0.1) == 2

    def test_single_frame_animation(self):
        """Test an animation of one frame is finished immediately."""
        anim = Animation.immediate(4, 4, 2.0)
        assert anim.finished() is True
        assert anim.finished_with_last() is False
        assert anim.update(0.5) is None
        assert anim.finished_with_last() is True


class TestAnimationProperties:
    """Properties that hold for any sequence of time steps."""

    @pytest.mark.parametrize("bounds", [(0, 7), (7, 0), (3, 3), (2, 9)])
    def test_non_looping_frame_stays_in_bounds(self, bounds):
        """Test current_frame never leaves the animation range."""
        rng = random.Random(42)
        anim = Animation.immediate(bounds[0], bounds[1], 12.0)
        for _ in range(200):
            anim.update(rng.uniform(0.0, 0.3))
            assert anim.lowest_frame <= anim.current_frame <= anim.highest_frame

    @pytest.mark.parametrize("bounds", [(0, 7), (7, 0), (2, 9)])
    def test_looping_frame_stays_in_bounds(self, bounds):
        """Test looping animations also stay in range."""
        rng = random.Random(7)
        anim = Animation.immediate(bounds[0], bounds[1], 24.0, True)
        for _ in range(200):
            anim.update(rng.uniform(0.0, 0.5))
            assert anim.lowest_frame <= anim.current_frame <= anim.highest_frame

    def test_finished_with_last_implies_finished(self):
        """Test the stricter finished check implies the weaker one."""
        rng = random.Random(3)
        anim = Animation.immediate(0, 5, 8.0)
        saw_finished_only = False
        for _ in range(100):
            anim.update(rng.uniform(0.0, 0.05))
            if anim.finished_with_last():
                assert anim.finished()
            elif anim.finished():
                saw_finished_only = True
        assert saw_finished_only

    def test_reset_is_idempotent(self):
        """Test resetting twice equals resetting once."""
        anim = Animation.immediate(1, 6, 10.0)
        anim.update(0.33)
        anim.reset()
        once = (anim.current_frame, anim.elapsed)
        anim.reset()
        assert (anim.current_frame, anim.elapsed) == once == (1, 0.0)

    def test_reset_keeps_paused_state(self):
        """Test reset does not touch paused."""
        anim = Animation.dormant(0, 3, 10.0)
        anim.reset()
        assert anim.paused is True

    def test_split_updates_match_single_update(self):
        """Test update(a); update(b) ends on the same frame as update(a + b)."""
        split = Animation.immediate(0, 9, 4.0)
        whole = Animation.immediate(0, 9, 4.0)
        split.update(0.5)
        split.update(0.75)
        whole.update(1.25)
        assert split.current_frame == whole.current_frame == 5


class TestGeometry:
    """Tests for Vec2 and Rect."""

    def test_vec2_arithmetic(self):
        """Test vector addition and subtraction."""
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(1, 2) - Vec2(3, 4) == Vec2(-2, -2)

    def test_rect_from_tuple(self):
        """Test creating a rect from (x, y, w, h)."""
        rect = Rect.from_tuple((1, 2, 3, 4))
        assert rect.as_tuple() == (1, 2, 3, 4)

    def test_translate(self):
        """Test translate moves the rect in place."""
        rect = Rect(0, 0, 4, 4)
        rect.translate(Vec2(2, -1))
        assert rect == Rect(2, -1, 4, 4)

    def test_intersect(self):
        """Test overlapping rectangles intersect."""
        a = Rect(0, 0, 4, 4)
        b = Rect(-1, -1, 1, 1)
        assert Rect.intersect(a, b)

    def test_touching_edges_intersect(self):
        """Test rectangles sharing an edge count as intersecting."""
        assert Rect.intersect(Rect(0, 0, 4, 4), Rect(4, 0, 4, 4))

    def test_separate_rects_do_not_intersect(self):
        """Test distant rectangles do not intersect."""
        assert not Rect.intersect(Rect(0, 0, 4, 4), Rect(5, 5, 1, 1))

    def test_contains(self):
        """Test points on or inside the edges are contained."""
        rect = Rect(0, 0, 10, 10)
        assert rect.contains(Vec2(5, 5))
        assert rect.contains(Vec2(10, 0))
        assert not rect.contains(Vec2(10.5, 5))

    def test_shortest_way_out_horizontal(self):
        """Test the shorter horizontal move is chosen."""
        rect = Rect(0, 0, 10, 10)
        assert rect.shortest_way_out(Rect(8, 2, 10, 10)) == Vec2(-2, 0)

    def test_shortest_way_out_vertical(self):
        """Test the shorter vertical move is chosen."""
        rect = Rect(0, 0, 10, 10)
        assert rect.shortest_way_out(Rect(2, 8, 4, 10)) == Vec2(0, -2)

    def test_shortest_way_out_clears_overlap(self):
        """Test applying the move leaves the rects just touching."""
        rect = Rect(0, 0, 10, 10)
        other = Rect(3, 7, 10, 10)
        rect.translate(rect.shortest_way_out(other))
        assert rect.y + rect.h == other.y


class TestInputAndErrors:
    """Tests for input events and error types."""

    def test_button_event_from_dict(self):
        """Test creating a ButtonEvent from a dictionary."""
        event = ButtonEvent.from_dict({"button": "middle", "state": "release"})
        assert event.button == MouseButton.MIDDLE
        assert event.state == ButtonState.RELEASE
        assert event.pressed is False

    def test_button_event_defaults_to_press(self):
        """Test state defaults to press."""
        assert ButtonEvent.from_dict({"button": "left"}).pressed is True

    def test_error_hierarchy(self):
        """Test all errors share a base class."""
        assert issubclass(InvalidConfigurationError, TileEditError)
        assert issubclass(ContractViolationError, TileEditError)
        assert issubclass(TextureUnavailableError, TileEditError)

    def test_texture_unavailable_message(self):
        """Test the texture error names the path and reason."""
        err = TextureUnavailableError("tiles.png", "not found")
        assert err.path == "tiles.png"
        assert "tiles.png" in str(err)
        assert "not found" in str(err)
