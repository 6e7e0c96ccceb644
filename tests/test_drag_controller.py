"""
Tests for the per-shape drag state machine.

Covers:
- Body drag of the line (translation of both endpoints)
- Corner drags: width change, half-delta endpoint move, y snapping
- Width never going negative, and the anchor holding while clamped
- Corner hit priority where corners overlap
- Which events are consumed in each state
- Rectangle body drag
"""
import pytest
from PyQt5.QtCore import Qt

from components.transform_widgets import (
    DragController, DragMode, LineBodyHandle, LineCornerHandle, RectangleBodyHandle,
)
from models.events import CanvasEvent, MouseButton
from models.transform import Vec2


def approx_vec(v):
    return pytest.approx((v.x, v.y))


# ══════════════════════════════════════════════════════════════════════════
# Line body
# ══════════════════════════════════════════════════════════════════════════

class TestLineBodyDrag:

    def test_press_on_body_starts_drag(self, line_controller):
        assert line_controller.press(Vec2(0.5, 0.4))
        assert line_controller.drag_mode is DragMode.BODY
        assert line_controller.dragged_corner is None

    def test_press_does_not_move_shape(self, line_controller, line_shape):
        line_controller.press(Vec2(0.5, 0.4))
        assert tuple(line_shape.start) == approx_vec(Vec2(0.1, 0.4))
        assert tuple(line_shape.end) == approx_vec(Vec2(0.9, 0.4))

    def test_move_translates_both_endpoints(self, line_controller, line_shape):
        line_controller.press(Vec2(0.5, 0.4))
        assert line_controller.move(Vec2(0.6, 0.45))
        assert tuple(line_shape.start) == approx_vec(Vec2(0.2, 0.45))
        assert tuple(line_shape.end) == approx_vec(Vec2(1.0, 0.45))
        assert line_shape.width == pytest.approx(0.2)

    def test_moves_accumulate_from_last_anchor(self, line_controller, line_shape):
        line_controller.press(Vec2(0.5, 0.4))
        line_controller.move(Vec2(0.55, 0.4))
        line_controller.move(Vec2(0.6, 0.4))
        assert tuple(line_shape.start) == approx_vec(Vec2(0.2, 0.4))

    def test_release_ends_drag(self, line_controller, line_shape):
        line_controller.press(Vec2(0.5, 0.4))
        assert line_controller.release()
        assert line_controller.drag_mode is DragMode.IDLE
        assert not line_controller.move(Vec2(0.7, 0.7))
        assert tuple(line_shape.start) == approx_vec(Vec2(0.1, 0.4))


# ══════════════════════════════════════════════════════════════════════════
# Line corners
# ══════════════════════════════════════════════════════════════════════════

class TestLineCornerDrag:

    def test_press_on_corner_wins_over_body(self, line_controller):
        # (0.1, 0.3) is also on the body's inclusive edge
        assert line_controller.press(Vec2(0.1, 0.3))
        assert line_controller.drag_mode is DragMode.CORNER
        assert line_controller.dragged_corner == 0

    def test_upper_left_moved_down_shrinks(self, line_controller, line_shape):
        line_controller.press(Vec2(0.1, 0.3))
        line_controller.move(Vec2(0.1, 0.34))
        assert line_shape.width == pytest.approx(0.16)
        assert line_shape.start.y == pytest.approx(0.42)
        assert line_shape.end.y == line_shape.start.y
        assert line_shape.start.x == pytest.approx(0.1)
        assert line_shape.end.x == pytest.approx(0.9)

    def test_upper_right_moves_end(self, line_controller, line_shape):
        line_controller.press(Vec2(0.9, 0.3))
        line_controller.move(Vec2(0.95, 0.28))
        assert line_shape.width == pytest.approx(0.22)
        assert tuple(line_shape.end) == approx_vec(Vec2(0.95, 0.39))
        assert line_shape.start.y == line_shape.end.y
        assert line_shape.start.x == pytest.approx(0.1)

    def test_lower_right_moved_down_grows(self, line_controller, line_shape):
        line_controller.press(Vec2(0.9, 0.5))
        assert line_controller.dragged_corner == 2
        line_controller.move(Vec2(0.9, 0.54))
        assert line_shape.width == pytest.approx(0.24)
        assert line_shape.end.y == pytest.approx(0.42)
        assert line_shape.start.y == line_shape.end.y

    def test_lower_left_moves_start(self, line_controller, line_shape):
        line_controller.press(Vec2(0.1, 0.5))
        assert line_controller.dragged_corner == 3
        line_controller.move(Vec2(0.05, 0.5))
        assert tuple(line_shape.start) == approx_vec(Vec2(0.05, 0.4))
        assert line_shape.width == pytest.approx(0.2)

    def test_corner_stays_under_cursor(self, line_controller, line_shape):
        from utils.geometry import line_corners
        line_controller.press(Vec2(0.1, 0.3))
        line_controller.move(Vec2(0.15, 0.33))
        corner = line_corners(line_shape.start, line_shape.end, line_shape.width)[0]
        assert tuple(corner) == approx_vec(Vec2(0.15, 0.33))

    def test_upper_corner_width_clamped_at_zero(self, line_controller, line_shape):
        line_controller.press(Vec2(0.1, 0.3))
        line_controller.move(Vec2(0.1, 0.8))
        assert line_shape.width == pytest.approx(0.0)
        assert line_shape.width >= 0.0
        assert line_shape.start.y == pytest.approx(0.5)
        assert line_shape.end.y == line_shape.start.y

    def test_lower_corner_width_clamped_at_zero(self, line_controller, line_shape):
        line_controller.press(Vec2(0.9, 0.5))
        line_controller.move(Vec2(0.9, 0.0))
        assert line_shape.width == pytest.approx(0.0)
        assert line_shape.width >= 0.0
        assert line_shape.end.y == pytest.approx(0.3)

    def test_clamped_corner_waits_for_cursor_to_return(self, line_controller, line_shape):
        line_controller.press(Vec2(0.1, 0.3))
        line_controller.move(Vec2(0.1, 0.8))

        # Still below the clamped corner: nothing moves
        line_controller.move(Vec2(0.1, 0.75))
        assert line_shape.width == pytest.approx(0.0)
        assert line_shape.start.y == pytest.approx(0.5)

        # Back above it: the corner follows the cursor again
        line_controller.move(Vec2(0.1, 0.45))
        assert line_shape.width == pytest.approx(0.05)
        assert line_shape.start.y - line_shape.width / 2.0 == pytest.approx(0.45)

    def test_corner_drag_returns_applied_delta(self, line_shape):
        applied = LineCornerHandle(0).drag(line_shape, Vec2(0.05, 0.5))
        assert tuple(applied) == approx_vec(Vec2(0.05, 0.2))

    def test_body_drag_applies_full_delta(self, line_shape, rectangle_shape):
        assert LineBodyHandle().drag(line_shape, Vec2(0.1, 0.9)) == Vec2(0.1, 0.9)
        assert RectangleBodyHandle().drag(rectangle_shape, Vec2(5.0, 7.0)) == Vec2(5.0, 7.0)


class TestLineCornerHitTest:

    def test_corner_hit(self, line_shape):
        assert LineCornerHandle(0).hit_test(Vec2(0.1, 0.3), line_shape)
        assert not LineCornerHandle(1).hit_test(Vec2(0.1, 0.3), line_shape)

    def test_overlapping_corners_first_wins(self, line_shape):
        line_shape.width = 0.0
        # Corners 0 and 3 coincide at the start point
        assert LineCornerHandle(0).hit_test(Vec2(0.1, 0.4), line_shape)
        assert not LineCornerHandle(3).hit_test(Vec2(0.1, 0.4), line_shape)

    def test_controller_grabs_first_corner(self, line_controller, line_shape):
        line_shape.width = 0.0
        line_controller.press(Vec2(0.1, 0.4))
        assert line_controller.dragged_corner == 0


# ══════════════════════════════════════════════════════════════════════════
# Event consumption
# ══════════════════════════════════════════════════════════════════════════

class TestEventConsumption:

    def test_press_outside_not_consumed(self, line_controller):
        assert not line_controller.press(Vec2(0.5, 0.9))
        assert line_controller.drag_mode is DragMode.IDLE

    def test_release_while_idle_not_consumed(self, line_controller):
        assert not line_controller.release()

    def test_move_while_idle_not_consumed(self, line_controller):
        assert not line_controller.move(Vec2(0.5, 0.4))

    def test_handle_event_press_release(self, line_controller):
        assert line_controller.handle_event(CanvasEvent.pressed(), Vec2(0.5, 0.4))
        assert line_controller.handle_event(CanvasEvent.moved(), Vec2(0.5, 0.41))
        assert line_controller.handle_event(CanvasEvent.released(), Vec2(0.5, 0.41))
        assert not line_controller.is_dragging

    def test_secondary_button_ignored(self, line_controller):
        assert not line_controller.handle_event(CanvasEvent.pressed(MouseButton.RIGHT), Vec2(0.5, 0.4))
        assert not line_controller.is_dragging

    def test_wheel_never_consumed(self, line_controller):
        assert not line_controller.handle_event(CanvasEvent.wheel(120), Vec2(0.5, 0.4))
        line_controller.press(Vec2(0.5, 0.4))
        assert not line_controller.handle_event(CanvasEvent.wheel(120), Vec2(0.5, 0.4))


class TestHoverCursor:

    @pytest.mark.parametrize("point,cursor", [
        (Vec2(0.1, 0.3), Qt.SizeFDiagCursor),
        (Vec2(0.9, 0.3), Qt.SizeBDiagCursor),
        (Vec2(0.9, 0.5), Qt.SizeFDiagCursor),
        (Vec2(0.1, 0.5), Qt.SizeBDiagCursor),
        (Vec2(0.5, 0.4), Qt.SizeAllCursor),
    ])
    def test_cursor_per_handle(self, line_controller, point, cursor):
        assert line_controller.handle_at(point).get_cursor() == cursor

    def test_no_handle_off_shape(self, line_controller):
        assert line_controller.handle_at(Vec2(0.5, 0.9)) is None


# ══════════════════════════════════════════════════════════════════════════
# Rectangle
# ══════════════════════════════════════════════════════════════════════════

class TestRectangleDrag:

    def test_drag_moves_rectangle(self, rectangle_shape):
        controller = DragController(rectangle_shape, 'rectangle')
        assert controller.press(Vec2(150.0, 75.0))
        controller.move(Vec2(170.0, 95.0))
        assert (rectangle_shape.x, rectangle_shape.y) == (120.0, 70.0)
        assert (rectangle_shape.width, rectangle_shape.height) == (100.0, 50.0)

    def test_edge_is_inside(self, rectangle_shape):
        controller = DragController(rectangle_shape, 'rectangle')
        assert controller.press(Vec2(200.0, 100.0))

    def test_outside_not_consumed(self, rectangle_shape):
        controller = DragController(rectangle_shape, 'rectangle')
        assert not controller.press(Vec2(99.0, 75.0))

    def test_unknown_mode(self, rectangle_shape):
        with pytest.raises(ValueError):
            DragController(rectangle_shape, 'triangle')
