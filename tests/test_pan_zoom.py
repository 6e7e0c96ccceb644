"""
Tests for the pan/zoom state machine.
"""
import pytest

from components.canvas_widgets.pan_zoom import PanZoomState
from models.events import CanvasEvent, MouseButton
from models.transform import Vec2, ViewTransform


@pytest.fixture
def pan_zoom():
    return PanZoomState()


class TestZoom:

    def test_zoom_in_keeps_cursor_fixed(self, pan_zoom):
        assert pan_zoom.wheel(Vec2(100.0, 100.0), 120)
        assert pan_zoom.scale == pytest.approx(1.1)
        assert tuple(pan_zoom.translation) == pytest.approx((-10.0, -10.0))

    def test_scene_point_under_cursor_unchanged(self, pan_zoom):
        from utils.coordinate_transforms import screen_to_scene
        cursor = Vec2(320.0, 45.0)
        before = screen_to_scene(cursor, pan_zoom.view)
        pan_zoom.wheel(cursor, -120)
        after = screen_to_scene(cursor, pan_zoom.view)
        assert tuple(after) == pytest.approx(tuple(before))

    def test_zoom_out(self, pan_zoom):
        pan_zoom.wheel(Vec2(0.0, 0.0), -1)
        assert pan_zoom.scale == pytest.approx(0.9)

    def test_zero_delta_ignored(self, pan_zoom):
        assert not pan_zoom.wheel(Vec2(10.0, 10.0), 0)
        assert pan_zoom.scale == 1.0

    def test_clamped_at_max(self):
        pan_zoom = PanZoomState(ViewTransform(Vec2(0.0, 0.0), 9.5))
        assert pan_zoom.wheel(Vec2(50.0, 50.0), 120)
        assert pan_zoom.scale == 10.0
        # Already at the limit: nothing changes, not consumed
        assert not pan_zoom.wheel(Vec2(50.0, 50.0), 120)
        assert pan_zoom.scale == 10.0

    def test_clamped_at_min(self):
        pan_zoom = PanZoomState(ViewTransform(Vec2(0.0, 0.0), 0.1))
        assert not pan_zoom.wheel(Vec2(50.0, 50.0), -120)
        assert pan_zoom.scale == 0.1

    def test_scale_stays_in_range_after_many_scrolls(self, pan_zoom):
        for _ in range(100):
            pan_zoom.wheel(Vec2(10.0, 10.0), 120)
        assert pan_zoom.scale <= 10.0
        for _ in range(200):
            pan_zoom.wheel(Vec2(10.0, 10.0), -120)
        assert pan_zoom.scale >= 0.1

    def test_reset(self, pan_zoom):
        pan_zoom.wheel(Vec2(100.0, 100.0), 120)
        pan_zoom.reset()
        assert pan_zoom.scale == 1.0
        assert pan_zoom.translation == Vec2(0.0, 0.0)


class TestPan:

    def test_drag_translates(self, pan_zoom):
        assert pan_zoom.press(Vec2(10.0, 10.0))
        assert pan_zoom.is_panning
        assert pan_zoom.move(Vec2(30.0, 25.0))
        assert pan_zoom.translation == Vec2(20.0, 15.0)
        assert pan_zoom.move(Vec2(40.0, 25.0))
        assert pan_zoom.translation == Vec2(30.0, 15.0)

    def test_release_stops(self, pan_zoom):
        pan_zoom.press(Vec2(10.0, 10.0))
        assert pan_zoom.release()
        assert not pan_zoom.is_panning
        assert not pan_zoom.move(Vec2(50.0, 50.0))
        assert pan_zoom.translation == Vec2(0.0, 0.0)

    def test_release_when_idle_still_consumed(self, pan_zoom):
        assert pan_zoom.release()

    def test_any_button_pans(self, pan_zoom):
        assert pan_zoom.handle_event(CanvasEvent.pressed(MouseButton.MIDDLE), Vec2(0.0, 0.0))
        assert pan_zoom.is_panning

    def test_pan_does_not_change_scale(self, pan_zoom):
        pan_zoom.handle_event(CanvasEvent.pressed(), Vec2(0.0, 0.0))
        pan_zoom.handle_event(CanvasEvent.moved(), Vec2(5.0, 5.0))
        pan_zoom.handle_event(CanvasEvent.released(), Vec2(5.0, 5.0))
        assert pan_zoom.scale == 1.0
        assert pan_zoom.translation == Vec2(5.0, 5.0)
