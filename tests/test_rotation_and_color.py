"""
Tests for rotation animation state, HSB color conversion and polygon colors.
"""
import pytest

from models.color import Color, hsb_to_rgb
from models.rotation import RotationState
from models.shapes import PolygonShape


class TestRotationState:

    def test_paused_tick_does_nothing(self):
        rotation = RotationState(step=0.5)
        assert rotation.tick() == 0.0

    def test_toggle_and_tick(self):
        rotation = RotationState(step=0.5)
        assert rotation.toggle()
        rotation.tick()
        rotation.tick()
        assert rotation.angle == pytest.approx(1.0)
        assert not rotation.toggle()
        rotation.tick()
        assert rotation.angle == pytest.approx(1.0)

    def test_wraps_into_full_turn(self):
        rotation = RotationState(step=0.5, angle=359.75, rotating=True)
        assert rotation.tick() == pytest.approx(0.25)

    def test_initial_angle_wrapped(self):
        assert RotationState(angle=370.0).angle == pytest.approx(10.0)

    def test_advance_by_elapsed_time(self):
        rotation = RotationState(step=0.25, rotating=True, tick_interval_ms=10)
        assert rotation.advance(40) == pytest.approx(1.0)

    def test_advance_paused(self):
        rotation = RotationState(step=0.25, tick_interval_ms=10)
        assert rotation.advance(40) == 0.0

    def test_label(self):
        assert RotationState(angle=12.5).label() == "Rotation Angle: 12.50°"


class TestColor:

    @pytest.mark.parametrize("hsb,rgb", [
        ((0.0, 100.0, 100.0), (1.0, 0.0, 0.0)),
        ((120.0, 100.0, 100.0), (0.0, 1.0, 0.0)),
        ((240.0, 100.0, 100.0), (0.0, 0.0, 1.0)),
        ((0.0, 0.0, 50.0), (0.5, 0.5, 0.5)),
    ])
    def test_hsb_to_rgb(self, hsb, rgb):
        assert hsb_to_rgb(*hsb) == pytest.approx(rgb)

    def test_hue_360_wraps_to_red(self):
        assert hsb_to_rgb(360.0, 100.0, 100.0) == pytest.approx((1.0, 0.0, 0.0))

    def test_components_clamped(self):
        c = Color(1.5, -0.2, 0.5, 2.0)
        assert (c.r, c.g, c.b, c.a) == (1.0, 0.0, 0.5, 1.0)

    def test_css_opaque(self):
        assert Color(1.0, 0.0, 0.0).to_css() == "rgb(255,0,0)"

    def test_css_translucent(self):
        assert Color(1.0, 0.0, 0.0, 0.8).to_css() == "rgba(255,0,0,0.8)"

    def test_hex(self):
        assert Color(0.0, 0.5, 1.0).to_hex() == "#007FFF"

    def test_equality(self):
        assert Color(0.1, 0.2, 0.3) == Color(0.1, 0.2, 0.3)
        assert Color(0.1, 0.2, 0.3) != Color(0.1, 0.2, 0.3, 0.5)


class TestPolygonShape:

    def test_edges_floored(self):
        polygon = PolygonShape(edges=1)
        assert polygon.edges == 3
        polygon.edges = 0
        assert polygon.edges == 3

    def test_fill_is_translucent(self):
        fill = PolygonShape(hue=0.0, saturation=100.0, brightness=100.0).fill_color()
        assert fill.a == pytest.approx(0.8)
        assert fill.to_rgb255() == (255, 0, 0)

    def test_stroke_is_darker(self):
        polygon = PolygonShape(hue=0.0, saturation=100.0, brightness=100.0)
        assert polygon.stroke_color().r == pytest.approx(0.7)
        assert polygon.stroke_color().a == 1.0
