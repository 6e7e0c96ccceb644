"""Base class for canvas programs.

A program owns the interaction state of one demo and exposes the two
entry points the canvas widget needs:

- on_event(event, bounds, cursor) -> (consumed, message)
- render(bounds, rotation_angle) -> list of primitives

Neither touches Qt; the widget translates Qt events in and paints the
primitives out.
"""

from abc import ABC, abstractmethod

from constants import DEFAULT_ROTATION_STEP, BACKGROUND_COLOR, RAINBOW_GRADIENT_STOPS
from models.color import Color
from models.drawing import FillRectangle, LinearGradient
from models.transform import Vec2


class BaseProgram(ABC):
    """Abstract canvas program."""

    title = "Canvas"
    rotation_step = DEFAULT_ROTATION_STEP

    def __init__(self):
        # Pushed down from the application on every tick
        self.rotation_angle = 0.0

    def set_rotation(self, angle):
        self.rotation_angle = angle

    def on_event(self, event, bounds, cursor):
        """Process one input event.

        Args:
            event: CanvasEvent
            bounds: Bounds of the render surface
            cursor: Vec2 cursor position in the bounds' parent coordinates, or None

        Returns:
            (consumed, message): whether the event was captured, and an
            optional derived message for the application
        """
        return False, None

    @abstractmethod
    def render(self, bounds, rotation_angle):
        """Describe the frame as a list of primitives in absolute pixels.

        Must be deterministic and free of side effects.
        """
        pass

    def cursor_shape(self, bounds, cursor):
        """Qt cursor shape to show at cursor, or None for the default arrow."""
        return None

    @staticmethod
    def background(bounds):
        return FillRectangle(Vec2(0.0, 0.0), bounds.width, bounds.height,
                             Color.from_rgb(BACKGROUND_COLOR))

    @staticmethod
    def rainbow_gradient(bounds):
        """Diagonal rainbow across the whole frame; does not rotate with shapes."""
        return LinearGradient.from_stops(Vec2(0.0, 0.0), Vec2(bounds.width, bounds.height),
                                         RAINBOW_GRADIENT_STOPS)
