"""Canvas input events and the messages programs derive from them.

Events carry only their payload; the cursor position and render bounds
are passed next to the event so the core never reads widget state.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.transform import Vec2


class EventKind(Enum):
    BUTTON_PRESSED = 'button_pressed'
    BUTTON_RELEASED = 'button_released'
    CURSOR_MOVED = 'cursor_moved'
    WHEEL_SCROLLED = 'wheel_scrolled'


class MouseButton(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    MIDDLE = 'middle'


@dataclass(frozen=True)
class CanvasEvent:
    """A single input event.

    button is set for press/release, wheel_delta for wheel events
    (positive = scrolled forward/up).
    """
    kind: EventKind
    button: Optional[MouseButton] = None
    wheel_delta: float = 0.0

    @classmethod
    def pressed(cls, button=MouseButton.LEFT):
        return cls(EventKind.BUTTON_PRESSED, button=button)

    @classmethod
    def released(cls, button=MouseButton.LEFT):
        return cls(EventKind.BUTTON_RELEASED, button=button)

    @classmethod
    def moved(cls):
        return cls(EventKind.CURSOR_MOVED)

    @classmethod
    def wheel(cls, delta):
        return cls(EventKind.WHEEL_SCROLLED, wheel_delta=delta)

    def is_primary_press(self) -> bool:
        return self.kind is EventKind.BUTTON_PRESSED and self.button is MouseButton.LEFT

    def is_primary_release(self) -> bool:
        return self.kind is EventKind.BUTTON_RELEASED and self.button is MouseButton.LEFT


# ======================================================================
# Derived messages
# ======================================================================

@dataclass(frozen=True)
class CursorMoved:
    """Cursor position in local canvas pixels, for status display."""
    position: Vec2
