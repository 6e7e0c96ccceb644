"""Rotation animation state.

The angle is owned by the application and pushed into a program's render
call every frame. Ticks come from the host (a QTimer in the GUI); nothing
here schedules anything.
"""
import logging

from constants import TICK_INTERVAL_MS, DEFAULT_ROTATION_STEP, FULL_TURN_DEGREES

logger = logging.getLogger(__name__)


class RotationState:
    """Play/pause rotation with an angle wrapping into [0, 360)."""

    def __init__(self, step=DEFAULT_ROTATION_STEP, angle=0.0, rotating=False,
                 tick_interval_ms=TICK_INTERVAL_MS):
        self.step = step
        self.angle = angle % FULL_TURN_DEGREES
        self.rotating = rotating
        self.tick_interval_ms = tick_interval_ms

    def toggle(self):
        """Flip between playing and paused. Returns the new playing state."""
        self.rotating = not self.rotating
        logger.debug("Rotation %s at %.2f deg", "started" if self.rotating else "paused", self.angle)
        return self.rotating

    def tick(self):
        """Advance one step if playing. Returns the current angle."""
        if self.rotating:
            self.angle = (self.angle + self.step) % FULL_TURN_DEGREES
        return self.angle

    def advance(self, elapsed_ms):
        """Advance proportionally to elapsed time if playing.

        One tick interval worth of elapsed time equals one step.
        """
        if self.rotating and elapsed_ms > 0:
            turns = self.step * (elapsed_ms / self.tick_interval_ms)
            self.angle = (self.angle + turns) % FULL_TURN_DEGREES
        return self.angle

    def label(self) -> str:
        return f"Rotation Angle: {self.angle:.2f}°"
