"""Drag context dataclass for shape interaction.

Single drag state object instead of separate boolean flags.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from models.transform import Vec2


class DragMode(Enum):
    """What part of a shape is grabbed."""
    IDLE = 'idle'
    BODY = 'body'
    CORNER = 'corner'


@dataclass
class DragContext:
    """Drag state for one shape.

    operation is IDLE, BODY or CORNER; corner is only set for CORNER.
    anchor is the last cursor position seen during the drag, in the
    shape's coordinate space.
    """
    operation: DragMode = DragMode.IDLE
    corner: Optional[int] = None
    anchor: Optional[Vec2] = None
    handle: Any = None

    @classmethod
    def idle(cls):
        return cls()

    @classmethod
    def grab(cls, handle, anchor):
        """Start a drag on handle at anchor."""
        return cls(handle.operation, handle.corner_index, anchor.copy(), handle)

    @property
    def is_dragging(self) -> bool:
        return self.operation is not DragMode.IDLE
