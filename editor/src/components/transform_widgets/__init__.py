"""
Canvas Shape Demos - Shape Interaction Components

This package contains the shape drag architecture:
- handles.py: ABC-based handle classes (LineCornerHandle, LineBodyHandle, etc.)
- modes.py: Mode classes defining handle sets and hit priority (LineMode, RectangleMode)
- drag_context.py: Drag mode + anchor state
- drag_controller.py: Press/move/release state machine over a mode
"""

from .handles import Handle, LineCornerHandle, LineBodyHandle, RectangleBodyHandle
from .modes import TransformMode, LineMode, RectangleMode, create_mode
from .drag_context import DragContext, DragMode
from .drag_controller import DragController

__all__ = [
    'Handle', 'LineCornerHandle', 'LineBodyHandle', 'RectangleBodyHandle',
    'TransformMode', 'LineMode', 'RectangleMode', 'create_mode',
    'DragContext', 'DragMode', 'DragController',
]
