"""UI components for Canvas Shape Demos

This package contains the UI components organized into subpackages:
- canvas_widgets: pan/zoom state and canvas painting/zoom mixins
- transform_widgets: shape handles and the drag state machine
- programs: one canvas program per demo

Direct imports for convenience:
"""

from .canvas_widget import CanvasWidget

__all__ = [
    'CanvasWidget',
]
