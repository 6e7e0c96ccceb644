"""Circle and rotating rectangle demo.

Sizes are fractions of min(frame.width, frame.height). The rectangle is
centered in the frame and rotates around that center; the circle stays
put. No mouse interaction.
"""

from constants import DEFAULT_ROTATING_RECT_WIDTH, DEFAULT_ROTATING_RECT_HEIGHT, CIRCLE_COLOR
from models.color import Color
from models.drawing import DrawingList
from models.shapes import CircleShape
from utils.geometry import rotate_rectangle_corners
from .base_program import BaseProgram


class CircleAndRectangleProgram(BaseProgram):
    """Gradient-filled bar spinning over a circle."""

    title = "Circle and Rectangle"

    def __init__(self, rect_width=DEFAULT_ROTATING_RECT_WIDTH,
                 rect_height=DEFAULT_ROTATING_RECT_HEIGHT, circle=None):
        super().__init__()
        self.circle = circle if circle is not None else CircleShape()
        self.rect_width = rect_width    # Thickness of the bar
        self.rect_height = rect_height  # Length of the bar, horizontal at 0 degrees

    def render(self, bounds, rotation_angle):
        drawing = DrawingList()
        drawing.add(self.background(bounds))

        center = bounds.center
        frame_min = bounds.min_extent

        drawing.fill_circle(center, frame_min * self.circle.radius, Color.from_rgb(CIRCLE_COLOR))

        corners = rotate_rectangle_corners(center, frame_min * self.rect_height,
                                           frame_min * self.rect_width, rotation_angle)
        drawing.fill_path(corners, self.rainbow_gradient(bounds))

        return list(drawing)
