"""
Resolve a touch point to the part of an axis-aligned crop :class:`Box` it grabs.

Corners are matched inside a square around each corner point, edges by their
perpendicular distance within the segment span, and anything else inside the
box grabs the whole box.
"""

from __future__ import annotations

from PySide6.QtCore import QPointF

from .box import Box, Line
from .handlers import HandlerType


class HitTester:
    """Pure-function hit tester for crop box handles."""

    def __init__(self, hit_padding: float = 16.0) -> None:
        """Initialize hit tester.

        Parameters
        ----------
        hit_padding:
            Distance threshold for detecting corner/edge hits, in viewport pixels.
        """
        self._hit_padding = float(hit_padding)

    @property
    def hit_padding(self) -> float:
        return self._hit_padding

    def near_point(self, x: float, y: float, point: QPointF) -> bool:
        """Return True if ``(x, y)`` lies in the square around *point*."""
        padding = self._hit_padding
        return abs(x - point.x()) <= padding and abs(y - point.y()) <= padding

    def near_line(self, x: float, y: float, line: Line) -> bool:
        """Return True if ``(x, y)`` is within padding of an axis-aligned *line*.

        The point has to lie inside the span of the segment; the padding only
        applies perpendicular to it.
        """
        start, end = line
        padding = self._hit_padding
        if line.is_vertical:
            low, high = sorted((start.y(), end.y()))
            return abs(x - start.x()) <= padding and low <= y <= high
        low, high = sorted((start.x(), end.x()))
        return abs(y - start.y()) <= padding and low <= x <= high

    def test(self, x: float, y: float, box: Box) -> HandlerType:
        """Determine which crop handle (if any) is under ``(x, y)``.

        Corners win over edges, edges win over the box body.

        Returns
        -------
        HandlerType:
            The handle that was hit, or ``HandlerType.NONE`` if nothing was hit.
        """
        corners = (
            (HandlerType.LEFT_TOP, box.left_top),
            (HandlerType.RIGHT_TOP, box.right_top),
            (HandlerType.RIGHT_BOTTOM, box.right_bottom),
            (HandlerType.LEFT_BOTTOM, box.left_bottom),
        )
        for handler, corner in corners:
            if self.near_point(x, y, corner):
                return handler

        edges = (
            (HandlerType.TOP, box.top_line),
            (HandlerType.RIGHT, box.right_line),
            (HandlerType.BOTTOM, box.bottom_line),
            (HandlerType.LEFT, box.left_line),
        )
        for handler, line in edges:
            if self.near_line(x, y, line):
                return handler

        if box.is_within(x, y):
            return HandlerType.BOX

        return HandlerType.NONE
