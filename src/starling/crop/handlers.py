"""
Handle model for crop box interaction.

Every draggable part of the box is a :class:`HandlerType`.  The four edges
additionally expose a :class:`CropHandler` descriptor with the edge's
current value and the limits it may move between.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from PySide6.QtCore import QRectF

from ..errors import InvalidHandlerError
from .box import Box, edges_of


class Axis(enum.Enum):
    """Coordinate axis an edge moves along."""

    X = "x"
    Y = "y"

    @property
    def other(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X


class HandlerType(enum.IntEnum):
    """Enumeration of crop box interaction targets."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3
    LEFT_TOP = 4
    RIGHT_TOP = 5
    RIGHT_BOTTOM = 6
    LEFT_BOTTOM = 7
    BOX = 8
    NONE = 9

    @property
    def is_edge(self) -> bool:
        return self in _EDGE_AXIS

    @property
    def is_corner(self) -> bool:
        return self in _CORNER_EDGES

    @property
    def axis(self) -> Axis:
        """Axis an edge handler moves along."""
        try:
            return _EDGE_AXIS[self]
        except KeyError:
            raise InvalidHandlerError(f"{self.name} does not move along a single axis") from None

    @property
    def edges(self) -> tuple[HandlerType, HandlerType]:
        """Return the ``(horizontal-axis, vertical-axis)`` edges of a corner."""
        try:
            return _CORNER_EDGES[self]
        except KeyError:
            raise InvalidHandlerError(f"{self.name} is not a corner handler") from None


_EDGE_AXIS: dict[HandlerType, Axis] = {
    HandlerType.LEFT: Axis.X,
    HandlerType.RIGHT: Axis.X,
    HandlerType.TOP: Axis.Y,
    HandlerType.BOTTOM: Axis.Y,
}

_CORNER_EDGES: dict[HandlerType, tuple[HandlerType, HandlerType]] = {
    HandlerType.LEFT_TOP: (HandlerType.LEFT, HandlerType.TOP),
    HandlerType.RIGHT_TOP: (HandlerType.RIGHT, HandlerType.TOP),
    HandlerType.RIGHT_BOTTOM: (HandlerType.RIGHT, HandlerType.BOTTOM),
    HandlerType.LEFT_BOTTOM: (HandlerType.LEFT, HandlerType.BOTTOM),
}

# Edges that are perpendicular to an axis, inner (left/top) member first.
AXIS_EDGES: dict[Axis, tuple[HandlerType, HandlerType]] = {
    Axis.X: (HandlerType.LEFT, HandlerType.RIGHT),
    Axis.Y: (HandlerType.TOP, HandlerType.BOTTOM),
}


@dataclass(frozen=True)
class CropHandler:
    """Read-only projection of one edge and the limits it may move between.

    Attributes
    ----------
    type:
        The edge this descriptor belongs to.
    value:
        Current coordinate of the edge (x for left/right, y for top/bottom).
    out_bound:
        Viewport edge on the same side; the edge may not move past it.
    in_bound:
        Opposite edge offset by the minimum dimension.
    center_bound:
        Limit when both edges of the axis move towards the center together.
    is_horizontal:
        True for edges that move along the x axis (left/right).
    is_outer:
        True for right/bottom, False for left/top.
    """

    type: HandlerType
    value: float
    out_bound: float
    in_bound: float
    center_bound: float
    is_horizontal: bool
    is_outer: bool

    @property
    def direction(self) -> float:
        """Sign of a coordinate change that moves the edge outwards."""
        return 1.0 if self.is_outer else -1.0

    def room_out(self) -> float:
        """Distance the edge may still grow before reaching the viewport."""
        return max(0.0, self.direction * (self.out_bound - self.value))

    def room_in(self) -> float:
        """Distance the edge may shrink before the minimum size is violated."""
        return max(0.0, self.direction * (self.value - self.in_bound))

    def room_center(self) -> float:
        """Distance the edge may shrink while its opposite edge shrinks too."""
        return max(0.0, self.direction * (self.value - self.center_bound))


def describe_handler(handler: HandlerType, box: Box, bounds: QRectF) -> CropHandler:
    """Return the :class:`CropHandler` of edge *handler* for *box* inside *bounds*.

    Raises
    ------
    InvalidHandlerError
        If *handler* is not one of the four edges.
    """
    view = edges_of(bounds)
    inner = box.inner_bound
    center = box.center_bound

    if handler == HandlerType.LEFT:
        return CropHandler(handler, box.left, view.left, inner.right, center.left, True, False)
    if handler == HandlerType.RIGHT:
        return CropHandler(handler, box.right, view.right, inner.left, center.right, True, True)
    if handler == HandlerType.TOP:
        return CropHandler(handler, box.top, view.top, inner.bottom, center.top, False, False)
    if handler == HandlerType.BOTTOM:
        return CropHandler(handler, box.bottom, view.bottom, inner.top, center.bottom, False, True)
    raise InvalidHandlerError(f"No handler data available for {handler.name}")


__all__ = ["AXIS_EDGES", "Axis", "CropHandler", "HandlerType", "describe_handler"]
