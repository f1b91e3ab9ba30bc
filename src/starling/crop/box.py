"""
Geometry primitives for the crop box.

The :class:`Box` keeps four scalar edges in viewport coordinates together
with the minimum distance two opposing edges must keep.  Corner points,
edge segments and the constraint rectangles are derived on access so they
can never go stale.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple

from PySide6.QtCore import QPointF, QRectF

from .aspect_ratio import AspectRatio


class Edges(NamedTuple):
    """Plain ``(left, top, right, bottom)`` values.

    Unlike :class:`QRectF` the values are kept as given, so an "inverted"
    rectangle (``right < left``) stays meaningful as a set of limits.
    """

    left: float
    top: float
    right: float
    bottom: float


class Line(NamedTuple):
    """Axis-aligned segment between two corner points."""

    start: QPointF
    end: QPointF

    @property
    def is_vertical(self) -> bool:
        return self.start.x() == self.end.x()


def rect_from_edges(left: float, top: float, right: float, bottom: float) -> QRectF:
    """Return a :class:`QRectF` spanning the given edge coordinates."""
    return QRectF(QPointF(left, top), QPointF(right, bottom))


def edges_of(rect: QRectF) -> Edges:
    """Return the four edges of *rect*."""
    return Edges(rect.left(), rect.top(), rect.right(), rect.bottom())


@dataclass
class Box:
    """Mutable crop rectangle plus its minimum-dimension constraint."""

    left: float
    top: float
    right: float
    bottom: float
    min_dimens: float

    @classmethod
    def from_bounds(
        cls,
        viewport: QRectF,
        aspect_ratio: AspectRatio,
        min_size_hint: float,
    ) -> Box:
        """Create the largest box inside *viewport* that keeps *aspect_ratio*.

        The box is centred in the viewport.  ``FREE`` and ``ORIGINAL`` fill
        the whole viewport.  The minimum dimension is a quarter of the
        smallest viewport side, capped by *min_size_hint*.
        """
        bounds = edges_of(viewport)
        view_width = bounds.right - bounds.left
        view_height = bounds.bottom - bounds.top
        min_dimens = min(min(view_width, view_height) / 4.0, float(min_size_hint))

        if aspect_ratio.is_free or aspect_ratio.is_original:
            return cls(bounds.left, bounds.top, bounds.right, bounds.bottom, min_dimens)

        width, height = aspect_ratio.size_within(view_width, view_height)
        left = bounds.left + (view_width - width) / 2.0
        top = bounds.top + (view_height - height) / 2.0
        return cls(left, top, left + width, top + height, min_dimens)

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> QPointF:
        return QPointF(self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def rect(self) -> QRectF:
        return rect_from_edges(self.left, self.top, self.right, self.bottom)

    @property
    def edges(self) -> Edges:
        return Edges(self.left, self.top, self.right, self.bottom)

    @property
    def left_top(self) -> QPointF:
        return QPointF(self.left, self.top)

    @property
    def right_top(self) -> QPointF:
        return QPointF(self.right, self.top)

    @property
    def right_bottom(self) -> QPointF:
        return QPointF(self.right, self.bottom)

    @property
    def left_bottom(self) -> QPointF:
        return QPointF(self.left, self.bottom)

    @property
    def top_line(self) -> Line:
        return Line(self.left_top, self.right_top)

    @property
    def right_line(self) -> Line:
        return Line(self.right_top, self.right_bottom)

    @property
    def bottom_line(self) -> Line:
        return Line(self.right_bottom, self.left_bottom)

    @property
    def left_line(self) -> Line:
        return Line(self.left_bottom, self.left_top)

    @property
    def center_bound(self) -> Edges:
        """Closest two opposing edges may come when both move inwards."""
        half = self.min_dimens / 2.0
        center = self.center
        return Edges(
            center.x() - half,
            center.y() - half,
            center.x() + half,
            center.y() + half,
        )

    @property
    def inner_bound(self) -> Edges:
        """Furthest each edge lets its opposite edge approach."""
        return Edges(
            self.left + self.min_dimens,
            self.top + self.min_dimens,
            self.right - self.min_dimens,
            self.bottom - self.min_dimens,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_within(self, x: float, y: float) -> bool:
        """Return True if ``(x, y)`` lies inside the box, edges included."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def copy(self) -> Box:
        """Return an independent value copy of the box."""
        return replace(self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def move(self, dx: float, dy: float) -> Box:
        """Translate all four edges."""
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy
        return self

    def grow_to(self, width: float, height: float) -> Box:
        """Resize symmetrically around the center to ``width`` x ``height``."""
        half_dx = (width - self.width) / 2.0
        half_dy = (height - self.height) / 2.0
        self.left -= half_dx
        self.right += half_dx
        self.top -= half_dy
        self.bottom += half_dy
        return self

    def shrink(self, dx: float, dy: float) -> Box:
        """Move every edge inwards; positive values shrink the box."""
        self.left += dx
        self.right -= dx
        self.top += dy
        self.bottom -= dy
        return self

    def adjust(
        self,
        left: float = 0.0,
        top: float = 0.0,
        right: float = 0.0,
        bottom: float = 0.0,
    ) -> Box:
        """Apply one delta per edge in a single update."""
        self.left += left
        self.top += top
        self.right += right
        self.bottom += bottom
        return self

    def set_rect(self, rect: QRectF) -> Box:
        """Replace all four edges with those of *rect*."""
        self.left, self.top, self.right, self.bottom = edges_of(rect)
        return self


__all__ = ["Box", "Edges", "Line", "edges_of", "rect_from_edges"]
