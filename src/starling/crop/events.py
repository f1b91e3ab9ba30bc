"""
Events emitted by the crop move engine.

The engine returns the events produced during a call so callers can react
to them (or assert on them) without registering callbacks.  Events raised
from timers are only delivered through the engine's listeners.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PySide6.QtCore import QPointF

from .handlers import HandlerType


@dataclass(frozen=True)
class BoundsHit:
    """Request to auto-scroll the image while the box is pinned at the viewport.

    ``delta`` holds the scroll step per axis; ``direction_x`` is ``LEFT``,
    ``RIGHT`` or ``NONE`` and ``direction_y`` is ``TOP``, ``BOTTOM`` or
    ``NONE``.  Both directions ``NONE`` cancels any running auto-scroll.
    """

    delta: QPointF
    direction_x: HandlerType = HandlerType.NONE
    direction_y: HandlerType = HandlerType.NONE

    @property
    def directions(self) -> tuple[HandlerType, HandlerType]:
        return (self.direction_x, self.direction_y)

    @property
    def is_cancel(self) -> bool:
        return self.direction_x == HandlerType.NONE and self.direction_y == HandlerType.NONE


@dataclass(frozen=True)
class ZoomRequested:
    """Request to zoom the image around ``center``."""

    center: QPointF
    zoom_out: bool


CropEvent = BoundsHit | ZoomRequested


@dataclass
class MoveOutcome:
    """Result of :meth:`CropMoveHandler.on_move`.

    Truthy when the box changed and the caller should repaint.
    """

    changed: bool = False
    events: list[CropEvent] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.changed


__all__ = ["BoundsHit", "CropEvent", "MoveOutcome", "ZoomRequested"]
