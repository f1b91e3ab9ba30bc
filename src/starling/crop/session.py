"""State of a single drag gesture on the crop box."""

from __future__ import annotations

from dataclasses import dataclass, field

from PySide6.QtCore import QPointF

from .box import Box
from .handlers import HandlerType


@dataclass
class MoveSession:
    """Transient data owned by the move engine between start and end of a drag.

    ``anchor`` is the handle's own coordinate at gesture start and
    ``start_point`` the touch point.  The first pointer sample is replaced by
    the anchor (``initial_move``) so the handle does not jump to the finger;
    later samples are used as they are.
    """

    handler: HandlerType
    anchor: QPointF
    start_box: Box
    start_point: QPointF = field(default_factory=QPointF)
    initial_move: bool = True
    direction_x: HandlerType = HandlerType.NONE
    direction_y: HandlerType = HandlerType.NONE
    translate_x: float = 0.0
    translate_y: float = 0.0

    @property
    def is_auto_panning(self) -> bool:
        return self.direction_x != HandlerType.NONE or self.direction_y != HandlerType.NONE

    def pointer(self, x: float, y: float) -> QPointF:
        """Map a raw pointer sample to the handle position it represents."""
        if self.initial_move:
            self.initial_move = False
            return QPointF(self.anchor)
        return QPointF(x, y)


__all__ = ["MoveSession"]
