"""
Crop overlay model.

This module keeps the crop box, the move engine and the ratio selection of
an overlay together, without any drawing or widget code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QObject, QPointF, QRect, QRectF

from ..settings import CropSettings
from .aspect_ratio import AspectRatio
from .box import Box
from .events import CropEvent, MoveOutcome
from .handlers import HandlerType
from .move_handler import CropMoveHandler

_LOGGER = logging.getLogger(__name__)


class CropOverlayModel:
    """Owns the crop box of an editing session and forwards gestures."""

    def __init__(
        self,
        *,
        settings: CropSettings | None = None,
        on_bounds_hit: Callable[[QPointF, tuple[HandlerType, HandlerType]], None] | None = None,
        on_zoom: Callable[[QPointF, bool], None] | None = None,
        timer_parent: QObject | None = None,
    ) -> None:
        self._settings = settings or CropSettings()
        self._on_bounds_hit = on_bounds_hit
        self._on_zoom = on_zoom
        self._timer_parent = timer_parent

        self._bounds = QRectF()
        self._aspect_ratio = AspectRatio.FREE
        self._box: Box | None = None
        self._start_box: Box | None = None
        self._engine: CropMoveHandler | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, bounds: QRectF, aspect_ratio: AspectRatio = AspectRatio.FREE) -> Box:
        """Create a fresh box for *bounds* and remember it as the start state."""
        self._bounds = QRectF(bounds)
        self._aspect_ratio = aspect_ratio.bind(bounds.width(), bounds.height())

        if self._engine is not None:
            self._engine.cancel()

        self._box = Box.from_bounds(self._bounds, self._aspect_ratio, self._settings.min_size)
        self._start_box = self._box.copy()
        self._engine = CropMoveHandler(
            bounds=self._bounds,
            box=self._box,
            aspect_ratio=self._aspect_ratio,
            settings=self._settings,
            on_bounds_hit=self._on_bounds_hit,
            on_zoom=self._on_zoom,
            timer_parent=self._timer_parent,
        )
        _LOGGER.debug(
            "Crop overlay initialised with %s inside %.1fx%.1f",
            self._aspect_ratio.label,
            self._bounds.width(),
            self._bounds.height(),
        )
        return self._box

    def update_ratio(self, aspect_ratio: AspectRatio) -> Box:
        """Switch to *aspect_ratio* and rebuild the box."""
        return self.initialize(self._bounds, aspect_ratio)

    def reset(self, bounds: QRectF) -> Box:
        """Rebuild the box for new *bounds*, keeping the current ratio."""
        ratio = self._aspect_ratio
        if ratio.is_original:
            ratio = AspectRatio.ORIGINAL
        return self.initialize(bounds, ratio)

    def update_bounds(self, bounds: QRectF) -> None:
        self._bounds = QRectF(bounds)
        if self._engine is not None:
            self._engine.update_bounds(bounds)

    def on_zoomed_in(self) -> None:
        """Enlarge the box after the image was zoomed in."""
        if self._engine is None or self._box is None:
            return
        self._box.set_rect(self._engine.scale_box())

    def restrict_border(self) -> None:
        """Pull the box back inside the viewport."""
        if self._engine is None or self._box is None:
            return
        self._box.set_rect(self._engine.update_border())

    # ------------------------------------------------------------------
    # Gesture forwarding
    # ------------------------------------------------------------------
    def start_move(self, x: float, y: float) -> bool:
        if self._engine is None:
            return False
        return self._engine.start_move(x, y)

    def on_move(self, x: float, y: float) -> MoveOutcome:
        if self._engine is None:
            return MoveOutcome()
        return self._engine.on_move(x, y)

    def end_move(self) -> list[CropEvent]:
        if self._engine is None:
            return []
        return self._engine.end_move()

    def cancel_move(self) -> None:
        if self._engine is not None:
            self._engine.cancel()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def box(self) -> Box | None:
        return self._box

    @property
    def engine(self) -> CropMoveHandler | None:
        return self._engine

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._aspect_ratio

    @property
    def bounds(self) -> QRectF:
        return QRectF(self._bounds)

    @property
    def outline(self) -> QRect:
        """Integer rectangle of the box, empty before :meth:`initialize`."""
        if self._box is None:
            return QRect()
        return self._box.rect.toRect()

    @property
    def zoom_level(self) -> float:
        if self._engine is None:
            return 1.0
        return self._engine.zoom_level

    @zoom_level.setter
    def zoom_level(self, value: float) -> None:
        if self._engine is not None:
            self._engine.zoom_level = value

    def is_touched(self) -> bool:
        """Return True when the box differs from its start state."""
        if self._box is None or self._start_box is None:
            return False
        return any(
            abs(a - b) > 1e-6 for a, b in zip(self._box.edges, self._start_box.edges, strict=True)
        )


__all__ = ["CropOverlayModel"]
