"""
Crop move engine.

:class:`CropMoveHandler` turns pointer samples into box mutations.  It picks
the handle under the pointer when a gesture starts, computes every edge
delta against the limits of the box and the viewport, and applies the final
deltas in one update so the box never shows an intermediate state.
Auto-pan and auto-zoom requests are returned as events and forwarded to the
optional listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from PySide6.QtCore import QObject, QPointF, QRectF

from ..settings import CropSettings
from .aspect_ratio import AspectRatio
from .box import Box, edges_of
from .events import BoundsHit, CropEvent, MoveOutcome, ZoomRequested
from .handlers import AXIS_EDGES, Axis, CropHandler, HandlerType, describe_handler
from .hit_tester import HitTester
from .session import MoveSession
from .timers import DelayedCall

_LOGGER = logging.getLogger(__name__)

_EPSILON = 1e-6

_EDGE_NAMES: dict[HandlerType, str] = {
    HandlerType.LEFT: "left",
    HandlerType.TOP: "top",
    HandlerType.RIGHT: "right",
    HandlerType.BOTTOM: "bottom",
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _fit_offset(low: float, high: float, low_bound: float, high_bound: float) -> float:
    """Return the shift that moves ``[low, high]`` back inside its bounds.

    The low side is checked first; a span larger than its bounds is aligned
    with the low bound.
    """
    if low < low_bound:
        return low_bound - low
    if high > high_bound:
        return high_bound - high
    return 0.0


def _cap_delta(delta: float, low: float, high: float, low_bound: float, high_bound: float) -> float:
    """Restrict a translation of ``[low, high]`` so it stops at the bounds."""
    if delta < 0:
        if low + delta <= low_bound:
            return low_bound - low
    elif high + delta >= high_bound:
        return high_bound - high
    return delta


class CropMoveHandler:
    """Drives a single :class:`Box` from pointer gestures."""

    def __init__(
        self,
        *,
        bounds: QRectF,
        box: Box,
        aspect_ratio: AspectRatio = AspectRatio.FREE,
        settings: CropSettings | None = None,
        on_bounds_hit: Callable[[QPointF, tuple[HandlerType, HandlerType]], None] | None = None,
        on_zoom: Callable[[QPointF, bool], None] | None = None,
        timer_parent: QObject | None = None,
    ) -> None:
        """Initialize the move engine.

        Parameters
        ----------
        bounds:
            Currently visible image bounds in viewport coordinates.
        box:
            The crop box to mutate.  The engine owns it during a gesture.
        aspect_ratio:
            Ratio the box has to keep while resizing.
        settings:
            Pixel sizes and delays; defaults to :class:`CropSettings`.
        on_bounds_hit:
            Listener for auto-pan requests, signature ``(delta, (dir_x, dir_y))``.
        on_zoom:
            Listener for zoom requests, signature ``(center, zoom_out)``.
        timer_parent:
            Parent QObject for timers (optional).
        """
        self._bounds = QRectF(bounds)
        self._box = box
        self._aspect_ratio = aspect_ratio
        self._settings = settings or CropSettings()
        self._hit_tester = HitTester(hit_padding=self._settings.handler_bounds)
        self._zoom_level = 1.0

        self.on_bounds_hit = on_bounds_hit
        self.on_zoom = on_zoom

        self._session: MoveSession | None = None
        self._zoom_out_running = False
        self._zoom_out_timer = DelayedCall(self._on_zoom_out_timeout, timer_parent=timer_parent)
        self._auto_pan_timer = DelayedCall(self._on_auto_pan_tick, timer_parent=timer_parent)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def box(self) -> Box:
        return self._box

    @property
    def bounds(self) -> QRectF:
        return QRectF(self._bounds)

    @property
    def settings(self) -> CropSettings:
        return self._settings

    @property
    def aspect_ratio(self) -> AspectRatio:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: AspectRatio) -> None:
        self._aspect_ratio = value

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, value: float) -> None:
        self._zoom_level = float(value)

    @property
    def session(self) -> MoveSession | None:
        return self._session

    @property
    def handler(self) -> HandlerType:
        """Handle engaged by the current gesture, ``NONE`` when idle."""
        if self._session is None:
            return HandlerType.NONE
        return self._session.handler

    @property
    def is_moving(self) -> bool:
        return self._session is not None

    @property
    def is_auto_panning(self) -> bool:
        """True while repeated auto-pan requests are scheduled."""
        return self._auto_pan_timer.is_active()

    @property
    def is_zoom_out_armed(self) -> bool:
        """True while a delayed zoom-out request is pending."""
        return self._zoom_out_timer.is_active()

    # ------------------------------------------------------------------
    # Gesture API
    # ------------------------------------------------------------------
    def start_move(self, x: float, y: float) -> bool:
        """Start a gesture at ``(x, y)``.

        Returns True if a handle (or the box body) was hit.
        """
        if self._session is not None:
            self._stop_timers()
            self._session = None

        handler = self._hit_tester.test(x, y, self._box)
        if handler == HandlerType.NONE:
            _LOGGER.debug("Crop gesture at (%.1f, %.1f) missed the box", x, y)
            return False

        point = QPointF(x, y)
        anchor = point if handler == HandlerType.BOX else self._handle_anchor(handler, x, y)
        self._session = MoveSession(
            handler=handler,
            anchor=anchor,
            start_box=self._box.copy(),
            start_point=point,
        )
        _LOGGER.debug("Crop gesture started on %s", handler.name)
        return True

    def on_move(self, x: float, y: float) -> MoveOutcome:
        """Apply a pointer sample to the active gesture.

        The returned outcome is truthy when the box changed.
        """
        session = self._session
        if session is None:
            return MoveOutcome()

        outcome = MoveOutcome()
        before = self._box.edges

        if session.handler == HandlerType.BOX:
            self._move_box(session, x, y, outcome.events)
        else:
            _, _, outside = self._within_bounds(x, y)
            self._update_zoom_out(outside)
            pointer = session.pointer(x, y)
            bounded_x, bounded_y, _ = self._within_bounds(pointer.x(), pointer.y())
            if session.handler.is_edge:
                target = bounded_x if session.handler.axis is Axis.X else bounded_y
                deltas = self._edge_deltas(session.handler, target)
            else:
                deltas = self._corner_deltas(session.handler, bounded_x, bounded_y)
            self._box.adjust(**deltas)

        outcome.changed = self._box.edges != before
        self._dispatch(outcome.events)
        return outcome

    def end_move(self) -> list[CropEvent]:
        """Finish the gesture and request a zoom-in if the box became small."""
        self._stop_timers()
        session = self._session
        self._session = None
        if session is None:
            _LOGGER.debug("end_move() without an active crop gesture")
            return []

        events: list[CropEvent] = []
        fraction = self._settings.zoom_in_fraction
        small_x = self._box.width <= self._bounds.width() * fraction
        small_y = self._box.height <= self._bounds.height() * fraction
        if small_x and small_y:
            _LOGGER.debug("Crop box below %.0f%% of the viewport, requesting zoom-in", fraction * 100)
            events.append(ZoomRequested(self._box.center, zoom_out=False))

        _LOGGER.debug("Crop gesture on %s ended", session.handler.name)
        self._dispatch(events)
        return events

    def cancel(self) -> None:
        """Abort the gesture without evaluating auto zoom-in."""
        self._stop_timers()
        if self._session is not None:
            _LOGGER.debug("Crop gesture on %s cancelled", self._session.handler.name)
        self._session = None

    def update_bounds(self, bounds: QRectF) -> None:
        """Replace the viewport used for all following bound checks."""
        self._bounds = QRectF(bounds)

    # ------------------------------------------------------------------
    # Box reconciliation
    # ------------------------------------------------------------------
    def scale_box(self) -> QRectF:
        """Return the box enlarged to the configured fraction of the viewport.

        The result keeps the aspect ratio and is shifted to lie inside the
        viewport.  The live box is not modified.
        """
        fraction = self._settings.scale_fraction
        width, height = self._aspect_ratio.size_within(
            self._bounds.width() * fraction,
            self._bounds.height() * fraction,
        )
        scaled = self._box.copy().grow_to(width, height)
        return self._fit_inside(scaled).rect

    def update_border(self) -> QRectF:
        """Return the box fitted into the current viewport.

        A box that is larger than the viewport on any axis is shrunk first
        (keeping the aspect ratio unless it is free) and then shifted inside.
        The live box is not modified.
        """
        fitted = self._box.copy()
        view_width = self._bounds.width()
        view_height = self._bounds.height()
        too_wide = fitted.width > view_width + _EPSILON
        too_high = fitted.height > view_height + _EPSILON

        if too_wide or too_high:
            if self._aspect_ratio.is_free:
                fitted.shrink(
                    max(0.0, (fitted.width - view_width) / 2.0),
                    max(0.0, (fitted.height - view_height) / 2.0),
                )
            else:
                width, height = self._aspect_ratio.size_within(
                    min(fitted.width, view_width),
                    min(fitted.height, view_height),
                )
                fitted.grow_to(width, height)
        return self._fit_inside(fitted).rect

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_anchor(self, handler: HandlerType, x: float, y: float) -> QPointF:
        """Return the coordinate of *handler* closest to the touch point."""
        box = self._box
        anchors = {
            HandlerType.LEFT_TOP: box.left_top,
            HandlerType.RIGHT_TOP: box.right_top,
            HandlerType.RIGHT_BOTTOM: box.right_bottom,
            HandlerType.LEFT_BOTTOM: box.left_bottom,
            HandlerType.LEFT: QPointF(box.left, y),
            HandlerType.RIGHT: QPointF(box.right, y),
            HandlerType.TOP: QPointF(x, box.top),
            HandlerType.BOTTOM: QPointF(x, box.bottom),
        }
        return anchors[handler]

    def _describe(self, handler: HandlerType) -> CropHandler:
        return describe_handler(handler, self._box, self._bounds)

    def _within_bounds(self, x: float, y: float) -> tuple[float, float, bool]:
        """Cap a point to the viewport and report whether it was outside."""
        bounds = edges_of(self._bounds)
        bounded_x = _clamp(x, bounds.left, bounds.right)
        bounded_y = _clamp(y, bounds.top, bounds.bottom)
        outside = bounded_x != x or bounded_y != y
        return bounded_x, bounded_y, outside

    def _cross(self, axis: Axis, growth: float) -> float:
        """Convert a size change along *axis* to the other axis."""
        if axis is Axis.X:
            return self._aspect_ratio.vertical_for(growth)
        return self._aspect_ratio.horizontal_for(growth)

    def _cross_inverse(self, axis: Axis, growth: float) -> float:
        """Convert a size change of the other axis back to *axis*."""
        if axis is Axis.X:
            return self._aspect_ratio.horizontal_for(growth)
        return self._aspect_ratio.vertical_for(growth)

    @staticmethod
    def _edge_growth(handler: CropHandler, target: float) -> float:
        """Return how far an edge may grow towards *target* (negative shrinks).

        The target is clamped between the viewport edge and the inner bound;
        the inner bound wins so the minimum size always holds.
        """
        if handler.is_outer:
            bounded = max(min(target, handler.out_bound), handler.in_bound)
        else:
            bounded = min(max(target, handler.out_bound), handler.in_bound)
        return handler.direction * (bounded - handler.value)

    @staticmethod
    def _dependent_growth(handler: CropHandler, requested: float) -> float:
        """Clamp the growth of an edge that follows the driving edge."""
        return _clamp(requested, -handler.room_center(), handler.room_out())

    def _edge_deltas(self, handler: HandlerType, target: float) -> dict[str, float]:
        driving = self._describe(handler)
        growth = self._edge_growth(driving, target)
        if self._aspect_ratio.is_free:
            return {_EDGE_NAMES[handler]: driving.direction * growth}

        axis = handler.axis
        dependents = [self._describe(edge) for edge in AXIS_EDGES[axis.other]]
        half_cross = self._cross(axis, growth) / 2.0
        for dependent in dependents:
            allowed = self._dependent_growth(dependent, half_cross)
            candidate = self._cross_inverse(axis, allowed * 2.0)
            if abs(candidate) < abs(growth):
                growth = candidate

        half_cross = self._cross(axis, growth) / 2.0
        deltas = {_EDGE_NAMES[handler]: driving.direction * growth}
        for dependent in dependents:
            deltas[_EDGE_NAMES[dependent.type]] = dependent.direction * half_cross
        return deltas

    def _corner_deltas(self, handler: HandlerType, x: float, y: float) -> dict[str, float]:
        horizontal_edge, vertical_edge = handler.edges
        horizontal = self._describe(horizontal_edge)
        vertical = self._describe(vertical_edge)
        growth_x = self._edge_growth(horizontal, x)
        growth_y = self._edge_growth(vertical, y)

        if not self._aspect_ratio.is_free:
            # The smaller candidate drives both axes; mixed signs favour shrinking.
            growth_x = min(growth_x, self._aspect_ratio.horizontal_for(growth_y))
            growth_y = self._aspect_ratio.vertical_for(growth_x)

            bounded_y = _clamp(growth_y, -vertical.room_in(), vertical.room_out())
            if bounded_y != growth_y:
                growth_y = bounded_y
                growth_x = self._aspect_ratio.horizontal_for(growth_y)
            bounded_x = _clamp(growth_x, -horizontal.room_in(), horizontal.room_out())
            if bounded_x != growth_x:
                growth_x = bounded_x
                growth_y = self._aspect_ratio.vertical_for(growth_x)

        return {
            _EDGE_NAMES[horizontal_edge]: horizontal.direction * growth_x,
            _EDGE_NAMES[vertical_edge]: vertical.direction * growth_y,
        }

    def _move_box(self, session: MoveSession, x: float, y: float, events: list[CropEvent]) -> None:
        """Translate the whole box and evaluate auto-pan."""
        delta_x = x - session.start_point.x()
        delta_y = y - session.start_point.y()
        start = session.start_box
        bounds = edges_of(self._bounds)

        restricted_x = _cap_delta(delta_x, start.left, start.right, bounds.left, bounds.right)
        restricted_y = _cap_delta(delta_y, start.top, start.bottom, bounds.top, bounds.bottom)

        box = self._box
        box.left = start.left + restricted_x
        box.right = start.right + restricted_x
        box.top = start.top + restricted_y
        box.bottom = start.bottom + restricted_y

        x_changed = self._update_auto_pan_axis(session, Axis.X, delta_x)
        y_changed = self._update_auto_pan_axis(session, Axis.Y, delta_y)
        if x_changed or y_changed:
            event = self._bounds_hit(session)
            _LOGGER.debug(
                "Auto-pan direction changed to (%s, %s)",
                event.direction_x.name,
                event.direction_y.name,
            )
            events.append(event)

        if session.is_auto_panning:
            if not self._auto_pan_timer.is_active():
                self._auto_pan_timer.start(self._settings.auto_pan_interval_ms)
        else:
            self._auto_pan_timer.stop()

    def _update_auto_pan_axis(self, session: MoveSession, axis: Axis, delta: float) -> bool:
        """Track whether the box is pinned on *axis* while the drag continues.

        Returns True if the direction on this axis changed.
        """
        low_edge, high_edge = AXIS_EDGES[axis]
        low_side, high_side = (
            (self._box.left, self._box.right) if axis is Axis.X else (self._box.top, self._box.bottom)
        )
        bounds = edges_of(self._bounds)
        low_bound, high_bound = (
            (bounds.left, bounds.right) if axis is Axis.X else (bounds.top, bounds.bottom)
        )
        at_low = abs(low_side - low_bound) <= _EPSILON
        at_high = abs(high_side - high_bound) <= _EPSILON

        if axis is Axis.X:
            direction, translation = session.direction_x, session.translate_x
        else:
            direction, translation = session.direction_y, session.translate_y

        threshold = self._settings.threshold
        step = self._settings.base_translate * max(1.0, self._zoom_level / 2.0)
        changed = False

        if direction == HandlerType.NONE:
            if delta <= -threshold and at_low:
                direction, translation = low_edge, step
                changed = True
            elif delta >= threshold and at_high:
                direction, translation = high_edge, -step
                changed = True
        elif direction == low_edge:
            if delta > -threshold or not at_low:
                direction, translation = HandlerType.NONE, 0.0
                changed = True
        elif direction == high_edge:
            if delta < threshold or not at_high:
                direction, translation = HandlerType.NONE, 0.0
                changed = True

        if axis is Axis.X:
            session.direction_x, session.translate_x = direction, translation
        else:
            session.direction_y, session.translate_y = direction, translation
        return changed

    @staticmethod
    def _bounds_hit(session: MoveSession) -> BoundsHit:
        return BoundsHit(
            QPointF(session.translate_x, session.translate_y),
            session.direction_x,
            session.direction_y,
        )

    def _fit_inside(self, box: Box) -> Box:
        bounds = edges_of(self._bounds)
        return box.move(
            _fit_offset(box.left, box.right, bounds.left, bounds.right),
            _fit_offset(box.top, box.bottom, bounds.top, bounds.bottom),
        )

    def _update_zoom_out(self, outside: bool) -> None:
        """Arm or cancel the delayed zoom-out for a resize gesture."""
        if outside and not self._aspect_ratio.is_free:
            if not self._zoom_out_running:
                self._zoom_out_running = True
                self._zoom_out_timer.start(self._settings.zoom_out_delay_ms)
            return
        self._zoom_out_running = False
        self._zoom_out_timer.stop()

    def _stop_timers(self) -> None:
        self._zoom_out_running = False
        self._zoom_out_timer.stop()
        self._auto_pan_timer.stop()

    def _on_zoom_out_timeout(self) -> None:
        if self._session is None or not self._zoom_out_running:
            return
        if self._zoom_level != 1.0:
            _LOGGER.debug("Resize handle held outside the image, requesting zoom-out")
            self._dispatch([ZoomRequested(self._box.center, zoom_out=True)])
        # The listener may have brought the zoom level back to 1.
        if self._zoom_level != 1.0 and self._session is not None:
            self._zoom_out_timer.start(self._settings.zoom_out_repeat_ms)

    def _on_auto_pan_tick(self) -> None:
        session = self._session
        if session is None or not session.is_auto_panning:
            return
        self._dispatch([self._bounds_hit(session)])
        self._auto_pan_timer.start(self._settings.auto_pan_interval_ms)

    def _dispatch(self, events: Iterable[CropEvent]) -> None:
        for event in events:
            if isinstance(event, BoundsHit):
                if self.on_bounds_hit is not None:
                    self.on_bounds_hit(event.delta, event.directions)
            elif self.on_zoom is not None:
                self.on_zoom(event.center, event.zoom_out)


__all__ = ["CropMoveHandler"]
