"""Single-slot delayed callbacks used by the crop move engine."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class DelayedCall:
    """Run a callback once after a delay; restarting replaces the pending call."""

    def __init__(self, callback: Callable[[], None], *, timer_parent: QObject | None = None) -> None:
        self._timer = QTimer(timer_parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(callback)

    def start(self, delay_ms: int) -> None:
        """Schedule the callback, discarding any call still pending."""
        self._timer.start(max(0, int(delay_ms)))

    def stop(self) -> None:
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def interval(self) -> int:
        return self._timer.interval()


__all__ = ["DelayedCall"]
