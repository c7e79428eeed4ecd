"""PySide6 handles for bars, viewport and deferred callbacks."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from hidebars.core.geometry import BarEdge
from hidebars.services.loop import TaskCallback


class QtBar:
    """Slides a widget vertically inside its parent."""

    def __init__(self, widget: QtWidgets.QWidget, edge: BarEdge = BarEdge.FAR) -> None:
        self.widget = widget
        self.edge = edge
        self._target: float | None = None
        self._animation: QtCore.QPropertyAnimation | None = None

    @property
    def offset(self) -> float:
        # While animating, report where the bar is headed, not where it is.
        if self._target is not None:
            return self._target
        return float(self.widget.y())

    @property
    def thickness(self) -> float:
        return float(self.widget.height())

    def place(self, offset: float) -> None:
        """Jump to ``offset`` outside of any hide/show transition."""
        self.move_to(offset, 0.0)

    def move_to(self, offset: float, duration: float) -> None:
        if self._animation is not None:
            self._animation.stop()
            self._animation = None
        end = QtCore.QPoint(self.widget.x(), round(offset))
        if duration <= 0.0:
            self._target = None
            self.widget.move(end)
            return
        self._target = offset
        animation = QtCore.QPropertyAnimation(self.widget, b"pos", self.widget)
        animation.setDuration(int(duration * 1000))
        animation.setEndValue(end)
        animation.setEasingCurve(QtCore.QEasingCurve.Type.InOutQuad)
        animation.finished.connect(lambda: self._on_finished(animation))
        self._animation = animation
        # Qt deletes the animation once it finishes or a newer move stops it.
        animation.start(QtCore.QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _on_finished(self, animation: QtCore.QPropertyAnimation) -> None:
        if self._animation is animation:
            self._animation = None
            self._target = None


class QtViewport:
    def __init__(self, widget: QtWidgets.QWidget) -> None:
        self.widget = widget

    @property
    def extent(self) -> float:
        return float(self.widget.height())

    @property
    def size(self) -> tuple[float, float]:
        return (float(self.widget.width()), float(self.widget.height()))


class _QtTimerHandle:
    def __init__(self, timer: QtCore.QTimer) -> None:
        self._timer: QtCore.QTimer | None = timer

    def cancel(self) -> None:
        timer = self._timer
        self._timer = None
        if timer is not None:
            timer.stop()
            timer.deleteLater()


class QtEventLoop:
    """Runs deferred callbacks on the Qt GUI thread via single-shot timers."""

    def __init__(self, parent: QtCore.QObject | None = None) -> None:
        self.parent = parent

    def call_later(self, delay: float, callback: TaskCallback) -> _QtTimerHandle:
        if delay < 0.0:
            raise ValueError("delay must be >= 0")
        timer = QtCore.QTimer(self.parent)
        timer.setSingleShot(True)
        handle = _QtTimerHandle(timer)

        def fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(fire)
        timer.start(int(delay * 1000))
        return handle
