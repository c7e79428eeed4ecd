import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from hidebars.core.geometry import BarEdge, is_bar_visible  # noqa: E402
from hidebars.ui.surfaces import QtBar, QtEventLoop, QtViewport  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_qt_bar_moves_without_animation(qapp):
    host = QtWidgets.QWidget()
    host.resize(300, 600)
    frame = QtWidgets.QFrame(host)
    frame.setGeometry(0, 560, 300, 40)
    bar = QtBar(frame, BarEdge.FAR)
    viewport = QtViewport(host)

    assert bar.thickness == 40
    assert viewport.extent == 600
    assert is_bar_visible(bar, viewport)

    bar.move_to(600, 0.0)

    assert frame.y() == 600
    assert bar.offset == 600
    assert not is_bar_visible(bar, viewport)


def test_qt_bar_reports_animation_target(qapp):
    host = QtWidgets.QWidget()
    frame = QtWidgets.QFrame(host)
    frame.setGeometry(0, 560, 300, 40)
    bar = QtBar(frame)

    bar.move_to(600, 0.25)

    assert bar.offset == 600
    bar.place(560)
    assert bar.offset == 560
    assert frame.y() == 560


def test_qt_event_loop_cancel_is_idempotent(qapp):
    loop = QtEventLoop()
    calls = []
    handle = loop.call_later(10.0, lambda: calls.append(1))

    handle.cancel()
    handle.cancel()
    qapp.processEvents()

    assert calls == []
    with pytest.raises(ValueError):
        loop.call_later(-1.0, lambda: None)


def test_qt_bar_animations_are_released(qapp):
    from PySide6 import QtCore

    host = QtWidgets.QWidget()
    frame = QtWidgets.QFrame(host)
    frame.setGeometry(0, 560, 300, 40)
    bar = QtBar(frame)

    for step in range(50):
        bar.move_to(600 if step % 2 == 0 else 560, 0.001)
        qapp.processEvents()
    QtCore.QCoreApplication.sendPostedEvents(None, QtCore.QEvent.Type.DeferredDelete)

    assert len(frame.findChildren(QtCore.QPropertyAnimation)) <= 1
    assert bar.offset == 560
