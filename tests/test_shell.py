import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from hidebars.config import HideBarsSettings  # noqa: E402
from hidebars.core.store import SettingsStore  # noqa: E402
from hidebars.ui.shell import ChromeScreenWidget, MainWindow  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_companion_keeps_gap_when_bottom_bar_cannot_hide(qapp):
    settings = HideBarsSettings(persist=False)
    demo = settings.demo
    tabs = QtWidgets.QTabWidget()
    widget = ChromeScreenWidget(
        "first", "Auto-hide", settings, None, tabs,
        hide_secondary_bar=False, hide_on_appear=False,
    )
    widget.resize(400, 800)
    widget.show()
    qapp.processEvents()

    try:
        expected = widget.height() - demo.bar_thickness - demo.companion_gap - demo.companion_height
        assert widget.companion.y() == expected
        assert widget.bottom_bar.y() == widget.height() - demo.bar_thickness
    finally:
        widget.close()
        widget.chrome.close()


def test_main_window_keeps_first_screen_out_of_store(qapp, tmp_path):
    store = SettingsStore(tmp_path / "bars.json")
    window = MainWindow(HideBarsSettings(persist=False), store)

    try:
        screens = [window.tab_widget.widget(i).chrome for i in range(window.tab_widget.count())]
        assert [s.screen_id for s in screens] == ["first", "second", "third"]

        first, second, _ = screens
        first.settings.set_flag("show_on_appear", False)
        second.settings.set_flag("show_on_appear", False)

        assert store.load("first") == {}
        assert store.load("second")["show_on_appear"] is False
    finally:
        window.close()
