"""Main PySide shell: demo screens whose bars hide and show."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from hidebars.config import HideBarsSettings
from hidebars.core.app import ChromeScreen, build_screen
from hidebars.core.geometry import BarEdge
from hidebars.core.store import SettingsStore
from hidebars.logging import get_logger
from hidebars.ui.surfaces import QtBar, QtEventLoop, QtViewport
from hidebars.ui.widgets import SettingsPanel


class ChromeScreenWidget(QtWidgets.QWidget):
    """Hosts a top and a bottom bar plus a companion panel above the bottom bar.

    Forwards show, hide and resize events and clicks on the content area to
    the screen's controller.
    """

    settings_requested = QtCore.Signal(object)

    def __init__(
        self,
        screen_id: str,
        title: str,
        app_settings: HideBarsSettings,
        store: SettingsStore | None,
        tabs: QtWidgets.QTabWidget,
        *,
        with_companion: bool = True,
        live_bar_updates: bool = True,
        persist: bool = True,
        **overrides,
    ) -> None:
        super().__init__()
        self.setObjectName("ChromeScreen")
        self.logger = get_logger(f"ui.{screen_id}")
        self._tabs = tabs
        demo = app_settings.demo

        self.top_bar = self._make_bar(title, demo.bar_thickness, "TopBar")
        settings_button = QtWidgets.QPushButton("Settings", self.top_bar)
        settings_button.setObjectName("BarButton")
        settings_button.clicked.connect(lambda: self.settings_requested.emit(self.chrome))
        self.top_bar.layout().addWidget(settings_button)

        self.bottom_bar = self._make_bar("Tap anywhere to toggle the bars", demo.bar_thickness, "BottomBar")

        self.companion: QtWidgets.QFrame | None = None
        if with_companion:
            self.companion = self._make_bar("Companion", demo.companion_height, "Companion")
            overrides.setdefault("companion_gap", demo.companion_gap)

        self._top = QtBar(self.top_bar, BarEdge.NEAR)
        self._bottom = QtBar(self.bottom_bar, BarEdge.FAR)
        self._companion = QtBar(self.companion) if self.companion is not None else None

        self.chrome: ChromeScreen = build_screen(
            screen_id,
            app_settings,
            QtEventLoop(self),
            QtViewport(self),
            primary=self._top,
            secondary=self._bottom,
            companion=self._companion,
            store=store,
            is_frontmost=lambda: self._tabs.currentWidget() is self,
            live_bar_updates=live_bar_updates,
            persist=persist,
            **overrides,
        )

    def _make_bar(self, text: str, thickness: int, name: str) -> QtWidgets.QFrame:
        frame = QtWidgets.QFrame(self)
        frame.setObjectName(name)
        frame.setFixedHeight(thickness)
        layout = QtWidgets.QHBoxLayout(frame)
        layout.setContentsMargins(12, 0, 12, 0)
        layout.addWidget(QtWidgets.QLabel(text), 1)
        return frame

    def _seat_bars(self) -> None:
        width, height = self.width(), self.height()
        for bar in (self.top_bar, self.bottom_bar, self.companion):
            if bar is not None:
                bar.setFixedWidth(width)
        self._top.place(0)
        self._bottom.place(height - self.bottom_bar.height())
        if self._companion is not None:
            gap = self.chrome.settings.companion_gap
            self._companion.place(height - self.bottom_bar.height() - gap - self.companion.height())
        self.chrome.controller.handle_layout()

    def showEvent(self, event: QtGui.QShowEvent) -> None:  # noqa: N802
        super().showEvent(event)
        self._seat_bars()
        self.chrome.controller.handle_appear()

    def hideEvent(self, event: QtGui.QHideEvent) -> None:  # noqa: N802
        self.chrome.controller.handle_disappear()
        super().hideEvent(event)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._seat_bars()
        if event.oldSize().isValid() and event.oldSize() != event.size():
            self.chrome.controller.handle_will_transition_to_size()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: N802
        if event.button() == QtCore.Qt.MouseButton.LeftButton:
            self.chrome.controller.handle_toggle_requested()
            event.accept()
            return
        super().mouseReleaseEvent(event)


class MainWindow(QtWidgets.QWidget):
    def __init__(self, settings: HideBarsSettings, store: SettingsStore | None = None) -> None:
        super().__init__()
        self.settings = settings
        self.store = store
        self.logger = get_logger("ui.shell")
        self._panel: QtWidgets.QDialog | None = None

        self._setup_window()
        self._build_layout()
        self._apply_styles()

    def _setup_window(self) -> None:
        self.setWindowTitle("hidebars — hiding bars demo")
        self.resize(self.settings.demo.width, self.settings.demo.height)

    def _build_layout(self) -> None:
        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)

        self.tab_widget = QtWidgets.QTabWidget()
        self.tab_widget.setTabPosition(QtWidgets.QTabWidget.TabPosition.South)
        outer.addWidget(self.tab_widget)

        screens = [
            ChromeScreenWidget(
                "first", "Auto-hide", self.settings, self.store, self.tab_widget,
                persist=False,
                hide_primary_bar=False, hide_secondary_bar=True, hide_on_appear=True,
            ),
            ChromeScreenWidget(
                "second", "Manual", self.settings, self.store, self.tab_widget,
                with_companion=False, hide_secondary_bar=False, hide_on_appear=False,
            ),
            ChromeScreenWidget(
                "third", "Both bars", self.settings, self.store, self.tab_widget,
                live_bar_updates=False,
            ),
        ]
        for widget in screens:
            widget.settings_requested.connect(self._open_settings)
            self.tab_widget.addTab(widget, widget.chrome.screen_id.title())

    def _open_settings(self, screen: ChromeScreen) -> None:
        if self._panel is not None:
            self._panel.close()
        dialog = QtWidgets.QDialog(self)
        dialog.setWindowTitle(f"{screen.screen_id.title()} bar settings")
        dialog.setAttribute(QtCore.Qt.WidgetAttribute.WA_DeleteOnClose)
        layout = QtWidgets.QVBoxLayout(dialog)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(SettingsPanel(screen.catalog(), dialog))
        dialog.destroyed.connect(lambda *_: setattr(self, "_panel", None))
        self._panel = dialog
        self.logger.debug(f"Editing settings of {screen.screen_id}")
        dialog.show()

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QFrame#TopBar, QFrame#BottomBar {
                background: #151520;
                color: #e5e7eb;
            }
            QFrame#TopBar QLabel, QFrame#BottomBar QLabel { color: #e5e7eb; }
            QFrame#Companion {
                background: rgba(99, 102, 241, 0.85);
                border-radius: 12px;
            }
            QFrame#Companion QLabel { color: #ffffff; }
            QPushButton#BarButton {
                background: #6366f1;
                color: #ffffff;
                border: none;
                border-radius: 6px;
                padding: 4px 10px;
            }
            QLabel#SettingDetail { color: #6b7280; }
            """
        )

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802
        for index in range(self.tab_widget.count()):
            widget = self.tab_widget.widget(index)
            if isinstance(widget, ChromeScreenWidget):
                widget.chrome.close()
        super().closeEvent(event)
