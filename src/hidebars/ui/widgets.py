"""Reusable UI components."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from hidebars.core.catalog import SettingsCatalog


class SettingsPanel(QtWidgets.QWidget):
    """Switch list for a screen's bar settings.

    Edits land in the shared settings object immediately, so the screen
    owning those settings reacts while the panel is open.
    """

    def __init__(self, catalog: SettingsCatalog, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("SettingsPanel")
        self.catalog = catalog
        self._switches: list[QtWidgets.QCheckBox] = []

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        for index in range(len(catalog)):
            content = catalog.content(index)
            if content is None:
                continue
            switch = QtWidgets.QCheckBox(content.label)
            switch.setChecked(content.is_on)
            font = QtGui.QFont()
            font.setBold(True)
            switch.setFont(font)
            switch.toggled.connect(lambda checked, i=index: self.catalog.set_on(i, checked))

            detail = QtWidgets.QLabel(content.detail)
            detail.setWordWrap(True)
            detail.setObjectName("SettingDetail")

            layout.addWidget(switch)
            layout.addWidget(detail)
            self._switches.append(switch)
        layout.addStretch(1)

        catalog.settings.add_observer(self._sync_switches, owner=self)
        self.destroyed.connect(lambda *_: catalog.settings.remove_observer(self))

    def _sync_switches(self, name: str, value: bool) -> None:
        for index, switch in enumerate(self._switches):
            if self.catalog.name_at(index) == name and switch.isChecked() != value:
                with QtCore.QSignalBlocker(switch):
                    switch.setChecked(value)
