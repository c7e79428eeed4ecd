"""Table-driven list of switchable bar settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, TypeAdapter

from hidebars.core.state import VisibilitySettings

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
CATALOG_RESOURCE = "bar_settings.json"


class SettingRow(BaseModel):
    name: str
    label: str
    detail: str


class SettingContent(BaseModel):
    label: str
    detail: str
    is_on: bool


_ROWS = TypeAdapter(list[SettingRow])


def load_rows(path: Path | None = None) -> list[SettingRow]:
    """Read setting rows from ``path`` or from the packaged catalog."""

    if path is not None:
        raw = path.read_text(encoding="utf-8")
    else:
        raw = (RESOURCES_DIR / CATALOG_RESOURCE).read_text(encoding="utf-8")
    return _ROWS.validate_json(raw)


class SettingsCatalog:
    """Exposes a screen's settings as rows of label, detail and switch state.

    Rows are addressed by position so a generic list widget can render and
    edit them without knowing the individual flags. Writes go through
    :meth:`VisibilitySettings.set_flag`, so any screen sharing the settings
    reacts immediately.
    """

    def __init__(self, settings: VisibilitySettings, rows: list[SettingRow] | None = None) -> None:
        self.settings = settings
        self.rows = [row for row in (rows if rows is not None else load_rows())
                     if settings.get_flag(row.name) is not None]

    def __len__(self) -> int:
        return len(self.rows)

    def name_at(self, index: int) -> str | None:
        if 0 <= index < len(self.rows):
            return self.rows[index].name
        return None

    def content(self, index: int) -> SettingContent | None:
        name = self.name_at(index)
        if name is None:
            return None
        row = self.rows[index]
        return SettingContent(label=row.label, detail=row.detail, is_on=self.settings.get_flag(name))

    def set_on(self, index: int, is_on: bool) -> None:
        name = self.name_at(index)
        if name is not None:
            self.settings.set_flag(name, is_on)
