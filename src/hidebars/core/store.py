"""Persistence of bar settings flags keyed by screen identifier."""

from __future__ import annotations

from pathlib import Path

import portalocker
from pydantic import BaseModel, Field, ValidationError

from hidebars.core.state import VisibilitySettings
from hidebars.logging import get_logger


class StoredScreens(BaseModel):
    version: int = 1
    screens: dict[str, dict[str, bool]] = Field(default_factory=dict)


class SettingsStore:
    """JSON file mapping each screen id to its named flags.

    Unknown screens load as empty; a missing or unreadable file is treated as
    empty rather than raising.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.logger = get_logger("settings-store")

    def load_all(self) -> StoredScreens:
        if not self.path.exists():
            return StoredScreens()
        try:
            return StoredScreens.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            self.logger.warning(f"Ignoring unreadable settings store {self.path}: {e}")
            return StoredScreens()

    def load(self, screen_id: str) -> dict[str, bool]:
        return dict(self.load_all().screens.get(screen_id, {}))

    def save(self, screen_id: str, flags: dict[str, bool]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lock_path = self.path.with_suffix(self.path.suffix + ".lock")
        with portalocker.Lock(str(lock_path), timeout=5):
            stored = self.load_all()
            stored.screens[screen_id] = dict(flags)
            self.path.write_text(stored.model_dump_json(indent=2), encoding="utf-8")
        self.logger.debug(f"Saved settings for {screen_id}")

    def restore(self, screen_id: str, settings: VisibilitySettings) -> None:
        """Copy stored flags into ``settings`` without notifying observers."""
        for name, value in self.load(screen_id).items():
            if settings.get_flag(name) is not None:
                setattr(settings, name, value)

    def bind(self, screen_id: str, settings: VisibilitySettings) -> None:
        """Persist every flag change of ``settings`` under ``screen_id``."""
        settings.add_observer(lambda _name, _value: self.save(screen_id, settings.flags()), owner=self)
