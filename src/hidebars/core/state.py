"""Per-screen bar visibility state."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hidebars.core.events import EventBus

if TYPE_CHECKING:
    from hidebars.config import BarDefaults
    from hidebars.core.geometry import CompanionHandle
    from hidebars.services.loop import Cancellable

SETTING_CHANGED = "setting.changed"

FLAG_NAMES = ("hide_primary_bar", "hide_secondary_bar", "hide_on_appear", "show_on_appear")

SettingObserver = Callable[[str, bool], None]


class BarRole(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"

    @property
    def flag(self) -> str:
        return f"hide_{self.value}_bar"


@dataclass(slots=True, frozen=True)
class SettingChange:
    name: str
    value: bool


@dataclass(slots=True, eq=False)
class VisibilitySettings:
    """Configuration and mutable state shared by a screen and its settings editor."""

    hide_primary_bar: bool = True
    hide_secondary_bar: bool = True
    hide_on_appear: bool = True
    show_on_appear: bool = True
    auto_hide_delay: float | None = 3.0
    companion: CompanionHandle | None = None
    companion_gap: float = 0.0
    companion_bar: BarRole = BarRole.SECONDARY

    bars_hidden: bool = False
    auto_hide_overridden: bool = False
    pending_auto_hide: Cancellable | None = None

    events: EventBus = field(default_factory=EventBus)

    @classmethod
    def from_defaults(cls, defaults: BarDefaults, **overrides) -> VisibilitySettings:
        values = defaults.flags()
        values["auto_hide_delay"] = defaults.auto_hide_delay
        values["companion_gap"] = defaults.companion_gap
        values.update(overrides)
        return cls(**values)

    @property
    def auto_hide_enabled(self) -> bool:
        return self.hide_on_appear and self.auto_hide_delay is not None

    def is_eligible(self, role: BarRole) -> bool:
        return self.get_flag(role.flag) is True

    def get_flag(self, name: str) -> bool | None:
        if name not in FLAG_NAMES:
            return None
        return getattr(self, name)

    def set_flag(self, name: str, value: bool) -> None:
        """Assign a named flag and notify observers inline. Unknown names are ignored."""
        if name not in FLAG_NAMES:
            return
        setattr(self, name, bool(value))
        self.events.emit(SETTING_CHANGED, SettingChange(name, bool(value)))

    def flags(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in FLAG_NAMES}

    def add_observer(self, observer: SettingObserver, owner: object) -> None:
        self.events.subscribe(
            SETTING_CHANGED,
            lambda change: observer(change.name, change.value),
            owner=owner,
        )

    def remove_observer(self, owner: object) -> None:
        self.events.unsubscribe_owner(SETTING_CHANGED, owner)
