"""Chrome visibility state machine."""

from __future__ import annotations

from collections.abc import Callable

from hidebars.core.geometry import BarMotionSynchronizer
from hidebars.core.state import BarRole, VisibilitySettings
from hidebars.logging import get_logger
from hidebars.services.loop import Cancellable, EventLoop
from hidebars.services.scheduler import AutoHideScheduler

LAYOUT_SETTLE_DELAY = 0.01


def _always_frontmost() -> bool:
    return True


class ChromeVisibilityController:
    """Drives both bars of one screen from lifecycle events and the toggle gesture.

    The host forwards appear, will-transition, layout and disappear events and
    the toggle signal. Every change to the bars goes through :meth:`set_bars`,
    which cancels any pending auto-hide before deciding whether to start a new
    one.
    """

    def __init__(
        self,
        settings: VisibilitySettings,
        synchronizer: BarMotionSynchronizer,
        scheduler: AutoHideScheduler,
        loop: EventLoop,
        *,
        is_frontmost: Callable[[], bool] = _always_frontmost,
        layout_settle_delay: float = LAYOUT_SETTLE_DELAY,
        live_bar_updates: bool = True,
    ) -> None:
        self.settings = settings
        self.synchronizer = synchronizer
        self.scheduler = scheduler
        self.loop = loop
        self.is_frontmost = is_frontmost
        self.layout_settle_delay = layout_settle_delay
        self.live_bar_updates = live_bar_updates
        self.logger = get_logger("chrome")
        self._pending_transition: Cancellable | None = None
        settings.add_observer(self.on_setting_changed, owner=self)

    def _appear_target(self) -> bool:
        return False if self.settings.show_on_appear else self.settings.bars_hidden

    def handle_appear(self) -> None:
        self.settings.auto_hide_overridden = False
        self.set_bars(hidden=self._appear_target(), animated=False)

    def handle_will_transition_to_size(self, size: tuple[float, float] | None = None) -> None:
        if size is not None and tuple(size) == tuple(self.synchronizer.viewport.size):
            # Same size: a 180 degree rotation, nothing moves.
            return
        if not self.is_frontmost():
            return
        self._cancel_transition()
        self._pending_transition = self.loop.call_later(self.layout_settle_delay, self._finish_transition)

    def _finish_transition(self) -> None:
        self._pending_transition = None
        self.set_bars(hidden=self._appear_target(), animated=True)

    def _cancel_transition(self) -> None:
        handle = self._pending_transition
        self._pending_transition = None
        if handle is not None:
            handle.cancel()

    def handle_layout(self) -> None:
        """Re-seat bars and companion after a layout pass without touching the countdown."""
        for role in BarRole:
            if self.settings.is_eligible(role):
                self.synchronizer.apply(role, self.settings.bars_hidden, animated=False)
            else:
                self.synchronizer.reseat_companion(role)

    def handle_disappear(self) -> None:
        self.scheduler.cancel()
        self._cancel_transition()

    def handle_toggle_requested(self) -> None:
        settings = self.settings
        if not (settings.hide_primary_bar or settings.hide_secondary_bar):
            return
        if settings.auto_hide_enabled:
            # Revealing hidden bars by hand suppresses auto-hide until the next appear.
            settings.auto_hide_overridden = settings.bars_hidden
        self.set_bars(hidden=not settings.bars_hidden, animated=True)

    def set_bars(self, hidden: bool, animated: bool) -> None:
        settings = self.settings
        self.scheduler.cancel()

        settings.bars_hidden = hidden
        for role in BarRole:
            if settings.is_eligible(role):
                self.synchronizer.apply(role, hidden, animated)

        if not hidden and settings.auto_hide_enabled and not settings.auto_hide_overridden:
            self.scheduler.schedule_hide_after(
                settings.auto_hide_delay,
                lambda: self.set_bars(hidden=True, animated=True),
            )
        self.logger.debug(
            f"Bars {'hidden' if hidden else 'shown'} "
            f"(animated={animated}, override={settings.auto_hide_overridden}, "
            f"auto_hide={self.scheduler.pending})"
        )

    def on_setting_changed(self, name: str, value: bool) -> None:
        if name == "hide_on_appear" and not value:
            self.scheduler.cancel()
            return
        if not self.live_bar_updates or not self.settings.bars_hidden:
            return
        for role in BarRole:
            if name == role.flag:
                self.synchronizer.apply(role, hidden=value, animated=True)

    def close(self) -> None:
        self.handle_disappear()
        self.settings.remove_observer(self)
