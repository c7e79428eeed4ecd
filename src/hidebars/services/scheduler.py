"""Debounced auto-hide countdown."""

from __future__ import annotations

from collections.abc import Callable

from hidebars.core.state import VisibilitySettings
from hidebars.logging import get_logger
from hidebars.services.loop import Cancellable, EventLoop


class AutoHideScheduler:
    """Owns the single pending auto-hide task of one settings instance.

    The task handle lives in ``settings.pending_auto_hide`` so that anything
    sharing the settings object sees the same slot.
    """

    def __init__(self, settings: VisibilitySettings, loop: EventLoop) -> None:
        self.settings = settings
        self.loop = loop
        self.logger = get_logger("auto-hide")

    @property
    def pending(self) -> bool:
        return self.settings.pending_auto_hide is not None

    def cancel(self) -> None:
        handle = self.settings.pending_auto_hide
        self.settings.pending_auto_hide = None
        if handle is not None:
            handle.cancel()
            self.logger.debug("Auto-hide cancelled")

    def schedule_hide_after(self, delay: float, action: Callable[[], None]) -> Cancellable:
        self.cancel()
        handle: Cancellable | None = None

        def fire() -> None:
            if self.settings.pending_auto_hide is handle:
                self.settings.pending_auto_hide = None
            action()

        handle = self.loop.call_later(delay, fire)
        self.settings.pending_auto_hide = handle
        self.logger.debug(f"Auto-hide scheduled in {delay:.2f}s")
        return handle
