"""hidebars composition root."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hidebars.config import HideBarsSettings
from hidebars.core.catalog import SettingsCatalog
from hidebars.core.controller import ChromeVisibilityController
from hidebars.core.geometry import BarHandle, BarMotionSynchronizer, CompanionHandle, Viewport
from hidebars.core.state import BarRole, VisibilitySettings
from hidebars.core.store import SettingsStore
from hidebars.logging import get_logger
from hidebars.services.loop import EventLoop
from hidebars.services.scheduler import AutoHideScheduler


@dataclass(slots=True)
class ChromeScreen:
    screen_id: str
    settings: VisibilitySettings
    scheduler: AutoHideScheduler
    synchronizer: BarMotionSynchronizer
    controller: ChromeVisibilityController

    def catalog(self) -> SettingsCatalog:
        """Settings list for an editor screen sharing this screen's settings."""
        return SettingsCatalog(self.settings)

    def close(self) -> None:
        self.controller.close()


def build_store(app_settings: HideBarsSettings) -> SettingsStore | None:
    if not app_settings.persist:
        return None
    return SettingsStore(app_settings.paths.store_file)


def build_screen(
    screen_id: str,
    app_settings: HideBarsSettings,
    loop: EventLoop,
    viewport: Viewport,
    *,
    primary: BarHandle | None = None,
    secondary: BarHandle | None = None,
    companion: CompanionHandle | None = None,
    store: SettingsStore | None = None,
    is_frontmost: Callable[[], bool] | None = None,
    live_bar_updates: bool = True,
    persist: bool = True,
    **overrides,
) -> ChromeScreen:
    """Wire settings, scheduler, synchronizer and controller for one screen.

    ``overrides`` set individual :class:`VisibilitySettings` fields on top of
    the configured defaults; stored flags, when a store is given, win over
    both. ``persist=False`` keeps this screen out of the store even when the
    app has one.
    """
    settings = VisibilitySettings.from_defaults(app_settings.bars, companion=companion, **overrides)
    if store is not None and persist:
        store.restore(screen_id, settings)
        store.bind(screen_id, settings)

    scheduler = AutoHideScheduler(settings, loop)
    synchronizer = BarMotionSynchronizer(
        settings,
        viewport,
        {BarRole.PRIMARY: primary, BarRole.SECONDARY: secondary},
        animation_duration=app_settings.motion.animation_duration,
    )
    controller_kwargs = {}
    if is_frontmost is not None:
        controller_kwargs["is_frontmost"] = is_frontmost
    controller = ChromeVisibilityController(
        settings,
        synchronizer,
        scheduler,
        loop,
        layout_settle_delay=app_settings.motion.layout_settle_delay,
        live_bar_updates=live_bar_updates,
        **controller_kwargs,
    )

    logger = get_logger("bootstrap")
    logger.info(f"Screen {screen_id} ready with flags {settings.flags()}")

    return ChromeScreen(
        screen_id=screen_id,
        settings=settings,
        scheduler=scheduler,
        synchronizer=synchronizer,
        controller=controller,
    )
