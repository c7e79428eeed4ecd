from dataclasses import dataclass

import pytest

from hidebars.config import HideBarsSettings
from hidebars.core.app import ChromeScreen, build_screen
from hidebars.core.geometry import BarEdge, FrameBar, FrameViewport
from hidebars.services.loop import ManualEventLoop

WIDTH = 400
HEIGHT = 800
BAR = 50
COMPANION = 60


@dataclass
class Rig:
    screen: ChromeScreen
    loop: ManualEventLoop
    viewport: FrameViewport
    primary: FrameBar
    secondary: FrameBar
    companion: FrameBar

    @property
    def settings(self):
        return self.screen.settings

    @property
    def controller(self):
        return self.screen.controller


@pytest.fixture
def make_rig():
    def _make(*, frontmost=lambda: True, live_bar_updates=True, **overrides) -> Rig:
        loop = ManualEventLoop()
        viewport = FrameViewport(width=WIDTH, height=HEIGHT)
        primary = FrameBar(offset=0, thickness=BAR, edge=BarEdge.NEAR)
        secondary = FrameBar(offset=HEIGHT - BAR, thickness=BAR)
        companion = FrameBar(offset=HEIGHT - BAR - COMPANION, thickness=COMPANION)
        overrides.setdefault("companion_gap", 5.0)
        screen = build_screen(
            "test",
            HideBarsSettings(persist=False),
            loop,
            viewport,
            primary=primary,
            secondary=secondary,
            companion=companion,
            is_frontmost=frontmost,
            live_bar_updates=live_bar_updates,
            **overrides,
        )
        return Rig(screen, loop, viewport, primary, secondary, companion)

    return _make
