"""Bar geometry: sliding bars off-screen and keeping a companion glued to them."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from hidebars.core.state import BarRole, VisibilitySettings
from hidebars.logging import get_logger

ANIMATION_DURATION = 0.25


class BarEdge(enum.Enum):
    """Screen edge a bar is docked to. Offsets grow away from ``NEAR``."""

    NEAR = "near"
    FAR = "far"


class CompanionHandle(Protocol):
    offset: float
    thickness: float

    def move_to(self, offset: float, duration: float) -> None: ...


class BarHandle(Protocol):
    offset: float
    thickness: float
    edge: BarEdge

    def move_to(self, offset: float, duration: float) -> None: ...


class Viewport(Protocol):
    @property
    def extent(self) -> float: ...

    @property
    def size(self) -> tuple[float, float]: ...


@dataclass(slots=True, eq=False)
class FrameBar:
    """Plain geometry-backed bar or companion. Moves land immediately."""

    offset: float
    thickness: float
    edge: BarEdge = BarEdge.FAR
    moves: list[tuple[float, float]] = field(default_factory=list)

    def move_to(self, offset: float, duration: float) -> None:
        self.moves.append((offset, duration))
        self.offset = offset


@dataclass(slots=True)
class FrameViewport:
    width: float
    height: float

    @property
    def extent(self) -> float:
        return self.height

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)


def is_bar_visible(bar: BarHandle, viewport: Viewport) -> bool:
    if bar.edge is BarEdge.FAR:
        return bar.offset < viewport.extent
    return bar.offset + bar.thickness > 0


def companion_offset(bar: BarHandle, companion: CompanionHandle, gap: float) -> float:
    if bar.edge is BarEdge.FAR:
        return bar.offset - gap - companion.thickness
    return bar.offset + bar.thickness + gap


class BarMotionSynchronizer:
    def __init__(
        self,
        settings: VisibilitySettings,
        viewport: Viewport,
        bars: Mapping[BarRole, BarHandle | None],
        *,
        animation_duration: float = ANIMATION_DURATION,
    ) -> None:
        self.settings = settings
        self.viewport = viewport
        self.bars = dict(bars)
        self.animation_duration = animation_duration
        self.logger = get_logger("bar-motion")

    def apply(self, role: BarRole, hidden: bool, animated: bool) -> None:
        """Move the ``role`` bar to its hidden or shown position.

        A bar already in the requested state is left where it is, but its
        companion is still repositioned: after rotations the companion can
        lag behind a bar that has already settled.
        """
        bar = self.bars.get(role)
        if bar is None:
            return

        duration = self.animation_duration if animated else 0.0
        if is_bar_visible(bar, self.viewport) == hidden:
            sign = 1.0 if hidden else -1.0
            if bar.edge is BarEdge.NEAR:
                sign = -sign
            target = bar.offset + sign * bar.thickness
            self.logger.debug(f"{role.value} bar -> {target:.1f} (hidden={hidden}, {duration:.2f}s)")
            bar.move_to(target, duration)

        self.reseat_companion(role, duration)

    def reseat_companion(self, role: BarRole, duration: float = 0.0) -> None:
        """Put the companion back next to the ``role`` bar, wherever that bar is."""
        bar = self.bars.get(role)
        companion = self.settings.companion
        if bar is None or companion is None or self.settings.companion_bar is not role:
            return
        companion.move_to(companion_offset(bar, companion, self.settings.companion_gap), duration)
