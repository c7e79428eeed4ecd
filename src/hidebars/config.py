"""Application configuration models and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppPaths(BaseModel):
    """Resolved directories for hidebars runtime files."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("HIDEBARS_HOME", Path.home() / ".hidebars"))
    )

    @property
    def config_dir(self) -> Path:
        return self.base_dir / "config"

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def data_dir(self) -> Path:
        return self.base_dir / "data"

    @property
    def store_file(self) -> Path:
        return self.data_dir / "bar_settings.json"

    def ensure(self) -> None:
        for path in (self.base_dir, self.config_dir, self.logs_dir, self.data_dir):
            path.mkdir(parents=True, exist_ok=True)


class MotionSettings(BaseModel):
    animation_duration: float = Field(default=0.25, ge=0.0, le=5.0)
    layout_settle_delay: float = Field(default=0.01, ge=0.0, le=1.0)


class BarDefaults(BaseModel):
    """Initial values for a screen's bar settings."""

    hide_primary_bar: bool = True
    hide_secondary_bar: bool = True
    hide_on_appear: bool = True
    show_on_appear: bool = True
    auto_hide_delay: float | None = Field(default=3.0, gt=0.0)
    companion_gap: float = Field(default=0.0, ge=0.0)

    def flags(self) -> dict[str, bool]:
        return {
            "hide_primary_bar": self.hide_primary_bar,
            "hide_secondary_bar": self.hide_secondary_bar,
            "hide_on_appear": self.hide_on_appear,
            "show_on_appear": self.show_on_appear,
        }


class DemoSettings(BaseModel):
    width: int = Field(default=420, ge=200, le=4000)
    height: int = Field(default=720, ge=200, le=4000)
    bar_thickness: int = Field(default=48, ge=16, le=200)
    companion_height: int = Field(default=64, ge=16, le=400)
    companion_gap: float = Field(default=5.0, ge=0.0)


class HideBarsSettings(BaseModel):
    app_name: str = "hidebars"
    persist: bool = True
    paths: AppPaths = Field(default_factory=AppPaths)
    motion: MotionSettings = Field(default_factory=MotionSettings)
    bars: BarDefaults = Field(default_factory=BarDefaults)
    demo: DemoSettings = Field(default_factory=DemoSettings)


def _maybe_float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _maybe_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    lowered = value.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def load_settings(env_path: Path | None = None) -> HideBarsSettings:
    """Load user settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    raw_delay = os.getenv('HIDEBARS_AUTO_HIDE_DELAY')
    if raw_delay is not None and raw_delay.strip().lower() in {"", "none", "off"}:
        overrides.setdefault('bars', {})['auto_hide_delay'] = None
    elif (delay := _maybe_float(raw_delay)) is not None and delay > 0:
        overrides.setdefault('bars', {})['auto_hide_delay'] = delay

    if (duration := _maybe_float(os.getenv('HIDEBARS_ANIMATION_DURATION'))) is not None:
        if 0.0 <= duration <= 5.0:
            overrides.setdefault('motion', {})['animation_duration'] = duration

    if (show := _maybe_bool(os.getenv('HIDEBARS_SHOW_ON_APPEAR'))) is not None:
        overrides.setdefault('bars', {})['show_on_appear'] = show

    if (hide := _maybe_bool(os.getenv('HIDEBARS_HIDE_ON_APPEAR'))) is not None:
        overrides.setdefault('bars', {})['hide_on_appear'] = hide

    if (persist := _maybe_bool(os.getenv('HIDEBARS_PERSIST'))) is not None:
        overrides['persist'] = persist

    settings = HideBarsSettings(**overrides)
    settings.paths.ensure()
    return settings
