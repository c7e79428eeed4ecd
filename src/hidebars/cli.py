"""Typer CLI for hidebars."""

from __future__ import annotations

import json
import platform

import typer

from hidebars.config import HideBarsSettings, load_settings
from hidebars.core.app import ChromeScreen, build_screen
from hidebars.core.geometry import BarEdge, FrameBar, FrameViewport
from hidebars.logging import configure_logging
from hidebars.services.loop import ManualEventLoop

app = typer.Typer(no_args_is_help=True)

DEFAULT_STEPS = ["appear", "wait:3", "toggle", "wait:3", "disappear", "appear", "wait:3"]


@app.command()
def run() -> None:
    """Launch the demo GUI."""

    from hidebars.main import main as launch

    launch()


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    info = {
        "python": platform.python_version(),
        "platform": platform.platform(),
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
            "store": str(settings.paths.store_file),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display current settings or a specific section."""

    data = load_settings().model_dump()
    if key:
        data = data.get(key, {})
    typer.echo(json.dumps(data, indent=2, default=str))


def _snapshot(step: str, screen: ChromeScreen, loop: ManualEventLoop) -> dict:
    settings = screen.settings
    bars = screen.synchronizer.bars
    companion = settings.companion
    return {
        "step": step,
        "time": round(loop.now, 3),
        "bars_hidden": settings.bars_hidden,
        "override": settings.auto_hide_overridden,
        "auto_hide_pending": screen.scheduler.pending,
        "bars": {role.value: bar.offset for role, bar in bars.items() if bar is not None},
        "companion": companion.offset if companion is not None else None,
    }


def _run_step(step: str, screen: ChromeScreen, loop: ManualEventLoop) -> None:
    controller = screen.controller
    name, _, arg = step.partition(":")
    if name == "appear":
        controller.handle_appear()
    elif name == "disappear":
        controller.handle_disappear()
    elif name == "toggle":
        controller.handle_toggle_requested()
    elif name == "layout":
        controller.handle_layout()
    elif name == "rotate":
        controller.handle_will_transition_to_size()
        loop.advance(controller.layout_settle_delay)
    elif name == "wait":
        loop.advance(float(arg or 0))
    elif name == "set":
        flag, _, value = arg.partition("=")
        screen.settings.set_flag(flag, value.lower() in {"1", "true", "yes", "on"})
    else:
        raise typer.BadParameter(f"unknown step '{step}'")


@app.command()
def simulate(
    steps: list[str] = typer.Argument(None, help="appear, disappear, toggle, layout, rotate, wait:<s>, set:<flag>=<bool>"),
    hide_primary: bool = typer.Option(True, help="Allow the top bar to hide."),
    hide_secondary: bool = typer.Option(True, help="Allow the bottom bar to hide."),
    hide_on_appear: bool = typer.Option(True, help="Enable auto-hide."),
    show_on_appear: bool = typer.Option(True, help="Show bars whenever the screen appears."),
    delay: float = typer.Option(3.0, help="Auto-hide delay in seconds, 0 disables it."),
    gap: float = typer.Option(5.0, help="Gap between companion and bottom bar."),
    log_level: str = typer.Option("WARNING", help="Level of log lines written to stderr."),
) -> None:
    """Replay lifecycle events on a virtual clock and print bar state after each."""

    configure_logging(level=log_level)
    app_settings = HideBarsSettings(persist=False)
    demo = app_settings.demo
    loop = ManualEventLoop()
    viewport = FrameViewport(width=demo.width, height=demo.height)
    screen = build_screen(
        "simulate",
        app_settings,
        loop,
        viewport,
        primary=FrameBar(offset=0, thickness=demo.bar_thickness, edge=BarEdge.NEAR),
        secondary=FrameBar(offset=demo.height - demo.bar_thickness, thickness=demo.bar_thickness),
        companion=FrameBar(offset=demo.height - demo.bar_thickness - gap - demo.companion_height,
                           thickness=demo.companion_height),
        hide_primary_bar=hide_primary,
        hide_secondary_bar=hide_secondary,
        hide_on_appear=hide_on_appear,
        show_on_appear=show_on_appear,
        auto_hide_delay=delay if delay > 0 else None,
        companion_gap=gap,
    )
    for step in steps or DEFAULT_STEPS:
        _run_step(step, screen, loop)
        typer.echo(json.dumps(_snapshot(step, screen, loop)))
