"""Loguru sinks for the demo app and the CLI."""

from __future__ import annotations

import sys

from loguru import logger

from hidebars.config import HideBarsSettings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[context]}</cyan> | {message}"
)

# Records logged through the bare loguru logger still carry a context.
logger.configure(extra={"context": "hidebars"})


def _to_stderr(message: str) -> None:
    # Looked up per write so redirected streams (test runners) receive it.
    sys.stderr.write(message)


def configure_logging(settings: HideBarsSettings | None = None, level: str = "INFO") -> None:
    """Replace all sinks with a colorized stderr sink at ``level``.

    With ``settings`` a DEBUG file sink rotating weekly in the logs dir is
    added as well. Stdout stays free for command output.
    """

    logger.remove()
    logger.add(_to_stderr, level=level.upper(), colorize=True, format=CONSOLE_FORMAT)
    if settings is None:
        return

    log_dir = settings.paths.logs_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "hidebars.log",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[context]} | {message}",
        rotation="1 week",
        retention=4,
        compression="zip",
        enqueue=True,
        backtrace=True,
        diagnose=True,
    )


def get_logger(name: str | None = None):
    return logger.bind(context=name or "hidebars")
