import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "esquery"


def _rich_handler(level, console: Optional[Console]) -> root_logging.Handler:
    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(root_logging.Formatter(fmt="%(name)s: %(message)s"))
    return handler


def _stream_handler() -> root_logging.Handler:
    handler = root_logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def setup_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Routes the 'esquery' logger to stderr, or to a Rich console when `pretty` is set.

    Handlers installed by a previous call are replaced, so the function can be
    called again to change the level or the output without duplicating records.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "WARNING").
        pretty (bool): Render records through Rich instead of a plain stream.
        console (Optional[rich.console.Console]): The Rich Console used when
            `pretty` is enabled. Defaults to a new Console(stderr=True).
        propagate (bool): Whether records also reach the root logger.
    """
    logger = root_logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    handler = _rich_handler(level, console) if pretty else _stream_handler()

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.debug(f"Logging initialized at level: {level}")


def get_logger(name: Optional[str] = None) -> root_logging.Logger:
    """
    Retrieves a logger in the esquery namespace; the package logger when `name` is None.
    """
    return root_logging.getLogger(name or ROOT_LOGGER_NAME)
