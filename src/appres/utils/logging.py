"""Rich logging setup for applications using appres.

The library itself only emits DEBUG records through standard module
loggers and never installs handlers. Applications call ``setup_logging``
(or ``configure_module_logger``) to make those records visible.
"""

import logging
import sys
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_KEYWORDS = ["Read", "Wrote", "Creating", "json", "toml", "yaml"]


def setup_logging(
    level: int = logging.INFO,
    show_path: bool = False,
    show_time: bool = True,
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Configure root logging with Rich formatting.

    Args:
        level: Logging level (default: INFO).
        show_path: Show file path in log messages (default: False).
        show_time: Show timestamp in log messages (default: True).
        rich_tracebacks: Use Rich for traceback formatting (default: True).
        console: Optional Rich Console instance (default: creates new one).
    """
    if console is None:
        console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        show_path=show_path,
        show_time=show_time,
        rich_tracebacks=rich_tracebacks,
        markup=False,
        show_level=True,
        level=level,
        omit_repeated_times=False,
        keywords=LOG_KEYWORDS,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def configure_module_logger(
    module_name: str,
    level: int = logging.INFO,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Give a single logger (e.g. ``"appres"``) its own handler.

    Args:
        module_name: Logger name.
        level: Logging level.
        use_colors: Use a Rich handler; a plain stderr handler otherwise.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler: Union[RichHandler, logging.Handler]
    if use_colors:
        console = Console(stderr=True, force_terminal=True, legacy_windows=False)
        handler = RichHandler(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
            show_level=True,
            level=logging.NOTSET,  # logger controls filtering
            omit_repeated_times=False,
            keywords=LOG_KEYWORDS,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False

    return logger
