"""Logging setup shared by all apigen modules.

Modules obtain loggers with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "apigen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``apigen`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        The named logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.WARNING, console: Console | None = None
) -> None:
    """Attach a RichHandler to the package root logger.

    Calling it again only changes the level.

    Args:
        level: Logging level name or number.
        console: Console to log to; defaults to stderr.
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    _configured = True
