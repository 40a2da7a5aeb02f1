"""Package-wide logging for pathgraph.

All modules obtain loggers through :func:`get_logger`, which hangs them under a
single ``pathgraph`` root logger carrying one handler. Records propagate to the
Python root logger so that pytest's ``caplog`` can observe them.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the handler on the ``pathgraph`` root logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called, so the
    handler is never duplicated.

    Args:
        level: Level for the root logger (default: INFO).
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler; a stdout ``StreamHandler`` when omitted.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits level and handler from the package root.

    Args:
        name: Logger name, normally the caller's ``__name__``.

    Returns:
        The logger, with its own level left unset.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every pathgraph logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every pathgraph logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler and forget prior setup (used by tests)."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
