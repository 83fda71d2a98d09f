"""
Logging configuration module for the proficiency engine.

The engine only emits records on the "gurps_skills" logger hierarchy and
never configures logging on import. Applications embedding it call
setup_logging to get colored output through rich.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gurps_skills"


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger inside the engine hierarchy.

    Args:
        name (str): A dotted name, prefixed with the package name if missing.

    Returns:
        logging.Logger: The logger instance.

    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int = logging.INFO, console: Optional[Console] = None
) -> logging.Logger:
    """
    Attaches a rich handler to the engine logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.
        console (Optional[Console]): The console to write to, stderr if None.

    Returns:
        logging.Logger: The configured engine logger.

    """
    handler = RichHandler(
        console=console or Console(stderr=True, width=120),
        show_time=True,
        show_level=True,
        show_path=False,
        # Context suffixes use square brackets.
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    engine_logger = get_logger(PACKAGE_LOGGER)
    for existing in list(engine_logger.handlers):
        if isinstance(existing, RichHandler):
            engine_logger.removeHandler(existing)
    engine_logger.addHandler(handler)
    engine_logger.setLevel(level)
    return engine_logger


logger = get_logger(PACKAGE_LOGGER)


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    return message


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a rejected input with optional context.

    Args:
        message (str): The error message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.error(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    logger.debug(_with_context(message, context))
