"""
Logging helpers for Mufassir.

Everything logs under the "mufassir" namespace. The library never installs a
handler by itself; applications call configure_logging() when they want the
corpus and lookup events on a stream.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "mufassir"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Send Mufassir log records to a stream.

    Calling it again replaces the previous handler, so it is safe to use
    from scripts and notebooks that re-run their setup.

    Args:
        level: Minimum level for the package logger and its handler
        format_string: Record format (default: DEFAULT_FORMAT)
        date_format: Timestamp format (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )
    package_logger.addHandler(handler)

    return package_logger


def enable_debug_logging() -> None:
    """Show chapter and verse lookup misses as well."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Silence the package logger."""
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(logging.NullHandler())


_logger = get_logger()


def _format_context(message: str, context: dict) -> str:
    if not context:
        return message
    details = ", ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} ({details})"


def log_corpus_loaded(char_count: int, location: str | None = None) -> None:
    suffix = f" from {location}" if location else ""
    _logger.info(f"Loaded {char_count} characters{suffix}")


def log_corpus_load_failed(error: BaseException) -> None:
    _logger.error(f"Failed to load corpus: {error}")


def log_verse_not_found(chapter: int, verse: int, stage: str) -> None:
    """``stage`` is the part that could not be located: "chapter" or "verse"."""
    _logger.debug(f"No commentary located for {chapter}:{verse} ({stage} not found)")


def log_warning(message: str, **context) -> None:
    """Log a warning, rendering keyword context as ``(key=value, ...)``."""
    _logger.warning(_format_context(message, context))


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error, rendering keyword context as ``(key=value, ...)``."""
    _logger.error(_format_context(message, context), exc_info=exc_info)
