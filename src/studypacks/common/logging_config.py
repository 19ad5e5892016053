"""
Logging configuration for studypacks.

Provides a centralized logging setup with human-readable output and structured context fields.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAMESPACE = "studypacks"

# Attributes every LogRecord carries; anything else came in through `extra=`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class ContextFormatter(logging.Formatter):
    """Formatter that appends structured context fields to log messages.

    Supports extra fields passed via logger.info("msg", extra={...})
    Format: timestamp [LEVEL] logger_name: message | key1=value1 key2=value2
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
        'GRAY': '\033[90m',
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)

        levelname = record.levelname
        if self.use_color and levelname in self.COLORS:
            colored_level = f"{self.COLORS[levelname]}[{levelname}]{self.COLORS['RESET']}"
            base_msg = base_msg.replace(f"[{levelname}]", colored_level, 1)

        extra_fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and value is not None
        ]
        if not extra_fields:
            return base_msg
        if self.use_color:
            return f"{base_msg}{self.COLORS['GRAY']} | {' '.join(extra_fields)}{self.COLORS['RESET']}"
        return f"{base_msg} | {' '.join(extra_fields)}"


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure logging for the studypacks namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Destination stream. Defaults to stderr so CLI output on stdout stays clean.

    Example:
        >>> from studypacks.common.logging_config import setup_logging
        >>> setup_logging("DEBUG")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    stream = stream if stream is not None else sys.stderr

    formatter = ContextFormatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_color=stream.isatty() if hasattr(stream, "isatty") else False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Pack created", extra={"pack_id": "1700000000000-a1b2c3d4"})
    """
    return logging.getLogger(name)
