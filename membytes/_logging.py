"""
Structured logging (OpenTelemetry-compliant).

Produces log records following the OpenTelemetry Logging Data Model, either
as one JSON object per line or as a compact human-readable line.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("pin")
    log.debug("Pinned buffer", extra={"address": addr, "length": 4})

Environment::

    MEMBYTES_LOG_LEVEL=trace|debug|info|warn|error|fatal|off (default: warn)
    MEMBYTES_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

from ._version import __version__

__all__ = ["logger", "setup_logging", "scoped_logger", "JsonFormatter", "HumanFormatter"]

# =============================================================================
# Level Mapping
# =============================================================================

# Python levels -> OpenTelemetry severity text
_LEVEL_TO_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

# Level names accepted from the environment and setup_logging() (case-insensitive)
_NAME_TO_LEVEL = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
    "none": logging.CRITICAL + 10,
}

_DEFAULT_LEVEL = logging.WARNING

# Levels that carry code location
_CODE_LOCATION_LEVELS = {logging.DEBUG, logging.ERROR, logging.CRITICAL}

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "scope", "taskName"}


def _infer_scope(logger_name: str) -> str:
    """Derive a scope from the logger name when none was given."""
    if "pin" in logger_name:
        return "pin"
    if "span" in logger_name or "view" in logger_name:
        return "view"
    if "display" in logger_name:
        return "display"
    if "walkthrough" in logger_name or "__main__" in logger_name:
        return "walkthrough"
    return logger_name.rsplit(".", 1)[-1] if logger_name else "membytes"


def _strip_path_prefix(filepath: str) -> str:
    """Shorten an absolute source path to its package-relative form."""
    marker = "membytes/"
    if marker in filepath:
        return filepath[filepath.index(marker) + len(marker) :]
    return filepath


def _record_scope(record: logging.LogRecord) -> str:
    return getattr(record, "scope", None) or _infer_scope(record.name)


# =============================================================================
# Formatters
# =============================================================================


class JsonFormatter(logging.Formatter):
    """OpenTelemetry-compliant JSON formatter."""

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        # RFC3339 with nanosecond field width
        timestamp = dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond * 1000:09d}Z"

        attributes: dict[str, Any] = {"scope": _record_scope(record)}
        for key, value in record.__dict__.items():
            if key not in _RECORD_FIELDS and not key.startswith("_"):
                attributes[key] = value

        if record.levelno in _CODE_LOCATION_LEVELS:
            attributes["code.filepath"] = _strip_path_prefix(record.pathname)
            attributes["code.lineno"] = record.lineno

        payload = {
            "timestamp": timestamp,
            "severityText": _LEVEL_TO_SEVERITY.get(record.levelno, "INFO"),
            "body": record.getMessage(),
            "attributes": attributes,
            "resource": {
                "service.name": "membytes",
                "service.version": __version__,
            },
        }
        return json.dumps(payload, separators=(",", ":"), default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for terminal output."""

    _RESET = "\x1b[0m"
    _DIM = "\x1b[2m"
    _RED = "\x1b[31m"
    _YELLOW = "\x1b[33m"
    _CYAN = "\x1b[36m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        if not self._use_colors or not color:
            return text
        return f"{color}{text}{self._RESET}"

    def _level_color(self, levelno: int) -> str:
        if levelno <= logging.DEBUG:
            return self._DIM
        if levelno >= logging.ERROR:
            return self._RED
        if levelno >= logging.WARNING:
            return self._YELLOW
        return ""

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        severity = _LEVEL_TO_SEVERITY.get(record.levelno, "INFO")

        parts = [
            dt.strftime("%H:%M:%S"),
            " ",
            self._paint(f"{severity:<5} ", self._level_color(record.levelno)),
            self._paint(f"[{_record_scope(record)}] ", self._CYAN),
            record.getMessage(),
        ]

        # Address is the one attribute worth showing inline
        address = getattr(record, "address", None)
        if address is not None:
            parts.append(f" (0x{address:x})")

        if record.levelno in _CODE_LOCATION_LEVELS:
            location = f" [{_strip_path_prefix(record.pathname)}:{record.lineno}]"
            parts.append(self._paint(location, self._DIM))

        return "".join(parts)


# =============================================================================
# Logger Setup
# =============================================================================


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _NAME_TO_LEVEL.get(level.lower(), _DEFAULT_LEVEL)


def _get_log_level() -> int:
    """Read the log level from the environment."""
    return _parse_level(os.environ.get("MEMBYTES_LOG_LEVEL", "warn"))


def _get_log_format() -> str:
    """Read the log format from the environment, or pick one from the TTY state."""
    fmt = os.environ.get("MEMBYTES_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "human" if sys.stderr.isatty() else "json"


def _create_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if _get_log_format() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))
    return handler


# Single logger for all of membytes
logger = logging.getLogger("membytes")


def _setup_default_handler() -> None:
    """Install the environment-driven handler unless the application already did."""
    if logger.handlers:
        return
    logger.addHandler(_create_handler())
    logger.setLevel(_get_log_level())


def setup_logging(
    level: str | int = "WARN",
    format: str | None = None,
) -> None:
    """
    Configure membytes logging.

    Parameters
    ----------
    level : str or int, default "WARN"
        Log level. Either a name ("DEBUG", "INFO", "WARN", "ERROR", "FATAL",
        "OFF") or a logging constant like ``logging.DEBUG``.

    format : str, optional
        Either "json" or "human". If not specified, uses MEMBYTES_LOG_FORMAT
        or auto-detects based on whether stderr is a TTY.

    Examples
    --------
    Watch pin/unpin events while running the walkthrough::

        >>> import membytes
        >>> membytes.setup_logging("DEBUG", format="human")
    """
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if format:
        os.environ["MEMBYTES_LOG_FORMAT"] = format

    logger.addHandler(_create_handler())
    logger.setLevel(_parse_level(level))


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges call-site extras over a fixed scope."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        extra: dict[str, Any] = dict(self.extra) if self.extra else {}
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """
    Create a logger adapter with a fixed scope.

    Parameters
    ----------
    scope : str
        The scope name (e.g., "view", "pin", "display").

    Returns
    -------
    logging.LoggerAdapter
        Adapter that adds ``scope`` to every record it emits.
    """
    return _ScopedLoggerAdapter(logger, {"scope": scope})


_setup_default_handler()
