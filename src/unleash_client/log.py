"""
Client Logging
==============
Default console sink used when the caller does not supply a logger.
"""

import logging
import sys
from datetime import datetime
from typing import Any, MutableMapping, Optional, Union

LOGGER_NAME = "unleash_client"
DEFAULT_CONTEXT_TAG = "Unleash"

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


class UnleashFormatter(logging.Formatter):
    """
    Render records as ``[<timestamp> <context tag> <level>] : <message>``.

    The timestamp is ISO-8601 with microseconds and local offset, the context
    tag is right-justified to 16 characters and the level name is
    left-justified to 5. The tag comes from the record's ``context_tag``
    attribute, set via ``extra`` or :class:`ContextTagAdapter`.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).astimezone()
        tag = getattr(record, "context_tag", None) or DEFAULT_CONTEXT_TAG
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return (
            f"[{timestamp.isoformat(timespec='microseconds')} "
            f"{tag.rjust(16)} {record.levelname.ljust(5)}] : {message}"
        )


class ContextTagAdapter(logging.LoggerAdapter):
    """Logger adapter that stamps a fixed context tag on every record."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def resolve_level(level: Union[int, str]) -> int:
    """
    Convert a level name or number into a stdlib logging level.

    Raises:
        ValueError: If the level is not a known logging level
    """
    if isinstance(level, bool):
        raise ValueError(f"invalid log level {level!r}")
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level '{level}'")
    return resolved


def default_logger(level: Union[int, str] = logging.WARNING, instance_id: Optional[str] = None) -> logging.Logger:
    """
    Get a logger wired to a stdout handler with UnleashFormatter.

    Each client instance gets its own child of the ``unleash_client`` logger,
    so one instance's level never changes another's. The handler is attached
    once per logger.
    """
    name = f"{LOGGER_NAME}.{instance_id}" if instance_id else LOGGER_NAME
    client_logger = logging.getLogger(name)
    if not any(getattr(handler, "_unleash_default", False) for handler in client_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(UnleashFormatter())
        handler._unleash_default = True  # type: ignore[attr-defined]
        client_logger.addHandler(handler)
        client_logger.propagate = False

    client_logger.setLevel(resolve_level(level))
    return client_logger
