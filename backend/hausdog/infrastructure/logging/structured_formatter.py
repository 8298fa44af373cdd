"""Structured one-line log formatting.

Each record renders as::

    2025-01-31 14:02:11 [info]: Property created {"property_id": "..."}

Metadata is whatever the caller passed through ``extra=``. An exception
stack trace, when present, follows on its own lines.
"""

import dataclasses
import json
import logging
from datetime import date, datetime
from typing import Any

CIRCULAR_MARKER = "[Circular]"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


_LEVEL_COLORS = {
    "debug": _Colors.CYAN,
    "info": _Colors.GREEN,
    "warning": _Colors.YELLOW,
    "error": _Colors.RED,
    "critical": _Colors.MAGENTA,
}


def _normalize(value: Any, seen: set[int]) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"

    is_record = dataclasses.is_dataclass(value) and not isinstance(value, type)
    if not is_record and not isinstance(value, (dict, list, tuple, set, frozenset)):
        return str(value)

    # Any container reached a second time in one pass is reported as circular,
    # including shared (non-cyclic) references.
    marker = id(value)
    if marker in seen:
        return CIRCULAR_MARKER
    seen.add(marker)

    if is_record:
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): _normalize(v, seen) for k, v in value.items()}
    return [_normalize(item, seen) for item in value]


def safe_json_dumps(value: Any) -> str:
    """Serialize arbitrary log metadata to JSON without ever raising."""
    return json.dumps(_normalize(value, set()), ensure_ascii=False)


class StructuredFormatter(logging.Formatter):
    """Formats records as ``timestamp [level]: message {metadata}``."""

    def __init__(self, use_color: bool = False):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_color = use_color

    @staticmethod
    def extract_metadata(record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.lower()
        if self.use_color:
            color = _LEVEL_COLORS.get(level, _Colors.GRAY)
            level = f"{color}{level}{_Colors.RESET}"

        line = f"{timestamp} [{level}]: {record.getMessage()}"

        metadata = self.extract_metadata(record)
        if metadata:
            line = f"{line} {safe_json_dumps(metadata)}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        if record.stack_info:
            line = f"{line}\n{self.formatStack(record.stack_info)}"
        return line
