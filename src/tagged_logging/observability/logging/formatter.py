"""Observability – JsonFormatter.

Renders each record as one JSON object per line::

    {"pid": 4242, "severity": "INFO", "timestamp": "2023-01-02T03:45:06.789123",
     "progname": "app", "message": "done", "tags": ["BCX"], "parsed_tags": {...}}

``context``, ``tags`` and ``parsed_tags`` are omitted when empty.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import traceback
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any


def _message_to_str(message: Any) -> str:
    if isinstance(message, str):
        return message
    if isinstance(message, BaseException):
        text = f"{message} ({type(message).__name__})"
        if message.__traceback__ is not None:
            text += "\n" + "".join(traceback.format_tb(message.__traceback__)).rstrip("\n")
        return text
    return str(message)


class JsonFormatter(logging.Formatter):
    """``logging.Formatter`` producing single-line JSON records.

    Parameters
    ----------
    utc:
        Render timestamps in UTC instead of local time.
    ensure_ascii:
        Escape non-ASCII characters in the JSON output.
    """

    datetime_format = "%Y-%m-%dT%H:%M:%S.%f"

    def __init__(self, *, utc: bool = False, ensure_ascii: bool = False) -> None:
        super().__init__()
        self.utc = utc
        self.ensure_ascii = ensure_ascii

    # ------------------------------------------------------------------
    # Line-logger interface
    # ------------------------------------------------------------------

    def render(
        self,
        severity: str,
        timestamp: datetime | float,
        progname: str | None,
        message: Any,
        *,
        context: Mapping[str, Any] | None = None,
        tags: Sequence[str] | None = None,
        parsed_tags: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the newline-terminated JSON line for one log event."""
        entry = self.build_entry(
            severity,
            timestamp,
            progname,
            message,
            context=context,
            tags=tags,
            parsed_tags=parsed_tags,
        )
        return self._dumps(entry) + "\n"

    def build_entry(
        self,
        severity: str,
        timestamp: datetime | float,
        progname: str | None,
        message: Any,
        *,
        context: Mapping[str, Any] | None = None,
        tags: Sequence[str] | None = None,
        parsed_tags: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "pid": os.getpid(),
            "severity": severity,
            "timestamp": self.format_timestamp(timestamp),
            "progname": progname,
            "message": _message_to_str(message),
        }
        if context:
            entry["context"] = context
        if tags:
            entry["tags"] = list(tags)
        if parsed_tags:
            entry["parsed_tags"] = parsed_tags
        return entry

    def format_timestamp(self, timestamp: datetime | float) -> str:
        if isinstance(timestamp, datetime):
            if self.utc and timestamp.tzinfo is not None:
                timestamp = timestamp.astimezone(timezone.utc)
        else:
            timestamp = datetime.fromtimestamp(timestamp, timezone.utc if self.utc else None)
        return timestamp.strftime(self.datetime_format)

    # ------------------------------------------------------------------
    # logging.Formatter interface
    # ------------------------------------------------------------------

    def format(self, record: logging.LogRecord) -> str:
        """Render *record*; the handler's terminator supplies the newline."""
        entry = self.build_entry(
            record.levelname,
            record.created,
            record.name,
            record.getMessage(),
            context=getattr(record, "context", None),
            tags=getattr(record, "tags", None),
            parsed_tags=getattr(record, "parsed_tags", None),
        )
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            entry["exception"] = record.exc_text
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)
        return self._dumps(entry)

    def copy(self) -> "JsonFormatter":
        """Return an independent formatter with the same options and class."""
        return copy.copy(self)

    def _dumps(self, entry: dict[str, Any]) -> str:
        return json.dumps(entry, ensure_ascii=self.ensure_ascii, default=str)


__all__ = ["JsonFormatter"]
