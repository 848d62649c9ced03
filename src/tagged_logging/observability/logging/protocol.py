"""Observability – TagRenderer protocol."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TagRenderer(Protocol):
    """A formatter that can render the tag extras attached by ``TaggedLogger``.

    ``TaggedLogger.wrap`` accepts any handler formatter satisfying this
    protocol, not only :class:`JsonFormatter` subclasses.
    """

    def format(self, record: logging.LogRecord) -> str: ...

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
    ) -> str: ...


__all__ = ["TagRenderer"]
