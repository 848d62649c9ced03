"""Observability – TaggedLogger.

A :class:`logging.LoggerAdapter` that keeps a stack of tags per execution
context and attaches them to every record it emits::

    logger = TaggedLogger.wrap(logging.getLogger("app"))

    with logger.tagged("http.request.id=123", "api"):
        logger.info("handling request")
    # {"...": ..., "message": "handling request",
    #  "tags": ["http.request.id=123", "api"],
    #  "parsed_tags": {"http": {"request": {"id": "123"}}}}

Tags pushed in one thread or asyncio task are never visible to another, and
two wrapped loggers never share tags even when they write to the same stream.
"""
from __future__ import annotations

import contextlib
import copy
import inspect
import logging
from collections.abc import Callable, Iterator, MutableMapping
from typing import Any, TypeVar
from uuid import uuid4

from tagged_logging.kernel.errors import UnsupportedFormatterError
from tagged_logging.observability.context import ExecutionContextRegistry, default_registry
from tagged_logging.observability.logging.formatter import JsonFormatter
from tagged_logging.observability.logging.protocol import TagRenderer
from tagged_logging.observability.logging.tag_stack import TagStack

R = TypeVar("R")

_log = logging.getLogger(__name__)


def _adopt_formatter(formatter: logging.Formatter | None) -> logging.Formatter:
    if formatter is None:
        return JsonFormatter()
    if isinstance(formatter, TagRenderer):
        duplicate = getattr(formatter, "copy", None)
        return duplicate() if callable(duplicate) else copy.copy(formatter)
    raise UnsupportedFormatterError(type(formatter))


def _duplicate_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    # Shallow copy: the duplicate writes to the same stream under the same lock.
    clone = copy.copy(handler)
    clone.filters = list(handler.filters)
    clone.setFormatter(formatter)
    return clone


def _duplicate_logger(base: logging.Logger) -> logging.Logger:
    # ``copy.copy`` would hand back the registered logger itself (Logger.__reduce__).
    formatters = [_adopt_formatter(handler.formatter) for handler in base.handlers]

    clone = base.__class__.__new__(base.__class__)
    clone.__dict__.update(base.__dict__)
    clone.handlers = [
        _duplicate_handler(handler, formatter)
        for handler, formatter in zip(base.handlers, formatters)
    ]
    if not clone.handlers:
        # Ancestor handlers would render the record without its tags.
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        clone.handlers = [handler]
        clone.propagate = False
    clone.filters = list(base.filters)
    clone._cache = {}
    return clone


def _accepts_logger(body: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(body).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(
        p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        for p in params
    )


class TaggedLogger(logging.LoggerAdapter):
    """Logger façade with scoped, per-context tags.

    Build one with :meth:`wrap`; the constructor expects a logger whose
    handlers already render tags.

    Parameters
    ----------
    logger:
        The underlying :class:`logging.Logger`.
    registry:
        Where tag stacks are stored. Defaults to the process-wide
        :func:`~tagged_logging.observability.context.default_registry`.
    """

    def __init__(
        self,
        logger: logging.Logger,
        registry: ExecutionContextRegistry | None = None,
    ) -> None:
        super().__init__(logger, {})
        self._registry = registry or default_registry()
        self._key = f"tagged_logging.tags:{uuid4().hex}"

    @classmethod
    def wrap(
        cls,
        base_logger: logging.Logger | "TaggedLogger",
        registry: ExecutionContextRegistry | None = None,
    ) -> "TaggedLogger":
        """Return a tagged duplicate of *base_logger*.

        The duplicate has its own handler copies, each with its own formatter:
        an unset formatter becomes a :class:`JsonFormatter`, a tag-rendering
        formatter is copied.  A logger without handlers of its own gets a
        ``sys.stderr`` handler with a :class:`JsonFormatter` and stops
        propagating.  *base_logger* itself is left untouched.

        Raises
        ------
        UnsupportedFormatterError
            If any handler uses a formatter that cannot render tags.
        """
        if isinstance(base_logger, TaggedLogger):
            registry = registry or base_logger._registry
            base_logger = base_logger.logger
        duplicate = _duplicate_logger(base_logger)
        _log.debug(
            "Wrapped logger %r (%d handler(s)) for tagged logging",
            base_logger.name,
            len(duplicate.handlers),
        )
        return cls(duplicate, registry=registry)

    # ------------------------------------------------------------------
    # Tag stack
    # ------------------------------------------------------------------

    @property
    def tag_stack(self) -> TagStack:
        """The tag stack of the calling thread or task, created on first use."""
        return self._registry.setdefault(self._key, TagStack)

    @property
    def current_tags(self) -> list[str]:
        return self.tag_stack.tags

    @property
    def current_parsed_tags(self) -> dict[str, Any]:
        return copy.deepcopy(self.tag_stack.current_parsed_tags)

    @contextlib.contextmanager
    def tagged(self, *tags: Any) -> Iterator["TaggedLogger"]:
        """Push *tags* for the duration of the ``with`` block.

        The pushed tags are popped on every exit path, including exceptions::

            with logger.tagged("BCX", "job.id=7") as log:
                log.info("working")
        """
        stack = self.tag_stack
        pushed = stack.push(tags)
        try:
            yield self
        finally:
            stack.pop(len(pushed))

    def call_tagged(self, body: Callable[..., R], *tags: Any) -> R:
        """Run *body* inside :meth:`tagged` and return its result.

        *body* receives this logger when it takes a positional argument.
        """
        with self.tagged(*tags):
            return body(self) if _accepts_logger(body) else body()

    def push_tags(self, *tags: Any) -> list[str]:
        return self.tag_stack.push(tags)

    def pop_tags(self, count: int = 1) -> list[str]:
        return self.tag_stack.pop(count)

    def clear_tags(self) -> list[str]:
        return self.tag_stack.clear()

    def flush(self) -> None:
        """Clear this context's tags, then flush the underlying logger.

        Calls the logger's own ``flush()`` when it has one, otherwise flushes
        each of its handlers.
        """
        self.clear_tags()
        logger_flush = getattr(self.logger, "flush", None)
        if callable(logger_flush):
            logger_flush()
            return
        for handler in self.logger.handlers:
            handler.flush()

    # ------------------------------------------------------------------
    # logging.LoggerAdapter interface
    # ------------------------------------------------------------------

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        stack = self.tag_stack
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        extra["tags"] = stack.tags
        extra["parsed_tags"] = stack.current_parsed_tags
        kwargs["extra"] = extra
        return msg, kwargs

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.logger.name} ({logging.getLevelName(self.getEffectiveLevel())})>"


__all__ = ["TaggedLogger"]
