"""Observability – TaggedLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO

import structlog

from tagged_logging.config.settings import DotenvSettingsLoader, EnvSettingsLoader, TaggedLoggingSettings
from tagged_logging.observability.context import ExecutionContextRegistry
from tagged_logging.observability.logging.formatter import JsonFormatter
from tagged_logging.observability.logging.processors import TagProcessor
from tagged_logging.observability.logging.tagged import TaggedLogger


class TaggedLoggerFactory:
    """Build JSON-emitting tagged loggers."""

    @staticmethod
    def create(
        name: str,
        stream: IO[str] | None = None,
        settings: TaggedLoggingSettings | None = None,
        registry: ExecutionContextRegistry | None = None,
    ) -> TaggedLogger:
        """Configure the stdlib logger *name* to write JSON to *stream* and wrap it.

        Existing handlers on that logger are replaced.  *stream* defaults to
        ``sys.stderr``.
        """
        settings = settings or TaggedLoggingSettings()

        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter(utc=settings.utc, ensure_ascii=settings.ensure_ascii))

        base = logging.getLogger(name)
        base.handlers.clear()
        base.addHandler(handler)
        base.setLevel(settings.level_number)
        base.propagate = settings.propagate
        return TaggedLogger.wrap(base, registry=registry)

    @staticmethod
    def from_env(
        name: str,
        stream: IO[str] | None = None,
        env_file: str | None = None,
    ) -> TaggedLogger:
        """Like :meth:`create`, with settings read from ``TAGGED_LOGGING_*`` variables.

        When *env_file* is given it is loaded first (requires ``python-dotenv``).
        """
        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return TaggedLoggerFactory.create(name, stream=stream, settings=loader.load(TaggedLoggingSettings))

    @staticmethod
    def configure_structlog(
        tagged_logger: TaggedLogger,
        stream: IO[str] | None = None,
        utc: bool = False,
    ) -> None:
        """Configure structlog to print JSON lines carrying *tagged_logger*'s tags."""
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt=JsonFormatter.datetime_format, utc=utc),
                TagProcessor(tagged_logger),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(tagged_logger.getEffectiveLevel()),
            logger_factory=structlog.PrintLoggerFactory(file=stream),
            cache_logger_on_first_use=False,
        )


__all__ = ["TaggedLoggerFactory"]
