"""Shared fixtures for tagged-logging tests."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Callable
from typing import Any

import pytest

from tagged_logging.observability.context import ExecutionContextRegistry
from tagged_logging.observability.logging import JsonFormatter, TaggedLogger


class FlushingLogger(logging.Logger):
    """Logger whose ``flush`` leaves a trace in the output."""

    def flush(self) -> None:
        self.info("[FLUSHED]")


def make_base_logger(stream: io.StringIO, formatter: logging.Formatter | None = None) -> FlushingLogger:
    base = FlushingLogger("test-app", logging.DEBUG)
    handler = logging.StreamHandler(stream)
    if formatter is not None:
        handler.setFormatter(formatter)
    base.addHandler(handler)
    return base


@pytest.fixture
def registry() -> ExecutionContextRegistry:
    return ExecutionContextRegistry()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(output: io.StringIO, registry: ExecutionContextRegistry) -> TaggedLogger:
    return TaggedLogger.wrap(make_base_logger(output, JsonFormatter()), registry=registry)


@pytest.fixture
def read_lines(output: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    """Parse every JSON line written to ``output`` so far."""

    def _read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in output.getvalue().splitlines() if line]

    return _read


@pytest.fixture
def base_logger_factory() -> Callable[..., FlushingLogger]:
    """``factory(stream, formatter=None)`` building a fresh handler-backed logger."""
    return make_base_logger
