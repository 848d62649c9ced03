"""Observability – tagged JSON logging and execution-context storage."""

from tagged_logging.observability.context import ExecutionContextRegistry, default_registry
from tagged_logging.observability.logging import (
    JsonFormatter,
    TaggedLogger,
    TaggedLoggerFactory,
    TagProcessor,
    TagRenderer,
    TagStack,
    wrap,
)

__all__ = [
    "ExecutionContextRegistry",
    "JsonFormatter",
    "TagProcessor",
    "TagRenderer",
    "TagStack",
    "TaggedLogger",
    "TaggedLoggerFactory",
    "default_registry",
    "wrap",
]
