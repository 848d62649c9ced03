"""Observability – tagged JSON logging."""
from tagged_logging.observability.logging.factory import TaggedLoggerFactory
from tagged_logging.observability.logging.formatter import JsonFormatter
from tagged_logging.observability.logging.processors import TagProcessor
from tagged_logging.observability.logging.protocol import TagRenderer
from tagged_logging.observability.logging.tag_stack import TagStack
from tagged_logging.observability.logging.tagged import TaggedLogger

wrap = TaggedLogger.wrap

__all__ = [
    "JsonFormatter",
    "TagProcessor",
    "TagRenderer",
    "TagStack",
    "TaggedLogger",
    "TaggedLoggerFactory",
    "wrap",
]
