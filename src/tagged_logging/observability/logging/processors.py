"""Observability – structlog processor for tagged logging.

``TagProcessor`` copies the current tags of a :class:`TaggedLogger` into
structlog event dicts, so structlog output and stdlib output carry the same
scope::

    import structlog
    from tagged_logging.observability.logging.processors import TagProcessor

    structlog.configure(processors=[TagProcessor(tagged), structlog.processors.JSONRenderer()])
"""
from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tagged_logging.observability.logging.tagged import TaggedLogger


class TagProcessor:
    """structlog processor injecting ``tags`` and ``parsed_tags``.

    Fields already present in the event dict are left alone, and empty
    values are not added.
    """

    def __init__(self, tagged_logger: "TaggedLogger") -> None:
        self._tagged = tagged_logger

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        stack = self._tagged.tag_stack
        if stack:
            event_dict.setdefault("tags", stack.tags)
        parsed = stack.current_parsed_tags
        if parsed:
            event_dict.setdefault("parsed_tags", copy.deepcopy(parsed))
        return event_dict


__all__ = ["TagProcessor"]
