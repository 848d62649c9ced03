"""Observability – TagStack.

Ordered tags for one execution context plus the nested ``parsed_tags`` view
derived from the structured (``key=value``) ones.

Structured tags use dot notation for nesting::

    stack = TagStack()
    stack.push(["http.request.id=123", "worker"])
    stack.push(["http.response.code=200"])
    stack.current_parsed_tags
    # {"http": {"request": {"id": "123"}, "response": {"code": "200"}}}
"""
from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping
from typing import Any


def _flatten(items: Iterable[Any]) -> Iterator[str]:
    for item in items:
        if item is None:
            continue
        if isinstance(item, str):
            yield item
        elif isinstance(item, Iterable) and not isinstance(item, (bytes, bytearray, Mapping)):
            yield from _flatten(item)
        else:
            yield str(item)


def _assign_path(tree: dict[str, Any], tag: str) -> None:
    """Write a ``a.b.c=value`` tag into *tree*, replacing whatever sits on the path."""
    key, value = tag.split("=", 1)
    *parents, leaf = key.split(".")
    node = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = node[segment] = {}
        node = child
    node[leaf] = value


class TagStack:
    """Tags pushed in the current execution context.

    Every tag on the stack has a matching parsed-tags snapshot: the merged
    structured view once that tag was applied.  Popping *n* tags therefore
    restores exactly the view that was current before they were pushed.
    Snapshots are never mutated once stored.
    """

    def __init__(self) -> None:
        self._tags: list[str] = []
        self._parsed: list[dict[str, Any]] = []

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def current_parsed_tags(self) -> dict[str, Any]:
        """The current snapshot (``{}`` when empty). Treat as read-only."""
        return self._parsed[-1] if self._parsed else {}

    @property
    def depth(self) -> int:
        return len(self._tags)

    def push(self, raw_tags: Iterable[Any]) -> list[str]:
        """Flatten *raw_tags*, drop blanks and append the rest.

        Returns the tags actually pushed, possibly none.
        """
        if isinstance(raw_tags, str):
            raw_tags = [raw_tags]
        pushed = [tag for tag in _flatten(raw_tags) if tag.strip()]

        snapshot = self.current_parsed_tags
        for tag in pushed:
            if "=" in tag:
                snapshot = copy.deepcopy(snapshot)
                _assign_path(snapshot, tag)
            self._tags.append(tag)
            self._parsed.append(snapshot)
        return pushed

    def pop(self, count: int = 1) -> list[str]:
        """Remove the last *count* tags and return them in push order.

        Popping more tags than are present empties the stack.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []
        removed = self._tags[-count:]
        del self._tags[-count:]
        del self._parsed[-count:]
        return removed

    def clear(self) -> list[str]:
        """Empty the stack and return the (now empty) tag list."""
        self._parsed.clear()
        self._tags.clear()
        return []

    def __len__(self) -> int:
        return len(self._tags)

    def __bool__(self) -> bool:
        return bool(self._tags)

    def __repr__(self) -> str:
        return f"TagStack(tags={self._tags!r})"


__all__ = ["TagStack"]
