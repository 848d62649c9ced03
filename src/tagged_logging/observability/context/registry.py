"""Observability – ExecutionContextRegistry.

Process-wide key/value slots that are private to the calling unit of
execution: one OS thread, or one :class:`asyncio.Task` when running inside an
event loop.

Slots live in a ``ContextVar``.  A context copied into a new task (or thread)
still references the parent's slot map, so every slot map records the thread
or task that created it; any other thread or task that finds it gets a fresh,
empty map instead of sharing the parent's mutable values.
"""
from __future__ import annotations

import asyncio
import threading
import weakref
from contextvars import ContextVar
from typing import Any, Callable, TypeVar
from uuid import uuid4

T = TypeVar("T")


def _current_owner() -> object:
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None
    return task if task is not None else threading.current_thread()


class _Slots:
    __slots__ = ("_owner", "values")

    def __init__(self, owner: object) -> None:
        self._owner = weakref.ref(owner)
        self.values: dict[str, Any] = {}

    def owned_by(self, owner: object) -> bool:
        return self._owner() is owner


class ExecutionContextRegistry:
    """Key/value slots isolated per thread and per asyncio task.

    Usage::

        registry = ExecutionContextRegistry()
        stack = registry.setdefault("tags:42", TagStack)
    """

    def __init__(self, name: str | None = None) -> None:
        self._var: ContextVar[_Slots | None] = ContextVar(
            name or f"tagged_logging_slots_{uuid4().hex}", default=None
        )

    def _slots(self) -> dict[str, Any]:
        owner = _current_owner()
        slots = self._var.get()
        if slots is None or not slots.owned_by(owner):
            slots = _Slots(owner)
            self._var.set(slots)
        return slots.values

    def get(self, key: str, default: Any = None) -> Any:
        return self._slots().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._slots()[key] = value

    def setdefault(self, key: str, factory: Callable[[], T]) -> T:
        """Return the value stored under *key*, creating it with *factory* first if absent."""
        slots = self._slots()
        if key not in slots:
            slots[key] = factory()
        return slots[key]

    def delete(self, key: str) -> None:
        self._slots().pop(key, None)

    def clear(self) -> None:
        """Drop every slot visible to the calling thread or task."""
        self._slots().clear()


_default_registry: ExecutionContextRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> ExecutionContextRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = ExecutionContextRegistry("tagged_logging_slots")
    return _default_registry


__all__ = ["ExecutionContextRegistry", "default_registry"]
