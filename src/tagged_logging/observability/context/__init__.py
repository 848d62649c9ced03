"""Observability – execution-context local storage."""
from tagged_logging.observability.context.registry import ExecutionContextRegistry, default_registry

__all__ = ["ExecutionContextRegistry", "default_registry"]
