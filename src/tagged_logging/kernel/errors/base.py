"""Root error class for the tagged-logging error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Subclasses set ``default_code``; ``detail`` holds the structured facts a
    log line or caller needs (the offending formatter type, a setting name).
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Plain dict, ready to pass as ``extra={"context": ...}``."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
