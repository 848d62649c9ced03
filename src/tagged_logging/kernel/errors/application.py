"""Application-layer errors raised while wiring loggers together."""

from __future__ import annotations

from tagged_logging.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """A logger or formatter was used in a way the library does not support."""

    default_code = "application_error"


class UnsupportedFormatterError(ApplicationError):
    """The logger being wrapped renders records with an incompatible formatter.

    Only an unset formatter or one that can render tags (a
    :class:`~tagged_logging.observability.logging.JsonFormatter` or anything
    satisfying :class:`~tagged_logging.observability.logging.TagRenderer`)
    can be wrapped.
    """

    default_code = "unsupported_formatter"

    def __init__(self, formatter_type: type) -> None:
        self.formatter_type = formatter_type
        name = formatter_type.__name__
        super().__init__(
            f"logger formatter must be an instance of JsonFormatter, got: {name}",
            detail={"formatter_type": f"{formatter_type.__module__}.{formatter_type.__qualname__}"},
        )


__all__ = ["ApplicationError", "UnsupportedFormatterError"]
