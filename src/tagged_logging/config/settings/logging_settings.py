"""Config settings – TaggedLoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from tagged_logging.config.settings.base import Settings
from tagged_logging.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class TaggedLoggingSettings(Settings):
    """Options for loggers built by ``TaggedLoggerFactory``.

    Read from ``TAGGED_LOGGING_LEVEL``, ``TAGGED_LOGGING_UTC``,
    ``TAGGED_LOGGING_ENSURE_ASCII`` and ``TAGGED_LOGGING_PROPAGATE``.
    """

    _prefix: ClassVar[str] = "TAGGED_LOGGING"

    level: str = "INFO"
    utc: bool = False
    ensure_ascii: bool = False
    propagate: bool = False

    def _validate(self) -> None:
        self.level = str(self.level).strip().upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise InvalidSettingValueError("level", self.level, "unknown log level")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["TaggedLoggingSettings"]
