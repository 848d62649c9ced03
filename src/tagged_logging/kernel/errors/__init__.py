"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError                (application.py)
    │   └── UnsupportedFormatterError
    └── ConfigError                     (tagged_logging.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from tagged_logging.kernel.errors.application import ApplicationError, UnsupportedFormatterError
from tagged_logging.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "UnsupportedFormatterError",
]
