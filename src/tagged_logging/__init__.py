"""
tagged_logging – scoped tags and single-line JSON records for stdlib logging.

Import path convention::

    from tagged_logging.observability.logging import TaggedLogger, JsonFormatter
    from tagged_logging.kernel.errors import UnsupportedFormatterError
    from tagged_logging.config import TaggedLoggingSettings
"""

from tagged_logging.kernel.errors import UnsupportedFormatterError
from tagged_logging.observability import JsonFormatter, TaggedLogger, TaggedLoggerFactory, TagStack, wrap

__version__ = "0.1.0"
__all__ = [
    "JsonFormatter",
    "TagStack",
    "TaggedLogger",
    "TaggedLoggerFactory",
    "UnsupportedFormatterError",
    "__version__",
    "wrap",
]
