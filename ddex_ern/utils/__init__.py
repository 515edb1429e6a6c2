"""Utility modules for the ERN generator.

- **errors** -- exception hierarchy rooted at ErnGeneratorError.
- **logging** -- structlog setup with console / JSON renderers.
- **identifiers** -- message ids and timestamps behind an injectable clock.
- **duration** -- free-form track lengths to ISO-8601 durations.
- **dates** -- release-date formatting and copyright-year fallback.
- **xml_helpers** (not re-exported here) -- lxml element helpers.
"""

from ddex_ern.utils.dates import copyright_year, format_release_date, release_year
from ddex_ern.utils.duration import normalize_duration
from ddex_ern.utils.errors import (
    ConfigurationError,
    DocumentAssemblyError,
    ErnGeneratorError,
    MalformedInputError,
    ReleaseValidationError,
)
from ddex_ern.utils.identifiers import MessageIdGenerator, MessageStamp
from ddex_ern.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "DocumentAssemblyError",
    "ErnGeneratorError",
    "MalformedInputError",
    "MessageIdGenerator",
    "MessageStamp",
    "ReleaseValidationError",
    "configure_logging",
    "copyright_year",
    "format_release_date",
    "get_logger",
    "normalize_duration",
    "release_year",
]
