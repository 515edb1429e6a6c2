"""Release-date helpers.

Release dates arrive as ISO dates (``2024-05-01``), ISO datetimes
(``2024-05-01T00:00:00.000Z``) or MySQL datetimes (``2024-05-01 00:00:00``).
"""

from __future__ import annotations

import re

from ddex_ern.utils.errors import MalformedInputError

_LEADING_YEAR_RE = re.compile(r"^\s*(\d{4})")


def format_release_date(value: str | None) -> str:
    """Return the date part (``YYYY-MM-DD``) of a release date string."""
    if not value:
        return ""
    return value.strip().split("T")[0].split(" ")[0]


def release_year(value: str | None, field_name: str = "release_date") -> int:
    """Return the leading four-digit year of a release date.

    Raises:
        MalformedInputError: if *value* has no parsable leading year.  The
            caller only asks for the year when it needs it, so a bad date
            must surface instead of turning into a silent default.
    """
    match = _LEADING_YEAR_RE.match(value or "")
    if match is None:
        raise MalformedInputError(
            message=f"Release date {value!r} has no leading year",
            field_name=field_name,
        )
    return int(match.group(1))


def copyright_year(explicit_year: int | None, release_date: str | None) -> int | None:
    """Explicit copyright year, else the release date's year.

    Returns None when neither is known; a present but unparsable release
    date still raises :class:`MalformedInputError`.
    """
    if explicit_year:
        return explicit_year
    if not release_date or not release_date.strip():
        return None
    return release_year(release_date)
