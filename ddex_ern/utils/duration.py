"""Duration normalization to ISO-8601.

Track lengths arrive in whatever notation the upload form stored:
already-ISO (``PT3M45S``), ``MM:SS`` or ``HH:MM:SS``.  Duration is
best-effort metadata, so anything unrecognized collapses to ``PT0S``
instead of failing the whole document.
"""

from __future__ import annotations

import re

ZERO_DURATION = "PT0S"

# ISO-8601 durations as DDEX uses them: optional day part, then a time part.
_ISO_DURATION_RE = re.compile(
    r"^P(?=\d|T\d)(?:\d+D)?(?:T(?=\d)(?:\d+H)?(?:\d+M)?(?:\d+(?:\.\d+)?S)?)?$"
)
_MINUTES_SECONDS_RE = re.compile(r"^(\d+):(\d{1,2})$")
_HOURS_MINUTES_SECONDS_RE = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2})$")


def format_iso_duration(hours: int, minutes: int, seconds: int) -> str:
    """Build ``PT<H>H<M>M<S>S``, dropping the hours part when it is zero."""
    if hours:
        return f"PT{hours}H{minutes}M{seconds}S"
    return f"PT{minutes}M{seconds}S"


def normalize_duration(value: str | None) -> str:
    """Convert a free-form duration string to an ISO-8601 duration.

    Args:
        value: ``PT..`` (returned unchanged), ``MM:SS`` or ``HH:MM:SS``.
               A two-part value is always minutes:seconds.

    Returns:
        The ISO-8601 duration, or ``PT0S`` for unrecognized input.
    """
    if not value:
        return ZERO_DURATION

    text = value.strip()

    if _ISO_DURATION_RE.match(text):
        return text

    match = _HOURS_MINUTES_SECONDS_RE.match(text)
    if match:
        hours, minutes, seconds = (int(part) for part in match.groups())
        return format_iso_duration(hours, minutes, seconds)

    match = _MINUTES_SECONDS_RE.match(text)
    if match:
        minutes, seconds = (int(part) for part in match.groups())
        return format_iso_duration(0, minutes, seconds)

    return ZERO_DURATION
