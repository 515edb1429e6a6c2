"""Message identifier and timestamp generation for ERN headers.

Every ERN message carries a ``MessageId`` / ``MessageThreadId`` and a
``MessageCreatedDateTime``.  Both come from a single clock reading so the
id and the timestamp always agree.

The clock and random source are constructor-injected: the rest of the
document pipeline is deterministic, and tests pin these two seams to get
byte-identical output.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable
from datetime import datetime, timezone
from typing import NamedTuple

Clock = Callable[[], datetime]

DEFAULT_PREFIX = "DDEX"
_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
_SUFFIX_LENGTH = 6


def utc_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def compact_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYYMMDDTHHMMSS`` in UTC (seconds resolution)."""
    return _as_utc(moment).strftime("%Y%m%dT%H%M%S")


def iso_timestamp(moment: datetime) -> str:
    """Render *moment* as ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    text = _as_utc(moment).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to already be UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class MessageStamp(NamedTuple):
    """Identifier and creation timestamp for one ERN message."""

    message_id: str
    created_at: str


class MessageIdGenerator:
    """Produces ``MessageStamp`` values from an injectable clock and RNG.

    Uniqueness is best-effort (time + randomness); message ids are
    advisory, not primary keys.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self._clock = clock or utc_now
        self._rng = rng or random.SystemRandom()
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def random_suffix(self) -> str:
        """Return a short uppercase alphanumeric suffix."""
        return "".join(self._rng.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))

    def stamp(self) -> MessageStamp:
        """Read the clock once and derive both message id and timestamp."""
        moment = self._clock()
        message_id = f"{self._prefix}{compact_timestamp(moment)}{self.random_suffix()}"
        return MessageStamp(message_id=message_id, created_at=iso_timestamp(moment))
