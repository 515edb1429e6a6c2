"""Unit tests for message id and timestamp generation."""

from __future__ import annotations

import random
import re
from datetime import datetime, timedelta, timezone

from ddex_ern.utils.identifiers import (
    MessageIdGenerator,
    compact_timestamp,
    iso_timestamp,
)


class TestTimestamps:
    def test_compact_timestamp(self) -> None:
        moment = datetime(2024, 5, 1, 12, 30, 45, tzinfo=timezone.utc)
        assert compact_timestamp(moment) == "20240501T123045"

    def test_iso_timestamp_has_millis_and_z(self) -> None:
        moment = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
        assert iso_timestamp(moment) == "2024-05-01T12:30:45.123Z"

    def test_non_utc_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2024, 5, 1, 14, 0, 0, tzinfo=plus_two)
        assert iso_timestamp(moment) == "2024-05-01T12:00:00.000Z"

    def test_naive_treated_as_utc(self) -> None:
        assert compact_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "20240102T030405"


class TestMessageIdGenerator:
    def test_stamp_shape(self, id_generator) -> None:
        stamp = id_generator.stamp()
        assert re.fullmatch(r"DDEX20240501T123045[A-Z0-9]{6}", stamp.message_id)
        assert stamp.created_at == "2024-05-01T12:30:45.123Z"

    def test_same_seed_same_stamp(self, make_id_generator) -> None:
        assert make_id_generator(7).stamp() == make_id_generator(7).stamp()

    def test_custom_prefix(self, fixed_clock) -> None:
        generator = MessageIdGenerator(clock=fixed_clock, rng=random.Random(1), prefix="TYTV")
        assert generator.prefix == "TYTV"
        assert generator.stamp().message_id.startswith("TYTV20240501T123045")

    def test_clock_read_once_per_stamp(self) -> None:
        readings = iter(
            [
                datetime(2024, 1, 1, tzinfo=timezone.utc),
                datetime(2025, 1, 1, tzinfo=timezone.utc),
            ]
        )
        generator = MessageIdGenerator(clock=lambda: next(readings), rng=random.Random(0))
        first = generator.stamp()
        assert first.message_id[4:8] == "2024"
        assert first.created_at.startswith("2024")

    def test_default_generator_produces_suffix(self) -> None:
        suffix = MessageIdGenerator().random_suffix()
        assert re.fullmatch(r"[A-Z0-9]{6}", suffix)
