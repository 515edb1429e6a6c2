"""Shared pytest fixtures for the ERN generator test suite."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any

import pytest

from ddex_ern.models.release import ReleaseBundle
from ddex_ern.utils.identifiers import MessageIdGenerator

FIXED_MOMENT = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Deterministic seams
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_clock():
    """A clock that always reads 2024-05-01T12:30:45.123Z."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def id_generator(fixed_clock) -> MessageIdGenerator:
    """Message id generator pinned to a fixed clock and a seeded RNG."""
    return MessageIdGenerator(clock=fixed_clock, rng=random.Random(42))


@pytest.fixture
def make_id_generator(fixed_clock):
    """Factory for identically seeded generators (byte-identical output)."""

    def _make(seed: int = 42) -> MessageIdGenerator:
        return MessageIdGenerator(clock=fixed_clock, rng=random.Random(seed))

    return _make


# ---------------------------------------------------------------------------
# Release payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def release_payload() -> dict[str, Any]:
    """Raw release row, keyed by the catalogue's own column names."""
    return {
        "id": 501,
        "upc": "0123456789012",
        "catalog": "CAT-501",
        "version_title": "Night Drive",
        "alt_title": "Conducción Nocturna",
        "release_type_name": "Album",
        "date": "2024-06-14T00:00:00.000Z",
        "cline": "2024 Neon Records",
        "pline": "2024 Neon Records",
        "front_pic": "https://cdn.example.com/covers/501.jpg",
        "label": {
            "id": 9,
            "name": "Neon Records",
            "release_front_art_dimensions": "1400x1400",
        },
        "mainArtist": {"id": 77, "stage_name": "Luna Vega", "name": "María Vega"},
    }


@pytest.fixture
def tracks_payload() -> list[dict[str, Any]]:
    """Two raw track rows with mixed credit roles."""
    return [
        {
            "id": 1001,
            "number": 1,
            "song_name": "Midnight",
            "isrc": "USABC2400001",
            "sound_length": "3:45",
            "mix_version": "Extended Mix",
            "explicit_status": "explicit",
            "main_genre_en": "Electronic",
            "secondary_genre_en": "House",
            "song_language_code": "es",
            "lyrics_language_code": "es",
            "has_lyrics": True,
            "audio_style": "wav",
            "sound_url": "https://cdn.example.com/audio/1001.wav",
            "artists": [
                {"id": 1, "stage_name": "Luna Vega", "role_name": "Artista"},
                {"id": 2, "artist_name": "Pedro Ruiz", "role_name": "Compositor"},
            ],
        },
        {
            "id": 1002,
            "number": 2,
            "song_name": "Sunrise",
            "isrc": "USABC2400002",
            "sound_length": "PT4M10S",
            "explicit_status": "clean",
            "main_genre_en": "Pop",
            "song_language_code": "en",
            "lyrics_language_code": "en",
            "has_lyrics": False,
            "sound_url": "https://cdn.example.com/audio/1002.mp3",
            "artists": [
                {"id": 3, "stage_name": "DJ Sol", "role_name": "Featuring"},
                {"id": 4, "name": "Ana Gil", "role_name": "Productor"},
            ],
        },
    ]


@pytest.fixture
def bundle_payload(release_payload, tracks_payload) -> dict[str, Any]:
    """Full JSON body accepted by the generate endpoint and CLI."""
    return {"release": release_payload, "tracks": tracks_payload}


@pytest.fixture
def bundle(bundle_payload) -> ReleaseBundle:
    """Validated two-track release bundle."""
    return ReleaseBundle.model_validate(bundle_payload)


@pytest.fixture
def single_track_bundle(release_payload, tracks_payload) -> ReleaseBundle:
    """Validated bundle with only the first track."""
    return ReleaseBundle.model_validate(
        {"release": release_payload, "tracks": tracks_payload[:1]}
    )
