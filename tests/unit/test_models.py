"""Unit tests for the release snapshot and document option models."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from ddex_ern.models.options import DealProfile, DocumentOptions
from ddex_ern.models.release import ArtistCredit, Release, ReleaseBundle, Track


class TestColumnAliases:
    """Raw catalogue rows validate as-is."""

    def test_track_aliases(self) -> None:
        track = Track.model_validate(
            {
                "id": 3,
                "song_name": "Intro",
                "sound_length": "1:00",
                "main_genre_name": "Latin",
                "song_language_code": "es",
                "sound_path": "s3://bucket/3.mp3",
                "artists": [{"role_name": "Artista", "release_track_id": 3}],
            }
        )
        assert track.title == "Intro"
        assert track.duration == "1:00"
        assert track.genre == "Latin"
        assert track.performance_language == "es"
        assert track.audio_url == "s3://bucket/3.mp3"
        assert track.credits[0].role == "Artista"
        assert track.credits[0].track_id == 3

    def test_release_aliases(self, release_payload) -> None:
        release = Release.model_validate(release_payload)
        assert release.catalog_number == "CAT-501"
        assert release.release_type == "Album"
        assert release.release_date == "2024-06-14T00:00:00.000Z"
        assert release.cover_image_url.endswith("501.jpg")
        assert release.main_artist.stage_name == "Luna Vega"
        assert release.label.front_art_dimensions == "1400x1400"

    def test_python_names_accepted(self) -> None:
        credit = ArtistCredit(stage_name="X", role="Productor")
        assert credit.role == "Productor"


class TestReleaseDate:
    def test_date_object_becomes_text(self) -> None:
        assert Release(id=1, release_date=date(2024, 1, 2)).release_date == "2024-01-02"

    def test_datetime_object_becomes_text(self) -> None:
        release = Release(id=1, release_date=datetime(2024, 1, 2, 3, 4, 5))
        assert release.release_date == "2024-01-02T03:04:05"


class TestImmutability:
    def test_release_is_frozen(self) -> None:
        release = Release(id=1)
        with pytest.raises(ValidationError):
            release.upc = "123"

    def test_bundle_requires_release(self) -> None:
        with pytest.raises(ValidationError):
            ReleaseBundle.model_validate({"tracks": []})

    def test_tracks_default_empty(self) -> None:
        assert ReleaseBundle(release=Release(id=1)).tracks == []


class TestDocumentOptions:
    def test_defaults(self) -> None:
        options = DocumentOptions()
        assert options.sender_party_id == "DPID:PADPIDA2014071501Y"
        assert options.deal_profile is DealProfile.FULL
        assert options.message_id_prefix == "DDEX"

    def test_profile_from_string(self) -> None:
        assert DocumentOptions(deal_profile="reduced").deal_profile is DealProfile.REDUCED

    def test_unknown_profile_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DocumentOptions(deal_profile="everything")
