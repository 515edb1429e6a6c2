"""Unit tests for caller-side release payload validation."""

from __future__ import annotations

import pytest

from ddex_ern.models.release import ReleaseBundle
from ddex_ern.services.release_validator import validate_release_bundle
from ddex_ern.utils.errors import ReleaseValidationError


def _failure(payload) -> ReleaseValidationError:
    with pytest.raises(ReleaseValidationError) as exc_info:
        validate_release_bundle(ReleaseBundle.model_validate(payload))
    return exc_info.value


class TestValidateReleaseBundle:
    def test_complete_bundle_passes(self, bundle) -> None:
        validate_release_bundle(bundle)

    def test_no_tracks(self, bundle_payload) -> None:
        bundle_payload["tracks"] = []
        error = _failure(bundle_payload)
        assert error.field_name == "tracks"
        assert error.tracks == []

    def test_blank_upc(self, bundle_payload) -> None:
        bundle_payload["release"]["upc"] = "   "
        assert _failure(bundle_payload).field_name == "upc"

    def test_missing_isrc_names_tracks(self, bundle_payload) -> None:
        bundle_payload["tracks"][1]["isrc"] = None
        error = _failure(bundle_payload)
        assert error.field_name == "isrc"
        assert error.tracks == [{"id": 1002, "name": "Sunrise"}]
        assert "Sunrise" in error.message

    def test_missing_date(self, bundle_payload) -> None:
        del bundle_payload["release"]["date"]
        assert _failure(bundle_payload).field_name == "date"

    def test_missing_duration(self, bundle_payload) -> None:
        bundle_payload["tracks"][0]["sound_length"] = ""
        error = _failure(bundle_payload)
        assert error.field_name == "sound_length"
        assert [t["id"] for t in error.tracks] == [1001]

    def test_missing_audio_url(self, bundle_payload) -> None:
        for track in bundle_payload["tracks"]:
            track.pop("sound_url")
        error = _failure(bundle_payload)
        assert error.field_name == "sound_url"
        assert [t["name"] for t in error.tracks] == ["Midnight", "Sunrise"]

    def test_checks_run_in_order(self, bundle_payload) -> None:
        bundle_payload["release"]["upc"] = None
        bundle_payload["tracks"][0]["isrc"] = None
        del bundle_payload["release"]["date"]
        assert _failure(bundle_payload).field_name == "upc"
