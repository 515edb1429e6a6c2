"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from ddex_ern.utils.errors import (
    ConfigurationError,
    DocumentAssemblyError,
    ErnGeneratorError,
    MalformedInputError,
    ReleaseValidationError,
)


class TestErnGeneratorError:
    def test_str_with_field(self) -> None:
        error = ErnGeneratorError("bad value", field_name="date")
        assert str(error) == "[date] bad value"

    def test_str_without_field(self) -> None:
        assert str(ErnGeneratorError("bad value")) == "bad value"

    @pytest.mark.parametrize(
        "error_cls",
        [MalformedInputError, DocumentAssemblyError, ReleaseValidationError, ConfigurationError],
    )
    def test_subclasses(self, error_cls) -> None:
        error = error_cls()
        assert isinstance(error, ErnGeneratorError)
        assert error.message


class TestReleaseValidationError:
    def test_tracks_copied(self) -> None:
        tracks = [{"id": 1, "name": "One"}]
        error = ReleaseValidationError("missing", field_name="isrc", tracks=tracks)
        tracks.append({"id": 2, "name": "Two"})
        assert error.tracks == [{"id": 1, "name": "One"}]
        assert error.field_name == "isrc"
