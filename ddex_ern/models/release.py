"""Release, track and artist-credit models consumed by the ERN generator.

Defines Pydantic v2 models for the normalized release snapshot handed to
the generator.  All models use frozen config: the generator reads a
release, it never mutates one.

The rows come from the catalogue database joined on labels, users, genres
and languages.  Each field therefore accepts both a readable Python name
and the catalogue column name (``song_name``, ``sound_length``,
``front_pic`` ...) via ``AliasChoices``, so a raw row validates as-is::

    Track.model_validate({"id": 7, "song_name": "Intro", "sound_length": "3:45"})

Key relationships:
    - ReleaseBundle has one Release and an ordered list of Track
    - Track has an ordered list of ArtistCredit
    - Release has an optional Label and an optional ArtistProfile
"""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _coerce_date_text(value: Any) -> Any:
    """Accept ``date`` / ``datetime`` objects where ISO text is expected."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


# ---------------------------------------------------------------------------
# Supporting models
# ---------------------------------------------------------------------------

class Label(BaseModel):
    """The record label administrating a release.

    When absent, the generator falls back to independent-label defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    name: str | None = None
    cline: str | None = None
    pline: str | None = None
    # Cover-art dimension hint, e.g. "3000x3000".
    front_art_dimensions: str | None = Field(
        default=None,
        validation_alias=AliasChoices("front_art_dimensions", "release_front_art_dimensions"),
    )


class ArtistProfile(BaseModel):
    """The user account behind a release's main artist."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    stage_name: str | None = None
    artist_name: str | None = None
    name: str | None = None


class ArtistCredit(BaseModel):
    """One artist credited on one track, with a free-text role.

    The role is whatever the catalogue stores (``"Compositor"``,
    ``"Featuring"`` ...); the vocabulary mapper translates it to DDEX.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    track_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("track_id", "release_track_id"),
    )
    stage_name: str | None = None
    artist_name: str | None = None
    name: str | None = None
    role: str | None = Field(
        default=None,
        validation_alias=AliasChoices("role", "role_name"),
    )


# ---------------------------------------------------------------------------
# Track
# ---------------------------------------------------------------------------

class Track(BaseModel):
    """A single track of a release.

    ``number`` is the release-assigned position; the generator itself
    relies on list order, which the data layer sorts by ``number``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    number: int | None = None
    title: str = Field(default="", validation_alias=AliasChoices("title", "song_name"))
    isrc: str | None = None
    # Free-form: "PT3M45S", "3:45" or "1:02:03".
    duration: str | None = Field(
        default=None,
        validation_alias=AliasChoices("duration", "sound_length"),
    )
    mix_version: str | None = None
    explicit_status: str | None = None
    genre: str | None = Field(
        default=None,
        validation_alias=AliasChoices("genre", "main_genre_en", "main_genre_name"),
    )
    secondary_genre: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "secondary_genre", "secondary_genre_en", "secondary_genre_name"
        ),
    )
    # ISO 639-1 codes.
    performance_language: str | None = Field(
        default=None,
        validation_alias=AliasChoices("performance_language", "song_language_code"),
    )
    lyrics_language: str | None = Field(
        default=None,
        validation_alias=AliasChoices("lyrics_language", "lyrics_language_code"),
    )
    has_lyrics: bool | None = None
    audio_style: str | None = None
    audio_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("audio_url", "sound_url", "sound_path"),
    )
    credits: list[ArtistCredit] = Field(
        default_factory=list,
        validation_alias=AliasChoices("credits", "artists"),
    )


# ---------------------------------------------------------------------------
# Release
# ---------------------------------------------------------------------------

class Release(BaseModel):
    """Release-level metadata snapshot.

    Artist and label names exist both as nested objects and as flat
    joined columns; the vocabulary mapper owns the precedence between them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    upc: str | None = None
    catalog_number: str | None = Field(
        default=None,
        validation_alias=AliasChoices("catalog_number", "catalog"),
    )
    version_title: str | None = None
    alt_title: str | None = None
    release_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("release_type", "release_type_name"),
    )
    release_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("release_date", "date"),
    )

    # Copyright lines; years fall back to the release date's year.
    cline: str | None = None
    pline: str | None = None
    cline_year: int | None = None
    pline_year: int | None = None

    cover_image_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("cover_image_url", "front_pic"),
    )

    label: Label | None = None
    label_name: str | None = None
    record_label: str | None = None

    main_artist: ArtistProfile | None = Field(
        default=None,
        validation_alias=AliasChoices("main_artist", "mainArtist"),
    )
    stage_name: str | None = None
    artist_name: str | None = None
    user_name: str | None = None

    @field_validator("release_date", mode="before")
    @classmethod
    def _release_date_as_text(cls, value: Any) -> Any:
        return _coerce_date_text(value)


class ReleaseBundle(BaseModel):
    """A release together with its ordered tracks — one generation unit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    release: Release
    tracks: list[Track] = Field(default_factory=list)
