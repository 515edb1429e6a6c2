"""ResourceList construction: one SoundRecording per track plus cover art.

Two projections are taken over each track's credit list, independently:

- :func:`select_primary_artists` -- who is shown as ``DisplayArtist``.
- :func:`select_contributors`    -- every credit, as ``ResourceContributor``.

A credit can therefore appear in both.  Keeping them as separate
functions over the same input avoids turning them into a partition.

Resource references are derived from ids (``A<track id>``), so the
Release and Relationship builders can recompute them without reading
this module's output.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from lxml import etree

from ddex_ern.models.release import ArtistCredit, Release, Track
from ddex_ern.services.vocabulary import (
    MAIN_ARTIST_ROLE,
    map_explicit_status,
    map_mix_version,
    map_role,
    resolve_artist_name,
    resolve_pline_text,
    resolve_release_artist_name,
)
from ddex_ern.utils.dates import copyright_year
from ddex_ern.utils.duration import normalize_duration
from ddex_ern.utils.xml_helpers import party_name, sub_element

SOUND_RECORDING_TYPE = "MusicalWorkSoundRecording"
DEFAULT_AUDIO_CODEC = "MP3"

COVER_IMAGE_REFERENCE = "AIMG1"
COVER_IMAGE_TYPE = "FrontCoverImage"
COVER_IMAGE_DETAILS_REFERENCE = "T_IMG1"
DEFAULT_IMAGE_SIZE = 3000

_DIMENSIONS_RE = re.compile(r"^\s*(\d+)\s*[xX×]\s*(\d+)\s*$")


class CreditEntry(NamedTuple):
    """A credit with its resolved display name and DDEX role."""

    name: str
    role: str


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------

def track_resource_reference(track: Track) -> str:
    return f"A{track.id}"


def track_technical_reference(track: Track) -> str:
    return f"T{track.id}"


def has_cover_image(release: Release) -> bool:
    return bool(release.cover_image_url)


# ---------------------------------------------------------------------------
# Credit projections
# ---------------------------------------------------------------------------

def _entries(credits: list[ArtistCredit]) -> list[CreditEntry]:
    return [CreditEntry(resolve_artist_name(c), map_role(c.role)) for c in credits]


def select_primary_artists(track: Track, release: Release) -> list[CreditEntry]:
    """Pick the artists displayed for *track*.

    1. Credits mapped to ``MainArtist``.
    2. Otherwise credits whose mapped role mentions "artist".
    3. Otherwise the release's main artist as the only entry.
    """
    entries = _entries(track.credits)

    main = [e for e in entries if e.role == MAIN_ARTIST_ROLE]
    if main:
        return main

    artist_like = [e for e in entries if "artist" in e.role.lower()]
    if artist_like:
        return artist_like

    return [CreditEntry(resolve_release_artist_name(release), MAIN_ARTIST_ROLE)]


def select_contributors(track: Track) -> list[CreditEntry]:
    """Every credit on *track*, in input order, whatever its role."""
    return _entries(track.credits)


def audio_codec(track: Track) -> str:
    """Codec from the audio-style hint, upper-cased; ``MP3`` by default."""
    hint = (track.audio_style or "").strip()
    return hint.upper() if hint else DEFAULT_AUDIO_CODEC


def image_dimensions(release: Release) -> tuple[int, int]:
    """(width, height) from the label's ``WxH`` hint, else 3000x3000."""
    hint = release.label.front_art_dimensions if release.label else None
    match = _DIMENSIONS_RE.match(hint or "")
    if match is None:
        return DEFAULT_IMAGE_SIZE, DEFAULT_IMAGE_SIZE
    return int(match.group(1)), int(match.group(2))


def image_codec(url: str) -> str:
    path = url.split("?", 1)[0].lower()
    return "PNG" if path.endswith(".png") else "JPEG"


# ---------------------------------------------------------------------------
# Element builders
# ---------------------------------------------------------------------------

def _display_artist(parent: etree._Element, entry: CreditEntry, sequence: int) -> None:
    artist = party_name(parent, "DisplayArtist", entry.name)
    artist.set("SequenceNumber", str(sequence))
    sub_element(artist, "ArtistRole", entry.role)


def _contributor(parent: etree._Element, entry: CreditEntry, sequence: int) -> None:
    contributor = party_name(parent, "ResourceContributor", entry.name)
    contributor.set("SequenceNumber", str(sequence))
    sub_element(contributor, "ResourceContributorRole", entry.role)


def _genre(parent: etree._Element, primary: str | None, secondary: str | None) -> None:
    if not primary and not secondary:
        return
    genre = sub_element(parent, "Genre")
    if primary:
        sub_element(genre, "GenreText", primary)
    if secondary:
        sub_element(genre, "SubGenre", secondary)


def build_sound_recording(
    parent: etree._Element,
    track: Track,
    release: Release,
) -> etree._Element:
    """Append the ``SoundRecording`` for *track* to *parent*."""
    recording = sub_element(parent, "SoundRecording")
    sub_element(recording, "ResourceReference", track_resource_reference(track))
    sub_element(recording, "Type", SOUND_RECORDING_TYPE)
    resource_id = sub_element(recording, "ResourceId")
    sub_element(resource_id, "ISRC", track.isrc or "")

    sub_element(recording, "DisplayTitleText", track.title)
    version_type = map_mix_version(track.mix_version)
    if version_type:
        display_title = sub_element(recording, "DisplayTitle")
        sub_element(display_title, "TitleText", track.title)
        sub_element(display_title, "SubTitle", track.mix_version, SubTitleType="Version")
        sub_element(recording, "VersionType", version_type)

    for sequence, entry in enumerate(select_primary_artists(track, release), start=1):
        _display_artist(recording, entry, sequence)
    for sequence, entry in enumerate(select_contributors(track), start=1):
        _contributor(recording, entry, sequence)

    if track.performance_language:
        sub_element(recording, "LanguageOfPerformance", track.performance_language)

    parental_warning = map_explicit_status(track.explicit_status)
    if parental_warning:
        sub_element(recording, "ParentalWarningType", parental_warning)

    pline_text = resolve_pline_text(release)
    if pline_text:
        pline = sub_element(recording, "PLine")
        year = copyright_year(release.pline_year, release.release_date)
        if year is not None:
            sub_element(pline, "Year", year)
        sub_element(pline, "PLineText", pline_text)

    _genre(recording, track.genre, track.secondary_genre)

    # An explicitly lyric-less track has no lyrics language to report.
    if track.lyrics_language and track.has_lyrics is not False:
        sub_element(recording, "LanguageOfLyrics", track.lyrics_language)

    sub_element(recording, "Duration", normalize_duration(track.duration))

    details = sub_element(recording, "TechnicalSoundRecordingDetails")
    sub_element(details, "TechnicalResourceDetailsReference", track_technical_reference(track))
    sub_element(details, "AudioCodecType", audio_codec(track))
    if track.audio_url:
        file_ = sub_element(details, "File")
        sub_element(file_, "URI", track.audio_url)

    return recording


def build_cover_image(parent: etree._Element, release: Release) -> etree._Element | None:
    """Append the release's single ``Image`` resource, if it has cover art."""
    if not has_cover_image(release):
        return None

    width, height = image_dimensions(release)
    image = sub_element(parent, "Image")
    sub_element(image, "ResourceReference", COVER_IMAGE_REFERENCE)
    sub_element(image, "Type", COVER_IMAGE_TYPE)
    resource_id = sub_element(image, "ResourceId")
    sub_element(resource_id, "ProprietaryId", f"IMG{release.id}")

    details = sub_element(image, "TechnicalImageDetails")
    sub_element(details, "TechnicalResourceDetailsReference", COVER_IMAGE_DETAILS_REFERENCE)
    sub_element(details, "ImageCodecType", image_codec(release.cover_image_url))
    sub_element(details, "ImageHeight", height)
    sub_element(details, "ImageWidth", width)
    file_ = sub_element(details, "File")
    sub_element(file_, "URI", release.cover_image_url)
    return image


def build_resource_list(
    parent: etree._Element,
    release: Release,
    tracks: list[Track],
) -> etree._Element:
    """Append ``ResourceList``: recordings in input order, then cover art."""
    resource_list = sub_element(parent, "ResourceList")
    for track in tracks:
        build_sound_recording(resource_list, track, release)
    build_cover_image(resource_list, release)
    return resource_list
