"""Presence checks for business-required release fields.

The generation core produces a best-effort document from whatever it is
given.  Callers that must not ship an incomplete ERN (the HTTP endpoint,
the CLI) run :func:`validate_release_bundle` first.  Checks run in a fixed
order and the first failure is raised, naming every offending track.
"""

from __future__ import annotations

from collections.abc import Callable

from ddex_ern.models.release import ReleaseBundle, Track
from ddex_ern.utils.errors import ReleaseValidationError


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def _offending(tracks: list[Track], missing: Callable[[Track], bool]) -> list[Track]:
    return [track for track in tracks if missing(track)]


def _raise_for_tracks(
    offending: list[Track],
    field_name: str,
    what: str,
    consequence: str,
) -> None:
    if not offending:
        return
    names = ", ".join(track.title for track in offending)
    raise ReleaseValidationError(
        message=f"The following tracks are missing {what}: {names}. {consequence}",
        field_name=field_name,
        tracks=[{"id": track.id, "name": track.title} for track in offending],
    )


def validate_release_bundle(bundle: ReleaseBundle) -> None:
    """Raise :class:`ReleaseValidationError` if *bundle* cannot be distributed.

    Order: tracks present, UPC, per-track ISRC, release date, per-track
    duration, per-track audio URL.
    """
    release = bundle.release
    tracks = list(bundle.tracks)

    if not tracks:
        raise ReleaseValidationError(
            message="Release must have at least one track to generate DDEX XML",
            field_name="tracks",
        )

    if _blank(release.upc):
        raise ReleaseValidationError(
            message=(
                "Release must have a confirmed UPC code. "
                "Please assign a UPC before generating DDEX XML."
            ),
            field_name="upc",
        )

    _raise_for_tracks(
        _offending(tracks, lambda t: _blank(t.isrc)),
        "isrc",
        "ISRC codes",
        "All tracks must have ISRC codes to generate DDEX XML.",
    )

    if _blank(release.release_date):
        raise ReleaseValidationError(
            message="Release must have a release date to generate DDEX XML.",
            field_name="date",
        )

    _raise_for_tracks(
        _offending(tracks, lambda t: _blank(t.duration)),
        "sound_length",
        "duration information",
        "All tracks must have duration to generate DDEX XML.",
    )

    _raise_for_tracks(
        _offending(tracks, lambda t: _blank(t.audio_url)),
        "sound_url",
        "audio file URLs",
        "All tracks must have audio files to generate DDEX XML.",
    )
