"""Vocabulary mapping from catalogue free text to DDEX controlled values.

Three independent, table-driven lookups plus the name-resolution
precedence chains used wherever a party name is written:

1. **Roles** -- exact, case-sensitive lookup in :data:`ROLE_TO_DDEX`.
   The catalogue stores role names in Spanish and English; anything
   unknown (or empty) is credited as ``Contributor``.

2. **Explicit status** -- case-insensitive lookup returning a
   ``ParentalWarningType``, or ``None`` so the element is left out.

3. **Mix versions** -- case-insensitive *substring* test against
   :data:`MIX_VERSION_KEYWORDS`, first hit wins.  The table is a tuple
   because its order is the tie-break: "Live Remix" is a ``Remix``.
   Matching is not word-bounded, so "Alive" also counts as ``Live``.

Every function here is pure; results are recomputed on each call.
"""

from __future__ import annotations

from collections.abc import Iterable

from ddex_ern.models.release import ArtistCredit, Release
from ddex_ern.utils.logging import get_logger

_logger = get_logger(__name__)

DEFAULT_ROLE = "Contributor"
MAIN_ARTIST_ROLE = "MainArtist"
UNKNOWN_ARTIST = "Unknown Artist"
INDEPENDENT_LABEL = "Independent Label"


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

ROLE_TO_DDEX: dict[str, str] = {
    # Spanish catalogue roles
    "Artista": "MainArtist",
    "Compositor": "Composer",
    "Productor": "Producer",
    "Mezclador": "MixingEngineer",
    "Arreglista": "Arranger",
    "Ingeniero de sonido": "Engineer",
    "Director de música": "MusicDirector",
    "Ingeniero Maestro": "MasteringEngineer",
    "Coro": "Choir",
    "Orquesta": "Orchestra",
    "Solista": "Soloist",
    "Director de video": "VideoDirector",
    "Productor de video": "VideoProducer",
    "Liricista": "Lyricist",
    "Editor": "Editor",
    # English catalogue roles
    "artist": "MainArtist",
    "Artist": "MainArtist",
    "Composer": "Composer",
    "Producer": "Producer",
    "Featuring": "FeaturedArtist",
    "Featured": "FeaturedArtist",
    "Primary": "MainArtist",
    "Remixer": "Remixer",
    "DJ": "DJ",
    "Lyricist": "Lyricist",
    "Mixer": "Mixer",
    "Engineer": "Engineer",
    "Arranger": "Arranger",
    # Account categories that show up as roles
    "admin": "Producer",
    "Participante": "Contributor",
    "Sello Discográfico": "RecordLabel",
    "Artista Invitado": "FeaturedArtist",
    "Otro": "Contributor",
}

EXPLICIT_STATUS_TO_DDEX: dict[str, str] = {
    "explicit": "Explicit",
    "clean": "NotExplicit",
    "edited": "Edited",
    "unspecified": "Unknown",
}

# Ordered (keyword, VersionType) pairs; order decides multi-keyword labels.
MIX_VERSION_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("remix", "Remix"),
    ("acoustic", "Acoustic"),
    ("live", "Live"),
    ("instrumental", "Instrumental"),
    ("acapella", "Acapella"),
    ("extended", "Extended"),
    ("radio", "RadioEdit"),
    ("demo", "Demo"),
)

# Source release-type labels that differ from their DDEX spelling.
RELEASE_TYPE_TO_DDEX: dict[str, str] = {
    "Sencillo": "Single",
}
DEFAULT_RELEASE_TYPE = "Album"


# ---------------------------------------------------------------------------
# Vocabulary lookups
# ---------------------------------------------------------------------------

def map_role(role: str | None) -> str:
    """Translate a catalogue role name to a DDEX role (exact match only)."""
    mapped = ROLE_TO_DDEX.get(role or "")
    if mapped is None:
        if role:
            _logger.debug("unmapped_role", role=role, fallback=DEFAULT_ROLE)
        return DEFAULT_ROLE
    return mapped


def map_explicit_status(status: str | None) -> str | None:
    """Translate an explicit-content flag to a ParentalWarningType, if known."""
    if not status:
        return None
    return EXPLICIT_STATUS_TO_DDEX.get(status.strip().lower())


def map_mix_version(label: str | None) -> str | None:
    """Return the VersionType of the first keyword contained in *label*."""
    if not label:
        return None
    lowered = label.lower()
    for keyword, version_type in MIX_VERSION_KEYWORDS:
        if keyword in lowered:
            return version_type
    return None


def map_release_type(release_type: str | None) -> str:
    """Translate the one non-DDEX release-type label; pass others through."""
    if not release_type:
        return DEFAULT_RELEASE_TYPE
    return RELEASE_TYPE_TO_DDEX.get(release_type, release_type)


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------

def _first_present(candidates: Iterable[str | None], fallback: str) -> str:
    for candidate in candidates:
        if candidate:
            return candidate
    return fallback


def resolve_artist_name(credit: ArtistCredit) -> str:
    """Display name of a credited artist: stage → legal → generic name."""
    return _first_present(
        (credit.stage_name, credit.artist_name, credit.name),
        UNKNOWN_ARTIST,
    )


def resolve_release_artist_name(release: Release) -> str:
    """Display name of the release's main artist.

    The nested account profile wins over the flat joined columns.
    """
    profile = release.main_artist
    nested = (
        (profile.stage_name, profile.artist_name, profile.name) if profile else ()
    )
    return _first_present(
        (*nested, release.stage_name, release.artist_name, release.user_name),
        UNKNOWN_ARTIST,
    )


def resolve_label_name(release: Release) -> str:
    """Name of the administrating label, else the independent-label default."""
    nested = release.label.name if release.label else None
    return _first_present(
        (nested, release.label_name, release.record_label),
        INDEPENDENT_LABEL,
    )


def resolve_cline_text(release: Release) -> str | None:
    """C-line text: the release's own line, else the label's."""
    nested = release.label.cline if release.label else None
    return release.cline or nested or None


def resolve_pline_text(release: Release) -> str | None:
    """P-line text: the release's own line, else the label's."""
    nested = release.label.pline if release.label else None
    return release.pline or nested or None
