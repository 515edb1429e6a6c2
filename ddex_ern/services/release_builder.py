"""ReleaseList construction: the single Release node of a message.

The ``ReleaseResourceReferenceList`` written here is the authoritative
resource ordering consumed downstream: every track's reference in input
order, then the cover image.  References are recomputed from ids with the
same helpers the Resource Builder uses, never read back from its output.
"""

from __future__ import annotations

from lxml import etree

from ddex_ern.models.release import Release, Track
from ddex_ern.services.resource_builder import (
    COVER_IMAGE_REFERENCE,
    has_cover_image,
    track_resource_reference,
)
from ddex_ern.services.vocabulary import (
    MAIN_ARTIST_ROLE,
    map_release_type,
    resolve_cline_text,
    resolve_label_name,
    resolve_pline_text,
    resolve_release_artist_name,
)
from ddex_ern.utils.dates import copyright_year, format_release_date
from ddex_ern.utils.xml_helpers import party_name, sub_element


def release_reference(release: Release) -> str:
    return f"R{release.id}"


def display_title(release: Release) -> str:
    """Version title, else alternate title."""
    return release.version_title or release.alt_title or ""


def resource_references(release: Release, tracks: list[Track]) -> list[str]:
    """Track references in input order, followed by the cover image's."""
    references = [track_resource_reference(track) for track in tracks]
    if has_cover_image(release):
        references.append(COVER_IMAGE_REFERENCE)
    return references


def _copyright_line(
    parent: etree._Element,
    tag: str,
    text: str | None,
    explicit_year: int | None,
    release_date: str | None,
) -> None:
    if not text:
        return
    line = sub_element(parent, tag)
    year = copyright_year(explicit_year, release_date)
    if year is not None:
        sub_element(line, "Year", year)
    sub_element(line, f"{tag}Text", text)


def build_release(
    parent: etree._Element,
    release: Release,
    tracks: list[Track],
    catalog_namespace: str | None = None,
) -> etree._Element:
    """Append the ``Release`` element describing *release* to *parent*.

    Parameters
    ----------
    parent:
        The ``ReleaseList`` element.
    release:
        Release snapshot.
    tracks:
        Tracks in release order.  Only the first track's genre is used.
    catalog_namespace:
        ``Namespace`` attribute for the proprietary catalog number,
        normally the sender's DPID.
    """
    node = sub_element(parent, "Release")
    sub_element(node, "ReleaseReference", release_reference(release))
    sub_element(node, "ReleaseType", map_release_type(release.release_type))

    icpn = sub_element(node, "ReleaseId")
    sub_element(icpn, "ICPN", release.upc or "")
    if release.catalog_number:
        catalog = sub_element(node, "ReleaseId")
        attributes = {"Namespace": catalog_namespace} if catalog_namespace else {}
        sub_element(catalog, "CatalogNumber", release.catalog_number, **attributes)

    title = display_title(release)
    sub_element(node, "DisplayTitleText", title)
    if release.alt_title and release.alt_title != title:
        alternative = sub_element(node, "AlternativeTitle")
        sub_element(alternative, "TitleText", release.alt_title)

    artist = party_name(node, "DisplayArtist", resolve_release_artist_name(release))
    artist.set("SequenceNumber", "1")
    sub_element(artist, "ArtistRole", MAIN_ARTIST_ROLE)

    party_name(node, "AdministratingRecordCompany", resolve_label_name(release))

    _copyright_line(
        node, "CLine", resolve_cline_text(release), release.cline_year, release.release_date
    )
    _copyright_line(
        node, "PLine", resolve_pline_text(release), release.pline_year, release.release_date
    )

    # Release genre is the first track's, not an aggregate.
    first = tracks[0] if tracks else None
    if first is not None and (first.genre or first.secondary_genre):
        genre = sub_element(node, "Genre")
        if first.genre:
            sub_element(genre, "GenreText", first.genre)
        if first.secondary_genre:
            sub_element(genre, "SubGenre", first.secondary_genre)

    sub_element(node, "ReleaseDate", format_release_date(release.release_date))

    reference_list = sub_element(node, "ReleaseResourceReferenceList")
    for reference in resource_references(release, tracks):
        sub_element(reference_list, "ReleaseResourceReference", reference)

    return node


def build_release_list(
    parent: etree._Element,
    release: Release,
    tracks: list[Track],
    catalog_namespace: str | None = None,
) -> etree._Element:
    """Append ``ReleaseList`` holding exactly one ``Release``."""
    release_list = sub_element(parent, "ReleaseList")
    build_release(release_list, release, tracks, catalog_namespace=catalog_namespace)
    return release_list
