"""Track sequencing for multi-track releases.

The sequence numbers written here are the only source of track order for
multi-track releases, so iteration must mirror the Resource Builder's:
input list order, 1-based.
"""

from __future__ import annotations

from lxml import etree

from ddex_ern.models.release import Release, Track
from ddex_ern.services.release_builder import release_reference
from ddex_ern.services.resource_builder import track_resource_reference
from ddex_ern.utils.xml_helpers import sub_element


def needs_relationships(tracks: list[Track]) -> bool:
    return len(tracks) > 1


def build_relationships(
    parent: etree._Element,
    release: Release,
    tracks: list[Track],
) -> etree._Element | None:
    """Append ``ReleaseRelationships`` when the release has several tracks."""
    if not needs_relationships(tracks):
        return None

    relationships = sub_element(parent, "ReleaseRelationships")
    reference = release_reference(release)
    for sequence, track in enumerate(tracks, start=1):
        entry = sub_element(relationships, "ResourceRelatedResourceReference")
        sub_element(entry, "ResourceRelatedResourceReference", track_resource_reference(track))
        sub_element(entry, "ReleaseResourceReference", reference)
        sub_element(entry, "SequenceNumber", sequence)
    return relationships
