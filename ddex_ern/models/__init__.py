"""ERN generator domain models — re-exports all public model classes.

Other parts of the codebase import directly from ``ddex_ern.models``
instead of the individual submodules:
    - release.py — release snapshot consumed by the generator
    - options.py — document-level options and ERN constants
"""

from __future__ import annotations

from ddex_ern.models.options import (
    DealProfile,
    DocumentOptions,
)
from ddex_ern.models.release import (
    ArtistCredit,
    ArtistProfile,
    Label,
    Release,
    ReleaseBundle,
    Track,
)

__all__ = [
    "ArtistCredit",
    "ArtistProfile",
    "DealProfile",
    "DocumentOptions",
    "Label",
    "Release",
    "ReleaseBundle",
    "Track",
]
