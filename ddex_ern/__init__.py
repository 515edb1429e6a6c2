"""DDEX ERN 3.8.2 generator.

Turns a normalized release snapshot (release, tracks, artist credits)
into a ``NewReleaseMessage`` document for digital service providers.
"""

__version__ = "1.0.0"
