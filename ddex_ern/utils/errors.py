"""Custom exception hierarchy for the ERN generator.

All application exceptions inherit from :class:`ErnGeneratorError`, which
carries an optional ``field_name`` so error handlers can report which input
field caused the failure (e.g. "date", "isrc", "sound_url").

The hierarchy is organized by layer:

    ErnGeneratorError  (base -- catch-all for any generator error)
    +-- MalformedInputError      (core: a required value cannot be interpreted)
    +-- ReleaseValidationError   (caller layer: required field missing)
    +-- DocumentAssemblyError    (core: XML tree could not be serialized)
    +-- ConfigurationError       (startup / invalid config)

The split between MalformedInputError and ReleaseValidationError mirrors
the split of responsibilities: the generation core only complains about
values it cannot use, while presence checks belong to whoever calls it.
"""

from __future__ import annotations

from typing import Any


class ErnGeneratorError(Exception):
    """Base exception for all ERN generator errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``field_name`` identifying the offending input field.  The ``__str__``
    method prefixes the field name in brackets for structured log output,
    e.g. ``[date] Release date has no leading year``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        field_name: str | None = None,
    ) -> None:
        self._message = message
        self._field_name = field_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def field_name(self) -> str | None:
        return self._field_name

    def __str__(self) -> str:
        if self._field_name:
            return f"[{self._field_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Generation core errors
# ---------------------------------------------------------------------------

class MalformedInputError(ErnGeneratorError):
    """Raised when a required value is present but cannot be interpreted.

    Example: a release date such as ``"soon"`` when its leading year is
    needed as the copyright-year fallback.  Distinct from a missing
    optional field, which never raises.
    """

    def __init__(
        self,
        message: str = "Malformed input value",
        field_name: str | None = None,
    ) -> None:
        super().__init__(message=message, field_name=field_name)


class DocumentAssemblyError(ErnGeneratorError):
    """Raised when the assembled XML tree cannot be serialized."""

    def __init__(
        self,
        message: str = "ERN document assembly failed",
        field_name: str | None = None,
    ) -> None:
        super().__init__(message=message, field_name=field_name)


# ---------------------------------------------------------------------------
# Caller-layer errors
# ---------------------------------------------------------------------------

class ReleaseValidationError(ErnGeneratorError):
    """Raised when a release payload lacks a business-required field.

    ``tracks`` lists the offending tracks (``{"id": ..., "name": ...}``)
    when the failure is per-track, so API clients can point at them.
    """

    def __init__(
        self,
        message: str = "Release payload is incomplete",
        field_name: str | None = None,
        tracks: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message=message, field_name=field_name)
        self._tracks = list(tracks or [])

    @property
    def tracks(self) -> list[dict[str, Any]]:
        return list(self._tracks)


class ConfigurationError(ErnGeneratorError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        field_name: str | None = None,
    ) -> None:
        super().__init__(message=message, field_name=field_name)
