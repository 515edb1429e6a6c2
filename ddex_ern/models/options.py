"""Document-level options for the ERN generator.

These are the few knobs that are not derived from release data: the
party identifiers written into the message header and which deal
catalog profile to emit.  Defaults reproduce the production values, so
``DocumentOptions()`` is always a valid configuration.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from ddex_ern.utils.identifiers import DEFAULT_PREFIX

ERN_NAMESPACE = "http://ddex.net/xml/ern/38"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
MESSAGE_SCHEMA_VERSION = "ern/382"
LANGUAGE_AND_SCRIPT_CODE = "en"

DEFAULT_SENDER_PARTY_ID = "DPID:PADPIDA2014071501Y"
DEFAULT_RECIPIENT_PARTY_ID = "DPID:PADPIDA2013011301U"
DEFAULT_RECIPIENT_PARTY_NAME = "Digital Service Provider"


class DealProfile(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Which slice of the static deal catalog to emit.

    FULL:    all five commercial-terms stanzas
    REDUCED: streaming + permanent download only
    """

    FULL = "full"
    REDUCED = "reduced"


class DocumentOptions(BaseModel):
    """Header and catalog settings applied to every generated document."""

    model_config = ConfigDict(frozen=True)

    sender_party_id: str = DEFAULT_SENDER_PARTY_ID
    recipient_party_id: str = DEFAULT_RECIPIENT_PARTY_ID
    recipient_party_name: str = DEFAULT_RECIPIENT_PARTY_NAME
    deal_profile: DealProfile = DealProfile.FULL
    message_id_prefix: str = DEFAULT_PREFIX
