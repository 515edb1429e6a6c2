"""ERN generation services.

- **vocabulary** -- controlled-vocabulary tables and name precedence chains
- **resource_builder** -- SoundRecording and cover Image resources
- **release_builder** -- the Release node and its resource ordering
- **deal_builder** -- the static deal catalog
- **relationship_builder** -- track sequencing for multi-track releases
- **document_assembler** -- composes the above into one ERN message
- **release_validator** -- caller-side presence checks
"""

from ddex_ern.services.document_assembler import DocumentAssembler, generate_ern_xml
from ddex_ern.services.release_validator import validate_release_bundle

__all__ = [
    "DocumentAssembler",
    "generate_ern_xml",
    "validate_release_bundle",
]
