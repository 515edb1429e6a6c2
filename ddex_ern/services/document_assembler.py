"""ERN 3.8.2 document assembly.

Composes the builders into one ``NewReleaseMessage`` tree, in fixed
order, and serializes it:

    MessageHeader → ResourceList → ReleaseList → DealList
    → ReleaseRelationships (only for multi-track releases)

The assembler holds no business logic of its own.  Its only
non-deterministic input is the :class:`MessageIdGenerator`, which is
injected so tests can pin the clock and random source.
"""

from __future__ import annotations

from lxml import etree

from ddex_ern.models.options import (
    ERN_NAMESPACE,
    LANGUAGE_AND_SCRIPT_CODE,
    MESSAGE_SCHEMA_VERSION,
    XSI_NAMESPACE,
    DocumentOptions,
)
from ddex_ern.models.release import Release, ReleaseBundle
from ddex_ern.services.deal_builder import build_deal_list
from ddex_ern.services.relationship_builder import build_relationships
from ddex_ern.services.release_builder import build_release_list
from ddex_ern.services.resource_builder import build_resource_list
from ddex_ern.services.vocabulary import resolve_label_name
from ddex_ern.utils.errors import DocumentAssemblyError
from ddex_ern.utils.identifiers import MessageIdGenerator, MessageStamp
from ddex_ern.utils.logging import get_logger
from ddex_ern.utils.xml_helpers import serialize, sub_element

_ROOT_TAG = f"{{{ERN_NAMESPACE}}}NewReleaseMessage"
_NSMAP = {"ern": ERN_NAMESPACE, "xs": XSI_NAMESPACE}


class DocumentAssembler:
    """Builds and serializes ERN ``NewReleaseMessage`` documents.

    One instance can serve any number of releases; calls share no state
    beyond the injected options and id generator.
    """

    def __init__(
        self,
        options: DocumentOptions | None = None,
        id_generator: MessageIdGenerator | None = None,
    ) -> None:
        self._options = options or DocumentOptions()
        self._id_generator = id_generator or MessageIdGenerator(
            prefix=self._options.message_id_prefix
        )
        self._logger = get_logger(__name__)

    @property
    def options(self) -> DocumentOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_tree(self, bundle: ReleaseBundle) -> etree._Element:
        """Return the ``NewReleaseMessage`` root element for *bundle*."""
        tree, _ = self._build(bundle)
        return tree

    def generate(self, bundle: ReleaseBundle) -> str:
        """Generate the serialized ERN document for *bundle*.

        Parameters
        ----------
        bundle:
            The release and its tracks, in release order.

        Returns
        -------
        str
            UTF-8 XML text with an XML declaration and indentation.

        Raises
        ------
        MalformedInputError
            If a copyright year must fall back to an unparsable release date.
        DocumentAssemblyError
            If lxml cannot serialize the tree.
        """
        root, stamp = self._build(bundle)
        try:
            document = serialize(root)
        except (ValueError, etree.SerialisationError) as exc:
            raise DocumentAssemblyError(
                message=f"Could not serialize ERN for release {bundle.release.id}: {exc}",
            ) from exc

        self._logger.info(
            "ern_document_generated",
            release_id=bundle.release.id,
            track_count=len(bundle.tracks),
            message_id=stamp.message_id,
            size_bytes=len(document.encode("utf-8")),
        )
        return document

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build(self, bundle: ReleaseBundle) -> tuple[etree._Element, MessageStamp]:
        release = bundle.release
        tracks = list(bundle.tracks)
        stamp = self._id_generator.stamp()

        root = etree.Element(_ROOT_TAG, nsmap=_NSMAP)
        root.set("MessageSchemaVersionId", MESSAGE_SCHEMA_VERSION)
        root.set("LanguageAndScriptCode", LANGUAGE_AND_SCRIPT_CODE)

        self._build_header(root, release, stamp)
        build_resource_list(root, release, tracks)
        build_release_list(
            root, release, tracks, catalog_namespace=self._options.sender_party_id
        )
        build_deal_list(root, release, profile=self._options.deal_profile)
        build_relationships(root, release, tracks)
        return root, stamp

    def _build_header(
        self,
        root: etree._Element,
        release: Release,
        stamp: MessageStamp,
    ) -> etree._Element:
        header = sub_element(root, "MessageHeader")
        sub_element(header, "MessageThreadId", stamp.message_id)
        sub_element(header, "MessageId", stamp.message_id)
        sub_element(header, "MessageCreatedDateTime", stamp.created_at)

        _message_party(
            header, "MessageSender", self._options.sender_party_id, resolve_label_name(release)
        )
        _message_party(
            header,
            "MessageRecipient",
            self._options.recipient_party_id,
            self._options.recipient_party_name,
        )
        return header


def _message_party(
    parent: etree._Element, tag: str, party_id: str, full_name: str
) -> etree._Element:
    party = sub_element(parent, tag)
    sub_element(party, "PartyId", party_id)
    name = sub_element(party, "PartyName")
    sub_element(name, "FullName", full_name)
    return party


def generate_ern_xml(
    bundle: ReleaseBundle,
    options: DocumentOptions | None = None,
    id_generator: MessageIdGenerator | None = None,
) -> str:
    """One-shot convenience wrapper around :class:`DocumentAssembler`."""
    return DocumentAssembler(options=options, id_generator=id_generator).generate(bundle)
