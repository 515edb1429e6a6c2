"""Small lxml helpers shared by the ERN builders.

Every builder appends children through :func:`sub_element` so that text
is always coerced to ``str`` and scrubbed of characters XML 1.0 cannot
represent (lxml refuses to serialize those).
"""

from __future__ import annotations

import re
from typing import Any

from lxml import etree

# Control characters other than tab, LF and CR are illegal in XML 1.0,
# as are lone surrogates and the U+FFFE / U+FFFF non-characters.
_XML_ILLEGAL_CHARS_RE = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


def xml_safe(value: Any) -> str:
    """Return *value* as text with XML-illegal characters removed."""
    return _XML_ILLEGAL_CHARS_RE.sub("", str(value))


def sub_element(
    parent: etree._Element,
    tag: str,
    text: Any = None,
    **attributes: str,
) -> etree._Element:
    """Append ``<tag>`` to *parent*, optionally with text and attributes."""
    element = etree.SubElement(parent, tag)
    for name, value in attributes.items():
        element.set(name, xml_safe(value))
    if text is not None:
        element.text = xml_safe(text)
    return element


def party_name(parent: etree._Element, tag: str, full_name: str) -> etree._Element:
    """Append ``<tag><PartyName><FullName>..</FullName></PartyName></tag>``."""
    element = sub_element(parent, tag)
    name = sub_element(element, "PartyName")
    sub_element(name, "FullName", full_name)
    return element


def serialize(root: etree._Element) -> str:
    """Serialize *root* to pretty-printed UTF-8 text with an XML declaration."""
    payload = etree.tostring(
        root,
        pretty_print=True,
        xml_declaration=True,
        encoding="UTF-8",
    )
    return payload.decode("utf-8")
