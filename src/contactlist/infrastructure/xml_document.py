"""XML document codec for contact lists, plus the display pretty-printer.

Document shape (no attributes, element-only):
<contacts><contact><name>Alice </name><address>1 Main St </address><email>a@x.org </email></contact></contacts>

Every leaf's text is the value followed by one space. Files written by earlier
versions of the program depend on it, so it is kept on disk and removed on read.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence

from contactlist.domain import Contact

ROOT_TAG = "contacts"
CONTACT_TAG = "contact"
NAME_TAG = "name"
ADDRESS_TAG = "address"
EMAIL_TAG = "email"
LEAF_SUFFIX = " "
INDENT = "    "

_TOKEN_RE = re.compile(r"<[^>]*>|[^<]+")


class DocumentError(ValueError):
    """Well-formed XML that is not a contact list."""


def _leaf(parent: ET.Element, tag: str, value: str) -> None:
    ET.SubElement(parent, tag).text = value + LEAF_SUFFIX


def _leaf_text(element: ET.Element) -> str:
    return (element.text or "").strip()


def contact_to_element(contact: Contact) -> ET.Element:
    element = ET.Element(CONTACT_TAG)
    _leaf(element, NAME_TAG, contact.name)
    for address in contact.addresses:
        _leaf(element, ADDRESS_TAG, address)
    for email in contact.emails:
        _leaf(element, EMAIL_TAG, email)
    return element


def contacts_to_element(contacts: Sequence[Contact]) -> ET.Element:
    root = ET.Element(ROOT_TAG)
    root.extend(contact_to_element(c) for c in contacts)
    return root


def to_compact_xml(element: ET.Element) -> str:
    """Serialize without a declaration or whitespace between tags."""
    return ET.tostring(element, encoding="unicode")


def element_to_contact(element: ET.Element) -> Contact:
    name = element.find(NAME_TAG)
    if name is None or not _leaf_text(name):
        raise DocumentError(f"<{CONTACT_TAG}> without a <{NAME_TAG}>")
    # Blank leaves come from files where the optional field was skipped.
    addresses = [_leaf_text(e) for e in element.findall(ADDRESS_TAG)]
    emails = [_leaf_text(e) for e in element.findall(EMAIL_TAG)]
    return Contact(
        name=_leaf_text(name),
        addresses=tuple(a for a in addresses if a),
        emails=tuple(e for e in emails if e),
    )


def element_to_contacts(root: ET.Element) -> list[Contact]:
    if root.tag != ROOT_TAG:
        raise DocumentError(f"root element is <{root.tag}>, expected <{ROOT_TAG}>")
    return [element_to_contact(e) for e in root.findall(CONTACT_TAG)]


def parse_contacts(data: str | bytes) -> list[Contact]:
    """Parse a serialized document. Raises ET.ParseError or DocumentError."""
    return element_to_contacts(ET.fromstring(data))


def format_xml(xml: str, indent: str = INDENT) -> str:
    """Pretty-print compact XML: one tag per line, leaves kept on a single line.

    Output starts with a newline. Only handles element-only documents like the one above.
    """
    out = []
    depth = 0
    follows_open = False
    for match in _TOKEN_RE.finditer(xml):
        token = match.group()
        if token.startswith("</"):
            if not follows_open:
                depth = max(depth - 1, 0)
                out.append("\n" + indent * depth)
            out.append(token)
            follows_open = False
        elif token.startswith(("<?", "<!")):
            out.append(token)
        elif token.startswith("<"):
            if follows_open:
                depth += 1
            out.append("\n" + indent * depth + token)
            follows_open = not token.endswith("/>")
        else:
            out.append(token)
    return "".join(out)


class XmlContactFormatter:
    """Renders contacts as pretty-printed XML, matching what is stored on disk."""

    def __init__(self, indent: str = INDENT) -> None:
        self._indent = indent

    def format_contacts(self, contacts: Sequence[Contact]) -> str:
        return format_xml(to_compact_xml(contacts_to_element(contacts)), self._indent)

    def format_contact(self, contact: Contact) -> str:
        return format_xml(to_compact_xml(contact_to_element(contact)), self._indent)
