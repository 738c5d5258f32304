"""Domain entities: Contact."""

import re
from dataclasses import dataclass, field, replace

# Characters XML 1.0 cannot hold; a stored value containing one makes the file unreadable.
_NON_XML_CHARS = re.compile(
    "[^\t\n\r\x20-{}{}-{}{}-{}]".format(
        *map(chr, (0xD7FF, 0xE000, 0xFFFD, 0x10000, 0x10FFFF))
    )
)


def clean_text(value: str | None) -> str:
    """Trim value and drop characters that cannot be stored in an XML document."""
    return _NON_XML_CHARS.sub("", value or "").strip()


def same_text(a: str, b: str) -> bool:
    """Whole-field, case-insensitive equality."""
    return clean_text(a).casefold() == clean_text(b).casefold()


def _clean_entries(values, label: str) -> tuple[str, ...]:
    out = []
    for value in values or ():
        value = clean_text(value)
        if not value:
            raise ValueError(f"Contact {label} entries must be non-empty.")
        out.append(value)
    return tuple(out)


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact list: a name plus addresses and emails in the order added.
    A Contact is immutable; appending returns a new Contact.
    """

    name: str = field(default="")
    addresses: tuple[str, ...] = field(default=())
    emails: tuple[str, ...] = field(default=())

    def __post_init__(self):
        name = clean_text(self.name)
        if not name:
            raise ValueError("Contact name must be non-empty.")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "addresses", _clean_entries(self.addresses, "address"))
        object.__setattr__(self, "emails", _clean_entries(self.emails, "email"))

    def with_address(self, address: str) -> "Contact":
        return replace(self, addresses=self.addresses + (address,))

    def with_email(self, email: str) -> "Contact":
        return replace(self, emails=self.emails + (email,))

    def has_name(self, name: str) -> bool:
        return same_text(self.name, name)

    def matches(self, keyword: str) -> bool:
        """True if keyword equals the name, one address or one email (whole field, any case)."""
        if self.has_name(keyword):
            return True
        return any(same_text(value, keyword) for value in self.addresses + self.emails)
