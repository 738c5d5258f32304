"""Application layer: use cases, ports, errors and validation. Depends only on domain."""

from contactlist.application.contact_store import ContactStore
from contactlist.application.dto import Invalid, Valid
from contactlist.application.errors import ContactListError, LoadError, StorageError
from contactlist.application.ports import ContactFormatter, ContactRepository
from contactlist.application.validation import optional_text, parse_choice, require_text

__all__ = [
    "ContactFormatter",
    "ContactListError",
    "ContactRepository",
    "ContactStore",
    "Invalid",
    "LoadError",
    "StorageError",
    "Valid",
    "optional_text",
    "parse_choice",
    "require_text",
]
