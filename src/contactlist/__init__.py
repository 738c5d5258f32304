"""
Contactlist core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactStore), ports (ContactRepository, ContactFormatter), errors.
- infrastructure: adapters (XmlContactRepository, InMemoryContactRepository, XmlContactFormatter).
"""

from contactlist.application import (
    ContactFormatter,
    ContactListError,
    ContactRepository,
    ContactStore,
    LoadError,
    StorageError,
)
from contactlist.domain import Contact
from contactlist.infrastructure import (
    InMemoryContactRepository,
    XmlContactFormatter,
    XmlContactRepository,
    format_xml,
    open_xml_contact_store,
)

__all__ = [
    "Contact",
    "ContactFormatter",
    "ContactListError",
    "ContactRepository",
    "ContactStore",
    "InMemoryContactRepository",
    "LoadError",
    "StorageError",
    "XmlContactFormatter",
    "XmlContactRepository",
    "format_xml",
    "open_xml_contact_store",
]
