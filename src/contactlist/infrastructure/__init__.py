"""Infrastructure layer: concrete implementations of application ports."""

from contactlist.infrastructure.memory_repository import InMemoryContactRepository
from contactlist.infrastructure.xml_document import XmlContactFormatter, format_xml
from contactlist.infrastructure.xml_repository import (
    XmlContactRepository,
    open_xml_contact_store,
)

__all__ = [
    "InMemoryContactRepository",
    "XmlContactFormatter",
    "XmlContactRepository",
    "format_xml",
    "open_xml_contact_store",
]
