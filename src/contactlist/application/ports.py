"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Sequence
from typing import Protocol

from contactlist.domain import Contact


class ContactRepository(Protocol):
    """Loads and saves the whole contact list as one document."""

    location: str

    def exists(self) -> bool:
        """Return True if a document is already stored at this location."""
        ...

    def load(self) -> list[Contact]:
        """Return all contacts in stored order. Raises LoadError or StorageError."""
        ...

    def save(self, contacts: Sequence[Contact]) -> None:
        """Replace the stored document with these contacts. Raises StorageError."""
        ...


class ContactFormatter(Protocol):
    """Renders contacts for display."""

    def format_contacts(self, contacts: Sequence[Contact]) -> str:
        """Render the whole document."""
        ...

    def format_contact(self, contact: Contact) -> str:
        """Render a single contact."""
        ...
