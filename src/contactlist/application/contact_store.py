"""Contact list use cases: add, append address/email, search, display. Saved after every change."""

import logging
from collections.abc import Callable

from contactlist.application.errors import StorageError
from contactlist.application.ports import ContactFormatter, ContactRepository
from contactlist.domain import Contact, clean_text

logger = logging.getLogger(__name__)

NO_NAME = "Cannot add a contact without a name."
NOT_FOUND_KEYWORD = "No contact containing this keyword can be found."
FOUND_HEADER = "The following contact(s) containing this keyword can be found:\n"


class ContactStore:
    """Owns the in-memory contact list and keeps its repository in sync.

    Names are not unique: name lookups return every match and updates apply to all of them.
    """

    def __init__(
        self,
        repository: ContactRepository,
        formatter: ContactFormatter,
        contacts: list[Contact] | None = None,
    ) -> None:
        self._repo = repository
        self._formatter = formatter
        self._contacts: list[Contact] = list(contacts or [])

    @classmethod
    def open(
        cls, repository: ContactRepository, formatter: ContactFormatter
    ) -> "ContactStore":
        """Load the stored list, or create and save an empty one.

        Raises LoadError if the stored document is malformed, StorageError on I/O failure.
        """
        if repository.exists():
            contacts = repository.load()
            logger.info(
                "Loaded %d contact(s) from %s", len(contacts), repository.location
            )
        else:
            contacts = []
            repository.save(contacts)
            logger.info("Created empty contact list at %s", repository.location)
        return cls(repository, formatter, contacts)

    @property
    def location(self) -> str:
        return self._repo.location

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __str__(self) -> str:
        return self._formatter.format_contacts(self._contacts)

    def add(self, name: str, address: str = "", email: str = "") -> str:
        """Append a new contact. Empty address/email are skipped."""
        if not clean_text(name):
            return NO_NAME
        address = clean_text(address)
        email = clean_text(email)
        contact = Contact(
            name=name,
            addresses=(address,) if address else (),
            emails=(email,) if email else (),
        )
        failure = self._commit(self._contacts + [contact])
        if failure:
            return failure
        logger.info("Added contact %s", contact.name)
        return f"Added contact {contact.name}."

    def add_address(self, name: str, address: str) -> str:
        """Append address to every contact named name."""
        return self._append_to_matches(name, "address", address, Contact.with_address)

    def add_email(self, name: str, email: str) -> str:
        """Append email to every contact named name."""
        return self._append_to_matches(name, "email", email, Contact.with_email)

    def find_by_name(self, name: str) -> list[Contact]:
        """Return contacts whose name equals name (case-insensitive, whole field)."""
        return [c for c in self._contacts if c.has_name(name)]

    def search(self, keyword: str) -> list[Contact]:
        """Return contacts whose name, one address or one email equals keyword (case-insensitive)."""
        return [c for c in self._contacts if c.matches(keyword)]

    def get_contact(self, keyword: str) -> str:
        """Return matching contacts pretty-printed, or a not-found message."""
        matches = self.search(keyword)
        if not matches:
            return NOT_FOUND_KEYWORD
        return FOUND_HEADER + "".join(
            self._formatter.format_contact(c) for c in matches
        )

    def _append_to_matches(
        self,
        name: str,
        label: str,
        value: str,
        append: Callable[[Contact, str], Contact],
    ) -> str:
        value = clean_text(value)
        if not value:
            return f"Cannot add an empty {label} to {name}."
        count = 0
        updated = []
        for contact in self._contacts:
            if contact.has_name(name):
                contact = append(contact, value)
                count += 1
            updated.append(contact)
        if count == 0:
            return (
                "No contact with such name can be found. "
                f"Cannot add {label} to {name}."
            )
        failure = self._commit(updated)
        if failure:
            return failure
        logger.info("Added %s to %d contact(s) named %s", label, count, name)
        return f"Added {label} {value} to {count} contact(s) named {name}."

    def _commit(self, contacts: list[Contact]) -> str | None:
        """Save contacts, then adopt them. On failure keep the old list and return a message."""
        try:
            self._repo.save(contacts)
        except StorageError as exc:
            logger.error("Save failed, change discarded: %s", exc)
            return (
                f"Could not save contact list to {self._repo.location}. "
                "No changes were made."
            )
        self._contacts = contacts
        return None
