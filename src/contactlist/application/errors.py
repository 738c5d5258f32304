"""Errors raised while opening or saving a contact list."""


class ContactListError(Exception):
    """Base class for contact list failures."""


class LoadError(ContactListError):
    """The backing file exists but is not a well-formed contact list document."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Cannot load contact list {location}: {reason}")
        self.location = location
        self.reason = reason


class StorageError(ContactListError):
    """The backing file could not be read or written."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Cannot access contact list {location}: {reason}")
        self.location = location
        self.reason = reason
