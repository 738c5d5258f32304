"""In-memory implementation of ContactRepository (no file)."""

from collections.abc import Sequence

from contactlist.application import StorageError
from contactlist.domain import Contact


class InMemoryContactRepository:
    """Keeps the last saved contact list in memory. Order preserved by insertion.
    Set fail_saves to make every save raise StorageError.
    """

    def __init__(self, contacts: Sequence[Contact] | None = None) -> None:
        self.location = "<memory>"
        self._saved: list[Contact] | None = list(contacts) if contacts is not None else None
        self.save_count = 0
        self.fail_saves = False

    def exists(self) -> bool:
        return self._saved is not None

    def load(self) -> list[Contact]:
        return list(self._saved or [])

    def save(self, contacts: Sequence[Contact]) -> None:
        if self.fail_saves:
            raise StorageError(self.location, "saving disabled")
        self._saved = list(contacts)
        self.save_count += 1
