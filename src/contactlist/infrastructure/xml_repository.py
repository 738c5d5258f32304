"""XML file implementation of ContactRepository. The whole document is rewritten on every save."""

import logging
import os
import tempfile
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

from contactlist.application import ContactStore, LoadError, StorageError
from contactlist.domain import Contact
from contactlist.infrastructure.xml_document import (
    DocumentError,
    XmlContactFormatter,
    contacts_to_element,
    element_to_contacts,
)

logger = logging.getLogger(__name__)


class XmlContactRepository:
    """Stores the contact list as one XML file at path."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self.location = str(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        try:
            return self._path.exists()
        except OSError as exc:
            raise StorageError(self.location, exc.strerror or str(exc)) from exc

    def load(self) -> list[Contact]:
        try:
            root = ET.parse(self._path).getroot()
        except ET.ParseError as exc:
            raise LoadError(self.location, str(exc)) from exc
        except OSError as exc:
            raise StorageError(self.location, exc.strerror or str(exc)) from exc
        try:
            contacts = element_to_contacts(root)
        except (DocumentError, ValueError) as exc:
            raise LoadError(self.location, str(exc)) from exc
        logger.debug("Read %d contact(s) from %s", len(contacts), self._path)
        return contacts

    def save(self, contacts: Sequence[Contact]) -> None:
        # Write a new temp file beside the target, then swap it in; a failed write leaves the list intact.
        tree = ET.ElementTree(contacts_to_element(contacts))
        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "wb") as fh:
                tree.write(fh, encoding="utf-8", xml_declaration=True)
            os.replace(tmp, self._path)
        except OSError as exc:
            if tmp is not None:
                try:
                    os.unlink(tmp)
                except OSError:
                    logger.debug("Could not remove temporary file %s", tmp)
            raise StorageError(self.location, exc.strerror or str(exc)) from exc
        logger.debug("Wrote %d contact(s) to %s", len(contacts), self._path)


def open_xml_contact_store(path: str | os.PathLike) -> ContactStore:
    """Open the contact list at path, creating an empty one if the file does not exist.

    Raises LoadError for a malformed file and StorageError if it cannot be read or created.
    """
    if not str(path).strip():
        raise StorageError(str(path), "empty file path")
    return ContactStore.open(XmlContactRepository(path), XmlContactFormatter())
