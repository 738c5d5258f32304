"""Console menu: open a contact list, then add, search and display contacts until quit."""

import logging
from collections.abc import Callable

from contactlist.application import (
    ContactListError,
    ContactStore,
    Invalid,
    optional_text,
    parse_choice,
    require_text,
)
from contactlist.config import Settings
from contactlist.infrastructure import open_xml_contact_store

logger = logging.getLogger(__name__)

QUIT = "6"
MENU = (
    ("0", "add a contact"),
    ("1", "add an address to an existing contact"),
    ("2", "add an email to an existing contact"),
    ("3", "search for a keyword (name, address, or email)"),
    ("4", "display all contacts"),
    ("5", "select a new contact list"),
    (QUIT, "quit"),
)
CANNOT_OPEN = "Cannot create contact list. Enter a new filePath."


class ContactListConsole:
    """Reads commands line by line and prints the store's replies.

    read/write default to input/print; tests pass their own.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
        open_store: Callable[[str], ContactStore] = open_xml_contact_store,
    ) -> None:
        self._settings = settings or Settings()
        self._read = read
        self._write = write
        self._open_store = open_store
        self.store: ContactStore | None = None
        self._handlers = {
            "0": self.add,
            "1": self.add_address,
            "2": self.add_email,
            "3": self.search,
            "4": self.display,
            "5": self.select_contact_list,
        }

    def run(self) -> int:
        """Run until the user quits or input ends. Returns the exit status."""
        try:
            self.select_contact_list()
            self._write("")
            while self.perform_operation():
                pass
        except EOFError:
            logger.info("Input closed, exiting")
        return 0

    def select_contact_list(self) -> None:
        write = self._write
        write("Enter the relative or absolute file path of the contact list.")
        write('Example: "/home/user1/Downloads/file.xml" to create a file in the Downloads folder.')
        write('Example: "file.xml" to create a file in the current folder.')
        default = self._settings.default_file
        if default:
            write(f'Press enter to use "{default}".')
        while True:
            path = optional_text(self._read()) or default or ""
            try:
                self.store = self._open_store(path)
            except ContactListError as exc:
                logger.warning("%s", exc)
                write(CANNOT_OPEN)
                continue
            return

    def perform_operation(self) -> bool:
        """Show the menu and run one operation. Returns False when the user quits."""
        for key, label in MENU:
            self._write(f"Enter {key} to {label}.")
        while True:
            choice = parse_choice(self._read(), (key for key, _ in MENU))
            if isinstance(choice, Invalid):
                self._write(choice.reason)
                continue
            break
        if choice.value == QUIT:
            return False
        self._handlers[choice.value]()
        self._write("")
        return True

    def add(self) -> None:
        name = self._ask_required("Enter a name for the contact.")
        self._write("Enter an address for the contact. Press enter to skip.")
        address = optional_text(self._read())
        self._write("Enter an email for the contact. Press enter to skip.")
        email = optional_text(self._read())
        self._write(self.store.add(name, address, email))

    def add_address(self) -> None:
        name = self._ask_required("Enter the name of the contact.")
        address = self._ask_required("Enter the address.")
        self._write(self.store.add_address(name, address))

    def add_email(self) -> None:
        name = self._ask_required("Enter the name of the contact.")
        email = self._ask_required("Enter the email.")
        self._write(self.store.add_email(name, email))

    def search(self) -> None:
        keyword = self._ask_required("Enter the keyword to search for.")
        self._write(self.store.get_contact(keyword))

    def display(self) -> None:
        self._write(str(self.store))

    def _ask_required(self, message: str) -> str:
        while True:
            self._write(message)
            result = require_text(self._read())
            if isinstance(result, Invalid):
                self._write(result.reason)
                continue
            return result.value
