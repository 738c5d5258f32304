"""
Console contact list.
Run: python -m contactlist (settings from env vars or a .env file in the current directory).
"""
import logging
import sys

from contactlist.cli import ContactListConsole
from contactlist.config import load_env_file, load_settings


def main() -> int:
    load_env_file()
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level_number,
        stream=sys.stderr,
    )
    return ContactListConsole(settings).run()


if __name__ == "__main__":
    sys.exit(main())
