"""Unit tests for ContactStore. In-memory repo only; no files."""

from contactlist.application import ContactStore
from contactlist.domain import Contact
from contactlist.infrastructure import InMemoryContactRepository, XmlContactFormatter


def _store(repo: InMemoryContactRepository | None = None) -> ContactStore:
    return ContactStore.open(repo or InMemoryContactRepository(), XmlContactFormatter())


def test_open_empty_repository_saves_immediately() -> None:
    repo = InMemoryContactRepository()
    store = _store(repo)
    assert len(store) == 0
    assert repo.exists()
    assert repo.save_count == 1


def test_open_existing_repository_loads_in_order() -> None:
    repo = InMemoryContactRepository([Contact(name="Ann"), Contact(name="Ben")])
    store = _store(repo)
    assert [c.name for c in store.contacts] == ["Ann", "Ben"]
    assert repo.save_count == 0


def test_add_with_name_only() -> None:
    store = _store()
    assert store.add("A", "", "") == "Added contact A."

    result = store.get_contact("A")
    assert result == (
        "The following contact(s) containing this keyword can be found:\n"
        "\n<contact>\n    <name>A </name>\n</contact>"
    )
    assert "<address>" not in result
    assert "<email>" not in result


def test_add_keeps_optional_fields_and_saves() -> None:
    repo = InMemoryContactRepository()
    store = _store(repo)
    store.add("Alice", "1 Main St", "alice@example.org")

    saved = repo.load()
    assert saved == [
        Contact(name="Alice", addresses=("1 Main St",), emails=("alice@example.org",))
    ]


def test_duplicate_names_allowed() -> None:
    store = _store()
    store.add("Bob", "", "")
    store.add("Bob", "", "")
    assert len(store) == 2
    assert len(store.find_by_name("bob")) == 2


def test_add_address_updates_every_match() -> None:
    store = _store()
    store.add("Bob", "", "")
    store.add("Carol", "", "")
    store.add("Bob", "", "")

    result = store.add_address("Bob", "1 Main St")
    assert result == "Added address 1 Main St to 2 contact(s) named Bob."
    assert [c.addresses for c in store.contacts] == [("1 Main St",), (), ("1 Main St",)]


def test_add_email_name_match_is_case_insensitive() -> None:
    store = _store()
    store.add("Dana Lee", "", "")
    assert store.add_email("dana lee", "d@x.org") == (
        "Added email d@x.org to 1 contact(s) named dana lee."
    )
    assert store.contacts[0].emails == ("d@x.org",)


def test_add_address_not_found_saves_nothing() -> None:
    repo = InMemoryContactRepository()
    store = _store(repo)
    result = store.add_address("Nobody", "X")
    assert result == (
        "No contact with such name can be found. Cannot add address to Nobody."
    )
    assert repo.save_count == 1
    assert len(store) == 0


def test_add_email_not_found_message() -> None:
    store = _store()
    store.add("Eve", "", "")
    assert store.add_email("Ev", "e@x.org") == (
        "No contact with such name can be found. Cannot add email to Ev."
    )


def test_fields_are_independent() -> None:
    store = _store()
    store.add("Finn", "Old Rd", "f@x.org")
    store.add_email("Finn", "finn@y.org")
    assert store.contacts[0].addresses == ("Old Rd",)
    store.add_address("Finn", "New Rd")
    assert store.contacts[0].emails == ("f@x.org", "finn@y.org")
    assert store.contacts[0].addresses == ("Old Rd", "New Rd")


def test_search_is_whole_field_and_case_insensitive() -> None:
    store = _store()
    store.add("Alice Smith", "", "")
    assert len(store.search("alice smith")) == 1
    assert len(store.search("ALICE SMITH")) == 1
    assert store.search("Alice") == []
    assert store.get_contact("Alice") == "No contact containing this keyword can be found."


def test_search_matches_any_single_address_or_email() -> None:
    store = _store()
    store.add("Gus", "10 High St", "gus@x.org")
    store.add_address("Gus", "22 Low St")
    store.add("Hal", "", "hal@x.org")

    assert [c.name for c in store.search("22 low st")] == ["Gus"]
    assert [c.name for c in store.search("HAL@X.ORG")] == ["Hal"]
    assert store.search("10 High St 22 Low St") == []
    assert store.search("x.org") == []


def test_get_contact_lists_every_match_in_order() -> None:
    store = _store()
    store.add("Ivy", "", "shared@x.org")
    store.add("Jon", "", "")
    store.add("Kim", "", "shared@x.org")

    result = store.get_contact("shared@x.org")
    assert result.startswith("The following contact(s) containing this keyword can be found:\n")
    assert result.index("Ivy") < result.index("Kim")
    assert "Jon" not in result


def test_str_renders_whole_document() -> None:
    store = _store()
    assert str(store) == "\n<contacts />"
    store.add("Lou", "", "")
    assert str(store) == "\n<contacts>\n    <contact>\n        <name>Lou </name>\n    </contact>\n</contacts>"


def test_failed_save_is_reported_and_discarded() -> None:
    repo = InMemoryContactRepository()
    store = _store(repo)
    store.add("Mia", "", "")
    repo.fail_saves = True

    assert store.add("Ned", "", "") == (
        "Could not save contact list to <memory>. No changes were made."
    )
    assert store.add_address("Mia", "5 Side St").startswith("Could not save")
    assert [c.name for c in store.contacts] == ["Mia"]
    assert store.contacts[0].addresses == ()
    assert repo.load() == [Contact(name="Mia")]


def test_blank_values_are_reported_not_raised() -> None:
    repo = InMemoryContactRepository()
    store = _store(repo)
    store.add("Bob", "", "")

    assert store.add("   ", "x", "y") == "Cannot add a contact without a name."
    assert store.add_address("Bob", "   ") == "Cannot add an empty address to Bob."
    assert store.add_email("Nobody", "\x1b") == "Cannot add an empty email to Nobody."
    assert store.contacts == (Contact(name="Bob"),)
    assert repo.save_count == 2
