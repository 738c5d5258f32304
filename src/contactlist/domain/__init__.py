"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactlist.domain.entities import Contact, clean_text

__all__ = ["Contact", "clean_text"]
