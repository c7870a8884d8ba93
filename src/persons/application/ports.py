"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from persons.domain import Person


class PersonRepository(Protocol):
    """Reads person records and stores runtime additions."""

    def get_all(self) -> list[Person]:
        """Return every person: source records in source order, then additions in insertion order."""
        ...

    def get_by_id(self, person_id: int) -> Person | None:
        """Return the first person with the given id, or None."""
        ...

    def get_by_color(self, color: str | None) -> list[Person]:
        """Return persons whose color matches (case-insensitive). Empty for None or ""."""
        ...

    def add(self, person: Person | None) -> None:
        """Store a person in memory. None is ignored."""
        ...
