"""In-memory implementation of PersonRepository (no file source)."""

import threading
from collections.abc import Iterable

from persons.domain import Person


def find_by_id(persons: Iterable[Person], person_id: int) -> Person | None:
    """Return the first person with the given id, or None."""
    for person in persons:
        if person.id == person_id:
            return person
    return None


def filter_by_color(persons: Iterable[Person], color: str | None) -> list[Person]:
    """Return persons whose color equals color, ignoring case. Empty for None or ""."""
    if not color:
        return []
    needle = color.casefold()
    return [p for p in persons if (p.color or "").casefold() == needle]


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion; nothing is ever removed.
    Safe to share across request threads: appends and snapshots are taken under a lock.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._lock = threading.Lock()
        self._persons: list[Person] = [p for p in persons if p is not None]

    def __len__(self) -> int:
        with self._lock:
            return len(self._persons)

    def add(self, person: Person | None) -> None:
        if person is None:
            return
        with self._lock:
            self._persons.append(person)

    def get_all(self) -> list[Person]:
        with self._lock:
            return list(self._persons)

    def get_by_id(self, person_id: int) -> Person | None:
        return find_by_id(self.get_all(), person_id)

    def get_by_color(self, color: str | None) -> list[Person]:
        return filter_by_color(self.get_all(), color)
