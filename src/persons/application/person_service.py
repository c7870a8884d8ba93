"""List, lookup, color filter, and add. Assigns ids to added persons."""

import dataclasses
import logging
import threading

from persons.application.ports import PersonRepository
from persons.domain import Person

logger = logging.getLogger(__name__)


class PersonService:
    """Use cases behind the persons REST API."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository
        self._add_lock = threading.Lock()

    def list_persons(self) -> list[Person]:
        return self._repo.get_all()

    def get_person(self, person_id: int) -> Person | None:
        """Return a person by id, or None if not found."""
        return self._repo.get_by_id(person_id)

    def persons_by_color(self, color: str | None) -> list[Person]:
        return self._repo.get_by_color(color)

    def add_person(self, person: Person) -> Person:
        """Store a copy of person with id = highest known id + 1 (1 when empty).

        The incoming id is ignored. Returns the stored copy.
        """
        with self._add_lock:
            existing = self._repo.get_all()
            next_id = max((p.id for p in existing), default=0) + 1
            created = dataclasses.replace(person, id=next_id)
            self._repo.add(created)
        logger.info("Added person %s (%s %s)", created.id, created.name, created.lastname)
        return created
