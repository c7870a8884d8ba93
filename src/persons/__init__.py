"""
Persons core: clean-architecture layout.

- domain: entities (Person) and the color code table. No outer dependencies.
- application: use cases (PersonService), ports (PersonRepository).
- infrastructure: adapters (CsvPersonRepository, InMemoryPersonRepository).
"""

from persons.application import PersonRepository, PersonService
from persons.domain import Person, color_from_id
from persons.infrastructure import CsvPersonRepository, InMemoryPersonRepository

__all__ = [
    "CsvPersonRepository",
    "InMemoryPersonRepository",
    "Person",
    "PersonRepository",
    "PersonService",
    "color_from_id",
]
