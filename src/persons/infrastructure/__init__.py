"""Infrastructure layer: concrete implementations of application ports."""

from persons.infrastructure.csv_repository import CsvPersonRepository, parse_line
from persons.infrastructure.memory_repository import InMemoryPersonRepository

__all__ = [
    "CsvPersonRepository",
    "InMemoryPersonRepository",
    "parse_line",
]
