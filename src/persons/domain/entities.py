"""Domain entities: Person."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """
    A person record, either parsed from the CSV source or added at runtime.
    For file-backed persons the id is the 1-based line number in the source.
    A Person is immutable once created; copies are made with dataclasses.replace.
    """

    id: int = 0
    name: str = ""
    lastname: str = ""
    zipcode: str = ""
    city: str = ""
    color: str = ""
