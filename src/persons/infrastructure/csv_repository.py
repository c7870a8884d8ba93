"""CSV-backed implementation of PersonRepository.

Source format, one person per line, no header:

    <lastname>, <firstname>, <zipcode> <city>, <color code>

The file is re-read on every call; runtime additions are kept in memory only
and are appended after the file records. The file itself is never written.
"""

import logging
import re
from pathlib import Path

from persons.domain import Person, color_from_id
from persons.infrastructure.memory_repository import (
    InMemoryPersonRepository,
    filter_by_color,
    find_by_id,
)

logger = logging.getLogger(__name__)

MIN_FIELDS = 4

# Signed 32-bit integer, ASCII digits only.
_COLOR_CODE_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_color_code(raw: str) -> int | None:
    if not _COLOR_CODE_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def parse_line(line: str, line_number: int) -> Person | None:
    """Parse one source line into a Person with id = line_number, or None if malformed."""
    parts = [part.strip() for part in line.split(",")]
    if len(parts) < MIN_FIELDS:
        return None

    color_id = _parse_color_code(parts[-1])
    if color_id is None:
        return None

    zip_city = parts[2].split(" ", 1)
    return Person(
        id=line_number,
        lastname=parts[0],
        name=parts[1],
        zipcode=zip_city[0],
        city=zip_city[1] if len(zip_city) > 1 else "",
        color=color_from_id(color_id),
    )


class CsvPersonRepository:
    """Reads persons from a CSV file on every call and keeps additions in memory.
    A missing file behaves like an empty one.
    """

    def __init__(self, csv_path: str | Path) -> None:
        self._path = Path(csv_path)
        self._added = InMemoryPersonRepository()

    @property
    def path(self) -> Path:
        return self._path

    def source_exists(self) -> bool:
        return self._path.is_file()

    def _read_file_persons(self) -> list[Person]:
        if not self.source_exists():
            return []
        persons = []
        # newline=None folds \r\n and \r into \n, matching line-based readers
        with self._path.open("r", encoding="utf-8-sig", errors="replace", newline=None) as f:
            for line_number, line in enumerate(f, start=1):
                person = parse_line(line.rstrip("\n"), line_number)
                if person is None:
                    logger.debug("Skipping malformed line %d in %s", line_number, self._path)
                    continue
                persons.append(person)
        return persons

    def get_all(self) -> list[Person]:
        return self._read_file_persons() + self._added.get_all()

    def get_by_id(self, person_id: int) -> Person | None:
        return find_by_id(self.get_all(), person_id)

    def get_by_color(self, color: str | None) -> list[Person]:
        if not color:
            return []
        return filter_by_color(self.get_all(), color)

    def add(self, person: Person | None) -> None:
        """Keep person in memory. The CSV file is not modified."""
        self._added.add(person)
