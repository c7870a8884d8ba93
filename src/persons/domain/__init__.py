"""Domain layer: entities and value lookups. No dependencies on outer layers."""

from persons.domain.colors import COLORS, UNKNOWN_COLOR, color_from_id
from persons.domain.entities import Person

__all__ = ["COLORS", "Person", "UNKNOWN_COLOR", "color_from_id"]
