"""Application layer: use cases and ports. Depends only on domain."""

from persons.application.person_service import PersonService
from persons.application.ports import PersonRepository

__all__ = ["PersonRepository", "PersonService"]
