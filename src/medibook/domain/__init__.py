"""Domain layer: entities and value objects. No dependencies on outer layers."""

from medibook.domain.entities import Appointment, Person, Remark, Role
from medibook.domain.errors import (
    DuplicatePerson,
    MedibookError,
    NullArgument,
    PersonNotFound,
)
from medibook.domain.lookup import find_by_id

__all__ = [
    "Appointment",
    "DuplicatePerson",
    "MedibookError",
    "NullArgument",
    "Person",
    "PersonNotFound",
    "Remark",
    "Role",
    "find_by_id",
]
