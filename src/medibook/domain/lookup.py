"""Id lookup shared by every role-qualified query on the roster."""

from collections.abc import Iterable

from medibook.domain.entities import Person, Role


def find_by_id(
    persons: Iterable[Person], person_id: int, role: Role | None = None
) -> Person | None:
    """Return the first person with exactly this id (and role, if given), or None."""
    for person in persons:
        if person.id == person_id and (role is None or person.role is role):
            return person
    return None
