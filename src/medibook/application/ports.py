"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from medibook.domain import Appointment, Person

PersonPredicate = Callable[[Person], bool]


class Model(Protocol):
    """The roster of patients and doctors that commands read and mutate."""

    @property
    def user_prefs(self) -> Any:
        """Opaque user preferences; never inspected by commands."""
        ...

    @property
    def roster_file_path(self) -> Path | None:
        """Where the roster is persisted; opaque to commands."""
        ...

    def add_person(self, person: Person) -> None:
        """Append a person. Callers check has_person first."""
        ...

    def has_person(self, person: Person) -> bool:
        """Return True if a stored person is the same person as the argument."""
        ...

    def delete_person(self, target: Person) -> None:
        """Remove the stored person that is target. Raises PersonNotFound."""
        ...

    def set_person(self, target: Person, edited_person: Person) -> None:
        """Replace target in place. Raises PersonNotFound or DuplicatePerson."""
        ...

    def get_person_list(self) -> list[Person]:
        """Return the full roster in insertion order."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Return the current filtered view of the roster."""
        ...

    def update_filtered_person_list(self, predicate: PersonPredicate | None = None) -> None:
        """Recompute the filtered view; None shows everyone."""
        ...

    def get_filtered_person_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        ...

    def get_filtered_patient_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        ...

    def get_filtered_doctor_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        ...

    def add_appointment(
        self, time: datetime, patient: Person, doctor: Person, remark: str = ""
    ) -> tuple[Appointment, Appointment]:
        """Record the appointment on both sides. Returns (doctor copy, patient copy)."""
        ...
