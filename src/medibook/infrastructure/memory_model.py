"""In-memory implementation of the Model port (no persistence)."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from medibook.application.ports import PersonPredicate
from medibook.domain import (
    Appointment,
    DuplicatePerson,
    Person,
    PersonNotFound,
    Role,
    find_by_id,
)
from medibook.domain.errors import require_non_null

logger = logging.getLogger(__name__)


class InMemoryModel:
    """Stores the roster in memory. Order preserved by insertion.
    The filtered view is recomputed after every mutation from the last predicate.
    """

    def __init__(
        self,
        persons: Sequence[Person] = (),
        *,
        user_prefs: Any = None,
        roster_file_path: Path | None = None,
    ) -> None:
        self._persons: list[Person] = list(persons)
        self._predicate: PersonPredicate | None = None
        self._filtered: list[Person] = list(self._persons)
        self._user_prefs = user_prefs
        self._roster_file_path = roster_file_path

    @property
    def user_prefs(self) -> Any:
        return self._user_prefs

    @property
    def roster_file_path(self) -> Path | None:
        return self._roster_file_path

    def _index_of(self, target: Person) -> int:
        for index, person in enumerate(self._persons):
            if person is target:
                return index
        raise PersonNotFound()

    def _refresh(self) -> None:
        if self._predicate is None:
            self._filtered = list(self._persons)
        else:
            self._filtered = [p for p in self._persons if self._predicate(p)]

    def add_person(self, person: Person) -> None:
        require_non_null(person=person)
        self._persons.append(person)
        self._refresh()
        logger.debug("Added %s #%s", person.role, person.id)

    def has_person(self, person: Person) -> bool:
        require_non_null(person=person)
        return any(stored.is_same_person(person) for stored in self._persons)

    def delete_person(self, target: Person) -> None:
        require_non_null(target=target)
        del self._persons[self._index_of(target)]
        self._refresh()
        logger.debug("Deleted %s #%s", target.role, target.id)

    def set_person(self, target: Person, edited_person: Person) -> None:
        require_non_null(target=target, edited_person=edited_person)
        index = self._index_of(target)
        if not target.is_same_person(edited_person) and any(
            stored is not target and stored.is_same_person(edited_person)
            for stored in self._persons
        ):
            raise DuplicatePerson()
        self._persons[index] = edited_person
        self._refresh()
        logger.debug("Replaced %s #%s", target.role, target.id)

    def get_person_list(self) -> list[Person]:
        return list(self._persons)

    def get_filtered_person_list(self) -> list[Person]:
        return list(self._filtered)

    def update_filtered_person_list(self, predicate: PersonPredicate | None = None) -> None:
        self._predicate = predicate
        self._refresh()

    def get_filtered_person_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        return find_by_id(persons, person_id)

    def get_filtered_patient_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        return find_by_id(persons, person_id, Role.PATIENT)

    def get_filtered_doctor_by_id(self, persons: Sequence[Person], person_id: int) -> Person | None:
        return find_by_id(persons, person_id, Role.DOCTOR)

    def add_appointment(
        self, time: datetime, patient: Person, doctor: Person, remark: str = ""
    ) -> tuple[Appointment, Appointment]:
        """Append one record to the doctor and one to the patient.

        Both records carry the same time, ids and remark but are separate
        list entries; a later edit or cancel has to touch both.
        """
        require_non_null(time=time, patient=patient, doctor=doctor)
        if not patient.is_patient:
            raise ValueError(f"{patient.name} is not a patient.")
        if not doctor.is_doctor:
            raise ValueError(f"{doctor.name} is not a doctor.")
        self._index_of(patient)
        self._index_of(doctor)
        remark = (remark or "").strip()
        doctor_copy = doctor.add_appointment(time, patient.id, doctor.id, remark)
        patient_copy = patient.add_appointment(time, patient.id, doctor.id, remark)
        self._refresh()
        logger.debug(
            "Appointment %s between patient #%s and doctor #%s",
            time.isoformat(),
            patient.id,
            doctor.id,
        )
        return doctor_copy, patient_copy
