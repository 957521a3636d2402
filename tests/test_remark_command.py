"""Unit tests for RemarkCommand against stub models and the in-memory model."""

from datetime import datetime

import pytest

from medibook.application import CommandException, RemarkCommand
from medibook.application.messages import (
    MESSAGE_ADD_REMARK_SUCCESS,
    MESSAGE_DELETE_REMARK_SUCCESS,
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
)
from medibook.domain import DuplicatePerson, NullArgument, Person, PersonNotFound, Remark, Role, find_by_id
from medibook.infrastructure import InMemoryModel


def _patient(person_id: int = 1) -> Person:
    return Person(id=person_id, name="Alice Tan", role=Role.PATIENT, phone_number="+12025551234")


def _doctor(person_id: int = 2) -> Person:
    return Person(id=person_id, name="Bob Lim", role=Role.DOCTOR, phone_number="+12025555678")


class ModelStub:
    """Fails on anything the test did not expect to be called."""

    user_prefs = None
    roster_file_path = None

    def add_person(self, person):
        raise AssertionError("This method should not be called.")

    def has_person(self, person):
        raise AssertionError("This method should not be called.")

    def delete_person(self, target):
        raise AssertionError("This method should not be called.")

    def set_person(self, target, edited_person):
        raise AssertionError("This method should not be called.")

    def get_person_list(self):
        raise AssertionError("This method should not be called.")

    def get_filtered_person_list(self):
        raise AssertionError("This method should not be called.")

    def update_filtered_person_list(self, predicate=None):
        raise AssertionError("This method should not be called.")

    def get_filtered_person_by_id(self, persons, person_id):
        raise AssertionError("This method should not be called.")

    def get_filtered_patient_by_id(self, persons, person_id):
        raise AssertionError("This method should not be called.")

    def get_filtered_doctor_by_id(self, persons, person_id):
        raise AssertionError("This method should not be called.")

    def add_appointment(self, time, patient, doctor, remark=""):
        raise AssertionError("This method should not be called.")


class ModelStubAcceptingPersons(ModelStub):
    """Keeps persons in a plain list and supports only what RemarkCommand needs."""

    def __init__(self) -> None:
        self.persons: list[Person] = []

    def add_person(self, person):
        self.persons.append(person)

    def get_person_list(self):
        return list(self.persons)

    def get_filtered_patient_by_id(self, persons, person_id):
        return find_by_id(persons, person_id, Role.PATIENT)

    def get_filtered_doctor_by_id(self, persons, person_id):
        return find_by_id(persons, person_id, Role.DOCTOR)

    def set_person(self, target, edited_person):
        index = next((i for i, p in enumerate(self.persons) if p is target), -1)
        if index == -1:
            raise PersonNotFound()
        if not target.is_same_person(edited_person) and any(
            p is not target and p.is_same_person(edited_person) for p in self.persons
        ):
            raise DuplicatePerson()
        self.persons[index] = edited_person


def test_remark_on_missing_patient_raises_invalid_index() -> None:
    model = ModelStubAcceptingPersons()
    command = RemarkCommand(_patient().id, Remark("Headache"))
    with pytest.raises(CommandException) as exc:
        command.execute(model)
    assert str(exc.value) == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    assert exc.value.message == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    assert model.persons == []


def test_remark_added_to_patient() -> None:
    model = ModelStubAcceptingPersons()
    patient = _patient()
    model.add_person(patient)

    result = RemarkCommand(patient.id, Remark("Headache")).execute(model)

    expected_person = patient.with_remark(Remark("Headache"))
    assert result.feedback_to_user == MESSAGE_ADD_REMARK_SUCCESS.format(expected_person)
    assert model.persons[0].remark == Remark("Headache")
    assert not result.exit


def test_empty_remark_deletes_existing_remark() -> None:
    model = ModelStubAcceptingPersons()
    patient = _patient().with_remark(Remark("Headache"))
    model.add_person(patient)

    result = RemarkCommand(patient.id, Remark("")).execute(model)

    assert result.feedback_to_user == MESSAGE_DELETE_REMARK_SUCCESS.format(
        patient.with_remark(Remark(""))
    )
    assert model.persons[0].remark.is_empty


def test_empty_remark_on_person_without_remark_still_succeeds() -> None:
    model = ModelStubAcceptingPersons()
    patient = _patient()
    model.add_person(patient)
    result = RemarkCommand(patient.id, Remark("")).execute(model)
    assert result.feedback_to_user == MESSAGE_DELETE_REMARK_SUCCESS.format(patient)


def test_patient_remark_does_not_match_doctor_with_same_id() -> None:
    model = ModelStubAcceptingPersons()
    doctor = _doctor(person_id=1)
    model.add_person(doctor)
    with pytest.raises(CommandException):
        RemarkCommand(1, Remark("Headache")).execute(model)
    assert model.persons == [doctor]


def test_doctor_remark() -> None:
    model = ModelStubAcceptingPersons()
    doctor = _doctor()
    model.add_person(doctor)
    result = RemarkCommand.for_doctor(doctor.id, Remark("On leave Fridays")).execute(model)
    assert result.feedback_to_user == MESSAGE_ADD_REMARK_SUCCESS.format(
        doctor.with_remark(Remark("On leave Fridays"))
    )
    assert "Doctor #2" in result.feedback_to_user


def test_remark_keeps_appointments() -> None:
    model = InMemoryModel()
    patient, doctor = _patient(), _doctor()
    model.add_person(patient)
    model.add_person(doctor)
    model.add_appointment(datetime(2024, 12, 31, 12, 0), patient, doctor, "Follow-up check")

    RemarkCommand(patient.id, Remark("Headache")).execute(model)

    stored = model.get_filtered_patient_by_id(model.get_person_list(), patient.id)
    assert stored.remark == Remark("Headache")
    assert stored.appointments == patient.appointments


def test_add_then_delete_round_trip() -> None:
    model = InMemoryModel()
    patient = _patient()
    model.add_person(patient)

    added = RemarkCommand(1, Remark("Headache")).execute(model)
    assert added.feedback_to_user == MESSAGE_ADD_REMARK_SUCCESS.format(
        patient.with_remark(Remark("Headache"))
    )

    deleted = RemarkCommand(1, Remark("")).execute(model)
    assert deleted.feedback_to_user == MESSAGE_DELETE_REMARK_SUCCESS.format(patient)

    [stored] = model.get_person_list()
    assert stored.remark.is_empty
    assert stored == patient


def test_remark_on_empty_model_fails_and_leaves_it_empty() -> None:
    model = InMemoryModel()
    with pytest.raises(CommandException, match=MESSAGE_INVALID_PERSON_DISPLAYED_INDEX):
        RemarkCommand(1, Remark("Headache")).execute(model)
    assert model.get_person_list() == []


def test_duplicate_from_model_surfaces_as_command_exception() -> None:
    class CollidingModel(ModelStubAcceptingPersons):
        def set_person(self, target, edited_person):
            raise DuplicatePerson()

    model = CollidingModel()
    model.add_person(_patient())
    with pytest.raises(CommandException, match=MESSAGE_DUPLICATE_PERSON):
        RemarkCommand(1, Remark("Headache")).execute(model)


def test_none_remark_rejected() -> None:
    with pytest.raises(NullArgument):
        RemarkCommand(1, None)


def test_equality() -> None:
    command = RemarkCommand(1, Remark("Headache"))
    assert command == RemarkCommand(1, Remark("Headache"))
    assert command != RemarkCommand(2, Remark("Headache"))
    assert command != RemarkCommand(1, Remark("Fever"))
    assert command != RemarkCommand.for_doctor(1, Remark("Headache"))
    assert command != "remark"


def test_remark_succeeds_when_a_doctor_shares_name_and_phone() -> None:
    model = InMemoryModel()
    patient = _patient(1)
    twin_doctor = Person(id=2, name="Alice Tan", role=Role.DOCTOR, phone_number="+12025551234")
    model.add_person(patient)
    model.add_person(twin_doctor)

    result = RemarkCommand(1, Remark("Headache")).execute(model)

    assert result.feedback_to_user == MESSAGE_ADD_REMARK_SUCCESS.format(
        patient.with_remark(Remark("Headache"))
    )
    stored = model.get_filtered_patient_by_id(model.get_person_list(), 1)
    assert stored.remark == Remark("Headache")
