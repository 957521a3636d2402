"""Command contract: validate against the model, mutate once, report."""

import logging
from abc import ABC, abstractmethod

from medibook.application.dto import CommandResult
from medibook.application.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from medibook.application.ports import Model
from medibook.domain import Person, Role

logger = logging.getLogger(__name__)


class CommandException(Exception):
    """A command was rejected. The message is shown to the user as is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Command(ABC):
    """
    One validated unit of work against the roster.

    execute() does all lookups and checks before its single mutation, so a
    rejected command leaves the model untouched.
    """

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        ...


def lookup_person(model: Model, person_id: int, role: Role | None) -> Person:
    """Find person_id in the full roster, restricted to role when given.

    Raises CommandException with the invalid index message when nothing matches.
    """
    persons = model.get_person_list()
    if role is Role.PATIENT:
        person = model.get_filtered_patient_by_id(persons, person_id)
    elif role is Role.DOCTOR:
        person = model.get_filtered_doctor_by_id(persons, person_id)
    else:
        person = model.get_filtered_person_by_id(persons, person_id)
    if person is None:
        logger.info("No %s with id %s", role or "person", person_id)
        raise CommandException(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return person
