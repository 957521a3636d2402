"""Add a person to the roster, or delete one by id."""

import logging

from medibook.application.commands.base import Command, CommandException, lookup_person
from medibook.application.dto import CommandResult
from medibook.application.messages import (
    MESSAGE_ADD_PERSON_SUCCESS,
    MESSAGE_DELETE_PERSON_SUCCESS,
    MESSAGE_DUPLICATE_PERSON,
)
from medibook.application.ports import Model
from medibook.domain import Person, Role
from medibook.domain.errors import require_non_null

logger = logging.getLogger(__name__)


class AddPersonCommand(Command):
    """Add an already-built patient or doctor, rejecting duplicates."""

    def __init__(self, person: Person) -> None:
        require_non_null(person=person)
        self.person = person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            logger.info("Rejected duplicate %s", self.person.name)
            raise CommandException(MESSAGE_DUPLICATE_PERSON)
        if model.get_filtered_person_by_id(model.get_person_list(), self.person.id) is not None:
            logger.info("Rejected person with taken id %s", self.person.id)
            raise CommandException(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        logger.info("Added %s #%s", self.person.role, self.person.id)
        return CommandResult(MESSAGE_ADD_PERSON_SUCCESS.format(self.person))


class DeletePersonCommand(Command):
    """Delete the person with the given id. role=None matches either role."""

    def __init__(self, person_id: int, role: Role | None = None) -> None:
        self.person_id = person_id
        self.role = role

    def execute(self, model: Model) -> CommandResult:
        person = lookup_person(model, self.person_id, self.role)
        model.delete_person(person)
        logger.info("Deleted %s #%s", person.role, person.id)
        return CommandResult(MESSAGE_DELETE_PERSON_SUCCESS.format(person))
