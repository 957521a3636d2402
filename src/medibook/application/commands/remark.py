"""Set or clear the remark on a patient or doctor."""

import logging

from medibook.application.commands.base import Command, CommandException, lookup_person
from medibook.application.dto import CommandResult
from medibook.application.messages import (
    MESSAGE_ADD_REMARK_SUCCESS,
    MESSAGE_DELETE_REMARK_SUCCESS,
    MESSAGE_DUPLICATE_PERSON,
)
from medibook.application.ports import Model
from medibook.domain import DuplicatePerson, Person, Remark, Role
from medibook.domain.errors import require_non_null

logger = logging.getLogger(__name__)


class RemarkCommand(Command):
    """Replace the remark of the person with the given id. An empty remark deletes it."""

    def __init__(self, person_id: int, remark: Remark, role: Role = Role.PATIENT) -> None:
        require_non_null(remark=remark)
        self.person_id = person_id
        self.remark = remark
        self.role = role

    @classmethod
    def for_doctor(cls, person_id: int, remark: Remark) -> "RemarkCommand":
        return cls(person_id, remark, role=Role.DOCTOR)

    def execute(self, model: Model) -> CommandResult:
        person = lookup_person(model, self.person_id, self.role)
        edited = person.with_remark(self.remark)
        try:
            model.set_person(person, edited)
        except DuplicatePerson as exc:
            raise CommandException(MESSAGE_DUPLICATE_PERSON) from exc
        logger.info("Remark on %s #%s set to %r", self.role, self.person_id, self.remark.value)
        return CommandResult(self._success_message(edited))

    def _success_message(self, edited: Person) -> str:
        if self.remark.is_empty:
            return MESSAGE_DELETE_REMARK_SUCCESS.format(edited)
        return MESSAGE_ADD_REMARK_SUCCESS.format(edited)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemarkCommand):
            return NotImplemented
        return (self.person_id, self.remark, self.role) == (
            other.person_id,
            other.remark,
            other.role,
        )

    def __repr__(self) -> str:
        return f"RemarkCommand(person_id={self.person_id!r}, remark={self.remark!r}, role={self.role})"
