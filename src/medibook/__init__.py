"""
Medibook core: clean-architecture layout.

- domain: entities (Person, Appointment, Remark, Role). No outer dependencies.
- application: commands (RemarkCommand, ...), the Model port, CommandResult.
- infrastructure: adapters (InMemoryModel, PersonFactory, settings).
"""

from medibook.application import (
    AddAppointmentCommand,
    AddPersonCommand,
    Command,
    CommandException,
    CommandResult,
    DeletePersonCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    Model,
    RemarkCommand,
)
from medibook.domain import Appointment, Person, Remark, Role
from medibook.infrastructure import InMemoryModel, PersonFactory

__all__ = [
    "AddAppointmentCommand",
    "AddPersonCommand",
    "Appointment",
    "Command",
    "CommandException",
    "CommandResult",
    "DeletePersonCommand",
    "ExitCommand",
    "FindCommand",
    "InMemoryModel",
    "ListCommand",
    "Model",
    "Person",
    "PersonFactory",
    "Remark",
    "RemarkCommand",
    "Role",
]
