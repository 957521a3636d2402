"""Commands executed against the roster model."""

from medibook.application.commands.appointment import AddAppointmentCommand
from medibook.application.commands.base import Command, CommandException
from medibook.application.commands.listing import (
    ExitCommand,
    FindCommand,
    ListCommand,
    NameContainsKeywords,
)
from medibook.application.commands.person import AddPersonCommand, DeletePersonCommand
from medibook.application.commands.remark import RemarkCommand

__all__ = [
    "AddAppointmentCommand",
    "AddPersonCommand",
    "Command",
    "CommandException",
    "DeletePersonCommand",
    "ExitCommand",
    "FindCommand",
    "ListCommand",
    "NameContainsKeywords",
    "RemarkCommand",
]
