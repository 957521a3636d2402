"""Application layer: commands, ports, and DTOs. Depends only on domain."""

from medibook.application.commands import (
    AddAppointmentCommand,
    AddPersonCommand,
    Command,
    CommandException,
    DeletePersonCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    NameContainsKeywords,
    RemarkCommand,
)
from medibook.application.dto import CommandResult
from medibook.application.ports import Model

__all__ = [
    "AddAppointmentCommand",
    "AddPersonCommand",
    "Command",
    "CommandException",
    "CommandResult",
    "DeletePersonCommand",
    "ExitCommand",
    "FindCommand",
    "ListCommand",
    "Model",
    "NameContainsKeywords",
    "RemarkCommand",
]
