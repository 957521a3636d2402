"""Read-only commands: find, list, exit."""

from medibook.application.commands.base import Command
from medibook.application.dto import CommandResult
from medibook.application.messages import (
    MESSAGE_EXIT_ACKNOWLEDGEMENT,
    MESSAGE_LIST_ALL_SUCCESS,
    MESSAGE_LIST_ROLE_SUCCESS,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
)
from medibook.application.ports import Model
from medibook.domain import Person, Role


class NameContainsKeywords:
    """Predicate: any keyword equals a whole word of the name, case-insensitive."""

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = [k.strip().casefold() for k in keywords if k and k.strip()]

    def __call__(self, person: Person) -> bool:
        words = person.name.casefold().split()
        return any(keyword in words for keyword in self.keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameContainsKeywords):
            return NotImplemented
        return self.keywords == other.keywords


class FindCommand(Command):
    """Show only persons whose name contains one of the keywords."""

    def __init__(self, keywords: list[str]) -> None:
        self.predicate = NameContainsKeywords(keywords)

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        count = len(model.get_filtered_person_list())
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))


class ListCommand(Command):
    """Show everyone, or only patients or only doctors."""

    def __init__(self, role: Role | None = None) -> None:
        self.role = role

    def execute(self, model: Model) -> CommandResult:
        if self.role is None:
            model.update_filtered_person_list(None)
            return CommandResult(MESSAGE_LIST_ALL_SUCCESS)
        role = self.role
        model.update_filtered_person_list(lambda p: p.role is role)
        return CommandResult(MESSAGE_LIST_ROLE_SUCCESS.format(str(role).lower()))


class ExitCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        return CommandResult(MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
