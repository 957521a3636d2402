"""Result types returned by commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user verbatim, plus flags for the outer layer."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
