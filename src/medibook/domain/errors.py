"""Domain errors raised by the roster store and its callers."""


class MedibookError(Exception):
    """Base class for roster errors."""


class PersonNotFound(MedibookError):
    """The target person is not in the roster."""

    def __init__(self, message: str = "Person not found in the roster.") -> None:
        super().__init__(message)


class DuplicatePerson(MedibookError):
    """The person would collide with another one already in the roster."""

    def __init__(self, message: str = "Operation would result in duplicate persons.") -> None:
        super().__init__(message)


class NullArgument(MedibookError, ValueError):
    """A required argument was None."""


def require_non_null(**arguments: object) -> None:
    """Raise NullArgument naming the first argument that is None."""
    for name, value in arguments.items():
        if value is None:
            raise NullArgument(f"{name} must not be None.")
