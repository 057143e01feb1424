from enum import Enum


class ErrorKind(str, Enum):
    unauthorized = "unauthorized"
    not_found = "not_found"
    validation = "validation"
    persistence = "persistence"


class ActionError(Exception):
    """
    Base for every failure an action can report.

    Actions never let these escape: they are caught at the action boundary
    and turned into a failed ActionResult.
    """

    kind: ErrorKind = ErrorKind.persistence

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnauthorizedError(ActionError):
    kind = ErrorKind.unauthorized

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(ActionError):
    # missing and not-owned share one message so ids can't be probed
    kind = ErrorKind.not_found

    @classmethod
    def deck(cls) -> "NotFoundError":
        return cls("Deck not found or access denied")

    @classmethod
    def card(cls) -> "NotFoundError":
        return cls("Card not found or access denied")


class InputValidationError(ActionError):
    kind = ErrorKind.validation

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = field_errors
        first = next(iter(field_errors.values()), "Invalid input")
        super().__init__(first)


class PersistenceError(ActionError):
    """The store failed; the message is the generic one of the action."""

    kind = ErrorKind.persistence

    def __init__(self, message: str, original_exception: Exception | None = None):
        super().__init__(message)
        self.original_exception = original_exception
