from typing import Any, Optional

from pydantic import BaseModel

from flashdeck.core.errors import ActionError, ErrorKind


class ActionResult(BaseModel):
    """
    Uniform outcome of a write action.

    Callers branch on ``success`` instead of catching exceptions.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    field_errors: Optional[dict[str, str]] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, kind: ErrorKind = ErrorKind.persistence,
             field_errors: dict[str, str] | None = None) -> "ActionResult":
        return cls(success=False, error=error, kind=kind, field_errors=field_errors)

    @classmethod
    def from_error(cls, exc: ActionError) -> "ActionResult":
        return cls.fail(exc.message, exc.kind, getattr(exc, "field_errors", None))
