from dataclasses import dataclass

from flashdeck.core.errors import UnauthorizedError


@dataclass(frozen=True)
class Caller:
    """Authenticated identity handed to every action explicitly."""

    user_id: str


def require_caller(caller: Caller | None) -> str:
    if caller is None or not caller.user_id:
        raise UnauthorizedError()
    return caller.user_id
