from typing import Iterable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from flashdeck.core.errors import InputValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# (field, pydantic error type) -> message shown to the user
MessageTable = Mapping[tuple[str, str], str]


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def flatten_errors(errors: Iterable[dict], messages: MessageTable | None = None) -> dict[str, str]:
    """
    Flatten pydantic error dicts into {field: message}.

    Only the first error per field is kept. Custom validators raise
    ValueError, their text is used as is instead of pydantic's
    "Value error, ..." wrapper.
    """
    messages = messages or {}
    flat: dict[str, str] = {}
    for err in errors:
        loc = tuple(err["loc"])
        field = _field_name(loc)
        if field in flat:
            continue

        top = str(loc[0]) if loc else field
        custom = messages.get((top, err["type"]))
        if custom is not None:
            flat[field] = custom
        elif err["type"] == "value_error" and "error" in err.get("ctx", {}):
            flat[field] = str(err["ctx"]["error"])
        else:
            flat[field] = err["msg"]
    return flat


def field_errors(exc: ValidationError, messages: MessageTable | None = None) -> dict[str, str]:
    return flatten_errors(exc.errors(), messages)


def parse_input(model: type[ModelT], data: dict, messages: MessageTable | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InputValidationError(field_errors(exc, messages)) from exc
