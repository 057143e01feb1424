from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flashdeck.core.errors import ErrorKind, InputValidationError
from flashdeck.schemas.results import ActionResult
from flashdeck.schemas.validation import flatten_errors
from flashdeck.services.revalidation import StaleViews

# 422 as a literal: the starlette constant was renamed
HTTP_422 = 422

STATUS_BY_KIND = {
    ErrorKind.unauthorized: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.validation: HTTP_422,
    ErrorKind.persistence: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

REVALIDATE_HEADER = "X-Revalidate"

# where FastAPI found the bad value, not part of the field name
_REQUEST_PARTS = {"body", "path", "query", "header", "cookie"}


def get_stale_views() -> StaleViews:
    return StaleViews()


def action_response(result: ActionResult, views: StaleViews | None = None,
                    success_status: int = status.HTTP_200_OK) -> JSONResponse:
    if result.success:
        status_code = success_status
    else:
        status_code = STATUS_BY_KIND.get(result.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = JSONResponse(
        content=result.model_dump(mode="json", exclude_none=True),
        status_code=status_code,
    )
    if views is not None and views.paths:
        response.headers[REVALIDATE_HEADER] = views.header_value()
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests get the same result body as a failed action."""
    errors = []
    for err in exc.errors():
        loc = tuple(err["loc"])
        if loc and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        errors.append({**err, "loc": loc})

    failure = InputValidationError(flatten_errors(errors))
    return action_response(ActionResult.from_error(failure))
