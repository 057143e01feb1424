import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from flashdeck.core.errors import ActionError, PersistenceError
from flashdeck.schemas.results import ActionResult

logger = logging.getLogger(__name__)


def action(failure_message: str):
    """
    Turn an action body into a total function returning ActionResult.

    The wrapped function takes the db session first. Expected failures
    (ActionError) keep their message and kind; database errors roll the
    session back and, like everything else, are reported as
    ``failure_message``.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(db, *args, **kwargs) -> ActionResult:
            try:
                return func(db, *args, **kwargs)
            except ActionError as exc:
                logger.warning("%s: %s", failure_message, exc.message)
                return ActionResult.from_error(exc)
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception(failure_message)
                return ActionResult.from_error(PersistenceError(failure_message, exc))
            except Exception:
                logger.exception(failure_message)
                return ActionResult.from_error(PersistenceError(failure_message))

        return wrapper

    return decorator
