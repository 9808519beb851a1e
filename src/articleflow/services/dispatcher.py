"""Error dispatch for the future and await based approaches."""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from articleflow.models import FailureKind
from articleflow.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_APPROACH = "UNKNOWN APPROACH"

ErrorHandler = Callable[[BaseException, str], None]


def _db_connection_error(cause: BaseException, approach: str) -> None:
    logger.error("DB CONNECTION ERROR", approach=approach, error=str(cause))


def _db_create_error(cause: BaseException, approach: str) -> None:
    logger.error("DB CREATE ARTICLE ERROR", approach=approach, error=str(cause))


def _file_system_error(cause: BaseException, approach: str) -> None:
    logger.error("FILE SYSTEM ERROR", approach=approach, error=str(cause))


ERROR_HANDLERS: Mapping[FailureKind, ErrorHandler] = MappingProxyType(
    {
        FailureKind.STORE_CONNECTION: _db_connection_error,
        FailureKind.STORE_CREATE: _db_create_error,
        FailureKind.FILE_SYSTEM: _file_system_error,
    }
)


def dispatch(
    failure: BaseException,
    approach: str = UNKNOWN_APPROACH,
    handlers: Mapping[FailureKind, ErrorHandler] = ERROR_HANDLERS,
) -> None:
    """Log a failure with the handler registered for its kind.

    Values without a known ``kind`` fall back to a generic line. This is the
    end of every error path: nothing is raised or returned.

    Args:
        failure: Usually a StageError; any exception is accepted.
        approach: Label of the approach that failed.
        handlers: Handler per failure kind.
    """
    kind = getattr(failure, "kind", None)
    try:
        handler = handlers.get(kind) if kind is not None else None
    except TypeError:
        # unhashable kind
        handler = None
    if handler is None:
        logger.error("UNIDENTIFIED ERROR", approach=approach, error=repr(failure))
        return
    handler(getattr(failure, "cause", failure), approach)
