"""Repository decorator for standardizing DB operations.

Wraps async repository methods with:
- Trace logging of start/finish with timing information
- Error logging classified by SQLAlchemy exception type

Errors are always re-raised; the unit of work decides what to roll back.
"""

import asyncio
from collections.abc import Callable, Coroutine
import functools
import time
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import (
    DatabaseError,
    IntegrityError,
    MultipleResultsFound,
    NoResultFound,
    OperationalError,
    SQLAlchemyError,
)

from trackvault.config import get_logger

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)

# Checked in order; the first matching class decides level and label
_ERROR_LEVELS: tuple[tuple[type[BaseException], str, str], ...] = (
    (NoResultFound, "DEBUG", "DB record not found"),
    (MultipleResultsFound, "WARNING", "Multiple results found"),
    (IntegrityError, "WARNING", "DB integrity error"),
    (OperationalError, "ERROR", "DB operational error"),
    (DatabaseError, "ERROR", "DB error"),
    (SQLAlchemyError, "ERROR", "SQLAlchemy error"),
)


def db_operation(operation_name: str | None = None):
    """Decorate repository methods with consistent logging and error handling.

    Args:
        operation_name: Optional name for the operation (defaults to function name)

    Example:
        @db_operation("find_track_by_id")
        async def find_track_by_id(self, track_id: int) -> TrackRecord | None:
            ...
    """

    def decorator(
        func: Callable[P, Coroutine[Any, Any, T]],
    ) -> Callable[P, Coroutine[Any, Any, T]]:
        func_name = operation_name or func.__name__

        if not asyncio.iscoroutinefunction(func):
            raise TypeError(
                f"db_operation can only be used with async functions, but {func_name} is not async",
            )

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            repo_name = args[0].__class__.__name__ if args else "Repository"
            context = _build_log_context(kwargs)
            start_time = time.perf_counter()

            logger.trace(
                f"DB operation starting: {repo_name}.{func_name}",
                operation=func_name,
                **context,
            )
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_failure(e, repo_name, func_name, start_time, context)
                raise

            logger.trace(
                f"DB operation completed: {repo_name}.{func_name}",
                operation=func_name,
                exec_time_ms=(time.perf_counter() - start_time) * 1000,
                **context,
            )
            return result

        return wrapper

    return decorator


def _log_failure(
    error: Exception,
    repo_name: str,
    func_name: str,
    start_time: float,
    context: dict[str, Any],
) -> None:
    exec_time = (time.perf_counter() - start_time) * 1000
    for error_class, level, label in _ERROR_LEVELS:
        if isinstance(error, error_class):
            logger.log(
                level,
                f"{label}: {repo_name}.{func_name}",
                operation=func_name,
                error=str(error),
                exec_time_ms=exec_time,
                **context,
            )
            return

    logger.exception(
        f"Unhandled exception in {repo_name}.{func_name}",
        operation=func_name,
        error=str(error),
        exec_time_ms=exec_time,
        **context,
    )


def _build_log_context(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Extract simple, loggable keyword arguments; ``*_id`` values take precedence."""
    id_params = {
        k: v
        for k, v in kwargs.items()
        if k.endswith("_id") and isinstance(v, int | str)
    }
    simple_params = {
        k: v
        for k, v in kwargs.items()
        if (
            not k.startswith("_")
            and isinstance(v, int | str | bool | float)
            and k not in id_params
        )
    }
    return {**simple_params, **id_params}
