import functools
import logging
import time
import uuid
from typing import Awaitable, Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.exceptions import NotFoundError, TodoAppError
from todo_app.models.task import Task

logger = logging.getLogger("todo_app.handlers")

R = TypeVar("R")


def handler(kind: str) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Log start, duration and failure of a command or query handler.

    Caller-correctable errors are logged at WARNING; anything else gets a
    traceback. Exceptions are always re-raised unchanged.
    """

    def decorate(fn: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        name = fn.__name__

        @functools.wraps(fn)
        async def wrapper(*args, **kwargs) -> R:
            started = time.perf_counter()
            logger.info("Executing %s %s", kind, name)
            try:
                result = await fn(*args, **kwargs)
            except TodoAppError as exc:
                logger.warning(
                    "%s %s rejected after %.1fms: %s",
                    kind.capitalize(), name, (time.perf_counter() - started) * 1000, exc,
                )
                raise
            except Exception:
                logger.exception(
                    "Failed to execute %s %s after %.1fms",
                    kind, name, (time.perf_counter() - started) * 1000,
                )
                raise
            logger.info(
                "%s %s completed in %.1fms",
                kind.capitalize(), name, (time.perf_counter() - started) * 1000,
            )
            return result

        return wrapper

    return decorate


command = handler("command")
query = handler("query")


async def get_active_task(db: AsyncSession, task_id: uuid.UUID) -> Task:
    result = await db.execute(
        select(Task).where(Task.id == str(task_id), Task.deleted_at.is_(None))
    )
    task = result.scalar_one_or_none()
    if task is None:
        raise NotFoundError(f"Task with ID {task_id} not found")
    return task
