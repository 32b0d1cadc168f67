import logging
import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.clock import Clock, IdFactory, new_task_id, utcnow
from todo_app.core.validation import (
    ensure_valid_task,
    normalize_description,
    normalize_title,
    parse_task_id,
)
from todo_app.handlers.base import command, get_active_task
from todo_app.models.task import Task
from todo_app.schemas.task import (
    TaskCompletionToggled,
    TaskCreated,
    TaskDeleted,
    TaskUpdated,
)

logger = logging.getLogger(__name__)

# TODO: concurrent toggle/update/delete on one task are last-write-wins; add a
# version column if the API ever needs to detect lost updates.


@command
async def create_task(
    db: AsyncSession,
    user_id: Optional[uuid.UUID],
    title: Optional[str],
    description: Optional[str] = None,
    *,
    clock: Clock = utcnow,
    id_factory: IdFactory = new_task_id,
) -> TaskCreated:
    title = normalize_title(title)
    description = normalize_description(description)
    ensure_valid_task(user_id, title, description)

    task = Task(
        id=str(id_factory()),
        user_id=str(user_id),
        title=title,
        description=description,
        created_at=clock(),
        completed_at=None,
        deleted_at=None,
    )
    db.add(task)
    await db.commit()
    await db.refresh(task)

    logger.debug("Task created id=%s user_id=%s", task.id, task.user_id)
    return TaskCreated.model_validate(task)


@command
async def update_task(
    db: AsyncSession,
    task_id: uuid.UUID,
    title: Optional[str],
    description: Optional[str] = None,
) -> TaskUpdated:
    task = await get_active_task(db, task_id)

    title = normalize_title(title)
    description = normalize_description(description)
    # Validate the candidate before touching the loaded row.
    ensure_valid_task(task.user_id, title, description)

    task.title = title
    task.description = description
    await db.commit()
    await db.refresh(task)

    return TaskUpdated.model_validate(task)


@command
async def toggle_task_completion(
    db: AsyncSession,
    task_id: uuid.UUID,
    *,
    clock: Clock = utcnow,
) -> TaskCompletionToggled:
    task = await get_active_task(db, task_id)

    if task.completed_at is None:
        task.completed_at = clock()
    else:
        task.completed_at = None

    await db.commit()
    await db.refresh(task)

    logger.debug("Task %s status=%s", task.id, task.status.value)
    return TaskCompletionToggled(task_id=task.id, completed_at=task.completed_at)


@command
async def delete_task(
    db: AsyncSession,
    raw_task_id: str,
    *,
    clock: Clock = utcnow,
) -> TaskDeleted:
    task_id = parse_task_id(raw_task_id)
    task = await get_active_task(db, task_id)

    task.deleted_at = clock()
    await db.commit()

    return TaskDeleted(id=str(task_id))
