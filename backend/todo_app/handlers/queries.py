import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.exceptions import ValidationError
from todo_app.core.pagination import paginate
from todo_app.core.validation import is_blank_id
from todo_app.handlers.base import query
from todo_app.models.task import Task
from todo_app.models.user import User
from todo_app.schemas.task import TaskPage, TaskStatistics
from todo_app.schemas.user import UserItem, UserList


def _active_tasks_for(user_id: uuid.UUID):
    return select(Task).where(Task.user_id == str(user_id), Task.deleted_at.is_(None))


@query
async def list_tasks(
    db: AsyncSession,
    user_id: uuid.UUID,
    page_number: int = 1,
    page_size: int = 10,
) -> TaskPage:
    """
    One page of a user's live tasks.

    Open tasks come first, newest created on top; completed tasks follow,
    most recently completed on top.
    """
    stmt = _active_tasks_for(user_id).order_by(
        Task.completed_at.is_not(None),
        func.coalesce(Task.completed_at, Task.created_at).desc(),
        Task.id,
    )
    page = await paginate(db, stmt, page_number, page_size)
    return TaskPage.model_validate(page)


@query
async def get_task_statistics(db: AsyncSession, user_id: Optional[uuid.UUID]) -> TaskStatistics:
    if is_blank_id(user_id):
        raise ValidationError.single("userId", "User ID is required")

    sub = _active_tasks_for(user_id).subquery()
    total, completed = (
        await db.execute(
            select(func.count(), func.count(sub.c.completed_at)).select_from(sub)
        )
    ).one()

    return TaskStatistics(
        pending_tasks=total - completed,
        completed_tasks=completed,
        total_tasks=total,
    )


@query
async def list_users(db: AsyncSession) -> UserList:
    result = await db.execute(select(User).order_by(User.name, User.id))
    return UserList(users=[UserItem.model_validate(u) for u in result.scalars().all()])
