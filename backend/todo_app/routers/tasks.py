from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.config import settings
from todo_app.core.database import get_db
from todo_app.core.validation import parse_task_id
from todo_app.handlers import commands, queries
from todo_app.schemas.task import (
    TaskCompletionToggled,
    TaskCreate,
    TaskCreated,
    TaskDeleted,
    TaskPage,
    TaskStatistics,
    TaskUpdate,
    TaskUpdated,
)

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    responses={404: {"description": "Not found"}},
)

@router.get("", response_model=TaskPage)
async def get_tasks(
    user_id: UUID = Query(..., alias="userId"),
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    db: AsyncSession = Depends(get_db),
):
    return await queries.list_tasks(db, user_id, page_number, page_size)

@router.post("", response_model=TaskCreated, status_code=status.HTTP_201_CREATED)
async def create_task(task_in: TaskCreate, db: AsyncSession = Depends(get_db)):
    return await commands.create_task(db, task_in.user_id, task_in.title, task_in.description)

@router.get("/statistics", response_model=TaskStatistics)
async def get_task_statistics(
    user_id: Optional[UUID] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    return await queries.get_task_statistics(db, user_id)

@router.put("/{task_id}", response_model=TaskUpdated)
async def update_task(task_id: str, task_in: TaskUpdate, db: AsyncSession = Depends(get_db)):
    """Replace title and description; completion state is left alone."""
    return await commands.update_task(
        db, parse_task_id(task_id), task_in.title, task_in.description
    )

@router.patch("/{task_id}/toggleCompletion", response_model=TaskCompletionToggled)
async def toggle_task_completion(task_id: str, db: AsyncSession = Depends(get_db)):
    return await commands.toggle_task_completion(db, parse_task_id(task_id))

@router.delete("/{task_id}", response_model=TaskDeleted)
async def delete_task(task_id: str, db: AsyncSession = Depends(get_db)):
    return await commands.delete_task(db, task_id)
