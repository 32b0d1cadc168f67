from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from todo_app.models.task import TaskStatus


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# Requests. Lengths are checked by the handlers so every violation is reported together.

class TaskCreate(CamelModel):
    user_id: UUID
    title: str
    description: Optional[str] = None

class TaskUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None

# Results

class TaskCreated(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus
    created_at: datetime
    completed_at: Optional[datetime] = None

class TaskUpdated(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None

class TaskCompletionToggled(CamelModel):
    task_id: UUID
    completed_at: Optional[datetime] = None

class TaskDeleted(CamelModel):
    id: str

class TaskItem(CamelModel):
    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    status: TaskStatus
    created_at: datetime
    completed_at: Optional[datetime] = None

class TaskPage(CamelModel):
    items: List[TaskItem]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool

class TaskStatistics(CamelModel):
    pending_tasks: int
    completed_tasks: int
    total_tasks: int
