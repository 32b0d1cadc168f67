from enum import Enum

from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from todo_app.core.database import Base

MAX_TITLE_LENGTH = 1024
MAX_DESCRIPTION_LENGTH = 4096


class TaskStatus(str, Enum):
    TODO = "TODO"
    COMPLETE = "COMPLETE"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(MAX_TITLE_LENGTH), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
    completed_at = Column(DateTime, nullable=True)  # set = completed
    deleted_at = Column(DateTime, nullable=True)  # set = soft-deleted, never cleared

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETE if self.completed_at is not None else TaskStatus.TODO
