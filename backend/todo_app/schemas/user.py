from typing import List
from uuid import UUID

from todo_app.schemas.task import CamelModel


class UserItem(CamelModel):
    id: UUID
    name: str

class UserList(CamelModel):
    users: List[UserItem]
