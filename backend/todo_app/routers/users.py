from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.database import get_db
from todo_app.handlers import queries
from todo_app.schemas.user import UserList

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
)

@router.get("", response_model=UserList)
async def get_users(db: AsyncSession = Depends(get_db)):
    return await queries.list_users(db)
