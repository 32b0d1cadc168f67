import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    return create_async_engine(url, echo=echo, connect_args=connect_args, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

Base = declarative_base()

async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(db_engine: AsyncEngine, seed_demo_data: bool = False) -> None:
    """Create the schema and optionally load demo users and tasks.

    Seeding only runs against an empty ``users`` table, so restarting with
    ``SEED_DEMO_DATA`` still set does not duplicate rows.
    """
    # Register the mapped classes on Base.metadata before create_all.
    from todo_app.models.task import Task  # noqa: F401
    from todo_app.models.user import User
    from .seed import seed_demo_data as _seed

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not seed_demo_data:
        return

    session_factory = sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        existing = await session.execute(select(User.id).limit(1))
        if existing.scalar_one_or_none() is not None:
            logger.info("Demo data skipped: users already present")
            return
        await _seed(session)
