import logging
import random
import uuid
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.clock import utcnow
from todo_app.models.task import Task
from todo_app.models.user import User

logger = logging.getLogger(__name__)

DEMO_USERS = [
    ("c7d3d975-9b97-4c4f-9e0a-041e31fd60f5", "Avery Johnson"),
    ("d4e7d976-9c97-4c4f-9e0a-041e31fd60f6", "Morgan Lee"),
    ("e5f8d977-9d97-4c4f-9e0a-041e31fd60f7", "Riley Patel"),
]

DEMO_TASK_COUNT = 50

_WORDS = (
    "review draft budget report schedule call client invoice update backlog "
    "prepare slides book venue order supplies clean inbox plan sprint fix "
    "leaky faucet renew passport water plants call dentist pay rent"
).split()


def _sentence(rng: random.Random, min_words: int, max_words: int) -> str:
    words = rng.choices(_WORDS, k=rng.randint(min_words, max_words))
    return " ".join(words).capitalize() + "."


async def seed_demo_data(
    session: AsyncSession,
    task_count: int = DEMO_TASK_COUNT,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> None:
    """Insert the three demo users and ``task_count`` tasks spread across them.

    Roughly half of the tasks come out completed, with ``completed_at`` in the
    last ten days and ``created_at`` somewhere in the past year.
    """
    rng = rng or random.Random()
    now = now or utcnow()

    for user_id, name in DEMO_USERS:
        session.add(User(id=user_id, name=name))

    for _ in range(task_count):
        created_at = now - timedelta(seconds=rng.randint(60, 365 * 24 * 3600))
        completed_at = None
        if rng.random() < 0.5:
            completed_at = max(created_at, now - timedelta(seconds=rng.randint(60, 10 * 24 * 3600)))
        session.add(
            Task(
                id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                user_id=rng.choice(DEMO_USERS)[0],
                title=_sentence(rng, 3, 8),
                description=" ".join(_sentence(rng, 6, 14) for _ in range(3)),
                created_at=created_at,
                completed_at=completed_at,
            )
        )

    await session.commit()
    logger.info("Seeded demo data users=%s tasks=%s", len(DEMO_USERS), task_count)
