# tests/test_task_queries.py

from __future__ import annotations

import random
import uuid

import pytest
from sqlalchemy import func, select

from todo_app.core.database import init_db
from todo_app.core.exceptions import ValidationError
from todo_app.core.pagination import MAX_PAGE_SIZE
from todo_app.core.seed import DEMO_USERS, seed_demo_data
from todo_app.core.validation import NIL_UUID
from todo_app.handlers.commands import create_task, delete_task, toggle_task_completion
from todo_app.handlers.queries import get_task_statistics, list_tasks, list_users
from todo_app.models.task import Task, TaskStatus


async def _create_many(db, user_id, count, clock):
    return [await create_task(db, user_id, f"Task {i}", clock=clock) for i in range(1, count + 1)]


async def test_empty_user_gets_an_empty_first_page(db, users) -> None:
    page = await list_tasks(db, uuid.uuid4())

    assert page.items == []
    assert (page.page_number, page.page_size, page.total_count, page.total_pages) == (1, 10, 0, 0)
    assert not page.has_previous_page
    assert not page.has_next_page


@pytest.mark.parametrize("requested", [3, 0, -1])
async def test_out_of_range_page_is_clamped(db, users, clock, requested) -> None:
    alice, _ = users
    await _create_many(db, alice, 2, clock)

    page = await list_tasks(db, alice, page_number=requested, page_size=10)

    assert page.page_number == 1
    assert len(page.items) == 2
    assert page.total_pages == 1


async def test_page_math(db, users, clock) -> None:
    alice, _ = users
    await _create_many(db, alice, 7, clock)

    sizes = []
    for number in (1, 2, 3):
        page = await list_tasks(db, alice, page_number=number, page_size=3)
        assert page.total_pages == 3
        assert page.total_count == 7
        sizes.append(len(page.items))
    assert sizes == [3, 3, 1]

    last = await list_tasks(db, alice, page_number=3, page_size=3)
    assert last.has_previous_page and not last.has_next_page

    by_five = await list_tasks(db, alice, page_number=1, page_size=5)
    assert by_five.total_pages == 2
    assert by_five.has_next_page


async def test_non_positive_page_size_is_rejected(db, users) -> None:
    alice, _ = users
    for size in (0, -5):
        with pytest.raises(ValidationError) as exc:
            await list_tasks(db, alice, page_size=size)
        assert "pageSize" in exc.value.by_field()


async def test_oversized_page_size_is_rejected(db, users) -> None:
    alice, _ = users
    for size in (MAX_PAGE_SIZE + 1, 2**63):
        with pytest.raises(ValidationError) as exc:
            await list_tasks(db, alice, page_size=size)
        assert exc.value.by_field() == {"pageSize": [f"Page size cannot exceed {MAX_PAGE_SIZE}"]}

    page = await list_tasks(db, alice, page_size=MAX_PAGE_SIZE)
    assert page.page_size == MAX_PAGE_SIZE


async def test_ordering_open_first_then_recently_completed(db, users, clock) -> None:
    alice, _ = users
    t1, t2, t3, t4 = await _create_many(db, alice, 4, clock)
    await toggle_task_completion(db, t3.id, clock=clock)
    await toggle_task_completion(db, t1.id, clock=clock)

    first = await list_tasks(db, alice, page_number=1, page_size=2)
    second = await list_tasks(db, alice, page_number=2, page_size=2)

    assert [t.id for t in first.items] == [t4.id, t2.id]
    assert [t.id for t in second.items] == [t1.id, t3.id]
    assert all(t.status is TaskStatus.TODO for t in first.items)
    assert all(t.status is TaskStatus.COMPLETE for t in second.items)


async def test_listing_is_scoped_to_owner(db, users, clock) -> None:
    alice, bob = users
    await _create_many(db, alice, 2, clock)
    await create_task(db, bob, "Bob's task", clock=clock)

    page = await list_tasks(db, bob)
    assert [t.title for t in page.items] == ["Bob's task"]
    assert page.items[0].user_id == bob


async def test_statistics_lifecycle(db, users) -> None:
    alice, _ = users

    created = await create_task(db, alice, "Lifecycle")
    stats = await get_task_statistics(db, alice)
    assert (stats.pending_tasks, stats.completed_tasks, stats.total_tasks) == (1, 0, 1)

    await toggle_task_completion(db, created.id)
    stats = await get_task_statistics(db, alice)
    assert (stats.pending_tasks, stats.completed_tasks, stats.total_tasks) == (0, 1, 1)

    await delete_task(db, str(created.id))
    stats = await get_task_statistics(db, alice)
    assert (stats.pending_tasks, stats.completed_tasks, stats.total_tasks) == (0, 0, 0)


async def test_statistics_totals_add_up(db, users, clock) -> None:
    alice, _ = users
    tasks = await _create_many(db, alice, 5, clock)
    for t in tasks[:2]:
        await toggle_task_completion(db, t.id, clock=clock)
    await delete_task(db, str(tasks[4].id))

    stats = await get_task_statistics(db, alice)
    assert stats.total_tasks == stats.pending_tasks + stats.completed_tasks == 4
    assert stats.completed_tasks == 2


async def test_statistics_unknown_user_is_zero(db, users) -> None:
    stats = await get_task_statistics(db, uuid.uuid4())
    assert (stats.pending_tasks, stats.completed_tasks, stats.total_tasks) == (0, 0, 0)


@pytest.mark.parametrize("user_id", [None, NIL_UUID])
async def test_statistics_require_user(db, user_id) -> None:
    with pytest.raises(ValidationError):
        await get_task_statistics(db, user_id)


async def test_list_users(db, users) -> None:
    result = await list_users(db)
    assert [(u.id, u.name) for u in result.users] == [
        (users[0], "Alice Example"),
        (users[1], "Bob Example"),
    ]


async def test_seed_demo_data_is_idempotent(engine, db) -> None:
    await init_db(engine, seed_demo_data=True)
    await init_db(engine, seed_demo_data=True)

    result = await list_users(db)
    assert sorted(str(u.id) for u in result.users) == sorted(uid for uid, _ in DEMO_USERS)

    total = (await db.execute(select(func.count()).select_from(Task))).scalar_one()
    assert total == 50


async def test_seeded_tasks_list_cleanly(db) -> None:
    await seed_demo_data(db, task_count=12, rng=random.Random(7))

    pages = 0
    seen = 0
    for uid, _ in DEMO_USERS:
        page = await list_tasks(db, uuid.UUID(uid), page_size=50)
        stats = await get_task_statistics(db, uuid.UUID(uid))
        assert page.total_count == stats.total_tasks
        seen += page.total_count
        pages += 1
    assert pages == 3
    assert seen == 12
