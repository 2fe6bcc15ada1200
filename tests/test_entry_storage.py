from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from spaced_review.db import ReviewEntry
from spaced_review.db.entries import delete_entry, get_entry, list_due_entries, save_entry
from spaced_review.review import EntryNotFoundError, InvalidRecallError, Recall, new_entry


@pytest.mark.asyncio
async def test_save_entry_assigns_id_and_round_trips(session_factory) -> None:
    now = datetime(2026, 2, 1, 9, 30, tzinfo=timezone.utc)
    entry = new_entry("Goroutines", description="lightweight threads", category="Go", now=now)

    async with session_factory() as session:
        async with session.begin():
            saved = await save_entry(session, entry)

    assert saved is entry
    assert entry.id > 0

    async with session_factory() as session:
        loaded = await get_entry(session, entry.id)

    assert loaded is not None
    assert loaded == entry
    assert loaded.recall is Recall.NOT_REVIEWED
    assert loaded.created_at.tzinfo == timezone.utc
    assert loaded.review_date == now + timedelta(days=1)
    assert loaded.last_review is None
    assert loaded.updated_at is None


@pytest.mark.asyncio
async def test_save_entry_updates_existing_row(session_factory) -> None:
    now = datetime(2026, 2, 1, tzinfo=timezone.utc)
    entry = new_entry("Select statement", now=now)

    async with session_factory() as session:
        async with session.begin():
            await save_entry(session, entry)

    entry.update_recall(Recall.EASY, now=now)
    entry.update_interval(now=now)
    entry.update_category("Go", now=now)

    async with session_factory() as session:
        async with session.begin():
            await save_entry(session, entry)

    async with session_factory() as session:
        loaded = await get_entry(session, entry.id)

    assert loaded is not None
    assert loaded.recall is Recall.EASY
    assert loaded.interval == 2
    assert loaded.category == "Go"
    assert loaded.last_review == now
    assert loaded.review_date == now + timedelta(days=2)


@pytest.mark.asyncio
async def test_save_entry_rejects_unknown_id(session_factory) -> None:
    entry = new_entry("Ghost")
    entry.id = 9999

    async with session_factory() as session:
        with pytest.raises(EntryNotFoundError):
            async with session.begin():
                await save_entry(session, entry)


@pytest.mark.asyncio
async def test_get_entry_returns_none_for_missing_id(session_factory) -> None:
    async with session_factory() as session:
        assert await get_entry(session, 404) is None


@pytest.mark.asyncio
async def test_get_entry_rejects_corrupted_recall(session_factory) -> None:
    now = datetime.now(timezone.utc)

    async with session_factory() as session:
        async with session.begin():
            record = ReviewEntry(
                title="Corrupted",
                recall=1.7,
                review_date=now,
                created_at=now,
            )
            session.add(record)
            await session.flush()
            record_id = record.id

    async with session_factory() as session:
        with pytest.raises(InvalidRecallError):
            await get_entry(session, record_id)


@pytest.mark.asyncio
async def test_list_due_entries_orders_by_review_date(session_factory) -> None:
    now = datetime(2026, 4, 10, 8, 0, tzinfo=timezone.utc)
    overdue = new_entry("Overdue", now=now - timedelta(days=3))
    due_today = new_entry("Due today", now=now - timedelta(days=1))
    future = new_entry("Future", now=now)

    async with session_factory() as session:
        async with session.begin():
            for entry in (future, due_today, overdue):
                await save_entry(session, entry)

        due = await list_due_entries(session, now=now)
        limited = await list_due_entries(session, now=now, limit=1)

    assert [entry.title for entry in due] == ["Overdue", "Due today"]
    assert [entry.title for entry in limited] == ["Overdue"]


@pytest.mark.asyncio
async def test_delete_entry(session_factory) -> None:
    entry = new_entry("Disposable")

    async with session_factory() as session:
        async with session.begin():
            await save_entry(session, entry)
        async with session.begin():
            assert await delete_entry(session, entry.id) is True
        async with session.begin():
            assert await delete_entry(session, entry.id) is False
        assert await get_entry(session, entry.id) is None
