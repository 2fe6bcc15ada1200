"""Helpers for persisting review entries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spaced_review.review import Entry, EntryNotFoundError, Recall

from . import ReviewEntry


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps returned by backends such as SQLite."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_entry(record: ReviewEntry) -> Entry:
    return Entry(
        id=record.id,
        title=record.title,
        description=record.description,
        recall=Recall.parse(record.recall),
        category=record.category,
        interval=record.interval,
        review_date=_as_utc(record.review_date),
        last_review=_as_utc(record.last_review),
        created_at=_as_utc(record.created_at),
        updated_at=_as_utc(record.updated_at),
    )


def _copy_to_record(entry: Entry, record: ReviewEntry) -> None:
    record.title = entry.title
    record.description = entry.description
    record.category = entry.category
    record.recall = entry.recall.value
    record.interval = entry.interval
    record.review_date = entry.review_date
    record.last_review = entry.last_review
    record.created_at = entry.created_at
    record.updated_at = entry.updated_at


async def save_entry(session: AsyncSession, entry: Entry) -> Entry:
    """Insert a new entry or update the stored copy of an existing one.

    New entries (``id == 0``) receive the identifier assigned by the database.
    """
    if entry.id == 0:
        record = ReviewEntry()
        _copy_to_record(entry, record)
        session.add(record)
        await session.flush()
        entry.id = record.id
        return entry

    record = await session.get(ReviewEntry, entry.id)
    if record is None:
        raise EntryNotFoundError(entry.id)
    _copy_to_record(entry, record)
    await session.flush()
    return entry


async def get_entry(session: AsyncSession, entry_id: int) -> Optional[Entry]:
    """Return the stored entry with the given identifier, if present."""
    record = await session.get(ReviewEntry, entry_id)
    if record is None:
        return None
    return _to_entry(record)


async def list_due_entries(
    session: AsyncSession,
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> list[Entry]:
    """Return entries whose review date has passed, oldest first."""
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = _as_utc(now)

    stmt = (
        select(ReviewEntry)
        .where(ReviewEntry.review_date <= now)
        .order_by(ReviewEntry.review_date, ReviewEntry.id)
    )
    if limit:
        stmt = stmt.limit(limit)

    result = await session.execute(stmt)
    return [_to_entry(record) for record in result.scalars().all()]


async def delete_entry(session: AsyncSession, entry_id: int) -> bool:
    """Remove a stored entry. Returns ``False`` when nothing was deleted."""
    record = await session.get(ReviewEntry, entry_id)
    if record is None:
        return False
    await session.delete(record)
    await session.flush()
    return True
