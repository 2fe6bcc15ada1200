"""Review-cycle orchestration on top of stored entries."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from spaced_review.db.entries import get_entry, list_due_entries, save_entry
from spaced_review.review import Entry, EntryNotFoundError, Recall


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReviewSummary:
    """Entries currently due for review, counted per category."""

    due_entries: list[Entry]
    by_category: dict[str, int]

    @property
    def total(self) -> int:
        return len(self.due_entries)


async def review_entry(
    session: AsyncSession,
    entry_id: int,
    recall: Union[Recall, float, int, str],
    now: Optional[datetime] = None,
) -> Entry:
    """Apply a user's rating to a stored entry and reschedule it.

    Rating and rescheduling share one timestamp. Invalid ratings propagate
    before anything is written.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    entry = await get_entry(session, entry_id)
    if entry is None:
        raise EntryNotFoundError(entry_id)

    previous_interval = entry.interval
    entry.update_recall(recall, now=now)
    entry.update_interval(now=now)
    await save_entry(session, entry)

    LOGGER.info(
        "Entry %s rated %s; interval %s -> %s days, next review at %s.",
        entry.id,
        entry.recall.label,
        previous_interval,
        entry.interval,
        entry.review_date.isoformat(),
    )
    return entry


async def summarize_due_entries(
    session: AsyncSession,
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> ReviewSummary:
    """Collect due entries and count them by category."""
    due_entries = await list_due_entries(session, now=now, limit=limit)
    counts = Counter(entry.category for entry in due_entries)
    return ReviewSummary(due_entries=due_entries, by_category=dict(counts))
