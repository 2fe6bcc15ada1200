"""Review entries scheduled with fixed per-rating interval multipliers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from .errors import (
    CategoryEmptyError,
    CategoryTooLongError,
    DescriptionTooLongError,
    InvalidRecallError,
    TitleEmptyError,
    TitleTooLongError,
)


MAX_TITLE_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 4000
MAX_CATEGORY_LENGTH = 30
DEFAULT_CATEGORY = "None"
INTERVAL_LIMIT = 90


class Recall(enum.Enum):
    """How well the user remembered an entry during its last review.

    The value of each success rating doubles as the multiplier applied to the
    current interval when the next review is scheduled.
    """

    NOT_REVIEWED = -1.0
    FAILED = 0.0
    HARD = 1.2
    GOOD = 2.0
    EASY = 2.5

    @property
    def label(self) -> str:
        return _RECALL_LABELS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: Union["Recall", float, int, str]) -> "Recall":
        """Return the rating matching ``value`` or raise ``InvalidRecallError``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidRecallError()
        try:
            return cls(float(value))
        except (TypeError, ValueError):
            raise InvalidRecallError() from None


_RECALL_LABELS = {
    Recall.NOT_REVIEWED: "Not Reviewed",
    Recall.FAILED: "Forgotten",
    Recall.HARD: "Struggled",
    Recall.GOOD: "Remembered",
    Recall.EASY: "Mastered",
}


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _clean_title(title: str) -> str:
    title = title.strip()
    if not title:
        raise TitleEmptyError()
    if len(title) > MAX_TITLE_LENGTH:
        raise TitleTooLongError()
    return title


def _clean_description(description: str) -> str:
    description = description.strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise DescriptionTooLongError()
    return description


def _clean_category(category: str) -> str:
    category = category.strip()
    if not category:
        raise CategoryEmptyError()
    if len(category) > MAX_CATEGORY_LENGTH:
        raise CategoryTooLongError()
    return category


@dataclass(slots=True)
class Entry:
    """A topic to be reviewed along with its scheduling state.

    Entries are normally created through :func:`new_entry`; the dataclass
    constructor is used as-is when a persistence layer rebuilds a stored row.
    """

    title: str
    id: int = 0
    description: str = ""
    recall: Recall = Recall.NOT_REVIEWED
    category: str = DEFAULT_CATEGORY
    interval: int = 1
    review_date: Optional[datetime] = None
    last_review: Optional[datetime] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    def update_title(self, title: str, *, now: Optional[datetime] = None) -> None:
        """Replace the title after trimming and validating it."""
        self.title = _clean_title(title)
        self.updated_at = _utc(now)

    def update_description(self, description: str, *, now: Optional[datetime] = None) -> None:
        """Replace the description after trimming and validating it."""
        self.description = _clean_description(description)
        self.updated_at = _utc(now)

    def update_category(self, category: str, *, now: Optional[datetime] = None) -> None:
        """Replace the category after trimming and validating it."""
        self.category = _clean_category(category)
        self.updated_at = _utc(now)

    def update_recall(
        self,
        recall: Union[Recall, float, int, str],
        *,
        now: Optional[datetime] = None,
    ) -> None:
        """Record the user's rating for the review that just happened.

        The interval and review date are left alone; call
        :meth:`update_interval` afterwards to reschedule the entry.
        """
        rating = Recall.parse(recall)
        if rating is Recall.NOT_REVIEWED:
            raise InvalidRecallError()

        timestamp = _utc(now)
        self.recall = rating
        self.updated_at = timestamp
        self.last_review = timestamp

    def update_interval(self, *, now: Optional[datetime] = None) -> None:
        """Reschedule the entry from its current interval and recall rating.

        Each call multiplies whatever interval the entry currently holds, so
        it should run exactly once per :meth:`update_recall`.
        """
        interval = self._next_interval()
        if interval > INTERVAL_LIMIT:
            interval = INTERVAL_LIMIT

        timestamp = _utc(now)
        self.interval = interval
        self.review_date = timestamp + timedelta(days=interval)
        self.updated_at = timestamp

    def is_due(self, now: Optional[datetime] = None) -> bool:
        """Return whether the entry's review date has been reached."""
        if self.review_date is None:
            return True
        return _utc(self.review_date) <= _utc(now)

    def _next_interval(self) -> int:
        if not isinstance(self.recall, Recall):
            raise InvalidRecallError()
        if self.recall in (Recall.NOT_REVIEWED, Recall.FAILED):
            return 1
        # Rounded before flooring so float error never drops a whole day.
        return math.floor(round(self.interval * self.recall.value, 6))


def new_entry(
    title: str,
    description: Optional[str] = None,
    category: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> Entry:
    """Create a validated entry that is due one day from now.

    ``description`` and ``category`` are optional; ``None`` leaves the
    default in place. The first invalid field aborts construction.
    """
    title = _clean_title(title)
    timestamp = _utc(now)

    entry = Entry(
        id=0,
        title=title,
        description="",
        recall=Recall.NOT_REVIEWED,
        category=DEFAULT_CATEGORY,
        interval=1,
        review_date=timestamp + timedelta(days=1),
        last_review=None,
        created_at=timestamp,
        updated_at=None,
    )

    if description is not None:
        entry.description = _clean_description(description)
    if category is not None:
        entry.category = _clean_category(category)

    return entry
