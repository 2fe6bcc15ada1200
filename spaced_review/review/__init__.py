"""Review entries and their spaced-repetition scheduling."""

from .entry import (
    DEFAULT_CATEGORY,
    INTERVAL_LIMIT,
    MAX_CATEGORY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    Entry,
    Recall,
    new_entry,
)
from .errors import (
    CategoryEmptyError,
    CategoryTooLongError,
    DescriptionTooLongError,
    EntryNotFoundError,
    EntryValidationError,
    InvalidRecallError,
    TitleEmptyError,
    TitleTooLongError,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "INTERVAL_LIMIT",
    "MAX_CATEGORY_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_TITLE_LENGTH",
    "Entry",
    "Recall",
    "new_entry",
    "CategoryEmptyError",
    "CategoryTooLongError",
    "DescriptionTooLongError",
    "EntryNotFoundError",
    "EntryValidationError",
    "InvalidRecallError",
    "TitleEmptyError",
    "TitleTooLongError",
]
