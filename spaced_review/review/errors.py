"""Validation errors raised by review entries."""

from typing import Optional


class EntryValidationError(ValueError):
    """Base class for invalid input supplied to an entry."""

    message = "invalid entry"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class TitleEmptyError(EntryValidationError):
    message = "title cannot be empty"


class TitleTooLongError(EntryValidationError):
    message = "title exceeds maximum length"


class DescriptionTooLongError(EntryValidationError):
    message = "description exceeds maximum length"


class CategoryEmptyError(EntryValidationError):
    message = "category cannot be empty"


class CategoryTooLongError(EntryValidationError):
    message = "category exceeds maximum length"


class InvalidRecallError(EntryValidationError):
    message = "invalid recall value"


class EntryNotFoundError(LookupError):
    """Raised when a stored entry cannot be located by its identifier."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"entry {entry_id} does not exist")
        self.entry_id = entry_id
