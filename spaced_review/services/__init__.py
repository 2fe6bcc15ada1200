"""Application services built on the review core."""

from .review import ReviewSummary, review_entry, summarize_due_entries

__all__ = ["ReviewSummary", "review_entry", "summarize_due_entries"]
