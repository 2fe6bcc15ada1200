"""Bootstrap logic for the Spaced Review process."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from spaced_review.app.settings import AppSettings
from spaced_review.db import get_engine, get_session_factory, run_migrations_if_needed
from spaced_review.services import ReviewSummary, summarize_due_entries


LOGGER = logging.getLogger(__name__)


def _configure_logging(log_level: str) -> None:
    """Set up project-wide logging configuration."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        level=log_level,
    )


async def report_due_entries(
    session_factory: async_sessionmaker[AsyncSession],
    limit: int,
) -> ReviewSummary:
    """Log the entries that are currently waiting for a review."""
    async with session_factory() as session:
        summary = await summarize_due_entries(session, limit=limit)

    if not summary.total:
        LOGGER.info("No entries are due for review.")
        return summary

    LOGGER.info("%s entries are due for review.", summary.total)
    for category, count in sorted(summary.by_category.items()):
        LOGGER.info("  %s: %s", category, count)
    for entry in summary.due_entries:
        LOGGER.debug(
            "Due entry %s %r (%s) scheduled for %s.",
            entry.id,
            entry.title,
            entry.recall.label,
            entry.review_date.isoformat(),
        )
    return summary


async def _run(settings: AppSettings) -> None:
    try:
        await report_due_entries(get_session_factory(), settings.due_report_limit)
    finally:
        await get_engine().dispose()


def run(settings: AppSettings) -> None:
    """Prepare the database and report entries due for review."""
    _configure_logging(settings.log_level)
    LOGGER.info("%s is running in %s mode.", settings.app_name, settings.app_env)

    try:
        run_migrations_if_needed()
    except Exception:
        LOGGER.exception("Database migrations failed. Aborting startup.")
        raise

    asyncio.run(_run(settings))
