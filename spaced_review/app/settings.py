"""Configuration helpers for the Spaced Review runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_DUE_REPORT_LIMIT = 20
MAX_DUE_REPORT_LIMIT = 500


@dataclass(frozen=True)
class AppSettings:
    """Strongly typed application settings loaded from environment variables."""

    app_name: str
    app_env: str
    log_level: str
    due_report_limit: int

    @classmethod
    def from_env(cls) -> AppSettings:
        """Construct settings directly from environment variables."""
        app_name = os.getenv("APP_NAME", "Spaced Review")
        app_env = os.getenv("APP_ENV", "development")
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        try:
            due_report_limit = int(os.getenv("DUE_REPORT_LIMIT", str(DEFAULT_DUE_REPORT_LIMIT)))
        except ValueError as exc:
            raise RuntimeError("DUE_REPORT_LIMIT must be an integer.") from exc
        if due_report_limit < 1 or due_report_limit > MAX_DUE_REPORT_LIMIT:
            raise RuntimeError(f"DUE_REPORT_LIMIT must be between 1 and {MAX_DUE_REPORT_LIMIT}.")

        return cls(
            app_name=app_name,
            app_env=app_env,
            log_level=log_level,
            due_report_limit=due_report_limit,
        )
