from spaced_review.app import AppSettings, run

__all__ = ["main"]


def main() -> None:
    """Entry point for the application."""
    settings = AppSettings.from_env()
    run(settings)


if __name__ == "__main__":
    main()
