"""Spaced-repetition scheduling for review entries."""
