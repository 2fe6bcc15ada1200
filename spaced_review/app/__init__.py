"""Application bootstrap helpers for the Spaced Review project."""

from .runtime import run
from .settings import AppSettings

__all__ = ["run", "AppSettings"]
