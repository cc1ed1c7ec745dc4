"""Schema definitions for the weekly registry."""

from .weekly import WeeklyConfig, WeeklyRecord

__all__ = [
    "WeeklyConfig",
    "WeeklyRecord",
]
