"""
Display helpers for computed grades.
"""

from typing import Optional

from gradebook.core.config import settings


def format_percentage(percentage: Optional[float]) -> str:
    if percentage is None:
        return settings.NOT_AVAILABLE_LABEL
    return f"{percentage:.{settings.DISPLAY_DECIMALS}f}%"
