import math
import re

from ..core.config import settings

_TAG = re.compile(r"<[^>]*>")


def calculate_reading_time(content: str, words_per_minute: int | None = None) -> int:
    """Estimated minutes to read ``content``; at least 1 for non-empty content."""
    if not content:
        return 0
    words_per_minute = words_per_minute or settings.READING_WORDS_PER_MINUTE
    words = len(_TAG.sub("", content).split())
    return max(1, math.ceil(words / words_per_minute))


def format_reading_time(minutes: int) -> str:
    return f"{minutes} min read"
