"""Text and layout helpers for the dashboard."""

from esdash.constants.limits import (
    DRAWER_WIDTH_MIN,
    DRAWER_WIDTH_PERCENT,
    RESULT_ID_WIDTH_MAX,
    RESULT_ID_WIDTH_MIN,
)
from esdash.constants.values import TRUNCATION_SENTINEL


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Bound ``value`` to ``[minimum, maximum]``; ``minimum`` wins on conflict."""
    return max(minimum, min(value, maximum))


def truncate_string(value: str, max_len: int) -> str:
    """Cut ``value`` to ``max_len`` characters and append ``...`` when cut.

    The sentinel is appended after the kept characters, so the result of
    a cut string is ``max_len + 3`` characters long.
    """
    if len(value) <= max_len:
        return value
    return value[: max(max_len, 0)] + TRUNCATION_SENTINEL


def result_id_width(total_width: int) -> int:
    """Width of the results table id column for a given pane width."""
    return clamp(total_width // 3, RESULT_ID_WIDTH_MIN, RESULT_ID_WIDTH_MAX)


def drawer_width(total_width: int) -> int:
    """Document drawer width: 55% of the screen, at least 30 columns."""
    maximum = max(total_width - 2, DRAWER_WIDTH_MIN)
    return clamp(total_width * DRAWER_WIDTH_PERCENT // 100, DRAWER_WIDTH_MIN, maximum)
