"""Formatting utilities for percentages and progress bars."""

import math

from decimal import ROUND_HALF_UP, Decimal

FILLED_CHAR = "█"
EMPTY_CHAR = "░"


def format_percentage(percentage: float, decimals: int = 1) -> str:
    """Format percentage with specified decimal places.

    Halves round up on the exact binary value of ``percentage``, so 26.25
    formats as "26.3" rather than the banker's "26.2".

    Args:
        percentage: Percentage value (0-100)
        decimals: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "67.5%")
    """
    quantum = Decimal(1).scaleb(-decimals)
    value = Decimal(percentage).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{value}%"


def _clamp(percentage: float) -> float:
    return max(0.0, min(100.0, percentage))


def _filled_width(percentage: float, bar_width: int) -> int:
    return math.floor((_clamp(percentage) / 100) * bar_width)


def render_progress_bar(
    percentage: float,
    bar_width: int,
    filled_char: str = FILLED_CHAR,
    empty_char: str = EMPTY_CHAR,
) -> str:
    """Render a fixed-width progress bar.

    Args:
        percentage: Progress percentage, clamped to 0-100
        bar_width: Number of glyphs in the bar
        filled_char: Character for filled segments
        empty_char: Character for empty segments

    Returns:
        Progress bar string (e.g., "███░░░░░░░░░░░░░")
    """
    filled = _filled_width(percentage, bar_width)
    empty = bar_width - filled
    return filled_char * filled + empty_char * empty


def render_progress_bar_with_label(percentage: float, bar_width: int) -> str:
    """Render a progress bar with the percentage centred in its larger segment.

    The label replaces the bar glyphs it covers. When filled and empty
    segments are the same length the label goes in the filled one. A label
    as wide as the bar (or wider) is returned alone, truncated to the bar.

    Args:
        percentage: Progress percentage, clamped to 0-100
        bar_width: Number of glyphs in the bar

    Returns:
        Labelled progress bar string (e.g., "███░░░░21.0%░░░░")
    """
    percentage = _clamp(percentage)
    label = format_percentage(percentage)

    if len(label) >= bar_width:
        return label[:bar_width]

    bar = render_progress_bar(percentage, bar_width)
    filled = _filled_width(percentage, bar_width)
    empty = bar_width - filled

    larger_start = 0 if filled >= empty else filled
    larger_length = max(filled, empty)

    offset = larger_start + (larger_length - len(label)) // 2
    offset = max(0, min(offset, bar_width - len(label)))

    return bar[:offset] + label + bar[offset + len(label) :]
