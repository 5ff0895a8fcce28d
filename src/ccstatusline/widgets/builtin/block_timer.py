"""Session block timer widget."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from ...config.schema import WidgetConfigModel
from ...types import BlockMetrics, EditorDisplay, Keybind, RenderContext
from ...utils.debug import debug_log
from ...utils.formatting import (
    format_percentage,
    render_progress_bar,
    render_progress_bar_with_label,
)
from ..base import MODE_MODIFIERS, Widget, format_modifiers
from ..percentage import FULL_BAR_WIDTH, SHORT_BAR_WIDTH, next_mode, resolve_mode
from ..registry import register_widget

DISPLAY_MODES = ("time", "progress", "progress-short", "bar-only", "bar-label")

BLOCK_DURATION = timedelta(hours=5)

PREVIEW_PERCENTAGE = 73.9
PREVIEW_ELAPSED = "3hr 45m"


@dataclass(frozen=True)
class BlockProgress:
    """Elapsed time in the current block and its share of the 5 hours."""

    elapsed: timedelta
    percentage: float
    active: bool = True


NO_ACTIVE_BLOCK = BlockProgress(elapsed=timedelta(0), percentage=0.0, active=False)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def measure_block(block_metrics: Optional[BlockMetrics]) -> Optional[BlockProgress]:
    """Measure the active block.

    Returns NO_ACTIVE_BLOCK when there is no block, and None when the start
    time is not a usable timestamp. Naive start times are read as local time.
    """
    if block_metrics is None:
        return NO_ACTIVE_BLOCK

    if block_metrics.start_time is None:
        debug_log("Block timer has an unreadable start time")
        return None

    try:
        start = block_metrics.start_time
        if start.tzinfo is None:
            start = start.astimezone()
        elapsed = max(_now() - start, timedelta(0))
        progress = min(elapsed / BLOCK_DURATION, 1.0)
    except (AttributeError, TypeError, ValueError, OverflowError) as e:
        debug_log(f"Block timer failed for {block_metrics.start_time!r}: {e}")
        return None

    return BlockProgress(elapsed=elapsed, percentage=progress * 100)


def format_elapsed(elapsed: timedelta) -> str:
    """Format elapsed time as "2hr" or "2hr 15m"."""
    total_minutes = int(elapsed.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)

    if minutes == 0:
        return f"{hours}hr"
    return f"{hours}hr {minutes}m"


@register_widget(
    "block-timer",
    display_name="Block Timer",
    default_color="yellow",
    description="Shows elapsed time since beginning of current 5hr block",
)
class BlockTimerWidget(Widget):
    """Display time elapsed in the current 5-hour usage block."""

    def get_editor_display(self, item: WidgetConfigModel) -> EditorDisplay:
        mode = resolve_mode(item, DISPLAY_MODES)
        modifiers = [MODE_MODIFIERS[mode]] if mode in MODE_MODIFIERS else []
        return EditorDisplay(
            display_text=self.display_name,
            modifier_text=format_modifiers(modifiers),
        )

    def handle_editor_action(
        self, action: str, item: WidgetConfigModel
    ) -> Optional[WidgetConfigModel]:
        if action == "toggle-progress":
            mode = resolve_mode(item, DISPLAY_MODES)
            return item.with_metadata(display=next_mode(mode, DISPLAY_MODES))
        return None

    def render(
        self, item: WidgetConfigModel, context: RenderContext, settings: Any
    ) -> Optional[str]:
        """Render block progress as time, a bar, or both."""
        mode = resolve_mode(item, DISPLAY_MODES)

        if context.is_preview:
            return self._format(
                item,
                mode,
                PREVIEW_PERCENTAGE,
                format_percentage(PREVIEW_PERCENTAGE),
                PREVIEW_ELAPSED,
            )

        block = measure_block(context.block_metrics)
        if block is None:
            return None

        if not block.active:
            return self._format(item, mode, 0.0, "0%", "0hr 0m")

        return self._format(
            item,
            mode,
            block.percentage,
            format_percentage(block.percentage),
            format_elapsed(block.elapsed),
        )

    def _format(
        self,
        item: WidgetConfigModel,
        mode: str,
        percentage: float,
        percentage_text: str,
        elapsed_text: str,
    ) -> str:
        if mode == "bar-only":
            return f"[{render_progress_bar(percentage, SHORT_BAR_WIDTH)}]"
        if mode == "bar-label":
            return f"[{render_progress_bar_with_label(percentage, SHORT_BAR_WIDTH)}]"
        if mode in ("progress", "progress-short"):
            prefix = "" if item.raw_value else "Block "
            width = FULL_BAR_WIDTH if mode == "progress" else SHORT_BAR_WIDTH
            bar = render_progress_bar(percentage, width)
            return f"{prefix}[{bar}] {percentage_text}"

        return elapsed_text if item.raw_value else f"Block: {elapsed_text}"

    def get_custom_keybinds(self) -> list[Keybind]:
        return [Keybind(key="p", label="(p)rogress toggle", action="toggle-progress")]

    def supports_raw_value(self) -> bool:
        return True
