"""Shared behavior for widgets showing token usage as a percentage."""

from typing import Any, Callable, Optional

from ..config.schema import WidgetConfigModel
from ..types import ContextConfig, EditorDisplay, Keybind, RenderContext
from ..utils.formatting import (
    format_percentage,
    render_progress_bar,
    render_progress_bar_with_label,
)
from ..utils.models import get_context_config_for_render
from .base import MODE_MODIFIERS, Widget, format_modifiers

DISPLAY_MODES = ("text", "progress", "progress-short", "bar-only", "bar-label")
DEFAULT_MODE = "text"

FULL_BAR_WIDTH = 32
SHORT_BAR_WIDTH = 16


def next_mode(current: str, modes: tuple[str, ...]) -> str:
    """Advance a display mode through its cycle, wrapping at the end."""
    return modes[(modes.index(current) + 1) % len(modes)]


def resolve_mode(item: WidgetConfigModel, modes: tuple[str, ...]) -> str:
    """Read the item's display mode, falling back to the first mode."""
    mode = item.metadata.get("display")
    return mode if mode in modes else modes[0]


def is_inverse(item: WidgetConfigModel) -> bool:
    return item.metadata.get("inverse") == "true"


class PercentageWidget(Widget):
    """Used tokens as a share of a model-dependent denominator.

    Concrete widgets differ only in data: the label, the preview value and
    which context size is the denominator.
    """

    def __init__(
        self,
        label: str,
        preview_percentage: float,
        denominator: Callable[[ContextConfig], int],
    ) -> None:
        self.label = label
        self.preview_percentage = preview_percentage
        self.denominator = denominator

    def get_editor_display(self, item: WidgetConfigModel) -> EditorDisplay:
        modifiers = []
        if is_inverse(item):
            modifiers.append("remaining")

        mode = resolve_mode(item, DISPLAY_MODES)
        if mode in MODE_MODIFIERS:
            modifiers.append(MODE_MODIFIERS[mode])

        return EditorDisplay(
            display_text=self.display_name,
            modifier_text=format_modifiers(modifiers),
        )

    def handle_editor_action(
        self, action: str, item: WidgetConfigModel
    ) -> Optional[WidgetConfigModel]:
        if action == "toggle-inverse":
            return item.with_metadata(inverse=str(not is_inverse(item)).lower())
        if action == "toggle-progress":
            mode = resolve_mode(item, DISPLAY_MODES)
            return item.with_metadata(display=next_mode(mode, DISPLAY_MODES))
        return None

    def used_percentage(self, context: RenderContext) -> Optional[float]:
        """Percentage of the denominator in use, or None without token data."""
        if context.is_preview:
            return self.preview_percentage
        if context.token_metrics is None:
            return None

        denominator = self.denominator(get_context_config_for_render(context))
        used = (context.token_metrics.context_length / denominator) * 100
        return min(100.0, used)

    def render(
        self, item: WidgetConfigModel, context: RenderContext, settings: Any
    ) -> Optional[str]:
        used = self.used_percentage(context)
        if used is None:
            return None

        shown = 100 - used if is_inverse(item) else used
        return self.format_output(item, resolve_mode(item, DISPLAY_MODES), used, shown)

    def format_output(
        self, item: WidgetConfigModel, mode: str, used: float, shown: float
    ) -> str:
        """Format the widget text.

        The bar always fills by ``used``; ``shown`` is the number printed
        beside it, which is the remaining share when inverted.
        """
        if mode == "bar-only":
            return f"[{render_progress_bar(used, SHORT_BAR_WIDTH)}]"
        if mode == "bar-label":
            return f"[{render_progress_bar_with_label(used, SHORT_BAR_WIDTH)}]"
        if mode in ("progress", "progress-short"):
            prefix = "" if item.raw_value else f"{self.label} "
            width = FULL_BAR_WIDTH if mode == "progress" else SHORT_BAR_WIDTH
            bar = render_progress_bar(used, width)
            return f"{prefix}[{bar}] {format_percentage(shown)}"

        if item.raw_value:
            return format_percentage(shown)
        return f"{self.label}: {format_percentage(shown)}"

    def get_custom_keybinds(self) -> list[Keybind]:
        return [
            Keybind(key="l", label="(l)eft/remaining", action="toggle-inverse"),
            Keybind(key="p", label="(p)rogress toggle", action="toggle-progress"),
        ]

    def supports_raw_value(self) -> bool:
        return True
