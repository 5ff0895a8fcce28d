"""Separator widget for visual division."""

from typing import Any, Optional

from ...config.schema import WidgetConfigModel
from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget


@register_widget(
    "separator",
    display_name="Separator",
    default_color="dim",
    description="Visual divider between widgets",
)
class SeparatorWidget(Widget):
    """Visual separator between widgets."""

    def render(
        self, item: WidgetConfigModel, context: RenderContext, settings: Any
    ) -> Optional[str]:
        """Render separator from metadata or default."""
        separator = item.metadata.get("text", "|")
        return f" {separator} "
