"""Model name widget."""

from typing import Any, Optional

from ...config.schema import WidgetConfigModel
from ...types import RenderContext
from ..base import Widget
from ..registry import register_widget

PREVIEW_MODEL_NAME = "Claude"


@register_widget(
    "model",
    display_name="Model",
    default_color="cyan",
    description="Displays the Claude model name (e.g., Claude 3.5 Sonnet)",
)
class ModelWidget(Widget):
    """Display Claude model name."""

    def render(
        self, item: WidgetConfigModel, context: RenderContext, settings: Any
    ) -> Optional[str]:
        """Render model display name."""
        if context.is_preview:
            name: Optional[str] = PREVIEW_MODEL_NAME
        else:
            model = context.data.get("model")
            if not isinstance(model, dict):
                return None
            name = model.get("display_name") or model.get("id")

        if not name:
            return None

        return name if item.raw_value else f"Model: {name}"

    def supports_raw_value(self) -> bool:
        return True
