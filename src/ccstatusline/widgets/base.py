"""Base widget interface for status line components."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..config.schema import WidgetConfigModel
from ..types import EditorDisplay, Keybind, RenderContext

# Editor modifier text per display mode; default modes have none
MODE_MODIFIERS = {
    "progress": "progress bar",
    "progress-short": "short bar",
    "bar-only": "bar only",
    "bar-label": "bar with label",
}


def format_modifiers(modifiers: list[str]) -> Optional[str]:
    """Join editor modifier tags as "(a, b)", or None when there are none."""
    return f"({', '.join(modifiers)})" if modifiers else None


class Widget(ABC):
    """Base widget interface - all widgets must implement this.

    Widget metadata (display_name, description, default_color) is set by the
    registry when the widget is registered.
    """

    display_name: str = ""
    description: str = ""
    default_color: str = "white"

    @abstractmethod
    def render(
        self, item: WidgetConfigModel, context: RenderContext, settings: Any
    ) -> Optional[str]:
        """Render widget content.

        Args:
            item: Widget configuration including colors and metadata
            context: Rendering context with data and metrics
            settings: Loaded status line settings

        Returns:
            Rendered string or None to hide widget
        """

    def get_editor_display(self, item: WidgetConfigModel) -> EditorDisplay:
        """Describe the item for the editor's widget list."""
        return EditorDisplay(display_text=self.display_name)

    def handle_editor_action(
        self, action: str, item: WidgetConfigModel
    ) -> Optional[WidgetConfigModel]:
        """Apply a named editor action, returning None when not handled."""
        return None

    def get_custom_keybinds(self) -> list[Keybind]:
        return []

    def supports_raw_value(self) -> bool:
        return False

    def supports_colors(self, item: WidgetConfigModel) -> bool:
        return True
