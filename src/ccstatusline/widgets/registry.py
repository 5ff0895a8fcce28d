"""Widget registry for managing available widgets."""

from typing import Callable, Optional

from .base import Widget

# Global registry of widget type -> widget instance
_WIDGET_REGISTRY: dict[str, Widget] = {}


def add_widget(
    widget_type: str,
    widget: Widget,
    display_name: str = "",
    default_color: str = "white",
    description: str = "",
) -> Widget:
    """Register a widget instance under a type tag.

    Args:
        widget_type: Widget type identifier (e.g., "context-percentage")
        widget: Widget instance handling items of this type
        display_name: Human-readable name (defaults to formatted type)
        default_color: Default color when the item sets none
        description: Description of what the widget displays

    Returns:
        The registered widget
    """
    widget.display_name = display_name or widget_type.replace("-", " ").title()
    widget.default_color = default_color
    widget.description = description

    _WIDGET_REGISTRY[widget_type] = widget
    return widget


def register_widget(
    widget_type: str,
    display_name: str = "",
    default_color: str = "white",
    description: str = "",
) -> Callable[[type[Widget]], type[Widget]]:
    """Decorator to register widget classes with metadata.

    Usage:
        @register_widget("model", display_name="Model", default_color="cyan",
                         description="Claude model name")
        class ModelWidget(Widget):
            def render(self, item, context, settings):
                ...
    """

    def decorator(cls: type[Widget]) -> type[Widget]:
        add_widget(
            widget_type,
            cls(),
            display_name=display_name,
            default_color=default_color,
            description=description,
        )
        return cls

    return decorator


def get_widget(widget_type: str) -> Optional[Widget]:
    """Get widget instance by type name.

    Args:
        widget_type: Widget type identifier

    Returns:
        Widget instance or None if not found
    """
    return _WIDGET_REGISTRY.get(widget_type)


def get_all_widgets() -> dict[str, Widget]:
    """Get all registered widgets as instances.

    Returns:
        Dictionary mapping widget type to instance
    """
    return dict(_WIDGET_REGISTRY)
