"""Editor operations on widget items.

These are the non-UI halves of the interactive editor: describing items,
listing their shortcuts and applying a key press to a configuration. Every
operation returns new objects and leaves its inputs untouched.
"""

from typing import Optional

from .config.schema import StatusLineConfig, WidgetConfigModel
from .types import EditorDisplay, Keybind
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget

RAW_VALUE_KEYBIND = Keybind(key="r", label="(r)aw value", action="toggle-raw")


def describe_item(item: WidgetConfigModel) -> EditorDisplay:
    """Editor summary for an item, naming unknown types as such."""
    widget = get_widget(item.type)
    if not widget:
        return EditorDisplay(display_text=item.type, modifier_text="(unknown)")

    display = widget.get_editor_display(item)
    if item.raw_value and widget.supports_raw_value():
        modifiers = [display.modifier_text.strip("()")] if display.modifier_text else []
        modifiers.append("raw value")
        return EditorDisplay(
            display_text=display.display_text,
            modifier_text=f"({', '.join(modifiers)})",
        )
    return display


def keybinds_for(item: WidgetConfigModel) -> list[Keybind]:
    """All shortcuts available for an item, including the raw-value toggle."""
    widget = get_widget(item.type)
    if not widget:
        return []

    keybinds = list(widget.get_custom_keybinds())
    if widget.supports_raw_value():
        keybinds.append(RAW_VALUE_KEYBIND)
    return keybinds


def toggle_raw_value(item: WidgetConfigModel) -> Optional[WidgetConfigModel]:
    """Flip raw value display, or None if the widget doesn't support it."""
    widget = get_widget(item.type)
    if not widget or not widget.supports_raw_value():
        return None
    return item.model_copy(update={"raw_value": not item.raw_value})


def apply_action(action: str, item: WidgetConfigModel) -> Optional[WidgetConfigModel]:
    """Apply a named action to an item, or None when nothing handles it."""
    if action == RAW_VALUE_KEYBIND.action:
        return toggle_raw_value(item)

    widget = get_widget(item.type)
    if not widget:
        return None
    return widget.handle_editor_action(action, item)


def apply_keybind(config: StatusLineConfig, item_id: str, key: str) -> StatusLineConfig:
    """Dispatch a key press for one item.

    Returns the updated config, or ``config`` itself when the item is missing
    or no shortcut matches the key.
    """
    item = config.find_item(item_id)
    if item is None:
        return config

    for keybind in keybinds_for(item):
        if keybind.key == key:
            updated = apply_action(keybind.action, item)
            return config.replace_item(updated) if updated else config

    return config
