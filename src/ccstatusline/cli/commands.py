"""CLI commands for inspecting and editing widget configuration."""

import sys

from ..config.loader import (
    CONFIG_LOAD_ERRORS,
    get_config_path,
    load_config,
    load_config_file,
    save_config,
)
from ..editor import apply_keybind, describe_item, keybinds_for
from ..widgets.registry import get_all_widgets


def cmd_widgets() -> int:
    """List registered widgets and the items configured for each.

    Returns:
        Exit code (always 0)
    """
    for widget_type, widget in sorted(get_all_widgets().items()):
        print(f"{widget_type}: {widget.display_name}")
        if widget.description:
            print(f"    {widget.description}")

    config = load_config()
    print(f"\nConfigured items ({get_config_path()}):")
    for line_idx, line in enumerate(config.lines, start=1):
        for item in line:
            if item.type == "separator":
                continue
            display = describe_item(item)
            modifiers = f" {display.modifier_text}" if display.modifier_text else ""
            keys = ", ".join(k.label for k in keybinds_for(item))
            print(f"  [{line_idx}] {item.id}  {display.display_text}{modifiers}")
            if keys:
                print(f"        keys: {keys}")

    return 0


def cmd_toggle(item_id: str, key: str) -> int:
    """Apply a widget shortcut to a configured item and save the result.

    Args:
        item_id: Id of the configured widget item
        key: Shortcut key

    Returns:
        Exit code (0 for success, 1 if nothing changed or the config
        file is invalid)
    """
    config_path = get_config_path()
    if config_path.exists():
        # An invalid file is left untouched rather than replaced by defaults
        try:
            config = load_config_file(config_path)
        except CONFIG_LOAD_ERRORS as e:
            print(f"✗ Invalid config at {config_path}: {e}", file=sys.stderr)
            print("  Fix the file before editing widgets.", file=sys.stderr)
            return 1
    else:
        config = load_config()

    if config.find_item(item_id) is None:
        print(f"✗ No widget item with id {item_id}", file=sys.stderr)
        return 1

    updated = apply_keybind(config, item_id, key)
    if updated is config:
        print(f"✗ Key '{key}' does nothing for item {item_id}", file=sys.stderr)
        return 1

    save_config(updated)

    item = updated.find_item(item_id)
    if item is not None:
        display = describe_item(item)
        print(f"✓ {display.display_text} {display.modifier_text or ''}".rstrip())
    return 0
