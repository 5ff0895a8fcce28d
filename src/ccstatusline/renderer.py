"""Main rendering pipeline for status line."""

from typing import Optional

from .config.loader import load_config
from .config.schema import StatusLineConfig, WidgetConfigModel
from .types import RenderContext
from .utils.colors import colorize
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget


def render_widget(
    item: WidgetConfigModel, context: RenderContext, settings: StatusLineConfig
) -> Optional[str]:
    """Render a single widget with colors applied.

    Args:
        item: Widget configuration
        context: Render context
        settings: Loaded status line settings

    Returns:
        Rendered and colorized widget string, or None to skip
    """
    widget = get_widget(item.type)
    if not widget:
        return None

    content = widget.render(item, context, settings)
    if content is None:
        return None

    if not widget.supports_colors(item):
        return content

    color = item.color or widget.default_color
    return colorize(content, color, item.bold)


def _remove_orphaned_separators(
    pairs: list[tuple[WidgetConfigModel, Optional[str]]],
) -> list[str]:
    """Remove separators that have no adjacent content.

    A separator is orphaned if:
    - It's at the start (nothing visible before it)
    - It's at the end (nothing visible after it)
    - It's adjacent to another separator (no content between)
    """
    result: list[tuple[WidgetConfigModel, str]] = []
    prev_was_separator = True

    for item, content in pairs:
        if content is None:
            continue

        is_separator = item.type == "separator"
        if not (is_separator and prev_was_separator):
            result.append((item, content))
        prev_was_separator = is_separator

    if result and result[-1][0].type == "separator":
        result.pop()

    return [content for _, content in result]


def render_line(
    items: list[WidgetConfigModel], context: RenderContext, settings: StatusLineConfig
) -> str:
    """Render one status line from its widget items."""
    pairs = [(item, render_widget(item, context, settings)) for item in items]
    return "".join(_remove_orphaned_separators(pairs))


def render_status_line(config: StatusLineConfig, context: RenderContext) -> str:
    """Render every configured line, dropping lines with no content.

    Args:
        config: Status line configuration, also passed to widgets as settings
        context: Render context with data and metrics

    Returns:
        Formatted status line string with ANSI colors
    """
    lines = [render_line(items, context, config) for items in config.lines]
    return "\n".join(line for line in lines if line)


def render_status_line_with_config(context: RenderContext) -> str:
    """Render status line using loaded configuration."""
    return render_status_line(load_config(), context)
