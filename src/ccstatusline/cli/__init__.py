"""CLI commands for ccstatusline."""

from .commands import cmd_toggle, cmd_widgets

__all__ = ["cmd_widgets", "cmd_toggle"]
