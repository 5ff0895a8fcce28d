#!/usr/bin/env python3

import argparse
import json
import sys

from datetime import datetime
from typing import Any, Optional, cast

from .renderer import render_status_line_with_config
from .types import BlockMetrics, RenderContext, TokenMetrics
from .utils.debug import debug_log


def parse_input_data() -> dict[str, Any]:
    """Parse JSON input from stdin and return as dict.

    Returns:
        Dictionary with Claude Code JSON payload
    """
    try:
        data = json.loads(sys.stdin.read())
    except (json.JSONDecodeError, ValueError):
        return {}
    return cast(dict[str, Any], data) if isinstance(data, dict) else {}


def _token_count(usage: dict[str, Any], key: str) -> int:
    """Read a token count, treating missing or non-integer values as 0."""
    value = usage.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        debug_log(f"Ignoring non-integer {key}: {value!r}")
        return 0
    return value


def extract_token_metrics(data: dict[str, Any]) -> Optional[TokenMetrics]:
    """Build token metrics from the payload's context_window block.

    Context length follows the official formula:
    input_tokens + cache_creation_input_tokens + cache_read_input_tokens

    Returns:
        TokenMetrics, or None when the payload has no current usage
    """
    cw = data.get("context_window")
    if not cw or not isinstance(cw, dict):
        return None

    usage = cw.get("current_usage")
    if not usage or not isinstance(usage, dict):
        return None

    input_tokens = _token_count(usage, "input_tokens")
    output_tokens = _token_count(usage, "output_tokens")
    cache_creation = _token_count(usage, "cache_creation_input_tokens")
    cache_read = _token_count(usage, "cache_read_input_tokens")

    return TokenMetrics(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cached_tokens=cache_creation + cache_read,
        total_tokens=input_tokens + output_tokens + cache_creation + cache_read,
        context_length=input_tokens + cache_creation + cache_read,
    )


def extract_block_metrics(data: dict[str, Any]) -> Optional[BlockMetrics]:
    """Read the active block start from an ISO-8601 ``block_start`` field.

    Returns None when there is no block. A start that is present but
    unreadable yields metrics without a start time, which the block timer
    treats as a fault rather than an idle block.
    """
    block_start = data.get("block_start")
    if block_start is None or block_start == "":
        return None
    if not isinstance(block_start, str):
        debug_log(f"Malformed block_start: {block_start!r}")
        return BlockMetrics(start_time=None)

    try:
        start_time = datetime.fromisoformat(block_start.replace("Z", "+00:00"))
    except ValueError:
        debug_log(f"Malformed block_start: {block_start!r}")
        return BlockMetrics(start_time=None)

    return BlockMetrics(start_time=start_time)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="ccstatusline",
        description="Customizable status line for Claude Code",
        epilog=(
            "When no command is given, reads JSON from stdin and outputs the statusline."
        ),
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Render with example values instead of reading stdin",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("widgets", help="List available widgets and their shortcuts")

    toggle = subparsers.add_parser(
        "toggle", help="Apply a widget shortcut to a configured item"
    )
    toggle.add_argument("item_id", help="Id of the configured widget item")
    toggle.add_argument("key", help="Shortcut key (e.g., p, l, r)")

    return parser


def main() -> None:
    """Main entry point with widget-based rendering."""
    parser = create_argument_parser()
    args = parser.parse_args()

    if args.command:
        from .cli import cmd_toggle, cmd_widgets

        if args.command == "widgets":
            sys.exit(cmd_widgets())
        sys.exit(cmd_toggle(args.item_id, args.key))

    if args.preview:
        context = RenderContext(is_preview=True)
    else:
        data = parse_input_data()
        session_id = data.get("session_id", "")

        context = RenderContext(
            data=data,
            token_metrics=extract_token_metrics(data),
            block_metrics=extract_block_metrics(data),
        )

        debug_log(f"Model ID: {(data.get('model') or {}).get('id', '')}", session_id)
        debug_log(f"Token metrics: {context.token_metrics}", session_id)
        debug_log(f"Block metrics: {context.block_metrics}", session_id)

    output = render_status_line_with_config(context)
    print(output, end="")


if __name__ == "__main__":
    main()
