"""ANSI color codes and utilities."""

from typing import Optional

COLORS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bright_white": "\033[97m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "reset": "\033[0m",
}

COLORS["gray"] = COLORS["bright_black"]
COLORS["grey"] = COLORS["bright_black"]


def colorize(text: str, color: Optional[str] = None, bold: bool = False) -> str:
    """Wrap text in ANSI codes.

    Args:
        text: Text to colorize
        color: Color name, None, or "none" to skip colorization
        bold: Whether to apply bold formatting

    Returns:
        Colorized text, or the text unchanged when no code applies
    """
    if not text or color == "none":
        return text

    codes = []
    if bold:
        codes.append(COLORS["bold"])
    if color and color.lower() in COLORS:
        codes.append(COLORS[color.lower()])

    if not codes:
        return text

    return "".join(codes) + text + COLORS["reset"]
