"""Data types for ccstatusline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class TokenMetrics:
    """Token usage for the current session."""

    input_tokens: int = 0
    output_tokens: int = 0
    cached_tokens: int = 0
    total_tokens: int = 0
    context_length: int = 0


@dataclass
class BlockMetrics:
    """Timing of the active 5-hour usage block.

    start_time is None when the payload named a block start that could not
    be read.
    """

    start_time: Optional[datetime]
    last_activity: Optional[datetime] = None


@dataclass(frozen=True)
class ContextConfig:
    """Context window sizes resolved for a model."""

    max_tokens: int
    usable_tokens: int


@dataclass(frozen=True)
class EditorDisplay:
    """Summary of a widget item shown in the editor list."""

    display_text: str
    modifier_text: Optional[str] = None


@dataclass(frozen=True)
class Keybind:
    """Single-key shortcut a widget contributes to the editor."""

    key: str
    label: str
    action: str


@dataclass
class RenderContext:
    """Context passed to widgets during rendering."""

    data: dict[str, Any] = field(default_factory=dict)
    token_metrics: Optional[TokenMetrics] = None
    block_metrics: Optional[BlockMetrics] = None
    is_preview: bool = False
