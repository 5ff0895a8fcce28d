"""Built-in widgets for status line.

Importing this module registers all built-in widgets with the registry.
"""

from .block_timer import BlockTimerWidget
from .context import CONTEXT_PERCENTAGE, CONTEXT_PERCENTAGE_USABLE
from .model import ModelWidget
from .separator import SeparatorWidget

__all__ = [
    "SeparatorWidget",
    "ModelWidget",
    "CONTEXT_PERCENTAGE",
    "CONTEXT_PERCENTAGE_USABLE",
    "BlockTimerWidget",
]
