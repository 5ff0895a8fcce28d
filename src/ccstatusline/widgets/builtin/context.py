"""Context usage widgets."""

from ..percentage import PercentageWidget
from ..registry import add_widget

CONTEXT_PERCENTAGE = add_widget(
    "context-percentage",
    PercentageWidget(
        label="Ctx",
        preview_percentage=9.3,
        denominator=lambda config: config.max_tokens,
    ),
    display_name="Context %",
    default_color="blue",
    description="Shows percentage of context window used or remaining",
)

CONTEXT_PERCENTAGE_USABLE = add_widget(
    "context-percentage-usable",
    PercentageWidget(
        label="Ctx(u)",
        preview_percentage=11.6,
        denominator=lambda config: config.usable_tokens,
    ),
    display_name="Context % (usable)",
    default_color="green",
    description=(
        "Shows percentage of usable context window used or remaining "
        "(80% of max before auto-compact)"
    ),
)
