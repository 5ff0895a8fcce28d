"""Model context window lookup."""

from typing import Optional

from ..types import ContextConfig, RenderContext

DEFAULT_CONTEXT_LIMIT = 200000
EXTENDED_CONTEXT_LIMIT = 1000000
EXTENDED_CONTEXT_MARKER = "[1m]"

# Share of the window usable before auto-compact kicks in
USABLE_CONTEXT_RATIO = 0.8

MODEL_CONTEXT_LIMITS: dict[str, int] = {
    "claude": 200000,
    "claude-3-5-sonnet": 200000,
    "claude-3-5-haiku": 200000,
    "claude-3-7-sonnet": 200000,
    "claude-sonnet-4": 200000,
    "claude-sonnet-4-20250514": 200000,
    "claude-sonnet-4-5": 200000,
    "claude-sonnet-4-5-20250929": 200000,
    "claude-haiku-4-5": 200000,
    "claude-opus-4": 200000,
    "claude-opus-4-1": 200000,
    "claude-opus-4-1-20250805": 200000,
    "claude-opus-4-5": 200000,
    "claude-opus-4-5-20251101": 200000,
}


def _lookup_context_limit(model_id: Optional[str]) -> int:
    if not model_id:
        return DEFAULT_CONTEXT_LIMIT

    model_lower = model_id.lower()

    if EXTENDED_CONTEXT_MARKER in model_lower:
        return EXTENDED_CONTEXT_LIMIT

    if model_lower in MODEL_CONTEXT_LIMITS:
        return MODEL_CONTEXT_LIMITS[model_lower]

    for key in sorted(MODEL_CONTEXT_LIMITS, key=len, reverse=True):
        if key in model_lower:
            return MODEL_CONTEXT_LIMITS[key]

    return DEFAULT_CONTEXT_LIMIT


def get_context_config(model_id: Optional[str]) -> ContextConfig:
    """Resolve max and usable context sizes for a model.

    Args:
        model_id: Model identifier (e.g., "claude-sonnet-4-5-20250929[1m]")

    Returns:
        ContextConfig with usable tokens at 80% of the max
    """
    max_tokens = _lookup_context_limit(model_id)
    return ContextConfig(
        max_tokens=max_tokens,
        usable_tokens=round(max_tokens * USABLE_CONTEXT_RATIO),
    )


def get_context_config_for_render(context: RenderContext) -> ContextConfig:
    """Get context config from the render context's model data."""
    model = context.data.get("model")
    model_id = model.get("id") if isinstance(model, dict) else None
    return get_context_config(model_id if isinstance(model_id, str) else None)
