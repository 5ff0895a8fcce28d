"""Performance benchmarks using pytest-benchmark for automatic tracking."""

import pytest

from ccstatusline.config.defaults import get_default_config
from ccstatusline.config.schema import WidgetConfigModel
from ccstatusline.renderer import render_status_line
from ccstatusline.types import RenderContext, TokenMetrics
from ccstatusline.utils.formatting import render_progress_bar_with_label
from ccstatusline.utils.models import get_context_config
from ccstatusline.widgets.registry import get_widget


@pytest.fixture
def live_context():
    return RenderContext(
        data={"model": {"id": "claude-sonnet-4-5-20250929[1m]"}},
        token_metrics=TokenMetrics(context_length=123456),
    )


@pytest.mark.performance
class TestPerformanceBenchmarks:
    """Benchmarks using pytest-benchmark fixture for automatic stats and history."""

    def test_labelled_bar(self, benchmark):
        result = benchmark(render_progress_bar_with_label, 21.0, 16)
        assert len(result) == 16

    def test_percentage_widget_render(self, benchmark, live_context):
        widget = get_widget("context-percentage")
        item = WidgetConfigModel(type="context-percentage", metadata={"display": "progress"})

        result = benchmark(widget.render, item, live_context, None)
        assert result is not None

    def test_default_status_line(self, benchmark, live_context):
        result = benchmark(render_status_line, get_default_config(), live_context)
        assert "Ctx" in result

    def test_model_lookup_known(self, benchmark):
        """Benchmark known Claude model context limit lookup."""
        benchmark(get_context_config, "claude-sonnet-4-20250514")
