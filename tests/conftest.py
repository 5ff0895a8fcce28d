import pytest

from ccstatusline.config.loader import clear_config_cache
from ccstatusline.config.schema import WidgetConfigModel
from ccstatusline.types import RenderContext, TokenMetrics


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")
    config.addinivalue_line("markers", "performance: pytest-benchmark timings")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config and debug logs at a temp dir and reset the config cache."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("CCSTATUSLINE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CCSTATUSLINE_DEBUG", raising=False)
    clear_config_cache()
    yield tmp_path / "config"
    clear_config_cache()


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def sample_input_payload():
    """Sample statusline input payload."""
    return {
        "session_id": "abc123-def456",
        "workspace": {"current_dir": "/path/to/project"},
        "model": {"id": "claude-sonnet-4-5-20250929", "display_name": "Sonnet 4.5"},
        "context_window": {
            "total_input_tokens": 15234,
            "total_output_tokens": 4521,
            "context_window_size": 200000,
            "current_usage": {
                "input_tokens": 8500,
                "output_tokens": 1200,
                "cache_creation_input_tokens": 5000,
                "cache_read_input_tokens": 2000,
            },
        },
        "version": "2.0.53",
    }


@pytest.fixture
def make_item():
    """Factory for widget items with optional display mode and flags."""

    def _make_item(
        widget_type: str,
        display: str | None = None,
        raw_value: bool = False,
        inverse: bool = False,
    ) -> WidgetConfigModel:
        metadata = {}
        if display is not None:
            metadata["display"] = display
        if inverse:
            metadata["inverse"] = "true"
        return WidgetConfigModel(
            id=widget_type, type=widget_type, raw_value=raw_value, metadata=metadata
        )

    return _make_item


@pytest.fixture
def token_context():
    """Factory for live render contexts with a model id and context length."""

    def _token_context(model_id: str | None, context_length: int) -> RenderContext:
        return RenderContext(
            data={"model": {"id": model_id}} if model_id else {},
            token_metrics=TokenMetrics(context_length=context_length),
        )

    return _token_context
