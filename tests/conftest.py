import pytest

from ccstatusline.config.loader import clear_config_cache
from ccstatusline.config.schema import StatusLineConfig, WidgetItemModel
from ccstatusline.types import RenderContext
from ccstatusline.widgets.base import Widget
from ccstatusline.widgets.registry import register_widget


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")
    config.addinivalue_line("markers", "performance: Benchmarks using pytest-benchmark")


@register_widget("test-failing", default_color=None, description="Always raises")
class FailingWidget(Widget):
    def render(self, config, context):
        raise RuntimeError("widget exploded")


@register_widget("test-non-string", default_color=None, description="Returns an int")
class NonStringWidget(Widget):
    def render(self, config, context):
        return 42


@register_widget("test-counting", default_color=None, description="Counts calls")
class CountingWidget(Widget):
    calls = 0

    def render(self, config, context):
        CountingWidget.calls += 1
        return config.metadata.get("text", "counted")


@pytest.fixture(autouse=True)
def isolated_dirs(monkeypatch, tmp_path):
    """Keep config and debug logs inside the test's temp directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("CCSTATUSLINE_DEBUG", raising=False)
    clear_config_cache()
    yield
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
        "transcript_path": "/path/to/transcript.jsonl",
        "model": {"id": "claude-sonnet-4-5-20250929", "display_name": "Sonnet 4.5"},
        "cost": {
            "total_cost_usd": 1.50,
            "total_lines_added": 100,
            "total_lines_removed": 25,
        },
        "context_window": {
            "context_window_size": 200000,
            "current_usage": {"input_tokens": 50000},
        },
        "version": "2.0.53",
    }


@pytest.fixture
def context():
    """Empty render context."""
    return RenderContext(data={})


@pytest.fixture
def text_item():
    """Factory for custom-text items with fixed output."""

    def _text_item(text: str, **kwargs) -> WidgetItemModel:
        return WidgetItemModel(type="custom-text", metadata={"text": text}, **kwargs)

    return _text_item


@pytest.fixture
def plain_config():
    """Factory for uncolored configs with no padding."""

    def _plain_config(**kwargs) -> StatusLineConfig:
        settings = {
            "color_level": "none",
            "default_padding": "",
            "default_separator": " | ",
            "flex_mode": "full",
        }
        settings.update(kwargs)
        return StatusLineConfig(**settings)

    return _plain_config
