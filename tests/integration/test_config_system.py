"""Integration tests for configuration system."""

import os

import pytest
import yaml

from pydantic import ValidationError

from ccstatusline.config.defaults import get_default_config
from ccstatusline.config.loader import (
    get_config_path,
    load_config,
    load_config_file,
    save_config,
)
from ccstatusline.config.schema import (
    PowerlineConfig,
    StatusLineConfig,
    WidgetItemModel,
)


@pytest.fixture
def temp_config_dir(tmp_path):
    """Config directory set up by the autouse isolated_dirs fixture."""
    return tmp_path / "config"


@pytest.fixture
def sample_config():
    """Create a sample configuration."""
    return StatusLineConfig(
        version=1,
        color_level="truecolor",
        default_separator=None,
        powerline=PowerlineConfig(enabled=True, theme="nord", auto_align=True),
        lines=[
            [
                WidgetItemModel(type="model", color="cyan", raw_value=True),
                WidgetItemModel(type="flex-separator"),
                WidgetItemModel(type="directory", color="hex:88C0D0", merge_prev=True),
            ]
        ],
    )


@pytest.mark.integration
class TestConfigLoading:
    """Tests for configuration loading."""

    def test_creates_default_config_when_missing(self, temp_config_dir):
        """Test that default config is created when file doesn't exist."""
        config = load_config()

        assert isinstance(config, StatusLineConfig)
        assert config.version == 1
        assert len(config.lines) > 0
        assert len(config.lines[0]) > 0

        config_file = temp_config_dir / "ccstatusline" / "config.yaml"
        assert config_file.exists()
        assert get_config_path() == config_file

    def test_loads_existing_config(self, temp_config_dir, sample_config):
        """Test loading an existing configuration file."""
        save_config(sample_config)

        loaded_config = load_config()

        assert loaded_config.color_level == "truecolor"
        assert loaded_config.default_separator is None
        assert loaded_config.powerline.enabled is True
        assert loaded_config.powerline.theme == "nord"
        assert loaded_config.powerline.separator == "\ue0b0"
        assert loaded_config.lines[0][0].type == "model"
        assert loaded_config.lines[0][0].raw_value is True
        assert loaded_config.lines[0][2].merge_prev is True

    def test_explicit_path(self, tmp_path, sample_config):
        path = tmp_path / "elsewhere.yaml"
        save_config(sample_config, path)

        assert load_config(path).powerline.theme == "nord"

    def test_handles_invalid_yaml(self, temp_config_dir, capsys):
        """Test that invalid YAML falls back to defaults."""
        config_dir = temp_config_dir / "ccstatusline"
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / "config.yaml").write_text("invalid: yaml: content: [[[")

        config = load_config()

        assert config.color_level == get_default_config().color_level
        assert len(config.lines) == len(get_default_config().lines)
        assert "Warning: Failed to load config" in capsys.readouterr().err

    def test_handles_schema_violation(self, temp_config_dir, capsys):
        """Unknown keys and bad values fall back to defaults."""
        config_dir = temp_config_dir / "ccstatusline"
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / "config.yaml").write_text("color_level: 17\nbogus: true\n")

        config = load_config()

        assert config.color_level == "basic"
        assert "Using default configuration." in capsys.readouterr().err

    def test_empty_file_uses_schema_defaults(self, temp_config_dir):
        config_dir = temp_config_dir / "ccstatusline"
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / "config.yaml").write_text("")

        config = load_config()

        assert config.lines == []
        assert config.flex_mode == "full-minus-40"

    def test_cache_refreshes_on_change(self, temp_config_dir, sample_config):
        save_config(sample_config)
        assert load_config().color_level == "truecolor"

        path = get_config_path()
        data = yaml.safe_load(path.read_text())
        data["color_level"] = "none"
        path.write_text(yaml.dump(data, allow_unicode=True))

        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 5))

        assert load_config().color_level == "none"

    def test_load_config_file_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("flex_mode: sideways\n")

        with pytest.raises(ValidationError):
            load_config_file(path)


@pytest.mark.integration
class TestSchema:
    """Tests for schema defaults and validation."""

    def test_item_defaults(self):
        item = WidgetItemModel(type="model")
        assert item.color is None
        assert item.bold is None
        assert item.merge_prev is False
        assert item.merge_next is False
        assert item.padding is None
        assert item.id

    def test_compact_threshold_bounds(self):
        with pytest.raises(ValidationError):
            StatusLineConfig(compact_threshold=150)

    def test_default_config_is_valid(self):
        config = get_default_config()
        types = {item.type for line in config.lines for item in line}
        assert "flex-separator" in types
        assert StatusLineConfig(**config.model_dump()) == config
