import json

import pytest

from ccstatusline.config.loader import save_config
from ccstatusline.config.schema import StatusLineConfig, WidgetItemModel
from ccstatusline.statusline import format_output, main, parse_input_data
from ccstatusline.utils.ansi import RESET
from ccstatusline.utils.flex import FLEX_FILL


@pytest.fixture
def write_config(tmp_path):
    """Factory fixture that saves a config and returns its path."""

    written = []

    def _write_config(**kwargs):
        path = tmp_path / f"statusline-{len(written)}.yaml"
        save_config(StatusLineConfig(**kwargs), path)
        written.append(path)
        return path

    return _write_config


@pytest.mark.integration
class TestPayloadParsing:
    """Test stdin payload parsing including session_id extraction."""

    def test_extracts_session_id_from_payload(self, mock_stdin, sample_input_payload):
        mock_stdin(json.dumps(sample_input_payload))

        data = parse_input_data()

        assert data.get("session_id") == "abc123-def456"

    def test_handles_missing_session_id(self, mock_stdin):
        """Backwards compatibility: old payloads without session_id."""
        payload = {"workspace": {"current_dir": "/test"}, "model": {"id": "test"}}
        mock_stdin(json.dumps(payload))

        data = parse_input_data()

        assert data.get("session_id", "") == ""

    def test_handles_invalid_json(self, mock_stdin):
        """Graceful degradation on malformed input."""
        mock_stdin("not valid json")

        assert parse_input_data() == {}

    def test_handles_non_object_json(self, mock_stdin):
        mock_stdin("[1, 2, 3]")

        assert parse_input_data() == {}


@pytest.mark.integration
class TestFormatOutput:
    """Tests for stdout formatting."""

    def test_plain_lines(self):
        assert format_output(["a", "", "b"], "none") == "a\n\nb\n"

    def test_colored_lines_start_with_reset(self):
        assert format_output(["a", ""], "basic") == RESET + "a\n\n"


@pytest.mark.integration
class TestMainOutput:
    """End-to-end runs of the entry point."""

    def test_renders_payload(
        self, mock_stdin, sample_input_payload, write_config, monkeypatch, capsys
    ):
        monkeypatch.setenv("COLUMNS", "60")
        path = write_config(
            color_level="none",
            flex_mode="full",
            default_padding="",
            default_separator=" | ",
            lines=[
                [
                    WidgetItemModel(type="model", raw_value=True),
                    WidgetItemModel(type="flex-separator"),
                    WidgetItemModel(type="directory"),
                ],
                [WidgetItemModel(type="session-id")],
            ],
        )
        mock_stdin(json.dumps(sample_input_payload))

        main(["--config", str(path)])

        out = capsys.readouterr().out
        first, second = out.splitlines()
        assert first == "Sonnet 4.5" + FLEX_FILL * 43 + "project"
        assert second == "Session: abc123-def456"

    def test_full_until_compact_uses_context_usage(
        self, mock_stdin, sample_input_payload, write_config, monkeypatch, capsys
    ):
        monkeypatch.setenv("COLUMNS", "100")
        config = dict(
            color_level="none",
            flex_mode="full-until-compact",
            default_padding="",
            lines=[
                [
                    WidgetItemModel(type="custom-text", metadata={"text": "L"}),
                    WidgetItemModel(type="flex-separator"),
                    WidgetItemModel(type="custom-text", metadata={"text": "R"}),
                ]
            ],
        )

        # 25% usage stays below the threshold
        mock_stdin(json.dumps(sample_input_payload))
        main(["--config", str(write_config(compact_threshold=60, **config))])
        assert len(capsys.readouterr().out.rstrip("\n")) == 100

        mock_stdin(json.dumps(sample_input_payload))
        main(["--config", str(write_config(compact_threshold=20, **config))])
        assert len(capsys.readouterr().out.rstrip("\n")) == 60

    def test_empty_payload_still_renders(
        self, mock_stdin, write_config, monkeypatch, capsys
    ):
        monkeypatch.setenv("COLUMNS", "120")
        path = write_config(
            color_level="none",
            lines=[
                [WidgetItemModel(type="model")],
                [WidgetItemModel(type="custom-text", metadata={"text": "static"})],
            ],
        )
        mock_stdin("")

        main(["--config", str(path)])

        assert capsys.readouterr().out == "\n static \n"

    def test_powerline_output(
        self, mock_stdin, sample_input_payload, write_config, monkeypatch, capsys
    ):
        monkeypatch.setenv("COLUMNS", "120")
        path = write_config(
            color_level="basic",
            powerline={"enabled": True, "theme": [{"fg": "white", "bg": "blue"}]},
            lines=[[WidgetItemModel(type="model", raw_value=True)]],
        )
        mock_stdin(json.dumps(sample_input_payload))

        main(["--config", str(path)])

        assert capsys.readouterr().out == (
            RESET + "\x1b[37;44m Sonnet 4.5 \x1b[34;49m\ue0b0" + RESET + "\n"
        )

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert "ccstatusline" in capsys.readouterr().out
