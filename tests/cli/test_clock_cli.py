import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from deckclock.cli import app
from deckclock.clock.surface import decode_data_url

runner = CliRunner()


def test_render_data_url():
    result = runner.invoke(app, ["clock", "render", "--at", "09:41:13", "--data-url"])

    assert result.exit_code == 0, result.output
    data_url = result.stdout.strip()
    assert data_url.startswith("data:image/png;base64,")
    assert decode_data_url(data_url).startswith(b"\x89PNG")


def test_render_is_deterministic_for_fixed_time():
    args = ["clock", "render", "--variant", "analog", "--at", "03:30", "--data-url"]

    first = runner.invoke(app, args)
    second = runner.invoke(app, args)

    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_render_to_file(tmp_path):
    output = tmp_path / "clock.png"

    result = runner.invoke(app, ["clock", "render", "--at", "12:00", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Wrote" in result.stdout
    assert output.read_bytes().startswith(b"\x89PNG")


def test_render_defaults_to_settings_path(mock_settings):
    result = runner.invoke(app, ["clock", "render"])

    assert result.exit_code == 0, result.output
    assert mock_settings.clock_output_path.exists()


@pytest.mark.parametrize("value", ["25:00", "noon", "9.41"])
def test_render_rejects_bad_time(value):
    result = runner.invoke(app, ["clock", "render", "--at", value, "--data-url"])
    assert result.exit_code != 0


def test_render_rejects_unknown_variant():
    result = runner.invoke(app, ["clock", "render", "--variant", "sundial", "--data-url"])
    assert result.exit_code != 0


def test_colors_json_includes_configured_overrides(mock_settings):
    mock_settings.digital_colors = {"lineOn": "#00FF00"}

    result = runner.invoke(app, ["clock", "colors", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "lineOn": "#00FF00",
        "lineOff": "#5A0000",
        "background": "#200000",
    }


def test_colors_table_for_analog():
    result = runner.invoke(app, ["clock", "colors", "--variant", "analog"])

    assert result.exit_code == 0, result.output
    assert "second" in result.stdout
    assert "#ff9933" in result.stdout


def test_config_show_json():
    result = runner.invoke(app, ["config", "show", "--json"])

    assert result.exit_code == 0, result.output
    config = json.loads(result.stdout)
    assert config["variant"] == "digital"
    assert config["width"] == 144


def test_config_show_table():
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0, result.output
    assert "Deck Clock Configuration" in result.stdout
    assert "variant" in result.stdout


def test_clock_run_starts_service(mock_settings):
    with patch("deckclock.clock.service.ClockService") as mock_service:
        mock_service.return_value.output_path = mock_settings.clock_output_path
        result = runner.invoke(app, ["clock", "run"])

    assert result.exit_code == 0, result.output
    mock_service.return_value.run_daemon.assert_called_once_with()
    assert mock_settings.clock_output_path.parent.is_dir()
