import os

import pytest

import app
from unplugged.weather import WeatherDescription


def test_manual_render_saves_png(fresh_config, capsys):
    out = fresh_config / "out"

    code = app.main(["--manual", "--seed", "3", "--width", "80", "--height", "40",
                     "--output-dir", str(out)])

    assert code == 0
    files = os.listdir(out)
    assert len(files) == 1
    assert files[0].startswith("weather-art-") and files[0].endswith(".png")
    output = capsys.readouterr().out
    assert "Genre:" in output
    assert "Manual input" in output


def test_field_options_imply_manual(fresh_config, capsys):
    code = app.main(["--temperature", "-5", "--description", "snow", "--basic",
                     "--width", "60", "--height", "30", "--debug"])

    assert code == 0
    output = capsys.readouterr().out
    assert "Snow, -5.0°C" in output
    assert "▄" in output
    assert not os.path.exists(fresh_config / "output")


def test_unknown_description_is_rejected(fresh_config):
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--description", "Hail"])
    assert excinfo.value.code == 2


def test_manual_observation_overrides():
    parser = app.build_parser()
    args = parser.parse_args(["--wind-speed", "30", "--description", "Fog"])
    observation = app.manual_observation(parser, args)

    assert app.wants_manual(args)
    assert observation.wind_speed == 30
    assert observation.description is WeatherDescription.FOG
    assert observation.temperature == 20


def test_live_mode_without_key_saves_fallback(fresh_config, monkeypatch, capsys):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)

    code = app.main(["--width", "40", "--height", "20"])

    assert code == 0
    assert len(os.listdir(fresh_config / "output")) == 1
    assert "Weather unavailable" in capsys.readouterr().out


def test_fatal_error_returns_one(fresh_config, capsys):
    assert app.main(["--manual", "--width", "-5"]) == 1
    assert "[ERROR] Fatal error" in capsys.readouterr().err
