import json

from unplugged import config
from unplugged.config import DEFAULT_CONFIG, Config, get_config


def test_defaults_when_file_missing(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.get("providers", "weather", "location", "latitude") == 51.5074
    assert cfg.get_canvas_config()["mode"] == "vibrant"
    assert cfg.get("nope", "missing", default=3) == 3


def test_defaults_are_copied(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    cfg.config["canvas"]["width"] = 10
    assert DEFAULT_CONFIG["canvas"]["width"] == 800


def test_loads_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "providers": {"weather": {"location": {"name": "Oslo"}, "cache_duration": 60}},
        "canvas": {"width": 1024},
    }))

    cfg = Config(str(path))

    assert cfg.get_provider_config("weather")["cache_duration"] == 60
    assert cfg.get_provider_config("unknown") == {}
    canvas = cfg.get_canvas_config()
    assert canvas["width"] == 1024
    assert canvas["height"] == 400
    assert canvas["output_dir"] == "output"


def test_invalid_file_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    cfg = Config(str(path))

    assert cfg.config == DEFAULT_CONFIG
    assert "Warning" in capsys.readouterr().out


def test_get_config_is_cached(fresh_config):
    assert get_config() is get_config()
    assert config._config is not None
