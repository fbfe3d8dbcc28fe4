import pytest

from weatherdash.config import DashboardConfig, DashboardEnv, load_config
from weatherdash.exceptions import ConfigError


def test_defaults():
    config = DashboardConfig()

    assert config.api.forecast_url == "https://api.open-meteo.com/v1/forecast"
    assert config.api.request_timeout is None
    assert config.location.fallback_latitude == 52.52
    assert config.location.fallback_longitude == 13.41
    assert config.location.use_device_location is True
    assert config.display.forecast_days == 5


def test_load_config_merges_partial_yaml(tmp_path):
    path = tmp_path / "weatherdash.yaml"
    path.write_text(
        "location:\n"
        "  use_device_location: false\n"
        "  fallback_latitude: 48.14\n"
        "display:\n"
        "  forecast_days: 7\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.location.use_device_location is False
    assert config.location.fallback_latitude == 48.14
    assert config.location.fallback_longitude == 13.41
    assert config.display.forecast_days == 7


def test_load_config_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == DashboardConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("location: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


@pytest.mark.parametrize(
    "content",
    [
        "location:\n  fallback_latitude: 123.0\n",
        "display:\n  forecast_days: 0\n",
        "api:\n  request_timeout: -1\n",
    ],
)
def test_load_config_invalid_values(tmp_path, content):
    path = tmp_path / "invalid.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config values"):
        load_config(path)


def test_env_reads_log_level(monkeypatch):
    monkeypatch.setenv("WEATHERDASH_LOG_LEVEL", "DEBUG")

    assert DashboardEnv().weatherdash_log_level == "DEBUG"
