from datetime import datetime, timedelta

import pytest
import requests

from unplugged import config
from unplugged.config import Config
from unplugged.providers import (
    DataProvider,
    DEFAULT_OBSERVATION,
    DisplayData,
    ManualWeatherProvider,
    WeatherProvider,
    convert_openweather,
    map_weather_type,
)
from unplugged.providers import weather_provider
from unplugged.weather import WeatherDescription


RAINY_RESPONSE = {
    "name": "Paris",
    "weather": [{"main": "Rain", "description": "light rain"}],
    "main": {"temp": 12.5, "humidity": 80},
    "wind": {"speed": 5, "deg": 270},
    "clouds": {"all": 75},
    "rain": {"1h": 2.5},
}


def response_with(**overrides):
    data = dict(RAINY_RESPONSE)
    data.pop("rain")
    data.update(overrides)
    return data


class FakeResponse:
    def __init__(self, payload, status_error=None):
        self.payload = payload
        self.status_error = status_error

    def raise_for_status(self):
        if self.status_error:
            raise self.status_error

    def json(self):
        return self.payload


@pytest.fixture
def weather_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "_config", Config(str(tmp_path / "missing.json")))
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")


def test_convert_rainy_response():
    observation = convert_openweather(RAINY_RESPONSE)
    assert observation.description is WeatherDescription.RAIN
    assert observation.temperature == 12.5
    assert observation.humidity == 80
    assert observation.cloud_cover == 75
    assert observation.precipitation_probability == pytest.approx(0.25)
    assert observation.precipitation_intensity == pytest.approx(2.5)
    assert observation.wind_speed == pytest.approx(18)
    assert observation.wind_direction == 270
    assert observation.uv_index == 5


def test_convert_description_matching():
    def description_for(main, detail):
        return convert_openweather(
            response_with(weather=[{"main": main, "description": detail}])
        ).description

    assert description_for("Clear", "clear sky") is WeatherDescription.CLEAR
    assert description_for("Clouds", "broken clouds") is WeatherDescription.BROKEN_CLOUDS
    assert description_for("Clouds", "overcast clouds") is WeatherDescription.SCATTERED_CLOUDS
    assert description_for("Thunderstorm", "thunderstorm with rain") is WeatherDescription.THUNDERSTORM
    assert description_for("Snow", "light snow") is WeatherDescription.SNOW
    assert description_for("Mist", "mist") is WeatherDescription.MIST
    assert description_for("Haze", "haze") is WeatherDescription.SCATTERED_CLOUDS


def test_convert_assumes_precipitation_from_condition():
    drizzle = convert_openweather(response_with(weather=[{"main": "Drizzle", "description": "drizzle"}]))
    assert drizzle.precipitation_probability == 0.7
    assert drizzle.precipitation_intensity == 3

    snow = convert_openweather(response_with(snow={"1h": 20},
                                             weather=[{"main": "Snow", "description": "snow"}]))
    assert snow.precipitation_probability == 1
    assert snow.precipitation_intensity == 10

    clear = convert_openweather(response_with(weather=[{"main": "Clear", "description": "clear sky"}]))
    assert clear.precipitation_probability == 0
    assert clear.precipitation_intensity == 0


def test_convert_rejects_incomplete_response():
    with pytest.raises(KeyError):
        convert_openweather({"weather": [{"main": "Clear"}]})
    with pytest.raises(IndexError):
        convert_openweather({"weather": []})


def test_map_weather_type():
    assert map_weather_type("Clear") == "sunny"
    assert map_weather_type("Clouds") == "cloudy"
    assert map_weather_type("Drizzle") == "rainy"
    assert map_weather_type("Thunderstorm") == "rainy"
    assert map_weather_type("Squall wind") == "windy"
    assert map_weather_type("Dust") == "cloudy"


def test_weather_provider_success(weather_config, monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(params)
        return FakeResponse(RAINY_RESPONSE)

    monkeypatch.setattr(weather_provider.requests, "get", fake_get)

    data = WeatherProvider().get_data()

    assert data.content["type"] == "weather"
    assert data.content["location"] == "Paris"
    assert data.content["condition"] == "rainy"
    assert data.content["observation"].description is WeatherDescription.RAIN
    assert calls[0]["appid"] == "test-key"
    assert calls[0]["units"] == "metric"


def test_weather_provider_is_cached(weather_config, monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(url)
        return FakeResponse(RAINY_RESPONSE)

    monkeypatch.setattr(weather_provider.requests, "get", fake_get)

    provider = WeatherProvider()
    first = provider.get_data()
    second = provider.get_data()
    assert first is second
    assert len(calls) == 1

    provider.get_data(force_refresh=True)
    assert len(calls) == 2


def test_weather_provider_network_failure(weather_config, monkeypatch, capsys):
    calls = []

    def failing_get(url, params=None, timeout=None):
        calls.append(url)
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(weather_provider.requests, "get", failing_get)

    provider = WeatherProvider()
    data = provider.get_data()

    assert data.content["error"] is True
    assert data.content["error_message"] == "Weather unavailable"
    assert "offline" in data.content["error_details"]
    assert "[WeatherProvider]" in capsys.readouterr().out

    # Errors are not cached
    provider.get_data()
    assert len(calls) == 2


def test_weather_provider_http_error(weather_config, monkeypatch):
    monkeypatch.setattr(
        weather_provider.requests, "get",
        lambda url, params=None, timeout=None: FakeResponse({}, requests.HTTPError("401")),
    )
    assert WeatherProvider().get_data().content["error"] is True


def test_weather_provider_without_api_key(weather_config, monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY")

    def unexpected_get(*args, **kwargs):
        raise AssertionError("no request expected without an API key")

    monkeypatch.setattr(weather_provider.requests, "get", unexpected_get)

    data = WeatherProvider().get_data()
    assert data.content["error"] is True
    assert data.content["location"] == "London, UK"


def test_manual_provider():
    data = ManualWeatherProvider().get_data()
    assert data.content["observation"] == DEFAULT_OBSERVATION
    assert data.content["location"] == "Manual input"
    assert data.metadata["source"] == "manual"


def test_data_provider_cache_expiry():
    class CountingProvider(DataProvider):
        def __init__(self):
            super().__init__()
            self.fetches = 0

        def fetch_data(self):
            self.fetches += 1
            return DisplayData(timestamp=datetime.now(), content={"n": self.fetches})

        def get_cache_duration(self):
            return timedelta(minutes=5)

    provider = CountingProvider()
    provider.get_data()
    provider.get_data()
    assert provider.fetches == 1

    provider.clear_cache()
    provider.get_data()
    assert provider.fetches == 2

    provider._cache_expires = datetime.now() - timedelta(seconds=1)
    provider.get_data()
    assert provider.fetches == 3


def test_display_data_metadata_defaults_to_dict():
    data = DisplayData(timestamp=datetime.now(), content={}, metadata=None)
    assert data.metadata == {}


def test_convert_tolerates_null_wind_and_clouds():
    observation = convert_openweather(response_with(wind=None, clouds=None))
    assert observation.wind_speed == 0
    assert observation.wind_direction == 0
    assert observation.cloud_cover == 0
