from unplugged.weather import WeatherDescription


def test_parse_is_case_insensitive():
    assert WeatherDescription.parse("broken clouds") is WeatherDescription.BROKEN_CLOUDS
    assert WeatherDescription.parse("  SNOW ") is WeatherDescription.SNOW


def test_parse_unknown_returns_none():
    assert WeatherDescription.parse("Hail") is None
    assert WeatherDescription.parse("") is None


def test_predicate_groups_do_not_overlap():
    for description in WeatherDescription:
        groups = [
            description.is_clear,
            description.is_cloudy,
            description.is_rainy,
            description.is_snowy,
            description.is_foggy,
        ]
        expected = 0 if description is WeatherDescription.THUNDERSTORM else 1
        assert groups.count(True) == expected, description


def test_shower_rain_counts_as_rain():
    assert WeatherDescription.SHOWER_RAIN.is_rainy
    assert not WeatherDescription.THUNDERSTORM.is_rainy
