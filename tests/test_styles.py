import random
from dataclasses import replace

from unplugged.providers import DEFAULT_OBSERVATION
from unplugged.styles import (
    DEFAULT_GENRES,
    DEFAULT_TECHNIQUE,
    _technique_for,
    generate_art_style,
    get_genres_by_description,
    select_genre,
)
from unplugged.weather import ArtGenre, WeatherDescription


def test_clear_weather_genres():
    assert set(get_genres_by_description(WeatherDescription.CLEAR)) == {
        ArtGenre.MINIMALISM, ArtGenre.GEOMETRIC_ABSTRACT, ArtGenre.POP_ART,
    }


def test_every_description_has_candidates():
    for description in WeatherDescription:
        genres = get_genres_by_description(description)
        assert 1 <= len(genres) <= 3


def test_unknown_description_gets_default_genres():
    assert get_genres_by_description("Hail") == DEFAULT_GENRES
    assert select_genre("Hail", random.Random(1)) is ArtGenre.ABSTRACT_EXPRESSIONISM


def test_selection_stays_within_candidates():
    rng = random.Random(0)
    candidates = get_genres_by_description(WeatherDescription.THUNDERSTORM)
    picks = {select_genre(WeatherDescription.THUNDERSTORM, rng) for _ in range(200)}
    assert picks == set(candidates)


def test_seeded_selection_is_repeatable():
    first = [select_genre(WeatherDescription.RAIN, random.Random(9)) for _ in range(5)]
    assert len(set(first)) == 1


def test_mood_and_colours():
    hot_rain = replace(DEFAULT_OBSERVATION, temperature=30,
                       description=WeatherDescription.RAIN, cloud_cover=20)
    style = generate_art_style(hot_rain, random.Random(1))
    assert style.mood == "warm, vibrant, dramatic"
    assert style.color_description == "vibrant warm tones"

    cold_clear = replace(DEFAULT_OBSERVATION, temperature=0,
                         description=WeatherDescription.CLEAR, cloud_cover=80)
    style = generate_art_style(cold_clear, random.Random(1))
    assert style.mood == "cold, stark, peaceful"
    assert style.color_description == "muted cool tones"

    mild_snow = replace(DEFAULT_OBSERVATION, temperature=10,
                        description=WeatherDescription.SNOW)
    assert generate_art_style(mild_snow).mood == "balanced, moderate"


def test_thunderstorm_mood_has_no_suffix():
    storm = replace(DEFAULT_OBSERVATION, temperature=20,
                    description=WeatherDescription.THUNDERSTORM)
    assert generate_art_style(storm, random.Random(1)).mood == "balanced, moderate"


def test_techniques():
    rainy = replace(DEFAULT_OBSERVATION, description=WeatherDescription.SHOWER_RAIN)
    windy = replace(DEFAULT_OBSERVATION, wind_speed=25)
    humid = replace(DEFAULT_OBSERVATION, humidity=85)

    assert _technique_for(ArtGenre.IMPRESSIONISM, rainy) == "wet-on-wet brushwork"
    assert _technique_for(ArtGenre.IMPRESSIONISM, DEFAULT_OBSERVATION) == "quick, light brushstrokes"
    assert _technique_for(ArtGenre.ABSTRACT_EXPRESSIONISM, windy) == "dynamic, sweeping gestures"
    assert _technique_for(ArtGenre.WATERCOLOR, humid) == "blended washes with soft edges"
    assert _technique_for(ArtGenre.WATERCOLOR, DEFAULT_OBSERVATION) == "controlled wash with defined edges"
    assert _technique_for(ArtGenre.SURREALISM, DEFAULT_OBSERVATION) == DEFAULT_TECHNIQUE


def test_style_technique_matches_genre():
    rng = random.Random(4)
    for _ in range(20):
        style = generate_art_style(DEFAULT_OBSERVATION, rng)
        assert style.technique == _technique_for(style.genre, DEFAULT_OBSERVATION)
