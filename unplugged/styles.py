"""
Art style selection.

Maps weather descriptions to candidate genres, picks one at random and
writes the human-readable style text (mood, colours, technique).
"""

import random
from typing import Optional, Tuple

from unplugged.weather import ArtGenre, ArtStyle, WeatherDescription, WeatherObservation


GENRES_BY_DESCRIPTION = {
    WeatherDescription.CLEAR: (
        ArtGenre.MINIMALISM, ArtGenre.GEOMETRIC_ABSTRACT, ArtGenre.POP_ART),
    WeatherDescription.FEW_CLOUDS: (
        ArtGenre.MINIMALISM, ArtGenre.WATERCOLOR, ArtGenre.GEOMETRIC_ABSTRACT),
    WeatherDescription.SCATTERED_CLOUDS: (
        ArtGenre.IMPRESSIONISM, ArtGenre.WATERCOLOR, ArtGenre.ABSTRACT_EXPRESSIONISM),
    WeatherDescription.BROKEN_CLOUDS: (
        ArtGenre.ABSTRACT_EXPRESSIONISM, ArtGenre.IMPRESSIONISM, ArtGenre.SURREALISM),
    WeatherDescription.SHOWER_RAIN: (
        ArtGenre.IMPRESSIONISM, ArtGenre.WATERCOLOR, ArtGenre.LINE_ART),
    WeatherDescription.RAIN: (
        ArtGenre.IMPRESSIONISM, ArtGenre.WATERCOLOR, ArtGenre.ABSTRACT_EXPRESSIONISM),
    WeatherDescription.THUNDERSTORM: (
        ArtGenre.EXPRESSIONISM, ArtGenre.SURREALISM, ArtGenre.GLITCH_ART),
    WeatherDescription.SNOW: (
        ArtGenre.MINIMALISM, ArtGenre.POINTILLISM, ArtGenre.WATERCOLOR),
    WeatherDescription.MIST: (
        ArtGenre.IMPRESSIONISM, ArtGenre.MINIMALISM, ArtGenre.WATERCOLOR),
    WeatherDescription.FOG: (
        ArtGenre.IMPRESSIONISM, ArtGenre.MINIMALISM, ArtGenre.ABSTRACT_EXPRESSIONISM),
}

DEFAULT_GENRES = (ArtGenre.ABSTRACT_EXPRESSIONISM,)

DEFAULT_TECHNIQUE = "mixed media with varied mark-making"


def get_genres_by_description(description) -> Tuple[ArtGenre, ...]:
    """
    Get candidate genres for a weather description.

    Args:
        description: WeatherDescription (anything else gets the default set)

    Returns:
        Tuple of 1-3 candidate genres
    """
    return GENRES_BY_DESCRIPTION.get(description, DEFAULT_GENRES)


def select_genre(description, rng: Optional[random.Random] = None) -> ArtGenre:
    """
    Pick one candidate genre uniformly at random.

    Args:
        description: Weather description
        rng: Random source (default: fresh unseeded generator)

    Returns:
        Selected genre
    """
    rng = rng or random.Random()
    return rng.choice(get_genres_by_description(description))


def _technique_for(genre: ArtGenre, observation: WeatherObservation) -> str:
    if genre is ArtGenre.IMPRESSIONISM:
        if observation.description.is_rainy:
            return "wet-on-wet brushwork"
        return "quick, light brushstrokes"
    if genre is ArtGenre.ABSTRACT_EXPRESSIONISM:
        if observation.wind_speed > 20:
            return "dynamic, sweeping gestures"
        return "layered, textural application"
    if genre is ArtGenre.WATERCOLOR:
        if observation.humidity > 70:
            return "blended washes with soft edges"
        return "controlled wash with defined edges"
    if genre is ArtGenre.GEOMETRIC_ABSTRACT:
        return "structured geometric shapes with clean lines"
    if genre is ArtGenre.MINIMALISM:
        return "restrained elements with emphasis on negative space"
    if genre is ArtGenre.POINTILLISM:
        return "densely packed color points creating optical blending"
    return DEFAULT_TECHNIQUE


def generate_art_style(observation: WeatherObservation,
                       rng: Optional[random.Random] = None) -> ArtStyle:
    """
    Build the art style for an observation.

    The genre is drawn from rng, so repeated calls with the same
    observation can return different styles unless rng is seeded.

    Args:
        observation: Weather observation
        rng: Random source (default: fresh unseeded generator)

    Returns:
        ArtStyle with genre, mood, colour description and technique
    """
    genre = select_genre(observation.description, rng)
    temperature = observation.temperature
    description = observation.description

    # Mood from temperature, then weather drama
    if temperature > 25:
        mood = "warm, vibrant"
    elif temperature < 5:
        mood = "cold, stark"
    else:
        mood = "balanced, moderate"

    if description.is_rainy:
        mood += ", dramatic"
    elif description.is_clear:
        mood += ", peaceful"

    if temperature > 25:
        temp_word = "warm"
    elif temperature < 5:
        temp_word = "cool"
    else:
        temp_word = "neutral"
    saturation_word = "muted" if observation.cloud_cover > 70 else "vibrant"

    return ArtStyle(
        genre=genre,
        mood=mood,
        color_description=f"{saturation_word} {temp_word} tones",
        technique=_technique_for(genre, observation),
    )
