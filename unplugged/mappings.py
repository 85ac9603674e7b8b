"""
Weather to drawing-parameter mappings.

Pure functions turning scalar weather fields into colour palettes and
numeric drawing parameters. Nothing here is random.
"""

from typing import Dict, Tuple

from unplugged.weather import DrawingParameters, WeatherObservation


# Temperature bands, hottest first. Each entry is (exclusive lower bound, palette).
# There is no interpolation between bands.
TEMPERATURE_PALETTES = [
    (30, ("#FF4500", "#FF7F50", "#FFA07A", "#FFD700", "#FFFFE0")),  # Hot
    (20, ("#FFA500", "#FFD700", "#FFDAB9", "#FFFACD", "#FFFFE0")),  # Warm
    (10, ("#98FB98", "#7FFFD4", "#FFFACD", "#B0E0E6", "#87CEEB")),  # Mild
    (0, ("#ADD8E6", "#B0E0E6", "#87CEEB", "#E0FFFF", "#F0F8FF")),   # Cool
]
COLD_PALETTE = ("#E0FFFF", "#F0F8FF", "#B0C4DE", "#D6BCFA", "#9370DB")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def get_color_palette(temperature: float) -> Tuple[str, ...]:
    """
    Pick the 5-colour palette for a temperature.

    Args:
        temperature: Degrees Celsius

    Returns:
        Tuple of 5 hex colours, primary first
    """
    for lower_bound, palette in TEMPERATURE_PALETTES:
        if temperature > lower_bound:
            return palette
    return COLD_PALETTE


def get_precipitation_params(probability: float, intensity: float) -> Dict[str, float]:
    """
    Map precipitation to mark density and opacity.

    Args:
        probability: Precipitation probability (0-1)
        intensity: Precipitation intensity in mm/hr

    Returns:
        Dict with density (5-100) and opacity (0.3-0.9)
    """
    return {
        "density": _clamp(probability * 100, 5, 100),
        "opacity": _clamp(0.3 + intensity / 10, 0.3, 0.9),
    }


def get_wind_params(speed: float, direction: float) -> Dict[str, float]:
    """Map wind to distortion (0-50) and directionality (degrees, passthrough)."""
    return {
        "distortion": _clamp(speed * 5, 0, 50),
        "directionality": direction,
    }


def get_atmospheric_params(cloud_cover: float, humidity: float) -> Dict[str, float]:
    """
    Map cloud cover and humidity to atmosphere parameters.

    Contrast, saturation and brightness never drop below 50 so heavy
    cloud cover can't flatten the image.

    Args:
        cloud_cover: Percent (0-100)
        humidity: Percent (0-100)

    Returns:
        Dict with contrast, saturation, brightness (>= 50) and blur (<= 5)
    """
    return {
        "contrast": max(50, 100 - cloud_cover),
        "saturation": max(50, 100 - cloud_cover * 0.5),
        "brightness": max(50, 100 - cloud_cover * 0.7),
        "blur": min(5, humidity / 20),
    }


def generate_drawing_params(observation: WeatherObservation) -> DrawingParameters:
    """
    Derive the full set of drawing parameters for an observation.

    Args:
        observation: Weather observation (usually already enhanced)

    Returns:
        DrawingParameters, freshly computed
    """
    palette = get_color_palette(observation.temperature)
    precipitation = get_precipitation_params(
        observation.precipitation_probability,
        observation.precipitation_intensity,
    )
    wind = get_wind_params(observation.wind_speed, observation.wind_direction)
    atmosphere = get_atmospheric_params(observation.cloud_cover, observation.humidity)

    return DrawingParameters(
        color_palette=palette,
        background_gradient=(palette[0], palette[-1]),
        # Higher UV = thinner, more precise lines
        stroke_width=max(1, 5 - observation.uv_index / 3),
        density=precipitation["density"],
        opacity=precipitation["opacity"],
        distortion=wind["distortion"],
        directionality=wind["directionality"],
        contrast=atmosphere["contrast"],
        saturation=atmosphere["saturation"],
        brightness=atmosphere["brightness"],
        blur=atmosphere["blur"],
        particle_size=_clamp(observation.precipitation_intensity * 2, 1, 5),
        particle_count=_clamp(observation.precipitation_probability * 500, 10, 500),
        movement_speed=_clamp(observation.wind_speed * 0.5, 1, 10),
    )
