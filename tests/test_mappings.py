from dataclasses import replace

import pytest

from unplugged.mappings import (
    COLD_PALETTE,
    generate_drawing_params,
    get_atmospheric_params,
    get_color_palette,
    get_precipitation_params,
    get_wind_params,
)
from unplugged.providers import DEFAULT_OBSERVATION
from unplugged.weather import WeatherDescription


def test_hot_palette():
    assert get_color_palette(32) == ("#FF4500", "#FF7F50", "#FFA07A", "#FFD700", "#FFFFE0")


def test_palette_band_edges_are_exclusive():
    assert get_color_palette(30) == get_color_palette(25)
    assert get_color_palette(20) == get_color_palette(15)
    assert get_color_palette(0) == COLD_PALETTE
    assert get_color_palette(-40) == COLD_PALETTE


@pytest.mark.parametrize("temperature", [-30, -0.5, 0, 0.5, 10, 10.1, 20, 29.9, 30.1, 45])
def test_palette_always_has_five_colours(temperature):
    assert len(get_color_palette(temperature)) == 5


def test_precipitation_params():
    params = get_precipitation_params(0.6, 4)
    assert params["density"] == pytest.approx(60)
    assert params["opacity"] == pytest.approx(0.7)


def test_precipitation_params_are_clamped():
    assert get_precipitation_params(0, 0) == {"density": 5, "opacity": 0.3}
    high = get_precipitation_params(5, 50)
    assert high["density"] == 100
    assert high["opacity"] == pytest.approx(0.9)


def test_wind_params():
    assert get_wind_params(4, 90) == {"distortion": 20, "directionality": 90}
    assert get_wind_params(40, 400)["distortion"] == 50
    assert get_wind_params(40, 400)["directionality"] == 400


def test_atmospheric_params_heavy_cloud():
    params = get_atmospheric_params(90, 40)
    assert params["contrast"] == 50
    assert params["saturation"] == pytest.approx(55)
    assert params["brightness"] == 50
    assert params["blur"] == pytest.approx(2)


def test_atmospheric_blur_is_capped():
    assert get_atmospheric_params(0, 100)["blur"] == 5


def test_drawing_params_bounds():
    extreme = replace(
        DEFAULT_OBSERVATION,
        temperature=50,
        precipitation_probability=1,
        precipitation_intensity=100,
        wind_speed=200,
        cloud_cover=100,
        humidity=100,
        uv_index=12,
    )
    params = generate_drawing_params(extreme)
    assert params.stroke_width == 1
    assert params.particle_size == 5
    assert params.particle_count == 500
    assert params.movement_speed == 10
    assert params.contrast >= 50 and params.saturation >= 50 and params.brightness >= 50
    assert params.blur <= 5

    calm = replace(DEFAULT_OBSERVATION, precipitation_probability=0,
                   precipitation_intensity=0, wind_speed=0, uv_index=0)
    params = generate_drawing_params(calm)
    assert params.stroke_width == 5
    assert params.particle_size == 1
    assert params.particle_count == 10
    assert params.movement_speed == 1


def test_background_gradient_uses_palette_ends():
    params = generate_drawing_params(replace(DEFAULT_OBSERVATION, temperature=-5))
    assert params.background_gradient == (COLD_PALETTE[0], COLD_PALETTE[-1])
    assert params.color_palette == COLD_PALETTE


def test_drawing_params_are_deterministic():
    observation = replace(DEFAULT_OBSERVATION, description=WeatherDescription.RAIN)
    assert generate_drawing_params(observation) == generate_drawing_params(observation)
