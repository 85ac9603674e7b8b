#!/usr/bin/env python3
"""
unplugged Demo Script

Demonstrates the weather -> parameters -> style -> artwork pipeline.
Shows the mappings, the enhancer, both background treatments and the
terminal preview.
"""

import random
import sys
from dataclasses import replace

from unplugged.enhancer import enhance, enhanced_palette
from unplugged.mappings import generate_drawing_params, get_color_palette
from unplugged.providers import DEFAULT_OBSERVATION, ManualWeatherProvider, WeatherProvider
from unplugged.renderers import ArtRenderer, ASCIIRenderer, render_basic, render_vibrant
from unplugged.renderers.export import save_image
from unplugged.styles import generate_art_style, get_genres_by_description
from unplugged.weather import ArtGenre, WeatherDescription


def demo_mappings():
    """
    Demo the pure weather -> parameter mappings.

    Nothing here is random, so the output is the same on every run.
    """
    print("=" * 64)
    print("Mappings Demo")
    print("=" * 64)
    print()

    for temperature in (32, 25, 15, 5, -5):
        print(f"  {temperature:>4}°C palette: {' '.join(get_color_palette(temperature))}")
    print()

    params = generate_drawing_params(DEFAULT_OBSERVATION)
    print("Drawing parameters for the default observation:")
    for name, value in vars(params).items():
        print(f"  {name}: {value}")
    print()


def demo_enhancer():
    """Demo the vibrancy enhancer on a dull, overcast observation."""
    print("=" * 64)
    print("Enhancer Demo")
    print("=" * 64)
    print()

    dull = replace(DEFAULT_OBSERVATION, cloud_cover=95, uv_index=2,
                   precipitation_intensity=8, wind_speed=2,
                   description=WeatherDescription.BROKEN_CLOUDS)
    enhanced = enhance(dull)

    for field in ("cloud_cover", "uv_index", "precipitation_intensity", "wind_speed", "description"):
        print(f"  {field}: {getattr(dull, field)} -> {getattr(enhanced, field)}")
    print(f"  vibrant palette: {' '.join(enhanced_palette(dull))}")
    print()


def demo_styles():
    """Demo genre candidates and a few random style picks."""
    print("=" * 64)
    print("Style Demo")
    print("=" * 64)
    print()

    for description in WeatherDescription:
        genres = ", ".join(g.value for g in get_genres_by_description(description))
        print(f"  {description.value:<17} {genres}")
    print()

    rng = random.Random(42)
    for _ in range(3):
        style = generate_art_style(DEFAULT_OBSERVATION, rng)
        print(f"  {style.genre.value}: {style.mood} / {style.color_description} / {style.technique}")
    print()


def demo_backgrounds():
    """
    Demo both background treatments with the same seed.

    Saves one PNG per treatment to output/.
    """
    print("=" * 64)
    print("Background Demo")
    print("=" * 64)
    print()

    basic = render_basic(DEFAULT_OBSERVATION, rng=random.Random(7))
    vibrant = render_vibrant(DEFAULT_OBSERVATION, rng=random.Random(7))

    print(f"  basic:   {basic.style.genre.value}, background {' -> '.join(basic.background)}")
    save_image(basic.image)
    print(f"  vibrant: {vibrant.style.genre.value}, background {' -> '.join(vibrant.background)}")
    save_image(vibrant.image)
    print()


def demo_preview():
    """Demo terminal previews for a few weather types."""
    print("=" * 64)
    print("Preview Demo")
    print("=" * 64)
    print()

    renderer = ArtRenderer(seed=3, quiet=True)
    preview = ASCIIRenderer(width=64, height=32, art_renderer=renderer)

    for description in (WeatherDescription.CLEAR, WeatherDescription.RAIN,
                        WeatherDescription.SNOW, WeatherDescription.FOG):
        provider = ManualWeatherProvider(replace(DEFAULT_OBSERVATION, description=description))
        print(preview.render_frame(provider.get_data(), title=description.value))
        print()


def demo_all_genres():
    """Paint every genre once, including those that share the default algorithm."""
    print("=" * 64)
    print("All Genres Demo")
    print("=" * 64)
    print()

    from unplugged.renderers.art import draw_artwork, fill_basic_background
    from unplugged.renderers.surface import RasterSurface
    from unplugged.weather import ArtStyle

    rng = random.Random(11)
    observation = enhance(DEFAULT_OBSERVATION)
    params = generate_drawing_params(observation)

    for genre in ArtGenre:
        surface = RasterSurface(800, 400)
        fill_basic_background(surface, params)
        style = ArtStyle(genre=genre, mood="", color_description="", technique="")
        draw_artwork(surface, observation, params, style, rng)
        print(f"  {genre.value}: {surface.size}")
    print()


def demo_weather():
    """
    Demo the live OpenWeather provider.

    Needs OPENWEATHER_API_KEY; without it the fallback gradient is shown.
    """
    print("=" * 64)
    print("Weather Provider Demo")
    print("=" * 64)
    print()

    provider = WeatherProvider()
    renderer = ArtRenderer()
    preview = ASCIIRenderer(width=64, height=32, art_renderer=renderer)

    print("Fetching weather data...")
    data = provider.get_data()
    print()

    if data.content.get('error'):
        print(f"Error: {data.content.get('error_message')} ({data.content.get('error_details')})")
    else:
        observation = data.content['observation']
        print(f"  Location: {data.content.get('location')}")
        print(f"  {observation.description.value}, {observation.temperature:.1f}°C, "
              f"wind {observation.wind_speed:.0f} km/h, clouds {observation.cloud_cover:.0f}%")
    print()

    print(preview.render(data))
    print()


def main():
    """Run all demos"""

    demos = {
        "mappings": demo_mappings,
        "enhancer": demo_enhancer,
        "styles": demo_styles,
        "backgrounds": demo_backgrounds,
        "preview": demo_preview,
        "genres": demo_all_genres,
        "weather": demo_weather,
    }

    if len(sys.argv) > 1:
        demo_name = sys.argv[1]

        if demo_name in demos:
            demos[demo_name]()
        else:
            print(f"Unknown demo: {demo_name}")
            print(f"Available demos: {', '.join(demos.keys())}")
            sys.exit(1)
    else:
        # Run all offline demos
        demo_mappings()
        demo_enhancer()
        demo_styles()
        demo_preview()

        print("\n" + "=" * 64)
        print("All demos completed!")
        print("=" * 64)
        print()
        print("To run individual demos:")
        for name in demos:
            print(f"  python demo.py {name}")
        print()


if __name__ == "__main__":
    main()
