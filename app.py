#!/usr/bin/env python3
"""
unplugged weather art

Generates a weather-driven artwork from live OpenWeather data or from
manually entered weather values, and saves it as a PNG (or previews it
in the terminal).
"""

import argparse
import sys
from dataclasses import replace

from unplugged.config import get_config
from unplugged.providers import DEFAULT_OBSERVATION, ManualWeatherProvider, WeatherProvider
from unplugged.renderers import ArtRenderer, ASCIIRenderer
from unplugged.renderers.export import save_image
from unplugged.weather import WeatherDescription


# Observation fields that can be set from the command line
MANUAL_FIELDS = [
    ("temperature", "Temperature in degrees C"),
    ("precipitation_probability", "Precipitation probability (0-1)"),
    ("precipitation_intensity", "Precipitation intensity in mm/hr"),
    ("wind_speed", "Wind speed in km/h"),
    ("wind_direction", "Wind direction in degrees"),
    ("cloud_cover", "Cloud cover in percent"),
    ("humidity", "Humidity in percent"),
    ("uv_index", "UV index (0-12)"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="unplugged - weather-driven procedural art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python app.py                                  Live weather, save PNG
  python app.py --debug                          Live weather, terminal preview
  python app.py --manual --temperature 32 --description Clear
  python app.py --manual --description Snow --basic --seed 7
        """
    )
    parser.add_argument("--manual", action="store_true",
                        help="Use manually entered weather instead of OpenWeather")
    for name, help_text in MANUAL_FIELDS:
        parser.add_argument(f"--{name.replace('_', '-')}", dest=name, type=float,
                            help=f"{help_text} (implies --manual)")
    parser.add_argument("--description",
                        help="Weather description, one of: "
                             + ", ".join(d.value for d in WeatherDescription)
                             + " (implies --manual)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--basic", action="store_true",
                        help="Use the 2-stop temperature gradient instead of the vibrant background")
    parser.add_argument("--seed", type=int, help="Seed for reproducible artwork")
    parser.add_argument("--output-dir", help="Directory for the PNG file")
    parser.add_argument("--debug", action="store_true",
                        help="Debug mode: print a terminal preview instead of saving a PNG")
    return parser


def manual_observation(parser: argparse.ArgumentParser, args: argparse.Namespace):
    """Build an observation from the default manual values and CLI overrides."""
    overrides = {
        name: getattr(args, name)
        for name, _ in MANUAL_FIELDS
        if getattr(args, name) is not None
    }
    if args.description is not None:
        description = WeatherDescription.parse(args.description)
        if description is None:
            parser.error(f"Unknown weather description: {args.description}")
        overrides["description"] = description
    return replace(DEFAULT_OBSERVATION, **overrides)


def wants_manual(args: argparse.Namespace) -> bool:
    if args.manual or args.description is not None:
        return True
    return any(getattr(args, name) is not None for name, _ in MANUAL_FIELDS)


def print_artwork_summary(artwork, location: str) -> None:
    style = artwork.style
    observation = artwork.observation

    print("=" * 70)
    print(f"Location:   {location}")
    print(f"Weather:    {observation.description.value}, {observation.temperature:.1f}°C")
    print(f"Genre:      {style.genre.value}")
    print(f"Mood:       {style.mood}")
    print(f"Colors:     {style.color_description}")
    print(f"Technique:  {style.technique}")
    print(f"Palette:    {' '.join(artwork.params.color_palette)}")
    print(f"Background: {' -> '.join(artwork.background)}")
    print("=" * 70)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
        canvas = config.get_canvas_config()

        if wants_manual(args):
            provider = ManualWeatherProvider(manual_observation(parser, args))
        else:
            provider = WeatherProvider()

        renderer = ArtRenderer(
            width=args.width or canvas["width"],
            height=args.height or canvas["height"],
            vibrant=not args.basic and canvas["mode"] != "basic",
            seed=args.seed,
        )

        data = provider.get_data()
        image = renderer.render(data)
        location = data.content.get("location", "Unknown")

        if data.content.get("error"):
            print(f"[app] {data.content.get('error_message')}: "
                  f"{data.content.get('error_details')} (showing fallback background)")
        elif renderer.last_artwork is not None:
            print_artwork_summary(renderer.last_artwork, location)

        if args.debug:
            preview = ASCIIRenderer(art_renderer=renderer)
            print(preview.image_to_ascii(image))
        else:
            save_image(image, args.output_dir or canvas["output_dir"])

    except Exception as e:
        print(f"\n[ERROR] Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
