# src/nearest_colors/cli.py
import argparse
import json
import logging
import sys

from .color.palettes import DEFAULT_PALETTE, PALETTES
from .errors import ConfigurationError, InvalidColorInput
from .general.utils.log import enable_topics
from .search import nearest_colors
from .types import SPACES, SearchConfig


def _split_names(value: str) -> list:
    return [v.strip() for v in value.split(",") if v.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nearest-colors",
        description="Find the nearest palette colors to a given input color.",
    )
    parser.add_argument(
        "color",
        nargs="?",
        help="Input color in any valid CSS format (e.g. hex, rgb, hsl, oklch)",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=1,
        help="Number of nearest colors to return",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=_split_names,
        action="extend",
        default=[],
        help="Comma-separated list of colors to exclude (repeatable)",
    )
    parser.add_argument("-s", "--space", choices=SPACES, default="lab", help="Color space to use")
    parser.add_argument(
        "-p",
        "--palette",
        choices=PALETTES,
        default=DEFAULT_PALETTE,
        help="Built-in palette to search",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def search_config(args: argparse.Namespace) -> SearchConfig:
    """Translate parsed flags into nearest_colors() keyword arguments."""
    return {
        "n": args.number,
        "exclude": args.exclude,
        "space": args.space,
        "palette": args.palette,
    }


def main(argv=None) -> int:
    """CLI: print the palette colors nearest to a CSS color."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.color is None:
        parser.print_help()
        return 0

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
        enable_topics("all")

    try:
        results = nearest_colors(args.color, **search_config(args))
    except (InvalidColorInput, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return 0

    print("Nearest colors:")
    for match in results:
        print(f"- {match['name']} - {match['value']} (distance: {match['distance']:.2f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
