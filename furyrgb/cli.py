"""Command-line interface for controlling Fury Renegade RGB lighting."""

from __future__ import annotations

import argparse
import re
import sys

from .colour import Colour
from .controller import MultiRamController, PatternStyle

_VERSION = "0.2.0"
PERCENT_TOO_HIGH = "Percent values must be equal to or less than 100"
STICK_ADDRESSES = (0x60, 0x61, 0x62, 0x63)
_BYTE = re.compile(r"\+?[0-9]+")


def _byte(text: str) -> int:
    if not _BYTE.fullmatch(text) or int(text) > 0xFF:
        raise argparse.ArgumentTypeError(f"{text!r} is not a number between 0 and 255")
    return int(text)


def _percent(text: str) -> int:
    value = _byte(text)
    if value > 100:
        raise argparse.ArgumentTypeError(PERCENT_TOO_HIGH)
    return value


def _style(text: str) -> PatternStyle:
    try:
        return PatternStyle.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _colour(text: str) -> Colour:
    try:
        return Colour.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="fury-renegade-rgb",
        description="Control the RGB lights on Kingston Fury Renegade RAM",
    )
    parser.add_argument("--version", action="version", version=_VERSION)
    parser.add_argument("-b", "--bus", required=True, help="i2c bus to use, e.g. /dev/i2c-1")
    for number in range(1, 5):
        parser.add_argument(
            f"-{number}",
            f"--stick-{number}",
            dest=f"stick_{number}",
            action="store_true",
            help=f"Run command on stick {number}",
        )

    commands = parser.add_subparsers(dest="action", required=True, metavar="COMMAND")
    commands.add_parser("noop", help="Open and close a command on each stick")
    commands.add_parser("reset", help="Restore the default settings")
    commands.add_parser("sync", help="Sync timings between the sticks (only tested on 4 sticks)")

    colour_brightness = commands.add_parser(
        "colour-brightness", help="Sets a rgb mask on whatever the pattern does"
    )
    for name in ("red", "green", "blue"):
        colour_brightness.add_argument(
            f"-{name[0]}",
            f"--{name}",
            type=_percent,
            required=True,
            help="Value between 0 and 100",
        )

    brightness = commands.add_parser("brightness", help="Sets the overall brightness of the stick")
    brightness.add_argument("value", type=_percent, help="Value between 0 and 100")

    start_offset = commands.add_parser(
        "pattern-start-offset",
        help="Sets a delay before starting the pattern. On a syncronized set of sticks, "
        "the offset appears to be additive",
    )
    start_offset.add_argument("raw_offset", type=_byte)

    repeat_delay = commands.add_parser(
        "pattern-repeat-delay",
        help="A delay before the pattern repeats, this should be set to the same value on all sticks",
    )
    repeat_delay.add_argument("raw_delay", type=_byte)

    pattern = commands.add_parser("pattern", help="Which pattern and style to use")
    pattern.add_argument(
        "style",
        type=_style,
        help="Can be one of: " + ", ".join(style.name.lower() for style in PatternStyle),
    )
    pattern.add_argument(
        "colours", type=_colour, nargs="*", help="#RRGGBB, #RGB or R,G,B with values 0 to 255"
    )
    return parser


def selected_sticks(args: argparse.Namespace) -> list[int]:
    """Return the I2C addresses of the sticks chosen on the command line."""
    return [
        address
        for number, address in enumerate(STICK_ADDRESSES, start=1)
        if getattr(args, f"stick_{number}")
    ]


def _run(controller: MultiRamController, args: argparse.Namespace) -> None:
    match args.action:
        case "noop":
            controller.noop()
        case "reset":
            controller.reset()
        case "sync":
            controller.sync_timings()
        case "colour-brightness":
            controller.set_rgb_brightness_percent(args.red, args.green, args.blue)
        case "brightness":
            controller.set_brightness_percent(args.value)
        case "pattern-start-offset":
            controller.set_pattern_start_offset(args.raw_offset)
        case "pattern-repeat-delay":
            controller.set_pattern_repeat_delay(args.raw_delay)
        case "pattern":
            controller.set_pattern(args.style, args.colours)


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and send the command to the selected sticks."""
    args = build_parser().parse_args(argv)
    sticks = selected_sticks(args)
    print(f"Running command on sticks: {sticks}")
    print(f"opts: {args}")
    try:
        with MultiRamController.open(args.bus, sticks) as controller:
            _run(controller, args)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())