import argparse
import logging
import sys

from asciiart.brightness import Brightness
from asciiart.config import (
    CHAR_PADDING,
    DEFAULT_BRIGHTNESS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    RenderOptions,
)
from asciiart.charsets import BRIGHTNESS_SCALE
from asciiart.converter import image_to_cells, load_image
from asciiart.errors import AsciiArtError, InvalidArgument
from asciiart.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


def dimension(value: str) -> int:
    """argparse type for integer sizes; range checks happen in RenderOptions."""
    try:
        return int(value)
    except ValueError:
        raise InvalidArgument(f"not an integer: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ascii-art", description="Print an image to the terminal as ASCII art")
    parser.add_argument("image", nargs="?", help="Path to input image")
    parser.add_argument("-i", "--image", dest="image_option", metavar="IMAGE", help="Path to input image")
    parser.add_argument(
        "-W",
        "--width",
        type=dimension,
        default=DEFAULT_WIDTH,
        help=f"Output width in characters (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-H",
        "--height",
        type=dimension,
        default=DEFAULT_HEIGHT,
        help=f"Output height in characters (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "-b",
        "--brightness",
        choices=[b.value for b in Brightness],
        default=None,
        help=f"Brightness mapping (default: {DEFAULT_BRIGHTNESS.value})",
    )
    parser.add_argument("--min-max", action="store_true", help="Shorthand for --brightness min-max")
    parser.add_argument("--luminosity", action="store_true", help="Shorthand for --brightness luminosity")
    parser.add_argument("--invert", action="store_true", default=False, help="Invert brightness levels")
    parser.add_argument("--monochrome", action="store_true", default=False, help="Disable colour output")
    parser.add_argument(
        "-p",
        "--padding",
        type=dimension,
        default=CHAR_PADDING,
        help=f"Times each character is repeated horizontally (default: {CHAR_PADDING})",
    )
    parser.add_argument("--scale", default=BRIGHTNESS_SCALE, help="Characters to draw with, lightest first")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _brightness(args: argparse.Namespace) -> Brightness:
    if args.brightness is not None:
        if args.min_max or args.luminosity:
            logger.warning("--min-max and --luminosity are ignored because --brightness is set")
        return Brightness(args.brightness)
    if args.min_max:
        if args.luminosity:
            logger.warning("--luminosity is ignored because --min-max is set")
        return Brightness.MIN_MAX
    if args.luminosity:
        return Brightness.LUMINOSITY
    return DEFAULT_BRIGHTNESS


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions(
        width=args.width,
        height=args.height,
        brightness=_brightness(args),
        invert=args.invert,
        colour=not args.monochrome,
        padding=args.padding,
        scale=args.scale,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    image_path = args.image_option or args.image
    if image_path is None:
        parser.error("an image path is required")

    try:
        options = options_from_args(args)
        options.validate()
        cells = image_to_cells(load_image(image_path), options)
    except AsciiArtError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print()
    TerminalRenderer(padding=options.padding).write(cells)
