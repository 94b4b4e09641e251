import argparse
import sys
from pathlib import Path

from . import __version__, config, render
from .decoders import DEFAULT_DECODERS, AsciiGraymapDecoder, AsciiTermination
from .errors import InvalidInput, NetpbmError
from .formats import FormatTag
from .observer import stderr_observer
from .parser import parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netpbm-view",
        description="Decode a PGM (P2/P5) image and show it in a window or as terminal block glyphs"
    )

    parser.add_argument(
        "image",
        type=Path,
        nargs="?",
        help="Path to the PGM image to display"
    )

    mode = parser.add_mutually_exclusive_group()

    mode.add_argument(
        "-t",
        "--text",
        dest="mode",
        action="store_const",
        const="text",
        help="Print the image to the terminal as block glyphs"
    )

    mode.add_argument(
        "-w",
        "--window",
        dest="mode",
        action="store_const",
        const="window",
        help="Show the image in a window, closed with Escape or 'q' (default unless configured otherwise)"
    )

    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=None,
        help="Integer upscaling factor for the window (defaults to the configured SCALE)"
    )

    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Window title (defaults to the configured WINDOW_TITLE)"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject non-numeric tokens in ASCII pixel data instead of treating them as the end of the data"
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"INI file with display and decoding settings (defaults to '{config.DEFAULT_CONFIG_PATH}' if present)"
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print decoder diagnostics to stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def run(args: argparse.Namespace) -> None:
    if args.image is None:
        raise InvalidInput("Not enough arguments! Expected the path of an image to display")

    settings = config.load(args.config)

    termination = AsciiTermination.STRICT if args.strict else settings.ascii_termination
    decoders = {**DEFAULT_DECODERS, FormatTag.PGM_ASCII: AsciiGraymapDecoder(termination)}

    observer = stderr_observer() if args.verbose or settings.verbose else None

    image = parse(args.image.read_bytes(), observer=observer, decoders=decoders)

    if (args.mode or settings.mode) == "text":
        sys.stdout.write(render.to_glyphs(image))
        return

    scale = settings.scale if args.scale is None else args.scale

    if scale < 1:
        raise InvalidInput(f"Scale must be a positive integer, not {scale}")

    render.show(
        image,
        title=settings.window_title if args.title is None else args.title,
        scale=scale
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        run(args)
    except (NetpbmError, config.ConfigError, render.DisplayError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0
