import argparse
import logging
import os
import re
import sys
from pathlib import Path

from termpic.charsets import RAMPS
from termpic.colour import RenderMode, colouriser_for
from termpic.converter import render
from termpic.errors import TermpicError, UsageError
from termpic.geometry import fit, reserve_prompt_line
from termpic.image import load_image
from termpic.paths import expand_home
from termpic.terminal import get_terminal_size

logger = logging.getLogger(__name__)

MODES = {mode.value: mode for mode in RenderMode}


def parse_size(value: str) -> tuple[int, int]:
    """Parse ``COLSxROWS`` into a (columns, rows) pair."""
    match = re.fullmatch(r"\s*(\d+)\s*[xX]\s*(\d+)\s*", value)
    if match is None:
        raise UsageError(f"invalid size {value!r}, expected COLSxROWS (e.g. 80x24)")
    return int(match.group(1)), int(match.group(2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termpic", description="Render an image as coloured text in the terminal")
    parser.add_argument("-i", "--image", default="", help="Path to the image file")
    parser.add_argument(
        "-m", "--mode", default=RenderMode.HALF_BLOCK.value, choices=sorted(MODES), help="Rendering mode (default: half)"
    )
    parser.add_argument(
        "-r",
        "--ramp",
        default=None,
        help=f"Luminance ramp for ascii mode, dark to light: one of {', '.join(sorted(RAMPS))} or literal characters",
    )
    parser.add_argument(
        "-s", "--size", default=None, help="Terminal size as COLSxROWS (default: size of the attached terminal)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def run(args: argparse.Namespace, home: Path) -> None:
    if not args.image:
        raise UsageError("usage: termpic --image=/path/to/image.jpg")

    if args.ramp == "":
        raise UsageError("luminance ramp must contain at least one character")

    path = expand_home(args.image, home)
    image = load_image(path)

    columns, rows = parse_size(args.size) if args.size is not None else get_terminal_size()
    logger.debug("terminal is %dx%d", columns, rows)

    ramp = RAMPS.get(args.ramp, args.ramp) if args.ramp is not None else None
    colouriser = colouriser_for(MODES[args.mode], ramp)
    grid = fit(image.width, image.height, columns, reserve_prompt_line(rows), half_block=colouriser.half_block)
    render(image, grid, colouriser, sys.stdout)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )
    home = Path.home()
    try:
        run(args, home)
    except TermpicError as e:
        print(f"termpic: {e}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # Reader closed early (e.g. piped into head); point stdout at devnull so the exit flush stays quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)
