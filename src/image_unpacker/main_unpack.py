"""
main_unpack.py — command line for the raw float-RGB → PNG converter.

USAGE
-----
  imageunpacker -i frame.raw -o frame.png
  imageunpacker -i frame.raw -o frame.png -gamma 2.2 -hist frame_hist.png
  python -m image_unpacker -i frame.raw -o frame.png -gamma 1

Exit status: 0 on success, 1 on a usage error or any read/decode/write
failure (message on stderr).

© 2025 Ali Pouya — Image Unpacker
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from image_unpacker.errors import UnpackError
from image_unpacker.tone.tone_model import DEFAULT_GAMMA, ToneParams
from image_unpacker.unpacker import convert_file
from image_unpacker.utils.metrics_module import plot_channel_histogram

logger = logging.getLogger("image_unpacker")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="imageunpacker",
        description="Unpack a raw float32 RGB buffer into a PNG image.",
    )
    p.add_argument("-i", dest="input", default="", help="input data filepath")
    p.add_argument("-o", dest="output", default="", help="output image filepath (must be .png)")
    p.add_argument("-gamma", dest="gamma", type=float, default=DEFAULT_GAMMA,
                   help="gamma correction exponent (default: %(default)s)")
    p.add_argument("-hist", dest="hist", default=None,
                   help="also save an RGB histogram figure to this path")
    p.add_argument("-v", dest="verbose", action="store_true", help="debug logging")
    return p


def _usage_error(parser: argparse.ArgumentParser, message: str | None = None) -> int:
    if message:
        print(f"{parser.prog}: {message}", file=sys.stderr)
    parser.print_help(sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)-32s - %(levelname)-8s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.input or not args.output:
        return _usage_error(parser)
    if Path(args.output).suffix != ".png":
        return _usage_error(parser, f"output must be a .png file: {args.output}")
    try:
        params = ToneParams(gamma=args.gamma)
    except ValueError as err:
        return _usage_error(parser, str(err))

    try:
        image = convert_file(args.input, args.output, params)
    except UnpackError as err:
        logger.error("%s", err)
        return 1

    height, width = image.shape[:2]
    print(f"[OK] Saved {width}x{height} image to {Path(args.output).resolve()}")

    if args.hist:
        try:
            hist_path = plot_channel_histogram(image, args.hist, title=Path(args.input).name)
        except (OSError, ValueError) as err:
            logger.error("Cannot save histogram to %s: %s", args.hist, err)
            return 1
        print(f"[OK] Saved histogram to {hist_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
