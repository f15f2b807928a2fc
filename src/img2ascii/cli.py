import argparse
import math
import sys

from img2ascii.converter import DecodeError, image_to_ascii, load_image, output_path
from img2ascii.renderer import RenderConfig

DEFAULT_SCALE = 0.25

USAGE = f"""\
usage: img2ascii [-d] [-i] [-o DIR] [--print] <path/to/image> [scale]
  -d apply dithering to image
  -i invert colors
  -o directory to write the text file to (default: current directory)
  --print also write the ASCII art to standard output
  scale: optional scale factor (default: {DEFAULT_SCALE})"""


def parse_scale(value: str) -> float:
    """Parse a scale factor, falling back to DEFAULT_SCALE on bad input."""
    try:
        scale = float(value)
    except ValueError:
        scale = math.nan
    if not (math.isfinite(scale) and scale > 0):
        print(f"Invalid scale value. Using default scale: {DEFAULT_SCALE}")
        return DEFAULT_SCALE
    return scale


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="img2ascii", description="Render an image as ASCII art", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", default=False, help="Show usage and exit")
    parser.add_argument("-d", "--dither", action="store_true", default=False, help="Use the finer 18-glyph ramp")
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert colors")
    parser.add_argument("-o", "--output-dir", default=".", help="Directory for the output file (default: .)")
    parser.add_argument("--print", action="store_true", default=False, help="Also print the ASCII art")
    parser.add_argument("args", nargs="*", help="Image path followed by an optional scale factor")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    if args.help or not 1 <= len(args.args) <= 2:
        print(USAGE)
        return 0

    image_path = args.args[0]
    scale = parse_scale(args.args[1]) if len(args.args) == 2 else DEFAULT_SCALE
    config = RenderConfig(dither=args.dither, invert=args.invert)

    try:
        image = load_image(image_path)
    except DecodeError as e:
        print("err: file could not be decoded", file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print("err: file could not be opened", file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)

    text = image_to_ascii(image, config, scale=scale)

    out_path = output_path(image_path, config, args.output_dir)
    try:
        out_path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as e:
        print(f"error creating file: {e}", file=sys.stderr)
        sys.exit(1)

    if args.print:
        print(text, end="")
    print(f"Saved ASCII art to {out_path}")
    return 0
