# -*- coding: utf-8 -*-
"""
cli.py
Dump every photo of a Game Boy Camera save RAM file to image files.

Usage:
  gbcam-dump [options] SAVE_FILE

Examples:
  # image-1.pgm ... image-30.pgm in the current directory
  gbcam-dump camera.sav

  # photos 1 and 5 only, as PNG, into out_png/
  gbcam-dump camera.sav --photo 1 --photo 5 --format png --outdir out_png
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

from . import __version__
from .export import EXPORT_FORMATS, save_image
from .layout import PHOTO_COUNT, new_raster
from .pgm import image_path, write_pgm
from .reader import TruncatedSaveError, decode_photo


class ImageWriteError(Exception):
    """An output image could not be created or written."""


def photo_number(text):
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid photo number: {text!r}")
    if not 1 <= n <= PHOTO_COUNT:
        raise argparse.ArgumentTypeError(f"photo number must be 1..{PHOTO_COUNT}: {n}")
    return n


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="gbcam-dump",
                                description="Extract Game Boy Camera photos from a save RAM dump")
    p.add_argument("save_file", metavar="SAVE_FILE",
                   help="Game Boy Camera save RAM (.sav) file")
    p.add_argument("--outdir", "-o", default=".",
                   help="Output directory (default: current directory)")
    p.add_argument("--base-name", "-b", default="image",
                   help="Output file name prefix (default: image -> image-1.pgm ...)")
    p.add_argument("--photo", "-p", type=photo_number, action="append",
                   help=f"Photo number 1..{PHOTO_COUNT} to extract, may be repeated (default: all)")
    p.add_argument("--format", "-f", choices=("pgm",) + EXPORT_FORMATS, default="pgm",
                   help="Output image format (default: pgm)")
    p.add_argument("--quality", "-q", type=int, default=95,
                   help="JPEG quality (only applies to jpg, default: 95)")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Print each written file")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def dump_photos(save_file, photo_indices, outdir, base_name="image",
                out_format="pgm", quality=95, verbose=False):
    """Decode and write each slot in order; stops at the first error."""
    raster = new_raster()
    written = []
    for photo_index in photo_indices:
        decode_photo(save_file, raster, photo_index)
        dest = image_path(photo_index, base_name, outdir)
        try:
            if out_format == "pgm":
                write_pgm(raster, dest)
            else:
                dest = dest.with_suffix("." + out_format)
                save_image(raster, dest, out_format, quality)
        except OSError as e:
            raise ImageWriteError(f"cannot write image file {dest}: {e.strerror or e}") from e
        if verbose:
            print(f"Wrote {dest}")
        written.append(dest)
    return written


def main(argv=None):
    args = parse_args(argv)

    if args.photo:
        photo_indices = sorted(set(n - 1 for n in args.photo))
    else:
        photo_indices = range(PHOTO_COUNT)
    quality = max(1, min(100, args.quality))

    outdir = Path(args.outdir)
    try:
        outdir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"error: cannot create output directory {outdir}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        save_file = open(args.save_file, "rb")
    except OSError:
        print(f"error: could not open file '{args.save_file}'.", file=sys.stderr)
        return 1

    with save_file:
        try:
            dump_photos(save_file, photo_indices, outdir, args.base_name,
                        args.format, quality, args.verbose)
        except (TruncatedSaveError, ImageWriteError, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
