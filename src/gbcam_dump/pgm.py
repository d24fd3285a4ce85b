# -*- coding: utf-8 -*-
import pathlib

from .layout import IMAGE_HEIGHT, IMAGE_RASTER_SIZE, IMAGE_WIDTH

GRAY_LEVEL_SCALE = 85  # 2-bit level -> 0, 85, 170, 255
PGM_MAX_VALUE = 255


def pgm_header() -> bytes:
    return f"P5\n{IMAGE_WIDTH} {IMAGE_HEIGHT}\n{PGM_MAX_VALUE}\n".encode("ascii")


def scale_raster(raster) -> bytes:
    return bytes(raster[i] * GRAY_LEVEL_SCALE for i in range(IMAGE_RASTER_SIZE))


def write_pgm(raster, out_path: pathlib.Path):
    """
    raster: IMAGE_RASTER_SIZE levels (0..3), row-major
    out_path: output PGM file path, truncated if it exists
    Binary PGM (P5), 8-bit samples, nothing after the last pixel.
    """
    with out_path.open("wb") as f:
        f.write(pgm_header())
        f.write(scale_raster(raster))


def image_path(photo_index: int, base_name="image", outdir=".") -> pathlib.Path:
    # file names count photos from 1
    return pathlib.Path(outdir) / f"{base_name}-{photo_index + 1}.pgm"


def write_image(raster, photo_index: int, base_name="image", outdir=".") -> pathlib.Path:
    out_path = image_path(photo_index, base_name, outdir)
    write_pgm(raster, out_path)
    return out_path
