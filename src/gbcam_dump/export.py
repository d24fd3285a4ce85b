# -*- coding: utf-8 -*-
"""
export.py
Save a decoded raster as PNG / BMP / JPG using Pillow.

The PGM writer in pgm.py stays the byte-exact output; this is for viewers
that do not read PGM.
"""
import pathlib

import numpy as np
from PIL import Image

from .layout import IMAGE_HEIGHT, IMAGE_WIDTH
from .pgm import GRAY_LEVEL_SCALE

EXPORT_FORMATS = ("png", "bmp", "jpg")


def raster_to_array(raster) -> np.ndarray:
    levels = np.frombuffer(bytes(raster), dtype=np.uint8)
    return (levels * GRAY_LEVEL_SCALE).astype(np.uint8).reshape(IMAGE_HEIGHT, IMAGE_WIDTH)


def raster_to_image(raster) -> Image.Image:
    # 2-D uint8 array -> mode "L"
    return Image.fromarray(raster_to_array(raster))


def save_image(raster, dest: pathlib.Path, out_format: str, quality: int = 95):
    im = raster_to_image(raster)
    if out_format == "jpg":
        im.save(dest, format="JPEG", quality=quality, optimize=True)
    elif out_format == "png":
        im.save(dest, format="PNG", optimize=True)
    elif out_format == "bmp":
        im.save(dest, format="BMP")
    else:
        raise ValueError(f"unsupported output format: {out_format}")
