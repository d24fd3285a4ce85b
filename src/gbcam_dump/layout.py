# -*- coding: utf-8 -*-
#
# layout.py
#
# Save RAM geometry of the Game Boy Camera and the tile -> raster addressing.
# - Photos live in 30 fixed slots, 0x1000 bytes apart, starting at 0x2000.
# - A photo is a 16 x 14 grid of 8x8 tiles, stored left-to-right, top-to-bottom.
# - The raster is flat and row-major, one byte (level 0..3) per pixel.
#

FIRST_PHOTO_POSITION = 0x2000
PHOTO_OFFSET = 0x1000
PHOTO_COUNT = 30

PHOTO_TILE_WIDTH = 16
PHOTO_TILE_HEIGHT = 14
PHOTO_TILE_COUNT = PHOTO_TILE_WIDTH * PHOTO_TILE_HEIGHT
TILE_SIDES = 8
TILE_BYTES = 16  # two bitplanes, one byte each per row

IMAGE_WIDTH = PHOTO_TILE_WIDTH * TILE_SIDES
IMAGE_HEIGHT = PHOTO_TILE_HEIGHT * TILE_SIDES
IMAGE_RASTER_SIZE = PHOTO_TILE_WIDTH * PHOTO_TILE_HEIGHT * TILE_SIDES * TILE_SIDES


def pixel_index(tile_index: int, x: int, y: int) -> int:
    """Raster index of pixel (x, y) inside tile number tile_index."""
    image_x = x + (tile_index % PHOTO_TILE_WIDTH) * TILE_SIDES
    image_y = y + (tile_index // PHOTO_TILE_WIDTH) * TILE_SIDES
    return IMAGE_WIDTH * image_y + image_x


def photo_offset(photo_index: int) -> int:
    # no range check, callers pass 0..PHOTO_COUNT-1
    return FIRST_PHOTO_POSITION + PHOTO_OFFSET * photo_index


def new_raster() -> bytearray:
    return bytearray(IMAGE_RASTER_SIZE)
