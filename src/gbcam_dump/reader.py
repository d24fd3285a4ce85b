# -*- coding: utf-8 -*-
"""
reader.py

Decode one photo slot of a Game Boy Camera save RAM image into a raster.

Each tile is 16 bytes: 8 rows, each row a (low plane, high plane) byte pair.
Bit 7 of a plane byte is the leftmost pixel of the row. The camera stores
levels inverted relative to the usual Game Boy palette, so every decoded
2-bit value is XOR'ed with 3 before it lands in the raster.
"""
import io

from .layout import (
    PHOTO_TILE_COUNT,
    TILE_BYTES,
    TILE_SIDES,
    photo_offset,
    pixel_index,
)


class TruncatedSaveError(ValueError):
    """The save image ends before the photo slot's tile data does."""


def decode_tile(tile: bytes, raster: bytearray, tile_index: int):
    for y in range(TILE_SIDES):
        low = tile[2 * y]
        high = tile[2 * y + 1]
        for k in range(8):
            value = ((low >> k) & 0x01) | (((high >> k) & 0x01) << 1)
            value ^= 3
            raster[pixel_index(tile_index, 7 - k, y)] = value


def decode_photo(source, raster: bytearray, photo_index: int):
    """
    source: seekable binary file object holding the save RAM image
    raster: IMAGE_RASTER_SIZE byte buffer, overwritten in place
    photo_index: slot number 0..29 (not validated)

    Raises TruncatedSaveError if the slot lies past the end of the source or
    a tile is cut short. The raster is then partially overwritten.
    """
    pos = photo_offset(photo_index)
    size = source.seek(0, io.SEEK_END)
    if pos > size:
        raise TruncatedSaveError(
            f"save file too small for photo {photo_index + 1}: "
            f"{size} bytes, photo starts at 0x{pos:05x}")
    source.seek(pos)

    for tile_index in range(PHOTO_TILE_COUNT):
        tile = source.read(TILE_BYTES)
        if len(tile) < TILE_BYTES:
            raise TruncatedSaveError(
                f"save file truncated in photo {photo_index + 1}, tile {tile_index}: "
                f"read {len(tile)} of {TILE_BYTES} bytes")
        decode_tile(tile, raster, tile_index)
