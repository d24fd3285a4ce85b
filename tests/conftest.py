import pytest

from gbcam_dump.layout import FIRST_PHOTO_POSITION, PHOTO_COUNT, PHOTO_OFFSET, PHOTO_TILE_COUNT, TILE_BYTES

FULL_SAVE_SIZE = FIRST_PHOTO_POSITION + PHOTO_COUNT * PHOTO_OFFSET


def build_save(fill=None, size=FULL_SAVE_SIZE):
    """Synthetic save image; fill(photo_index) gives a 16-byte tile repeated over the slot."""
    data = bytearray(size)
    if fill is not None:
        for photo_index in range(PHOTO_COUNT):
            start = FIRST_PHOTO_POSITION + photo_index * PHOTO_OFFSET
            tile = fill(photo_index)
            for t in range(PHOTO_TILE_COUNT):
                pos = start + t * TILE_BYTES
                if pos + TILE_BYTES > size:
                    return bytes(data)
                data[pos:pos + TILE_BYTES] = tile
    return bytes(data)


def slot_tile(photo_index):
    # low plane = slot number, high plane = its complement
    return bytes([photo_index, 0xFF ^ photo_index] * 8)


@pytest.fixture
def save_path(tmp_path):
    path = tmp_path / "camera.sav"
    path.write_bytes(build_save(slot_tile))
    return path
