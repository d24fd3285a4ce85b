from gbcam_dump.layout import (
    IMAGE_HEIGHT,
    IMAGE_RASTER_SIZE,
    IMAGE_WIDTH,
    PHOTO_TILE_COUNT,
    new_raster,
    photo_offset,
    pixel_index,
)


def test_geometry():
    assert (IMAGE_WIDTH, IMAGE_HEIGHT) == (128, 112)
    assert IMAGE_RASTER_SIZE == 14336
    assert PHOTO_TILE_COUNT == 224


def test_pixel_index_known_values():
    assert pixel_index(8, 8, 8) == 1096
    assert pixel_index(8, 7, 8) == 1095
    assert pixel_index(0, 0, 0) == 0
    assert pixel_index(1, 0, 0) == 8
    assert pixel_index(16, 0, 0) == 8 * IMAGE_WIDTH
    assert pixel_index(223, 7, 7) == IMAGE_RASTER_SIZE - 1


def test_pixel_index_is_a_bijection():
    seen = set(
        pixel_index(t, x, y)
        for t in range(PHOTO_TILE_COUNT)
        for y in range(8)
        for x in range(8)
    )
    assert seen == set(range(IMAGE_RASTER_SIZE))


def test_photo_offset():
    assert photo_offset(0) == 0x2000
    assert photo_offset(1) == 0x3000
    assert photo_offset(29) == 0x1F000


def test_new_raster():
    raster = new_raster()
    assert len(raster) == IMAGE_RASTER_SIZE
    assert not any(raster)
