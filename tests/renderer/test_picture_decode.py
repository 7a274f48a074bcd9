import numpy as np
import pytest

from vt_renderer.pool import ObjectPool
from vt_renderer.renderer.picture import decode_picture_graphic, unpack_indices
from vt_renderer.types import PictureGraphicFormat
from tests.test_utils import make_palette, make_picture

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PALETTE = make_palette(
    {
        0: BLACK,
        1: WHITE,
        2: (10, 0, 0),
        3: (0, 30, 0),
        4: (0, 0, 40),
        5: (50, 50, 0),
        6: (0, 60, 60),
        7: WHITE,
        10: (100, 0, 100),
    }
)
POOL = ObjectPool(palette=PALETTE)


def rgb(raster: np.ndarray) -> list:
    return [[tuple(int(c) for c in px[:3]) for px in row] for row in raster]


def alpha(raster: np.ndarray) -> list:
    return [[int(px[3]) for px in row] for row in raster]


def test_unpack_indices() -> None:
    data = np.array([0b10100001, 0xA3], dtype=np.uint8)
    mono = unpack_indices(data, PictureGraphicFormat.MONOCHROME)
    assert mono[0].tolist() == [1, 0, 1, 0, 0, 0, 0, 1]
    four = unpack_indices(data, PictureGraphicFormat.FOUR_BIT)
    assert four[1].tolist() == [10, 3]
    eight = unpack_indices(data, PictureGraphicFormat.EIGHT_BIT)
    assert eight[:, 0].tolist() == [0b10100001, 0xA3]


def test_monochrome_msb_first_and_rest_of_byte_dropped() -> None:
    picture = make_picture(
        bytes([0b10100000]), 3, 1, PictureGraphicFormat.MONOCHROME
    )
    raster = decode_picture_graphic(picture, POOL)
    assert raster.shape == (1, 3, 4)
    assert rgb(raster) == [[WHITE, BLACK, WHITE]]
    assert alpha(raster) == [[255, 255, 255]]


def test_monochrome_rows_start_on_byte_boundary() -> None:
    picture = make_picture(
        bytes([0b10111111, 0b01000000]), 3, 2, PictureGraphicFormat.MONOCHROME
    )
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster) == [[WHITE, BLACK, WHITE], [BLACK, WHITE, BLACK]]


def test_monochrome_wide_row_spans_bytes() -> None:
    picture = make_picture(
        bytes([0xFF, 0b10000000, 0x00, 0x00]), 9, 2, PictureGraphicFormat.MONOCHROME
    )
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster)[0] == [WHITE] * 9
    assert rgb(raster)[1] == [BLACK] * 9


def test_four_bit_high_nibble_first() -> None:
    picture = make_picture(bytes([0xA3]), 2, 1, PictureGraphicFormat.FOUR_BIT)
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster) == [[PALETTE[10], PALETTE[3]]]


def test_four_bit_odd_width_drops_low_nibble_at_row_end() -> None:
    picture = make_picture(
        bytes([0x12, 0x3F, 0x45, 0x6F]), 3, 2, PictureGraphicFormat.FOUR_BIT
    )
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster) == [
        [PALETTE[1], PALETTE[2], PALETTE[3]],
        [PALETTE[4], PALETTE[5], PALETTE[6]],
    ]


def test_eight_bit_row_major() -> None:
    picture = make_picture(bytes([1, 2, 3, 4]), 2, 2)
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster) == [[PALETTE[1], PALETTE[2]], [PALETTE[3], PALETTE[4]]]


def test_transparency_matches_resolved_colour() -> None:
    # Index 7 has the same colour as the transparency index 1.
    picture = make_picture(
        bytes([1, 5, 7]), 3, 1, transparent=True, transparency_colour=1
    )
    raster = decode_picture_graphic(picture, POOL)
    assert alpha(raster) == [[0, 255, 0]]
    assert rgb(raster)[0][1] == PALETTE[5]


def test_transparency_colour_ignored_without_option() -> None:
    picture = make_picture(bytes([1, 5]), 2, 1, transparency_colour=1)
    assert alpha(decode_picture_graphic(picture, POOL)) == [[255, 255]]


def test_surplus_data_is_truncated() -> None:
    picture = make_picture(bytes([1, 2, 3, 4, 5, 6]), 2, 1)
    raster = decode_picture_graphic(picture, POOL)
    assert raster.shape == (1, 2, 4)
    assert rgb(raster) == [[PALETTE[1], PALETTE[2]]]


def test_short_data_leaves_rest_transparent() -> None:
    picture = make_picture(bytes([1, 2, 3]), 2, 3)
    raster = decode_picture_graphic(picture, POOL)
    assert alpha(raster) == [[255, 255], [255, 0], [0, 0]]


def test_short_monochrome_data_only_covers_its_byte() -> None:
    picture = make_picture(bytes([0xFF]), 10, 2, PictureGraphicFormat.MONOCHROME)
    raster = decode_picture_graphic(picture, POOL)
    assert alpha(raster)[0] == [255] * 8 + [0, 0]
    assert alpha(raster)[1] == [0] * 10


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (0, 0)])
def test_empty_bitmap(width: int, height: int) -> None:
    picture = make_picture(bytes([1, 2, 3]), width, height)
    assert decode_picture_graphic(picture, POOL).shape == (height, width, 4)


def test_no_data_is_fully_transparent() -> None:
    raster = decode_picture_graphic(make_picture(b"", 2, 2), POOL)
    assert not raster.any()


def test_run_length_encoded_data_is_expanded() -> None:
    picture = make_picture(bytes([3, 1, 1, 2]), 4, 1, run_length_encoded=True)
    raster = decode_picture_graphic(picture, POOL)
    assert rgb(raster) == [[PALETTE[1], PALETTE[1], PALETTE[1], PALETTE[2]]]
