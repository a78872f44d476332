import pytest

from smwkit.addr import AddrVram
from smwkit.map16 import Block, Tile8x8


def test_flags_from_top_bits():
    assert Tile8x8(0x8000).flip_y() is True
    assert Tile8x8(0x8000).flip_x() is False
    assert Tile8x8(0x4000).flip_x() is True
    assert Tile8x8(0x2000).priority() is True
    assert Tile8x8(0x1FFF).priority() is False


def test_palette_bits():
    assert Tile8x8(0b101 << 10).palette() == 0b101
    assert Tile8x8(0xE3FF).palette() == 0


def test_tile_number_masks_ten_bits():
    assert Tile8x8(0xFFFF).tile_number() == 0x3FF
    assert Tile8x8(0xFC00).tile_number() == 0


@pytest.mark.parametrize("number", [0x000, 0x07F, 0x080, 0x17F, 0x200, 0x3FF])
def test_layer_is_tile_number_over_0x80(number):
    assert Tile8x8(number).layer() == number // 0x80


def test_vram_addr_uses_half_a_4bpp_tile_per_number():
    tile = Tile8x8(0xC002)
    assert tile.tile_vram_addr(0x100) == Tile8x8.vram_addr_from_tile_number(2, 0x100)
    assert Tile8x8.vram_addr_from_tile_number(0, 0x4000) == AddrVram(0x4000)
    assert (
        Tile8x8.vram_addr_from_tile_number(3, 0).value
        - Tile8x8.vram_addr_from_tile_number(2, 0).value
        == 16
    )


def test_out_of_range_tile():
    with pytest.raises(ValueError):
        Tile8x8(0x10000)


def test_block_from_tuple_order():
    tiles = (Tile8x8(1), Tile8x8(2), Tile8x8(3), Tile8x8(4))
    block = Block.from_tuple(tiles)
    assert block.upper_left == tiles[0]
    assert block.lower_left == tiles[1]
    assert block.upper_right == tiles[2]
    assert block.lower_right == tiles[3]


def test_block_from_tuple_wrong_length():
    with pytest.raises(ValueError):
        Block.from_tuple((Tile8x8(1), Tile8x8(2), Tile8x8(3)))