"""The 0x200 Map16 blocks of the level tilesets, some shared and some per tileset."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from smwkit.addr import AddrSnes
from smwkit.map16 import Block, Tile8x8
from smwkit.rom import Rom, RomError
from smwkit.rom_slice import RomSlice

logger = logging.getLogger(__name__)

TILESETS_COUNT = 5
MAP16_TILE_SIZE = 8


class TilesetParseError(Exception):
    """A range of Map16 data cannot be read."""

    def __init__(self, slice: RomSlice) -> None:
        super().__init__(f"Could not parse Map16 tiles at:\n- {slice}")
        self.slice = slice


def _map16_data_slice(addr: int, first: int, last: int) -> RomSlice:
    return RomSlice(AddrSnes(addr), (last - first + 1) * MAP16_TILE_SIZE)


TILES_000_072 = _map16_data_slice(0x0D8000, 0x000, 0x072)

# Per tileset: Normal/Cloud/Forest, Castle 1, Rope, Underground/Castle 2, Switch Palace 1/Ghost House.
TILES_073_0FF = (
    _map16_data_slice(0x0D8B70, 0x073, 0x0FF),
    _map16_data_slice(0x0DBC00, 0x073, 0x0FF),
    _map16_data_slice(0x0DC800, 0x073, 0x0FF),
    _map16_data_slice(0x0DD400, 0x073, 0x0FF),
    _map16_data_slice(0x0DE300, 0x073, 0x0FF),
)

TILES_100_106 = (
    _map16_data_slice(0x0D8398, 0x100, 0x106),
    _map16_data_slice(0x0DC068, 0x100, 0x106),
    _map16_data_slice(0x0DCC68, 0x100, 0x106),
    _map16_data_slice(0x0DD868, 0x100, 0x106),
    _map16_data_slice(0x0DE768, 0x100, 0x106),
)

TILES_107_110 = _map16_data_slice(0x0DC068, 0x107, 0x110)
TILES_111_152 = _map16_data_slice(0x0D83D0, 0x111, 0x152)

TILES_153_16D = (
    _map16_data_slice(0x0D9028, 0x153, 0x16D),
    _map16_data_slice(0x0DC0B8, 0x153, 0x16D),
    _map16_data_slice(0x0DCCB8, 0x153, 0x16D),
    _map16_data_slice(0x0DD8B8, 0x153, 0x16D),
    _map16_data_slice(0x0DE7B8, 0x153, 0x16D),
)

TILES_16E_1C3 = _map16_data_slice(0x0D85E0, 0x16E, 0x1C3)
TILES_1C4_1C7 = _map16_data_slice(0x0D8890, 0x1C4, 0x1C7)
TILES_1C8_1EB = _map16_data_slice(0x0D88B0, 0x1C8, 0x1EB)
TILES_1EC_1EF = _map16_data_slice(0x0D89D0, 0x1EC, 0x1EF)
TILES_1F0_1FF = _map16_data_slice(0x0D89F0, 0x1F0, 0x1FF)


@dataclass(frozen=True)
class SharedTile:
    """A Map16 block that is the same in every tileset."""

    block: Block


@dataclass(frozen=True)
class TilesetSpecificTile:
    """A Map16 block with one variant per tileset."""

    blocks: Tuple[Block, ...]


Map16Tile = Union[SharedTile, TilesetSpecificTile]


def _parse_blocks(rom: Rom, slice: RomSlice) -> List[Block]:
    try:
        data = rom.slice_lorom(slice)
    except RomError as exc:
        raise TilesetParseError(slice) from exc
    tiles = [Tile8x8(word) for (word,) in struct.iter_unpack("<H", data[: len(data) & ~1])]
    groups = zip(*[iter(tiles)] * 4)
    return [Block.from_tuple(group) for group in groups]


def _shared(rom: Rom, slice: RomSlice) -> List[Map16Tile]:
    return [SharedTile(block) for block in _parse_blocks(rom, slice)]


def _specific(rom: Rom, slices: Iterable[RomSlice]) -> List[Map16Tile]:
    per_tileset = [_parse_blocks(rom, slice) for slice in slices]
    return [TilesetSpecificTile(tuple(blocks)) for blocks in zip(*per_tileset)]


@dataclass(frozen=True)
class Tilesets:
    """All Map16 blocks, indexed by block number."""

    tiles: Tuple[Map16Tile, ...]

    @classmethod
    def parse(cls, rom: Rom) -> "Tilesets":
        shared_000 = _shared(rom, TILES_000_072)
        shared_107 = _shared(rom, TILES_107_110)
        shared_111 = _shared(rom, TILES_111_152)
        shared_16e = _shared(rom, TILES_16E_1C3)
        shared_1c4 = _shared(rom, TILES_1C4_1C7)
        shared_1c8 = _shared(rom, TILES_1C8_1EB)
        shared_1ec = _shared(rom, TILES_1EC_1EF)
        shared_1f0 = _shared(rom, TILES_1F0_1FF)
        specific_073 = _specific(rom, TILES_073_0FF)
        specific_100 = _specific(rom, TILES_100_106)
        specific_153 = _specific(rom, TILES_153_16D)
        return cls(
            tuple(
                shared_000
                + specific_073
                + specific_100
                + shared_107
                + shared_111
                + specific_153
                + shared_16e
                + shared_1c4
                + shared_1c8
                + shared_1ec
                + shared_1f0
            )
        )

    def get_map16_tile(self, tile_num: int, tileset: int) -> Optional[Block]:
        """The block for ``tile_num`` as it looks in ``tileset``, or None if either is out of range."""
        if 0 <= tile_num < len(self.tiles) and 0 <= tileset < TILESETS_COUNT:
            tile = self.tiles[tile_num]
            if isinstance(tile, SharedTile):
                return tile.block
            return tile.blocks[tileset]
        logger.error("Invalid tile_num (%#X) or tileset (%d)", tile_num, tileset)
        return None