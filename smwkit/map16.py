"""Map16 blocks: 16x16 blocks built from four 8x8 tile references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from smwkit.addr import AddrVram
from smwkit.gfx_file import TileFormat


@dataclass(frozen=True)
class Tile8x8:
    """A 16-bit 8x8 tile reference: ``YXPCCCTT TTTTTTTT``."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Tile8x8 needs an int, got {self.value!r}")
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"Tile8x8 out of range: {self.value:#x}")

    def tile_number(self) -> int:
        # ------tt TTTTTTTT
        return self.value & 0x3FF

    def flip_y(self) -> bool:
        # Y------- --------
        return (self.value >> 15) != 0

    def flip_x(self) -> bool:
        # -X------ --------
        return ((self.value >> 14) & 1) != 0

    def priority(self) -> bool:
        # --P----- --------
        return ((self.value >> 13) & 1) != 0

    def palette(self) -> int:
        # ---CCC-- --------
        return (self.value >> 10) & 0b111

    def layer(self) -> int:
        """Which of the four object graphics files the tile comes from."""
        return self.tile_number() // 0x80

    def tile_vram_addr(self, offset: int) -> AddrVram:
        return Tile8x8.vram_addr_from_tile_number(self.tile_number(), offset)

    @staticmethod
    def vram_addr_from_tile_number(tile_num: int, offset: int) -> AddrVram:
        """VRAM word address of a 4BPP tile number placed after ``offset``."""
        return AddrVram(offset + tile_num * TileFormat.TILE_4BPP.tile_size() // 2)


@dataclass(frozen=True)
class Block:
    """A 16x16 block made of four 8x8 tiles."""

    upper_left: Tile8x8
    lower_left: Tile8x8
    upper_right: Tile8x8
    lower_right: Tile8x8

    @classmethod
    def from_tuple(cls, tiles: Sequence[Tile8x8]) -> "Block":
        """Build from tiles in the order upper left, lower left, upper right, lower right."""
        upper_left, lower_left, upper_right, lower_right = tiles
        return cls(upper_left, lower_left, upper_right, lower_right)