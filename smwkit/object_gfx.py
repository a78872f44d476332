"""The list of graphics files used for object tiles in each tileset."""

from __future__ import annotations

from dataclasses import dataclass

from smwkit.addr import AddrSnes
from smwkit.map16 import Tile8x8
from smwkit.rom import Rom, RomError
from smwkit.rom_slice import RomSlice

OBJECT_GFX_LIST = RomSlice(AddrSnes(0x00A92B), 26 * 4)


class ObjectGfxListParseError(Exception):
    """The object graphics list cannot be read."""

    def __init__(self, slice: RomSlice) -> None:
        super().__init__(f"Could not parse GFX list at:\n- {slice}")
        self.slice = slice


@dataclass(frozen=True)
class ObjectGfxList:
    """Four graphics file numbers per tileset."""

    gfx_file_nums: bytes

    @classmethod
    def parse(cls, rom: Rom) -> "ObjectGfxList":
        try:
            data = rom.slice_lorom(OBJECT_GFX_LIST)
        except RomError as exc:
            raise ObjectGfxListParseError(OBJECT_GFX_LIST) from exc
        return cls(data)

    def gfx_file_for_object_tile(self, tile: Tile8x8, tileset: int) -> int:
        """Number of the graphics file that holds ``tile`` in ``tileset``."""
        return self.gfx_file_nums[tileset * 4 + tile.layer()]