"""Tables describing which VRAM tiles are animated and where their frames come from."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Optional, Tuple

from smwkit.addr import AddrSnes, AddrVram
from smwkit.map16 import Block, Tile8x8
from smwkit.rom import Rom, RomError
from smwkit.rom_slice import RomSlice

ANIM_SRC_ADDRESSES_TABLE = RomSlice(AddrSnes(0x05B999), 416)
ANIM_DST_ADDRESSES_TABLE = RomSlice(AddrSnes(0x05B93B), 48)
ANIM_BEHAVIOUR_TABLE = RomSlice(AddrSnes(0x05B96B), 46)

_SWITCH_OFFSET = 0x26


class AnimatedTileDataParseError(Exception):
    """The animated tile tables cannot be read."""

    def __init__(self) -> None:
        super().__init__("Could not parse AnimatedTileData table.")


def _words(data: bytes) -> List[int]:
    return [word for (word,) in struct.iter_unpack("<H", data[: len(data) & ~1])]


@dataclass(frozen=True)
class AnimatedTileData:
    """Source WRAM addresses, destination VRAM addresses and behaviour of animated tiles."""

    src_addresses: Tuple[AddrSnes, ...]
    dst_addresses: Tuple[AddrVram, ...]
    behaviours: bytes
    switches: bytes
    tilesets: bytes

    @classmethod
    def from_tables(cls, src_table: bytes, dst_table: bytes, behaviour_table: bytes) -> "AnimatedTileData":
        """Decode the three raw tables."""
        behaviour_table = bytes(behaviour_table)
        if len(behaviour_table) < 46:
            raise AnimatedTileDataParseError()
        return cls(
            src_addresses=tuple(AddrSnes(word).with_bank(0x7E) for word in _words(bytes(src_table))),
            dst_addresses=tuple(AddrVram(word) for word in _words(bytes(dst_table))),
            behaviours=behaviour_table[:24],
            switches=behaviour_table[18 : 18 + 15],
            tilesets=behaviour_table[32 : 32 + 14],
        )

    @classmethod
    def parse(cls, rom: Rom) -> "AnimatedTileData":
        """Read the tables from their LoROM locations."""
        try:
            tables = [
                rom.slice_lorom(table)
                for table in (ANIM_SRC_ADDRESSES_TABLE, ANIM_DST_ADDRESSES_TABLE, ANIM_BEHAVIOUR_TABLE)
            ]
        except RomError as exc:
            raise AnimatedTileDataParseError() from exc
        return cls.from_tables(*tables)

    def is_tile_animated(self, tile: Tile8x8, offset: int) -> bool:
        return tile.tile_vram_addr(offset) in self.dst_addresses

    def get_animation_frames_for_block(
        self,
        block: Block,
        tileset: int,
        blue_pswitch: bool,
        silver_pswitch: bool,
        on_off_switch: bool,
        offset: int,
    ) -> Optional[Tuple[AddrSnes, AddrSnes, AddrSnes, AddrSnes]]:
        """The four frame addresses of an animated block, or None if it is not animated."""
        if not self.is_tile_animated(block.upper_left, offset):
            return None
        vram_addr = block.upper_left.tile_vram_addr(offset)
        dst_index = self.dst_addresses.index(vram_addr)
        behaviour = self.behaviours[dst_index]
        if behaviour == 0:
            gfx_tile_offset = dst_index
        elif behaviour == 1:
            switch = self.switches[dst_index]
            states = {0: blue_pswitch, 1: silver_pswitch, 2: on_off_switch}
            if switch not in states:
                raise ValueError(f"unknown animation switch {switch} for tile {dst_index}")
            gfx_tile_offset = dst_index + _SWITCH_OFFSET if states[switch] else dst_index
        elif behaviour == 2:
            gfx_tile_offset = dst_index + self.tilesets[tileset]
        else:
            raise ValueError(f"unknown animation behaviour {behaviour} for tile {dst_index}")
        src_index = ((gfx_tile_offset & 0xFF) << 3) // 2
        first, second, third, fourth = self.src_addresses[src_index : src_index + 4]
        return first, second, third, fourth