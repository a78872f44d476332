"""Graphics files made of 8x8 tiles in the SNES bitplane formats."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

from smwkit.addr import AddrSnes
from smwkit.rom_slice import RomSlice

logger = logging.getLogger(__name__)

N_PIXELS_IN_TILE = 8 * 8

C = TypeVar("C")


class GfxFileParseError(ValueError):
    """Graphics data that does not hold whole tiles."""


class TileFromWramError(LookupError):
    """A WRAM address that no graphics file is loaded at."""

    def __init__(self, address: AddrSnes) -> None:
        super().__init__(f"Cannot get GFX tile at WRAM address ${address:X}")
        self.address = address


class TileFormat(enum.Enum):
    """Bit depth and layout of a tile."""

    TILE_2BPP = "2BPP"
    TILE_3BPP = "3BPP"
    TILE_4BPP = "4BPP"
    TILE_8BPP = "8BPP"
    TILE_3BPP_MODE7 = "3BPP Mode 7"

    def tile_size(self) -> int:
        """Bytes taken by one tile."""
        return _TILE_SIZES[self]

    def __str__(self) -> str:
        return self.value


_TILE_SIZES = {
    TileFormat.TILE_2BPP: 2 * 8,
    TileFormat.TILE_3BPP: 3 * 8,
    TileFormat.TILE_4BPP: 4 * 8,
    TileFormat.TILE_8BPP: 8 * 8,
    TileFormat.TILE_3BPP_MODE7: 3 * 8,
}


def _head(data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) < size:
        raise GfxFileParseError("Parsing GFX tile")
    return data[:size]


@dataclass(frozen=True)
class Tile:
    """An 8x8 tile as 64 palette indices, row by row."""

    color_indices: bytes

    @classmethod
    def _from_planar(cls, data: bytes, bpp: int) -> "Tile":
        raw = _head(data, bpp * 8)
        indices = bytearray()
        for row in range(8):
            for col in range(7, -1, -1):
                value = 0
                for bit in range(bpp):
                    byte = raw[2 * row + 16 * (bit // 2) + bit % 2]
                    value |= ((byte >> col) & 1) << bit
                indices.append(value)
        return cls(bytes(indices))

    @classmethod
    def from_2bpp(cls, data: bytes) -> "Tile":
        """Decode the 2BPP tile at the front of ``data``."""
        return cls._from_planar(data, 2)

    @classmethod
    def from_3bpp(cls, data: bytes) -> "Tile":
        """Decode the 3BPP tile at the front of ``data``."""
        raw = _head(data, 24)
        indices = bytearray()
        for row in range(8):
            for col in range(7, -1, -1):
                bit1 = (raw[2 * row] >> col) & 1
                bit2 = (raw[2 * row + 1] >> col) & 1
                bit3 = (raw[16 + row] >> col) & 1
                indices.append((bit3 << 2) | (bit2 << 1) | bit1)
        return cls(bytes(indices))

    @classmethod
    def from_4bpp(cls, data: bytes) -> "Tile":
        """Decode the 4BPP tile at the front of ``data``."""
        return cls._from_planar(data, 4)

    @classmethod
    def from_8bpp(cls, data: bytes) -> "Tile":
        """Decode the 8BPP tile at the front of ``data``."""
        return cls._from_planar(data, 8)

    @classmethod
    def from_3bpp_mode7(cls, data: bytes) -> "Tile":
        """Decode the packed 3-bit Mode 7 tile at the front of ``data``."""
        raw = _head(data, 24)
        indices = bytearray()
        for row in range(8):
            packed = int.from_bytes(raw[3 * row : 3 * row + 3], "big")
            indices.extend((packed >> (3 * (7 - pixel))) & 0b111 for pixel in range(8))
        return cls(bytes(indices))

    def to_colors(self, palette: Sequence[C], missing: C) -> Tuple[C, ...]:
        """Look every pixel up in ``palette``; indices past its end give ``missing``."""
        return tuple(self._lookup(palette, missing, index) for index in self.color_indices)

    def to_colors_with_substitute_at(
        self, palette: Sequence[C], missing: C, sub_color: C, sub_idx: int
    ) -> Tuple[C, ...]:
        """As :meth:`to_colors`, but pixels of index ``sub_idx`` give ``sub_color``."""
        return tuple(
            sub_color if index == sub_idx else self._lookup(palette, missing, index)
            for index in self.color_indices
        )

    @staticmethod
    def _lookup(palette: Sequence[C], missing: C, index: int) -> C:
        if index < len(palette):
            return palette[index]
        logger.warning("Tile color index %d outside palette of %d colors", index, len(palette))
        return missing


_TILE_PARSERS = {
    TileFormat.TILE_2BPP: Tile.from_2bpp,
    TileFormat.TILE_3BPP: Tile.from_3bpp,
    TileFormat.TILE_4BPP: Tile.from_4bpp,
    TileFormat.TILE_8BPP: Tile.from_8bpp,
    TileFormat.TILE_3BPP_MODE7: Tile.from_3bpp_mode7,
}


@dataclass(frozen=True)
class GfxFile:
    """A graphics file: its tile format and its tiles."""

    tile_format: TileFormat
    tiles: Tuple[Tile, ...]

    @classmethod
    def from_decompressed(cls, data: bytes, tile_format: TileFormat) -> "GfxFile":
        """Cut decompressed data into tiles; a trailing partial tile is dropped."""
        data = bytes(data)
        size = tile_format.tile_size()
        parser = _TILE_PARSERS[tile_format]
        tiles = tuple(parser(data[start : start + size]) for start in range(0, len(data) - size + 1, size))
        if not tiles:
            raise GfxFileParseError("Parsing GFX tile")
        return cls(tile_format, tiles)

    def n_pixels(self) -> int:
        return len(self.tiles) * N_PIXELS_IN_TILE


def tile_from_wram(files: Sequence[GfxFile], wram_addr: AddrSnes) -> Tile:
    """The tile that the game copies to ``wram_addr`` from the graphics files."""
    addr = wram_addr.value
    if 0x7E2000 <= addr <= 0x7E7CFF:
        file, offset = files[0x32], addr - 0x7E2000
    elif 0x7E7D00 <= addr <= 0x7EACFF:
        file, offset = files[0x33], addr - 0x7E7D00
    else:
        raise TileFromWramError(wram_addr)
    return file.tiles[offset // (4 * 8)]


def _meta(fmt: TileFormat, addr: int, size: int) -> Tuple[TileFormat, RomSlice]:
    return fmt, RomSlice(AddrSnes(addr), size)


_B2 = TileFormat.TILE_2BPP
_B3 = TileFormat.TILE_3BPP
_B4 = TileFormat.TILE_4BPP
_M7 = TileFormat.TILE_3BPP_MODE7

GFX_FILES_META: Tuple[Tuple[TileFormat, RomSlice], ...] = (
    _meta(_B3, 0x08D9F9, 2104),  # 00
    _meta(_B3, 0x08E231, 2698),  # 01
    _meta(_B3, 0x08ECBB, 2199),  # 02
    _meta(_B3, 0x08F552, 2603),  # 03
    _meta(_B3, 0x08FF7D, 2534),  # 04
    _meta(_B3, 0x098963, 2569),  # 05
    _meta(_B3, 0x09936C, 2468),  # 06
    _meta(_B3, 0x099D10, 2375),  # 07
    _meta(_B3, 0x09A657, 2378),  # 08
    _meta(_B3, 0x09AFA1, 2676),  # 09
    _meta(_B3, 0x09BA15, 2439),  # 0A
    _meta(_B3, 0x09C39C, 2503),  # 0B
    _meta(_B3, 0x09CD63, 2159),  # 0C
    _meta(_B3, 0x09D5D2, 2041),  # 0D
    _meta(_B3, 0x09DDCB, 2330),  # 0E
    _meta(_B3, 0x09E6E5, 2105),  # 0F
    _meta(_B3, 0x09EF1E, 2193),  # 10
    _meta(_B3, 0x09F7AF, 2062),  # 11
    _meta(_B3, 0x09FFBD, 2387),  # 12
    _meta(_B3, 0x0A8910, 2616),  # 13
    _meta(_B3, 0x0A9348, 1952),  # 14
    _meta(_B3, 0x0A9AE8, 2188),  # 15
    _meta(_B3, 0x0AA374, 1600),  # 16
    _meta(_B3, 0x0AA9B4, 2297),  # 17
    _meta(_B3, 0x0AB2AD, 2359),  # 18
    _meta(_B3, 0x0ABBE4, 1948),  # 19
    _meta(_B3, 0x0AC380, 2278),  # 1A
    _meta(_B3, 0x0ACC66, 2072),  # 1B
    _meta(_B3, 0x0AD47E, 2058),  # 1C
    _meta(_B3, 0x0ADC88, 2551),  # 1D
    _meta(_B3, 0x0AE67F, 1988),  # 1E
    _meta(_B3, 0x0AEE43, 2142),  # 1F
    _meta(_B3, 0x0AF6A1, 2244),  # 20
    _meta(_B3, 0x0AFF65, 2408),  # 21
    _meta(_B3, 0x0B88CD, 2301),  # 22
    _meta(_B3, 0x0B91CA, 2331),  # 23
    _meta(_B3, 0x0B9AE5, 2256),  # 24
    _meta(_B3, 0x0BA3B5, 2668),  # 25
    _meta(_B3, 0x0BAE21, 2339),  # 26
    _meta(_M7, 0x0BB744, 2344),  # 27
    _meta(_B2, 0x0BC06C, 1591),  # 28
    _meta(_B2, 0x0BC6A3, 1240),  # 29
    _meta(_B2, 0x0BCB7B, 1397),  # 2A
    _meta(_B2, 0x0BD0F0, 1737),  # 2B
    _meta(_B3, 0x0BD7B9, 2125),  # 2C
    _meta(_B3, 0x0BE006, 2352),  # 2D
    _meta(_B3, 0x0BE936, 2127),  # 2E
    _meta(_B2, 0x0BF185, 566),  # 2F
    _meta(_B3, 0x0BF3BB, 1093),  # 30
    _meta(_B3, 0x0BF800, 1293),  # 31
    _meta(_B4, 0x088000, 16320),  # 32
    _meta(_B3, 0x08BFC0, 6713),  # 33
)
"""Tile format and compressed location of every graphics file, by file number."""