"""The internal ROM header found at the end of the first LoROM or HiROM bank."""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass
from typing import Callable, Tuple, TypeVar

from smwkit.addr import AddrPc, AddrSnes
from smwkit.rom import Rom, RomError
from smwkit.rom_slice import RomSlice

logger = logging.getLogger(__name__)

COMPLEMENT_CHECK_OFFSET = 0x1C
CHECKSUM_OFFSET = 0x1E

INTERNAL_HEADER_SIZE = 64
INTERNAL_ROM_NAME_SIZE = 21

HEADER_LOROM = RomSlice(AddrPc(0x007FC0), INTERNAL_HEADER_SIZE)
HEADER_HIROM = RomSlice(AddrPc(0x00FFC0), INTERNAL_HEADER_SIZE)

_PARSE_FAILURE = "Could not parse ROM slice"

T = TypeVar("T")


class InternalHeaderParseError(Exception):
    """The internal ROM header is missing or one of its fields cannot be read."""


class MapMode(enum.IntEnum):
    """Memory map and access speed of the cartridge."""

    SLOW_LOROM = 0b100000
    SLOW_HIROM = 0b100001
    SLOW_EXLOROM = 0b100010
    SLOW_EXHIROM = 0b100100
    FAST_LOROM = 0b110000
    FAST_HIROM = 0b110001
    FAST_EXLOROM = 0b110010
    FAST_EXHIROM = 0b110100

    def is_slow(self) -> bool:
        return (self.value & 0b010000) == 0

    def is_fast(self) -> bool:
        return not self.is_slow()

    def is_lorom(self) -> bool:
        return (self.value & 0b000001) == 0

    def is_hirom(self) -> bool:
        return (self.value & 0b000001) != 0

    def is_exlorom(self) -> bool:
        return (self.value & 0b000010) != 0

    def is_exhirom(self) -> bool:
        return (self.value & 0b000100) != 0

    def __str__(self) -> str:
        return _MAP_MODE_NAMES[self]


_MAP_MODE_NAMES = {
    MapMode.SLOW_LOROM: "LoROM",
    MapMode.SLOW_HIROM: "HiROM",
    MapMode.SLOW_EXLOROM: "ExLoROM",
    MapMode.SLOW_EXHIROM: "ExHiROM",
    MapMode.FAST_LOROM: "Fast LoROM",
    MapMode.FAST_HIROM: "Fast HiROM",
    MapMode.FAST_EXLOROM: "Fast ExLoROM",
    MapMode.FAST_EXHIROM: "Fast ExHiROM",
}


class RomType(enum.IntEnum):
    """Chips present on the cartridge besides the ROM."""

    ROM = 0x00
    ROM_RAM = 0x01
    ROM_RAM_SRAM = 0x02

    ROM_DSP = 0x03
    ROM_SUPER_FX = 0x13
    ROM_OBC1 = 0x23
    ROM_SA1 = 0x33
    ROM_SDD1 = 0x43
    ROM_SRTC = 0x53
    ROM_OTHER = 0xE3
    ROM_CUSTOM = 0xF3

    ROM_DSP_RAM = 0x04
    ROM_SUPER_FX_RAM = 0x14
    ROM_OBC1_RAM = 0x24
    ROM_SA1_RAM = 0x34
    ROM_SDD1_RAM = 0x44
    ROM_SRTC_RAM = 0x54
    ROM_OTHER_RAM = 0xE4
    ROM_CUSTOM_RAM = 0xF4

    ROM_DSP_RAM_SRAM = 0x05
    ROM_SUPER_FX_RAM_SRAM = 0x15
    ROM_OBC1_RAM_SRAM = 0x25
    ROM_SA1_RAM_SRAM = 0x35
    ROM_SDD1_RAM_SRAM = 0x45
    ROM_SRTC_RAM_SRAM = 0x55
    ROM_OTHER_RAM_SRAM = 0xE5
    ROM_CUSTOM_RAM_SRAM = 0xF5

    ROM_DSP_SRAM = 0x06
    ROM_SUPER_FX_SRAM = 0x16
    ROM_OBC1_SRAM = 0x26
    ROM_SA1_SRAM = 0x36
    ROM_SDD1_SRAM = 0x46
    ROM_SRTC_SRAM = 0x56
    ROM_OTHER_SRAM = 0xE6
    ROM_CUSTOM_SRAM = 0xF6

    def __str__(self) -> str:
        if self is RomType.ROM:
            return "ROM"
        if self is RomType.ROM_RAM:
            return "ROM + RAM"
        if self is RomType.ROM_RAM_SRAM:
            return "ROM + RAM + SRAM"
        chip = _EXPANSION_CHIPS.get(self.value & 0xF0, "Unknown expansion chip")
        memory = _MEMORY_CHIPS.get(self.value & 0x0F, " + Unknown memory chip")
        return f"ROM + {chip}{memory}"


_EXPANSION_CHIPS = {
    0x00: "DSP",
    0x10: "SuperFX",
    0x20: "OBC-1",
    0x30: "SA-1",
    0x40: "SDD-1",
    0x50: "S-RTC",
    0xE0: "Other expansion chip",
    0xF0: "Custom expansion chip",
}

_MEMORY_CHIPS = {
    0x3: "",
    0x4: " + RAM",
    0x5: " + RAM + SRAM",
    0x6: " + SRAM",
}


class RegionCode(enum.IntEnum):
    """Region the cartridge was released for."""

    JAPAN = 0x00
    NORTH_AMERICA = 0x01
    EUROPE = 0x02
    SWEDEN = 0x03
    FINLAND = 0x04
    DENMARK = 0x05
    FRANCE = 0x06
    NETHERLANDS = 0x07
    SPAIN = 0x08
    GERMANY = 0x09
    ITALY = 0x0A
    CHINA = 0x0B
    INDONESIA = 0x0C
    KOREA = 0x0D
    GLOBAL = 0x0E
    CANADA = 0x0F
    BRAZIL = 0x10
    AUSTRALIA = 0x11
    OTHER1 = 0x12
    OTHER2 = 0x13
    OTHER3 = 0x14

    def __str__(self) -> str:
        return _REGION_NAMES[self]


_REGION_NAMES = {
    RegionCode.JAPAN: "Japan",
    RegionCode.NORTH_AMERICA: "North America",
    RegionCode.EUROPE: "Europe",
    RegionCode.SWEDEN: "Sweden",
    RegionCode.FINLAND: "Finland",
    RegionCode.DENMARK: "Denmark",
    RegionCode.FRANCE: "France",
    RegionCode.NETHERLANDS: "Netherlands",
    RegionCode.SPAIN: "Spain",
    RegionCode.GERMANY: "Germany",
    RegionCode.ITALY: "Italy",
    RegionCode.CHINA: "China",
    RegionCode.INDONESIA: "Indonesia",
    RegionCode.KOREA: "Korea",
    RegionCode.GLOBAL: "Global",
    RegionCode.CANADA: "Canada",
    RegionCode.BRAZIL: "Brazil",
    RegionCode.AUSTRALIA: "Australia",
    RegionCode.OTHER1: "Other (1)",
    RegionCode.OTHER2: "Other (2)",
    RegionCode.OTHER3: "Other (3)",
}


def _read(rom: Rom, slice: RomSlice, what: str) -> bytes:
    try:
        return rom.slice_pc(slice)
    except RomError as exc:
        raise InternalHeaderParseError(f"{what}:\n- {exc}") from exc


def _parse(rom: Rom, slice: RomSlice, what: str, convert: Callable[[bytes], T]) -> T:
    data = _read(rom, slice, what)
    try:
        return convert(data)
    except (ValueError, struct.error) as exc:
        raise InternalHeaderParseError(f"{what}:\n- {_PARSE_FAILURE}") from exc


def _find(rom: Rom) -> RomSlice:
    lo_slice = HEADER_LOROM.offset_forward(COMPLEMENT_CHECK_OFFSET).resize(4)
    hi_slice = HEADER_HIROM.offset_forward(COMPLEMENT_CHECK_OFFSET).resize(4)

    unpack = lambda data: struct.unpack("<HH", data)  # noqa: E731
    lo_cpl, lo_csm = _parse(rom, lo_slice, "Reading checksum and complement at LoROM location", unpack)
    hi_cpl, hi_csm = _parse(rom, hi_slice, "Reading checksum and complement at HiROM location", unpack)

    if lo_csm ^ lo_cpl == 0xFFFF:
        logger.info("Internal ROM header found at LoROM location: %s", format(HEADER_LOROM.begin, "X"))
        return HEADER_LOROM
    if hi_csm ^ hi_cpl == 0xFFFF:
        logger.info("Internal ROM header found at HiROM location: %s", format(HEADER_HIROM.begin, "X"))
        return HEADER_HIROM
    logger.error("Couldn't find internal ROM header due to invalid checksums")
    logger.error("(LoROM: %X^%X, HiROM: %X^%X)", lo_cpl, lo_csm, hi_cpl, hi_csm)
    raise InternalHeaderParseError("Couldn't find internal ROM header")


def _single_byte(data: bytes) -> int:
    (value,) = data
    return value


@dataclass(frozen=True)
class RomInternalHeader:
    """Fields of the internal ROM header."""

    internal_rom_name: str
    map_mode: MapMode
    rom_type: RomType
    rom_size: int
    sram_size: int
    region_code: RegionCode
    developer_id: int
    version_number: int
    interrupt_vectors: Tuple[AddrSnes, ...]

    @classmethod
    def parse(cls, rom: Rom) -> "RomInternalHeader":
        """Locate the header by its checksum pair and read its fields."""
        header = _find(rom)
        name_slice = header.resize(INTERNAL_ROM_NAME_SIZE)
        byte_slice = name_slice.skip_forward(1).resize(1)

        def byte_at(index: int, what: str, convert: Callable[[int], T]) -> T:
            return _parse(rom, byte_slice.skip_forward(index), what, lambda d: convert(_single_byte(d)))

        name = _parse(rom, name_slice, "Reading Internal ROM Name", lambda d: d.decode("utf-8"))
        map_mode = byte_at(0, "Reading Map Mode", MapMode)
        rom_type = byte_at(1, "Reading ROM Type", RomType)
        rom_size = byte_at(2, "Reading ROM Size", int)
        sram_size = byte_at(3, "Reading SRAM Size", int)
        region_code = byte_at(4, "Reading Region Code", RegionCode)
        developer_id = byte_at(5, "Reading Developer ID", int)
        version_number = byte_at(6, "Reading Version Number", int)

        vectors_slice = byte_slice.skip_forward(15).resize(2 * 6)
        emulation_slice = vectors_slice.skip_forward(1).offset_forward(4)
        unpack_vectors = lambda d: struct.unpack("<6H", d)  # noqa: E731
        native = _parse(rom, vectors_slice, "Reading Version Number", unpack_vectors)
        emulation = _parse(rom, emulation_slice, "Reading Version Number", unpack_vectors)

        return cls(
            internal_rom_name=name,
            map_mode=map_mode,
            rom_type=rom_type,
            rom_size=rom_size,
            sram_size=sram_size,
            region_code=region_code,
            developer_id=developer_id,
            version_number=version_number,
            interrupt_vectors=tuple(AddrSnes(v) for v in (*native, *emulation)),
        )

    def rom_size_in_kb(self) -> int:
        return 2**self.rom_size

    def sram_size_in_kb(self) -> int:
        return 0 if self.sram_size == 0 else 2**self.sram_size