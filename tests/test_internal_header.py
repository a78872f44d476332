import pytest

from smwkit.addr import AddrSnes
from smwkit.internal_header import (
    InternalHeaderParseError,
    MapMode,
    RegionCode,
    RomInternalHeader,
    RomType,
)
from smwkit.rom import Rom

NAME = b"SUPER MARIOWORLD     "
NATIVE = [0x1111, 0x2222, 0x3333, 0x4444, 0x5555, 0x6666]
EMULATION = [0x7777, 0x8888, 0x9999, 0xAAAA, 0xBBBB, 0xCCCC]


def header_bytes(name=NAME, map_mode=0x20, rom_type=0x02, rom_size=9, sram_size=0,
                 region=0x01, developer=0x01, version=0x00, cpl=0x1234, csm=0x1234 ^ 0xFFFF):
    out = bytearray(64)
    out[0:21] = name
    out[21] = map_mode
    out[22] = rom_type
    out[23] = rom_size
    out[24] = sram_size
    out[25] = region
    out[26] = developer
    out[27] = version
    out[0x1C:0x1E] = cpl.to_bytes(2, "little")
    out[0x1E:0x20] = csm.to_bytes(2, "little")
    for i, v in enumerate(NATIVE):
        out[0x24 + 2 * i:0x26 + 2 * i] = v.to_bytes(2, "little")
    for i, v in enumerate(EMULATION):
        out[0x34 + 2 * i:0x36 + 2 * i] = v.to_bytes(2, "little")
    return bytes(out)


def make_rom(header, location=0x7FC0, size=0x10000):
    data = bytearray(size)
    data[location:location + 64] = header
    return Rom(bytes(data))


def test_parse_lorom_header():
    hdr = RomInternalHeader.parse(make_rom(header_bytes()))
    assert hdr.internal_rom_name == NAME.decode()
    assert hdr.map_mode is MapMode.SLOW_LOROM
    assert hdr.rom_type is RomType.ROM_RAM_SRAM
    assert hdr.rom_size == 9
    assert hdr.sram_size == 0
    assert hdr.region_code is RegionCode.NORTH_AMERICA
    assert hdr.developer_id == 1
    assert hdr.version_number == 0
    assert hdr.interrupt_vectors == tuple(AddrSnes(v) for v in NATIVE + EMULATION)


def test_parse_hirom_header():
    rom = make_rom(header_bytes(map_mode=0x31, region=0x00, version=2), location=0xFFC0)
    hdr = RomInternalHeader.parse(rom)
    assert hdr.map_mode is MapMode.FAST_HIROM
    assert hdr.region_code is RegionCode.JAPAN
    assert hdr.version_number == 2


def test_header_with_copier_prefix():
    data = bytes(0x200) + bytes(make_rom(header_bytes()))
    hdr = RomInternalHeader.parse(Rom(data))
    assert hdr.map_mode is MapMode.SLOW_LOROM


def test_missing_header():
    with pytest.raises(InternalHeaderParseError, match="Couldn't find internal ROM header"):
        RomInternalHeader.parse(Rom(bytes(0x10000)))


def test_rom_too_small_for_hirom_checksum():
    with pytest.raises(InternalHeaderParseError, match="HiROM location"):
        RomInternalHeader.parse(make_rom(header_bytes(), size=0x8000))


def test_invalid_map_mode():
    with pytest.raises(InternalHeaderParseError, match="Reading Map Mode"):
        RomInternalHeader.parse(make_rom(header_bytes(map_mode=0x00)))


def test_invalid_rom_type():
    with pytest.raises(InternalHeaderParseError, match="Reading ROM Type"):
        RomInternalHeader.parse(make_rom(header_bytes(rom_type=0x07)))


def test_invalid_region():
    with pytest.raises(InternalHeaderParseError, match="Reading Region Code"):
        RomInternalHeader.parse(make_rom(header_bytes(region=0x15)))


def test_invalid_name_encoding():
    name = b"\xff" * 21
    with pytest.raises(InternalHeaderParseError, match="Reading Internal ROM Name"):
        RomInternalHeader.parse(make_rom(header_bytes(name=name)))


def test_sizes_in_kb():
    hdr = RomInternalHeader.parse(make_rom(header_bytes(rom_size=9, sram_size=0)))
    assert hdr.rom_size_in_kb() == 512
    assert hdr.sram_size_in_kb() == 0
    bigger = RomInternalHeader.parse(make_rom(header_bytes(rom_size=10, sram_size=1)))
    assert bigger.rom_size_in_kb() == 2 * hdr.rom_size_in_kb()
    assert bigger.sram_size_in_kb() == 2


def test_map_mode_flags():
    assert MapMode.SLOW_LOROM.is_slow() and MapMode.SLOW_LOROM.is_lorom()
    assert MapMode.FAST_HIROM.is_fast() and MapMode.FAST_HIROM.is_hirom()
    assert MapMode.FAST_EXLOROM.is_exlorom() and not MapMode.FAST_EXLOROM.is_exhirom()
    assert MapMode.SLOW_EXHIROM.is_exhirom()
    for mode in MapMode:
        assert mode.is_slow() != mode.is_fast()
        assert mode.is_lorom() != mode.is_hirom()


def test_map_mode_names():
    assert str(MapMode(0b100000)) == "LoROM"
    assert str(MapMode(0b110100)) == "Fast ExHiROM"


def test_rom_type_names():
    assert str(RomType(0x00)) == "ROM"
    assert str(RomType(0x02)) == "ROM + RAM + SRAM"
    assert str(RomType(0x34)) == "ROM + SA-1 + RAM"
    assert str(RomType(0x03)).startswith("ROM + DSP")
    for rom_type in RomType:
        assert str(rom_type).startswith("ROM")
        assert "Unknown" not in str(rom_type)


def test_region_names():
    assert str(RegionCode(0x01)) == "North America"
    assert str(RegionCode(0x13)) == "Other (2)"