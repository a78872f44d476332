import pytest

from smwkit.addr import AddrPc, AddrSnes
from smwkit.rom import (
    SMC_HEADER_SIZE,
    EmptyRomError,
    Rom,
    RomError,
    RomSizeError,
    SliceError,
)
from smwkit.rom_slice import RomSlice

DATA = bytes(range(256)) * 4


def test_empty_rom_rejected():
    with pytest.raises(EmptyRomError) as info:
        Rom(b"")
    assert str(info.value) == "Empty ROM file"
    assert isinstance(info.value, RomError)


def test_bad_size_rejected():
    with pytest.raises(RomSizeError) as info:
        Rom(b"\x00" * 100)
    assert info.value.size == 100
    assert "Invalid ROM size" in str(info.value)


def test_plain_rom_kept_whole():
    rom = Rom(DATA)
    assert len(rom) == len(DATA)
    assert bytes(rom) == DATA


def test_copier_header_stripped():
    rom = Rom(b"\xAA" * SMC_HEADER_SIZE + DATA)
    assert bytes(rom) == DATA


def test_slice_pc():
    rom = Rom(DATA)
    assert rom.slice_pc(RomSlice(AddrPc(0x10), 4)) == DATA[0x10:0x14]


def test_infinite_slice_reads_to_end():
    rom = Rom(DATA)
    assert rom.slice_pc(RomSlice(AddrPc(0x300), 1).infinite()) == DATA[0x300:]


def test_slice_pc_out_of_range():
    rom = Rom(DATA)
    bad = RomSlice(AddrPc(len(DATA) - 2), 4)
    with pytest.raises(SliceError) as info:
        rom.slice_pc(bad)
    assert info.value.slice == bad
    assert "Could not PC slice ROM" in str(info.value)


def test_slice_lorom_matches_pc():
    rom = Rom(DATA)
    snes = AddrSnes.try_from_lorom(AddrPc(0x10))
    assert rom.slice_lorom(RomSlice(snes, 4)) == rom.slice_pc(RomSlice(AddrPc(0x10), 4))


def test_slice_lorom_invalid_address():
    rom = Rom(DATA)
    bad = RomSlice(AddrSnes(0x7EAC20), 4)
    with pytest.raises(SliceError) as info:
        rom.slice_lorom(bad)
    assert info.value.slice == bad
    assert "Could not SNES slice ROM" in str(info.value)