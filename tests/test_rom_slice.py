import pytest

from smwkit.addr import AddrPc, AddrSnes
from smwkit.rom_slice import INFINITE_SIZE, RomSlice


def test_end_of_finite_slice():
    s = RomSlice(AddrPc(0x7FC0), 64)
    assert s.end() == s.begin + s.size


def test_end_of_infinite_slice_is_none():
    s = RomSlice(AddrPc(0x10), 4).infinite()
    assert s.is_infinite()
    assert s.size == INFINITE_SIZE
    assert s.end() is None


def test_offset_round_trip():
    s = RomSlice(AddrSnes(0x05E600), 3)
    assert s.offset_forward(9).offset_backward(9) == s
    assert s.offset_forward(9).size == s.size


def test_skip_forward_moves_by_size():
    s = RomSlice(AddrSnes(0x05F800), 512)
    assert s.skip_forward(1) == s.offset_forward(512)
    assert s.skip_forward(3).skip_backward(3) == s


def test_skip_and_expand_leave_infinite_slice_alone():
    s = RomSlice(AddrPc(0x100), 8).infinite()
    assert s.skip_forward(5) == s
    assert s.skip_backward(1) == s
    assert s.expand(10) == s


def test_expand_shrink_resize():
    s = RomSlice(AddrPc(0x100), 8)
    assert s.expand(4).shrink(4) == s
    assert s.resize(21).size == 21
    assert s.resize(21).begin == s.begin
    with pytest.raises(ValueError):
        s.shrink(9)


def test_move_to():
    s = RomSlice(AddrPc(0x100), 8)
    moved = s.move_to(AddrPc(0x200))
    assert moved.begin == AddrPc(0x200)
    assert moved.size == s.size


def test_contains_is_half_open():
    s = RomSlice(AddrPc(0x100), 8)
    assert s.contains(s.begin)
    assert s.contains(s.begin + 7)
    assert not s.contains(s.end())
    assert not s.contains(AddrPc(0xFF))


def test_infinite_contains_nothing():
    s = RomSlice(AddrPc(0x100), 8).infinite()
    assert not s.contains(AddrPc(0x100))


def test_display():
    assert str(RomSlice(AddrSnes(0x00A92B), 104)) == "RomSlice { begin: SNES $A92B, size: 104 }"


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        RomSlice(AddrPc(0), -1)