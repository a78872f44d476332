import pytest

from smwkit.objects import Object

HEADER = bytes(5)


def test_empty_buffer_gives_none():
    assert Object.parse_from_ram(b"") is None


def test_only_terminator_gives_no_objects():
    assert Object.parse_from_ram(HEADER + b"\xff") == []


def test_parse_exit_and_standard():
    buffer = HEADER + bytes([0x03, 0x02, 0x00, 0x25]) + bytes([0x81, 0x23, 0x45]) + b"\xff"
    exit_obj, standard = Object.parse_from_ram(buffer)
    assert exit_obj == Object(int.from_bytes(bytes([0x03, 0x02, 0x00, 0x25]), "big"))
    assert standard == Object(int.from_bytes(bytes([0x81, 0x23, 0x45, 0x00]), "big"))


def test_exit_fields():
    exit_obj = Object(int.from_bytes(bytes([0x03, 0x02, 0x00, 0x25]), "big"))
    assert exit_obj.is_extended()
    assert exit_obj.is_exit()
    assert not exit_obj.is_screen_jump()
    assert exit_obj.screen_number() == 0x03
    assert exit_obj.is_secondary_exit()
    assert not exit_obj.is_midway()
    assert exit_obj.exit_id() == 0x25


def test_exit_high_bit_and_midway():
    obj = Object(int.from_bytes(bytes([0x00, 0x09, 0x00, 0x80]), "big"))
    assert obj.is_exit()
    assert obj.is_midway()
    assert obj.exit_id() == 0x100 | 0x80


def test_standard_fields():
    obj = Object(int.from_bytes(bytes([0x81, 0x23, 0x45, 0x00]), "big"))
    assert obj.is_standard()
    assert obj.is_new_screen()
    assert obj.standard_object_number() == 0x02
    assert obj.xy() == (0x3, 0x01)
    assert obj.settings() == 0x45


def test_screen_jump():
    obj = Object(int.from_bytes(bytes([0x05, 0x00, 0x01, 0x00]), "big"))
    assert obj.is_screen_jump()
    assert not obj.is_exit()
    assert obj.screen_number() == 0x05


def test_standard_number_high_bits():
    obj = Object(int.from_bytes(bytes([0x60, 0xF0, 0x00, 0x00]), "big"))
    assert obj.standard_object_number() == 0x3F
    assert obj.is_standard()


def test_extended_and_standard_are_opposites():
    for value in (0, 0x60000000, 0x00F00000, 0x1F0F0100, 0xFFFFFFFF):
        obj = Object(value)
        assert obj.is_extended() != obj.is_standard()


def test_missing_terminator_raises():
    with pytest.raises(ValueError):
        Object.parse_from_ram(HEADER + bytes([0x81, 0x23, 0x45]))


def test_truncated_object_raises():
    with pytest.raises(ValueError):
        Object.parse_from_ram(HEADER + bytes([0x81, 0x23]))


def test_out_of_range_value():
    with pytest.raises(ValueError):
        Object(1 << 32)