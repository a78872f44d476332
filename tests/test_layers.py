import pytest

from smwkit.layers import (
    ExitObject,
    ExtendedOtherObject,
    LayerParseError,
    ObjectLayer,
    ScreenJumpObject,
    SpriteInstance,
    SpriteLayer,
    StandardObject,
)

STANDARD = bytes([0x81, 0x23, 0x45])
EXIT = bytes([0x05, 0x03, 0x00, 0x10])
SCREEN_JUMP = bytes([0x07, 0x00, 0x01])
OTHER = bytes([0x00, 0x00, 0x42])


def test_object_layer_kinds_in_order():
    data = STANDARD + EXIT + SCREEN_JUMP + OTHER + b"\xff"
    layer, consumed = ObjectLayer.parse(data)
    kinds = [type(o) for o in layer.objects]
    assert kinds == [StandardObject, ExitObject, ScreenJumpObject, ExtendedOtherObject]
    assert consumed == len(data)


def test_object_layer_ignores_trailing_bytes():
    data = STANDARD + b"\xff"
    layer, consumed = ObjectLayer.parse(data + b"\x01\x02\x03")
    assert consumed == len(data)
    assert len(layer.objects) == 1


def test_empty_layer():
    layer, consumed = ObjectLayer.parse(b"\xff")
    assert layer.objects == ()
    assert consumed == 1


def test_standard_object_fields():
    obj = StandardObject(STANDARD)
    assert obj.new_screen() is True
    assert obj.settings() == 0x45
    assert obj.is_extended() is False
    assert obj.ext_obj_num() is None
    assert obj.std_obj_num() == 2
    assert obj.xy_pos() == (0x23 & 0xF, 0x81 & 0x1F)


def test_exit_object_fields():
    obj = ExitObject(EXIT)
    assert obj.screen_number() == 0x05
    assert obj.secondary_exit() is True
    assert obj.destination_level() == 0x110
    assert obj.is_extended() is True


def test_screen_jump_and_other():
    assert ScreenJumpObject(SCREEN_JUMP).screen_number() == 0x07
    assert ScreenJumpObject(SCREEN_JUMP).is_extended() is True
    assert ExtendedOtherObject(OTHER).is_extended() is True


@pytest.mark.parametrize("data", [b"", STANDARD, STANDARD + b"\x01", EXIT[:3]])
def test_object_layer_without_terminator(data):
    with pytest.raises(LayerParseError):
        ObjectLayer.parse(data)


def test_wrong_object_size():
    with pytest.raises(ValueError):
        ExitObject(STANDARD)


def test_sprite_layer_parse():
    data = bytes([0x31, 0x25, 0x7A, 0x10, 0xFF, 0x20, 0xFF])
    layer, consumed = SpriteLayer.parse(data)
    assert consumed == len(data)
    assert [s.sprite_id() for s in layer.sprites] == [0x7A, 0x20]
    assert layer.sprites[1].data == bytes([0x10, 0xFF, 0x20])


def test_sprite_layer_terminator_first():
    layer, consumed = SpriteLayer.parse(b"\xff\x01\x02\x03")
    assert layer.sprites == ()
    assert consumed == 1


def test_sprite_layer_truncated():
    with pytest.raises(LayerParseError):
        SpriteLayer.parse(bytes([0x01, 0x02]))


def test_sprite_instance_fields():
    sprite = SpriteInstance(bytes([0x31, 0x25, 0x7A]))
    assert sprite.xy_pos() == (0x25 >> 4, 0x13)
    assert sprite.sprite_id() == 0x7A
    assert sprite.extra_bits() == 0
    assert sprite.screen_number() == 0x25 & 0xF


def test_sprite_instance_high_bits():
    sprite = SpriteInstance(bytes([0x0E, 0x00, 0x00]))
    assert sprite.extra_bits() == 0b11
    assert sprite.screen_number() == 0x10