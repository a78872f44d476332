"""Layer 1/2 object data and sprite data of a level, each list ending in 0xFF."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

NON_EXIT_INSTANCE_SIZE = 3
EXIT_INSTANCE_SIZE = 4
SPRITE_INSTANCE_SIZE = 3
TERMINATOR = 0xFF


class LayerParseError(ValueError):
    """Layer data that ends before its 0xFF terminator."""


@dataclass(frozen=True)
class _Packed:
    data: bytes

    _SIZE: ClassVar[int] = NON_EXIT_INSTANCE_SIZE

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != self._SIZE:
            raise ValueError(f"{type(self).__name__} needs {self._SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "data", data)


@dataclass(frozen=True)
class StandardObject(_Packed):
    """A standard object: ``NBBYYYYY bbbbXXXX SSSSSSSS``."""

    def new_screen(self) -> bool:
        # N------- -------- --------
        return (self.data[0] >> 7) != 0

    def std_obj_num(self) -> int:
        # -BB----- bbbb---- --------
        hi = (self.data[0] >> 1) & 0b110000
        lo = (self.data[1] >> 4) & 0b1111
        return hi | lo

    def ext_obj_num(self) -> Optional[int]:
        # -------- -------- NNNNNNNN
        return self.data[2] if self.is_extended() else None

    def xy_pos(self) -> Tuple[int, int]:
        # ---YYYYY ----XXXX --------
        return self.data[1] & 0b1111, self.data[0] & 0b11111

    def settings(self) -> int:
        # -------- -------- SSSSSSSS
        return self.data[2]

    def is_extended(self) -> bool:
        return self.std_obj_num() == 0


@dataclass(frozen=True)
class ExitObject(_Packed):
    """A screen exit: ``000ppppp 0000w0sh 00000000 dddddddd``."""

    _SIZE: ClassVar[int] = EXIT_INSTANCE_SIZE

    def screen_number(self) -> int:
        # ---ppppp -------- -------- --------
        return self.data[0] & 0b11111

    def secondary_exit(self) -> bool:
        # -------- ------s- -------- --------
        return (self.data[1] & 0b10) != 0

    def destination_level(self) -> int:
        # -------- -------D -------- dddddddd
        return ((self.data[1] & 0b1) << 8) | self.data[3]

    def is_extended(self) -> bool:
        return True


@dataclass(frozen=True)
class ScreenJumpObject(_Packed):
    """A screen jump: ``000HHHHH 00000000 00000001``."""

    def screen_number(self) -> int:
        # ---HHHHH -------- --------
        return self.data[0] & 0b11111

    def is_extended(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtendedOtherObject(_Packed):
    """Any other extended object."""

    def is_extended(self) -> bool:
        return True


ObjectInstance = Union[StandardObject, ExitObject, ScreenJumpObject, ExtendedOtherObject]


def _take(data: bytes, pos: int, size: int, what: str) -> bytes:
    chunk = data[pos : pos + size]
    if len(chunk) < size:
        raise LayerParseError(f"{what} data ends before the 0xFF terminator")
    return chunk


def _at_terminator(data: bytes, pos: int) -> bool:
    return pos < len(data) and data[pos] == TERMINATOR


@dataclass(frozen=True)
class ObjectLayer:
    """The objects of one layer, in the order they appear."""

    objects: Tuple[ObjectInstance, ...]

    @classmethod
    def parse(cls, data: bytes) -> Tuple["ObjectLayer", int]:
        """Read objects up to the 0xFF terminator; returns the layer and the bytes consumed."""
        data = bytes(data)
        pos = 0
        objects = []
        while not _at_terminator(data, pos):
            first = _take(data, pos, NON_EXIT_INSTANCE_SIZE, "Object")
            if first[0] & 0b01100000 == 0 and first[1] & 0b11110000 == 0:
                if first[2] == 0:
                    objects.append(ExitObject(_take(data, pos, EXIT_INSTANCE_SIZE, "Object")))
                    pos += EXIT_INSTANCE_SIZE
                    continue
                if first[2] == 1:
                    objects.append(ScreenJumpObject(first))
                else:
                    objects.append(ExtendedOtherObject(first))
            else:
                objects.append(StandardObject(first))
            pos += NON_EXIT_INSTANCE_SIZE
        return cls(tuple(objects)), pos + 1


@dataclass(frozen=True)
class SpriteInstance(_Packed):
    """A placed sprite: ``yyyyEESY XXXXssss NNNNNNNN``."""

    def xy_pos(self) -> Tuple[int, int]:
        # yyyy---Y XXXX---- --------
        x = self.data[1] >> 4
        y = ((self.data[0] & 0b1) << 4) | (self.data[0] >> 4)
        return x, y

    def extra_bits(self) -> int:
        # ----EE-- -------- --------
        return (self.data[0] >> 2) & 0b11

    def screen_number(self) -> int:
        # ------S- ----ssss --------
        return ((self.data[0] & 0b10) << 3) | (self.data[1] & 0b1111)

    def sprite_id(self) -> int:
        # -------- -------- NNNNNNNN
        return self.data[2]


@dataclass(frozen=True)
class SpriteLayer:
    """The sprites of a level, in the order they appear."""

    sprites: Tuple[SpriteInstance, ...]

    @classmethod
    def parse(cls, data: bytes) -> Tuple["SpriteLayer", int]:
        """Read sprites up to the 0xFF terminator; returns the layer and the bytes consumed."""
        data = bytes(data)
        pos = 0
        sprites = []
        while not _at_terminator(data, pos):
            sprites.append(SpriteInstance(_take(data, pos, SPRITE_INSTANCE_SIZE, "Sprite")))
            pos += SPRITE_INSTANCE_SIZE
        return cls(tuple(sprites)), pos + 1