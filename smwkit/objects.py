"""Level objects packed into 32-bit words, as the game keeps them in RAM."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

_RAM_HEADER_SIZE = 5
_TERMINATOR = 0xFF


@dataclass(frozen=True)
class Object:
    """A level object.

    Standard ``NBBYYYYY bbbbXXXX SSSSSSSS``, extended ``N00YYYYY 0000XXXX BBBBBBBB``,
    exit ``000ppppp 0000w0sh 00000000 dddddddd``, screen jump ``000HHHHH 00000000 00000001``.
    Three-byte objects sit in the upper three bytes of the word.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Object needs an int, got {self.value!r}")
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"Object out of range: {self.value:#x}")

    @classmethod
    def parse_from_ram(cls, buffer: bytes) -> Optional[List["Object"]]:
        """Read the objects after the 5-byte level header up to 0xFF; None for an empty buffer."""
        data = bytes(buffer)
        if not data:
            return None
        pos = _RAM_HEADER_SIZE
        objects: List[Object] = []
        while True:
            if pos >= len(data):
                raise ValueError("object data ends before the 0xFF terminator")
            if data[pos] == _TERMINATOR:
                break
            head = data[pos : pos + 3]
            if len(head) < 3:
                raise ValueError("object data ends before the 0xFF terminator")
            if head[0] & 0x50 == 0 and head[1] & 0xF0 == 0 and head[2] == 0:
                chunk = data[pos : pos + 4]
                if len(chunk) < 4:
                    raise ValueError("object data ends before the 0xFF terminator")
                objects.append(cls(int.from_bytes(chunk, "big")))
                pos += 4
            else:
                objects.append(cls(int.from_bytes(head + b"\x00", "big")))
                pos += 3
        return objects

    def is_extended(self) -> bool:
        # -00----- 0000---- -------- --------
        return (self.value >> 20) & 0x60F == 0

    def is_standard(self) -> bool:
        return not self.is_extended()

    def is_exit(self) -> bool:
        return self.is_extended() and self.settings() == 0

    def is_screen_jump(self) -> bool:
        return self.is_extended() and self.settings() == 1

    def is_new_screen(self) -> bool:
        # N------- -------- -------- --------
        return (self.value >> 31) & 1 != 0

    def standard_object_number(self) -> int:
        # -BB----- bbbb---- -------- --------
        return ((self.value >> 25) & 0x30) | ((self.value >> 20) & 0x0F)

    def settings(self) -> int:
        # -------- -------- SSSSSSSS --------
        return (self.value >> 8) & 0xFF

    def y(self) -> int:
        # ---YYYYY -------- -------- --------
        return (self.value >> 24) & 0x1F

    def x(self) -> int:
        # -------- ----XXXX -------- --------
        return (self.value >> 16) & 0xF

    def xy(self) -> Tuple[int, int]:
        return self.x(), self.y()

    def screen_number(self) -> int:
        # ---ppppp -------- -------- -------- (exit and screen jump)
        return (self.value >> 24) & 0x1F

    def is_midway(self) -> bool:
        # -------- ----w--- -------- --------
        return (self.value >> 19) & 1 != 0

    def is_secondary_exit(self) -> bool:
        # -------- ------s- -------- --------
        return (self.value >> 17) & 1 != 0

    def exit_id(self) -> int:
        # -------- -------h -------- dddddddd
        return (self.value & 0xFF) | ((self.value >> 8) & 0x100)