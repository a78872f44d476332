"""Level headers and secondary entrance records, decoded from their packed bytes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

PRIMARY_HEADER_SIZE = 5
SECONDARY_HEADER_SIZE = 4
SPRITE_HEADER_SIZE = 1
SECONDARY_ENTRANCE_SIZE = 4


def _checked(data: bytes, size: int, name: str) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{name} needs {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class PrimaryHeader:
    """The five-byte header in front of a level's layer 1 data."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _checked(self.data, PRIMARY_HEADER_SIZE, "PrimaryHeader"))

    def palette_bg(self) -> int:
        # BBB----- -------- -------- -------- --------
        return self.data[0] >> 5

    def level_length(self) -> int:
        # ---LLLLL -------- -------- -------- --------
        return self.data[0] & 0b11111

    def back_area_color(self) -> int:
        # -------- CCC----- -------- -------- --------
        return self.data[1] >> 5

    def level_mode(self) -> int:
        # -------- ---MMMMM -------- -------- --------
        return self.data[1] & 0b11111

    def layer3_priority(self) -> bool:
        # -------- -------- P------- -------- --------
        return (self.data[2] >> 7) != 0

    def music(self) -> int:
        # -------- -------- -MMM---- -------- --------
        return (self.data[2] >> 4) & 0b111

    def sprite_gfx(self) -> int:
        # -------- -------- ----SSSS -------- --------
        return self.data[2] & 0b1111

    def timer(self) -> int:
        # -------- -------- -------- TT------ --------
        return self.data[3] >> 6

    def palette_sprite(self) -> int:
        # -------- -------- -------- --PPP--- --------
        return (self.data[3] >> 3) & 0b111

    def palette_fg(self) -> int:
        # -------- -------- -------- -----FFF --------
        return self.data[3] & 0b111

    def item_memory(self) -> int:
        # -------- -------- -------- -------- II------
        return self.data[4] >> 6

    def vertical_scroll(self) -> int:
        # -------- -------- -------- -------- --VV----
        return (self.data[4] >> 4) & 0b11

    def fg_bg_gfx(self) -> int:
        # -------- -------- -------- -------- ----GGGG
        return self.data[4] & 0b1111


@dataclass(frozen=True)
class SecondaryHeader:
    """The four-byte secondary level header."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _checked(self.data, SECONDARY_HEADER_SIZE, "SecondaryHeader"))

    def layer2_scroll(self) -> int:
        # SSSS---- -------- -------- --------
        return (self.data[0] >> 4) & 0b1111

    def main_entrance_xy_pos(self) -> Tuple[int, int]:
        # ----YYYY -----XXX -------- --------
        return self.data[1] & 0b111, self.data[0] & 0b1111

    def layer3(self) -> int:
        # -------- LL------ -------- --------
        return (self.data[1] >> 6) & 0b11

    def main_entrance_mario_action(self) -> int:
        # -------- --AAA--- -------- --------
        return (self.data[1] >> 3) & 0b111

    def midway_entrance_screen(self) -> int:
        # -------- -------- SSSS---- --------
        return (self.data[2] >> 4) & 0b1111

    def fg_initial_pos(self) -> int:
        # -------- -------- ----FF-- --------
        return (self.data[2] >> 2) & 0b11

    def bg_initial_pos(self) -> int:
        # -------- -------- ------BB --------
        return self.data[2] & 0b11

    def no_yoshi_level(self) -> bool:
        # -------- -------- -------- Y-------
        return (self.data[3] >> 7) != 0

    def unknown_vertical_pos_level(self) -> bool:
        # -------- -------- -------- -U------
        return (self.data[3] & 0b01000000) != 0

    def vertical_level(self) -> bool:
        # -------- -------- -------- --V-----
        return (self.data[3] & 0b00100000) != 0

    def main_entrance_screen(self) -> int:
        # -------- -------- -------- ---EEEEE
        return self.data[3] & 0b11111


@dataclass(frozen=True)
class SpriteHeader:
    """The one-byte header in front of a level's sprite data."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"SpriteHeader needs a byte, got {self.value}")

    @classmethod
    def read_from(cls, data: bytes) -> Tuple["SpriteHeader", bytes]:
        """Read the header from the front of ``data``; returns it and the remaining bytes."""
        data = bytes(data)
        if len(data) < SPRITE_HEADER_SIZE:
            raise ValueError("not enough data for a sprite header")
        return cls(data[0]), data[SPRITE_HEADER_SIZE:]

    def sprite_buoyancy(self) -> bool:
        # B-------
        return (self.value & 0b10000000) != 0

    def disable_layer2_interaction(self) -> bool:
        # -L------
        return (self.value & 0b01000000) != 0

    def sprite_memory(self) -> int:
        # --MMMMMM
        return self.value & 0b00111111


@dataclass(frozen=True)
class SecondaryEntrance:
    """A four-byte secondary entrance record."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _checked(self.data, SECONDARY_ENTRANCE_SIZE, "SecondaryEntrance"))

    def destination_level(self) -> int:
        # dddddddd -------- -------- ----D---
        hi = (self.data[3] & 0b1000) << 5
        return hi | self.data[0]

    def bg_initial_pos(self) -> int:
        # -------- bb------ -------- --------
        return self.data[1] >> 6

    def fg_initial_pos(self) -> int:
        # -------- --ff---- -------- --------
        # The upper bits are not masked off.
        return self.data[1] >> 4

    def entrance_xy_pos(self) -> Tuple[int, int]:
        # -------- ----yyyy xxx----- --------
        return self.data[2] >> 5, self.data[1] & 0b1111

    def screen_number(self) -> int:
        # -------- -------- ---SSSSS --------
        return self.data[2] & 0b11111