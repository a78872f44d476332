"""Address types for SNES ROMs, with LoROM and HiROM conversion."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

MASK_BB = 0xFF0000
"""Bank byte."""
MASK_HH = 0x00FF00
"""High byte."""
MASK_DD = 0x0000FF
"""Low byte."""
MASK_HHDD = MASK_HH | MASK_DD
"""Absolute address."""
MASK_BBHHDD = MASK_BB | MASK_HH | MASK_DD
"""Long address."""


class AddressError(ValueError):
    """An address that cannot be mapped to the other address space."""

    def __init__(self, message: str, address: "_Address") -> None:
        super().__init__(message)
        self.address = address


def _arith(op: Callable[[int, int], int]) -> Callable[["_Address", object], "_Address"]:
    def method(self: "_Address", other: object) -> "_Address":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        result = op(self.value, rhs)
        if not 0 <= result <= self._MAX:
            raise OverflowError(f"{type(self).__name__} arithmetic out of range: {result:#x}")
        return type(self)(result)

    return method


def _shift(op: Callable[[int, int], int]) -> Callable[["_Address", object], "_Address"]:
    def method(self: "_Address", other: object) -> "_Address":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if rhs >= self._BITS:
            raise OverflowError(f"shift by {rhs} overflows {type(self).__name__}")
        return type(self)(op(self.value, rhs) & self._MAX)

    return method


@dataclass(frozen=True, order=True, repr=False)
class _Address:
    value: int = 0

    _BITS: ClassVar[int] = 32
    _MAX: ClassVar[int] = 0xFFFFFFFF
    _HEX_LOWER: ClassVar[str] = "{:#x}"
    _HEX_UPPER: ClassVar[str] = "0x{:X}"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} needs an int, got {self.value!r}")
        if not 0 <= self.value <= self._MAX:
            raise ValueError(f"{type(self).__name__} out of range: {self.value:#x}")

    def __int__(self) -> int:
        return self.value

    def _operand(self, other: object) -> Optional[int]:
        if isinstance(other, _Address):
            return other.value if type(other) is type(self) else None
        if isinstance(other, bool) or not isinstance(other, int):
            return None
        if not 0 <= other <= self._MAX:
            raise ValueError(f"operand {other} does not fit in {type(self).__name__}")
        return other

    __add__ = _arith(operator.add)
    __sub__ = _arith(operator.sub)
    __mul__ = _arith(operator.mul)
    __floordiv__ = _arith(operator.floordiv)
    __mod__ = _arith(operator.mod)
    __and__ = _arith(operator.and_)
    __or__ = _arith(operator.or_)
    __xor__ = _arith(operator.xor)
    __lshift__ = _shift(operator.lshift)
    __rshift__ = _shift(operator.rshift)

    def __invert__(self) -> "_Address":
        return type(self)(~self.value & self._MAX)

    def _opposite(self) -> Optional["_Address"]:
        return None

    def __format__(self, spec: str) -> str:
        if spec.endswith("x"):
            return self._HEX_LOWER.format(self.value)
        if spec.endswith("X"):
            return self._HEX_UPPER.format(self.value)
        if not spec:
            return str(self)
        return format(self.value, spec)

    def _suffix(self) -> str:
        opposite = self._opposite()
        return "" if opposite is None else f" [-> {opposite:X}]"

    def __str__(self) -> str:
        return f"0x{self.value:04X}{self._suffix()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.value:04X}){self._suffix()}"


@dataclass(frozen=True, order=True, repr=False)
class AddrPc(_Address):
    """A file offset into the headerless ROM image."""

    value: int = 0

    _HEX_LOWER: ClassVar[str] = "PC {:#x}"
    _HEX_UPPER: ClassVar[str] = "PC 0x{:X}"

    @classmethod
    def try_from_lorom(cls, addr: "AddrSnes") -> "AddrPc":
        """Map a LoROM SNES address to a PC offset."""
        if not addr.is_valid_lorom():
            raise AddressError(f"Invalid SNES LoROM address {addr:x}", addr)
        return cls(((addr.value & 0x7F0000) >> 1) | (addr.value & 0x7FFF))

    @classmethod
    def try_from_hirom(cls, addr: "AddrSnes") -> "AddrPc":
        """Map a HiROM SNES address to a PC offset."""
        if not addr.is_valid_hirom():
            raise AddressError(f"Invalid SNES LoROM address {addr:x}", addr)
        return cls(addr.value & 0x3FFFFF)

    def as_index(self) -> int:
        """The offset as a plain integer index."""
        return self.value

    def is_valid_lorom(self) -> bool:
        return self.value < 0x400000

    def is_valid_hirom(self) -> bool:
        return self.value < 0x400000

    def _opposite(self) -> Optional[_Address]:
        try:
            return AddrSnes.try_from_lorom(self)
        except AddressError:
            return None


@dataclass(frozen=True, order=True, repr=False)
class AddrSnes(_Address):
    """An address on the SNES bus."""

    value: int = 0x8000

    _HEX_LOWER: ClassVar[str] = "SNES ${:x}"
    _HEX_UPPER: ClassVar[str] = "SNES ${:X}"

    @classmethod
    def try_from_lorom(cls, addr: AddrPc) -> "AddrSnes":
        """Map a PC offset to a LoROM SNES address."""
        if not addr.is_valid_lorom():
            raise AddressError(f"Invalid PC LoROM address {addr:x}", addr)
        return cls(((addr.value << 1) & 0x7F0000) | (addr.value & 0x7FFF) | 0x8000)

    @classmethod
    def try_from_hirom(cls, addr: AddrPc) -> "AddrSnes":
        """Map a PC offset to a HiROM SNES address."""
        if not addr.is_valid_hirom():
            raise AddressError(f"Invalid PC LoROM address {addr:x}", addr)
        return cls(addr.value | 0xC00000)

    def as_index(self) -> int:
        """The address as a plain integer index."""
        return self.value

    def is_valid_lorom(self) -> bool:
        wram = (self.value & 0xFE0000) == 0x7E0000
        junk = (self.value & 0x408000) == 0x000000
        sram = (self.value & 0x708000) == 0x700000
        return not (wram or junk or sram)

    def is_valid_hirom(self) -> bool:
        wram = (self.value & 0xFE0000) == 0x7E0000
        junk = (self.value & 0x408000) == 0x000000
        return not (wram or junk)

    def bank(self) -> int:
        return (self.value >> 16) & 0xFF

    def high(self) -> int:
        return (self.value & MASK_HH) >> 8

    def low(self) -> int:
        return self.value & MASK_DD

    def absolute(self) -> int:
        return self.value & MASK_HHDD

    def with_bank(self, bank: int) -> "AddrSnes":
        return AddrSnes((self.value & 0x00FFFF) | ((bank & 0xFF) << 16))

    def with_high(self, high: int) -> "AddrSnes":
        return AddrSnes((self.value & 0xFF00FF) | ((high & 0xFF) << 8))

    def with_low(self, low: int) -> "AddrSnes":
        return AddrSnes((self.value & 0xFFFF00) | (low & 0xFF))

    def with_absolute(self, absolute: int) -> "AddrSnes":
        return AddrSnes((self.value & 0xFF0000) | (absolute & 0xFFFF))

    def _opposite(self) -> Optional[_Address]:
        try:
            return AddrPc.try_from_lorom(self)
        except AddressError:
            return None


@dataclass(frozen=True, order=True, repr=False)
class AddrVram(_Address):
    """A word address in video RAM."""

    value: int = 0

    _BITS: ClassVar[int] = 16
    _MAX: ClassVar[int] = 0xFFFF
    _HEX_LOWER: ClassVar[str] = "VRAM ${:x}"
    _HEX_UPPER: ClassVar[str] = "VRAM ${:X}"

    def as_index(self) -> int:
        """The address as a plain integer index."""
        return self.value

    def __str__(self) -> str:
        return repr(self)

    def __repr__(self) -> str:
        return f"AddrVram(0x{self.value:04x})"