"""Address ranges within a ROM image."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

from smwkit.addr import AddrPc, AddrSnes

INFINITE_SIZE = 2**64 - 1
"""Size marking a slice that runs to the end of the data."""

A = TypeVar("A", AddrPc, AddrSnes)


@dataclass(frozen=True)
class RomSlice(Generic[A]):
    """A range of ``size`` bytes starting at ``begin``."""

    begin: A
    size: int

    def __post_init__(self) -> None:
        if not 0 <= self.size <= INFINITE_SIZE:
            raise ValueError(f"invalid slice size: {self.size}")

    def end(self) -> Optional[A]:
        """One past the last address, or None for an infinite slice."""
        if self.is_infinite():
            return None
        return self.begin + self.size

    def offset_forward(self, offset: int) -> "RomSlice[A]":
        return replace(self, begin=self.begin + offset)

    def offset_backward(self, offset: int) -> "RomSlice[A]":
        return replace(self, begin=self.begin - offset)

    def skip_forward(self, lengths: int) -> "RomSlice[A]":
        """Move forward by a whole number of slice lengths."""
        if self.is_infinite():
            return self
        return replace(self, begin=self.begin + self.size * lengths)

    def skip_backward(self, lengths: int) -> "RomSlice[A]":
        """Move backward by a whole number of slice lengths."""
        if self.is_infinite():
            return self
        return replace(self, begin=self.begin - self.size * lengths)

    def move_to(self, new_address: A) -> "RomSlice[A]":
        return replace(self, begin=new_address)

    def expand(self, diff: int) -> "RomSlice[A]":
        if self.is_infinite():
            return self
        return replace(self, size=self.size + diff)

    def shrink(self, diff: int) -> "RomSlice[A]":
        return replace(self, size=self.size - diff)

    def resize(self, new_size: int) -> "RomSlice[A]":
        return replace(self, size=new_size)

    def infinite(self) -> "RomSlice[A]":
        return replace(self, size=INFINITE_SIZE)

    def is_infinite(self) -> bool:
        return self.size == INFINITE_SIZE

    def contains(self, addr: A) -> bool:
        """Whether ``addr`` lies within a finite slice."""
        end = self.end()
        if end is None:
            return False
        return self.begin <= addr < end

    def __str__(self) -> str:
        return f"RomSlice {{ begin: {self.begin:X}, size: {self.size} }}"