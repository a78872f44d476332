"""A ROM image with byte-range access by PC or LoROM address."""

from __future__ import annotations

from smwkit.addr import AddressError, AddrPc, AddrSnes
from smwkit.rom_slice import RomSlice

SMC_HEADER_SIZE = 0x200


class RomError(Exception):
    """Base class for errors reading a ROM image."""


class EmptyRomError(RomError):
    """The ROM image holds no bytes."""

    def __init__(self) -> None:
        super().__init__("Empty ROM file")


class RomSizeError(RomError):
    """The ROM size is neither a whole number of kilobytes nor that plus a copier header."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Invalid ROM size (not a multiple of 512 bytes): {size} ({size:#x})")
        self.size = size


class SliceError(RomError):
    """A slice that does not lie within the ROM image."""

    def __init__(self, slice: RomSlice) -> None:
        kind = "SNES" if isinstance(slice.begin, AddrSnes) else "PC"
        super().__init__(f"Could not {kind} slice ROM: {slice}")
        self.slice = slice


class Rom:
    """ROM bytes with any copier header removed."""

    __slots__ = ("data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if not data:
            raise EmptyRomError()
        remainder = len(data) % 0x400
        if remainder == SMC_HEADER_SIZE:
            data = data[SMC_HEADER_SIZE:]
        elif remainder:
            raise RomSizeError(len(data))
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def slice_pc(self, slice: RomSlice) -> bytes:
        """Bytes covered by a slice given in PC offsets."""
        begin = slice.begin.as_index()
        end = len(self.data) if slice.is_infinite() else begin + slice.size
        if begin > len(self.data) or end > len(self.data):
            raise SliceError(slice)
        return self.data[begin:end]

    def slice_lorom(self, slice: RomSlice) -> bytes:
        """Bytes covered by a slice given in LoROM SNES addresses."""
        try:
            begin = AddrPc.try_from_lorom(slice.begin)
        except AddressError as exc:
            raise SliceError(slice) from exc
        return self.slice_pc(RomSlice(begin, slice.size))