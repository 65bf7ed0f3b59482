"""Cartridge mappers: how PRG-ROM is banked into the CPU address space."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .rom import PRG_BANK_SIZE

if TYPE_CHECKING:  # pragma: no cover
    from .console import Famicom

BANK_SIZE = 8 * 1024


class MapperNotFoundError(LookupError):
    """Raised when a ROM asks for a mapper that is not supported."""

    def __init__(self, number: int) -> None:
        super().__init__(f"mapper {number:03d} is not supported")
        self.number = number


class Mapper(ABC):
    """Base class for cartridge mappers."""

    number: int

    @abstractmethod
    def reset(self, famicom: "Famicom | Any") -> None:
        """Map the cartridge's banks into ``famicom.prg_banks``."""


class Mapper000(Mapper):
    """NROM: the first and last 16 KiB PRG banks at $8000 and $C000."""

    number = 0

    def reset(self, famicom: "Famicom | Any") -> None:
        rom = famicom.rom
        count = rom.info.count_prgrom_16kb
        if count < 1:
            raise ValueError("ROM has no PRG-ROM banks to map")
        view = memoryview(rom.prg_rom)
        last = (count - 1) * PRG_BANK_SIZE
        offsets = (0, BANK_SIZE, last, last + BANK_SIZE)
        for region, offset in enumerate(offsets, start=4):
            famicom.prg_banks[region] = view[offset:offset + BANK_SIZE]


_MAPPERS: dict[int, type[Mapper]] = {
    Mapper000.number: Mapper000,
}


def load_mapper(number: int) -> Mapper:
    """Return a new mapper for the given iNES mapper number."""
    try:
        mapper_class = _MAPPERS[number]
    except KeyError:
        raise MapperNotFoundError(number) from None
    return mapper_class()