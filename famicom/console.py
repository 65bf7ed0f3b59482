"""The console: ROM loading, the CPU address space and disassembly."""

from __future__ import annotations

from enum import IntEnum
from os import PathLike
from typing import Any, Callable, Optional, Union

from . import disasm
from .mapper import Mapper, load_mapper
from .rom import Rom, load_rom

MAIN_MEMORY_SIZE = 2 * 1024
SAVE_MEMORY_SIZE = 8 * 1024
REGION_COUNT = 0x10000 >> 13

Loader = Callable[[Any], Rom]


class Vector(IntEnum):
    """Addresses of the 6502 interrupt vectors."""

    NMI = 0xFFFA
    RESET = 0xFFFC
    IRQBRK = 0xFFFE


def default_loader(source: Union[str, PathLike]) -> Rom:
    """Load an iNES image from the file at ``source``."""
    return load_rom(source)


class Famicom:
    """A console with a cartridge inserted."""

    def __init__(self, source: Any, loader: Optional[Loader] = None) -> None:
        self.source = source
        self.loader: Loader = loader if loader is not None else default_loader
        self.rom: Optional[Rom] = None
        self.mapper: Optional[Mapper] = None
        self.main_memory = bytearray(MAIN_MEMORY_SIZE)
        self.save_memory = bytearray(SAVE_MEMORY_SIZE)
        self.prg_banks: list[Any] = [None] * REGION_COUNT
        self.prg_banks[0] = self.main_memory
        self.prg_banks[3] = self.save_memory
        self.load_new_rom()

    def _release_rom(self) -> None:
        for region in range(4, REGION_COUNT):
            bank = self.prg_banks[region]
            if isinstance(bank, memoryview):
                bank.release()
            self.prg_banks[region] = None
        self.rom = None
        self.mapper = None

    def load_new_rom(self) -> None:
        """Drop the current ROM, load one from the source and map it."""
        self._release_rom()
        self.rom = self.loader(self.source)
        self.mapper = load_mapper(self.rom.info.mapper_number)
        self.mapper.reset(self)

    def _locate(self, address: int) -> tuple[Any, int]:
        if not 0 <= address <= 0xFFFF:
            raise ValueError(f"address out of range: {address:#x}")
        region = address >> 13
        if region == 0:
            return self.main_memory, address & 0x07FF
        if region in (1, 2):
            raise LookupError(f"${address:04X}: PPU and APU registers are not emulated")
        bank = self.prg_banks[region]
        if bank is None:
            raise LookupError(f"${address:04X}: no bank is mapped")
        return bank, address & 0x1FFF

    def read(self, address: int) -> int:
        """Read a byte from the CPU address space."""
        bank, offset = self._locate(address)
        return bank[offset]

    def write(self, address: int, value: int) -> None:
        """Write a byte to the CPU address space."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value out of byte range: {value}")
        bank, offset = self._locate(address)
        bank[offset] = value

    def read_word(self, address: int) -> int:
        """Read a little-endian 16-bit word."""
        low = self.read(address)
        high = self.read((address + 1) & 0xFFFF)
        return low | (high << 8)

    def disassemble(self, address: int) -> str:
        """Disassemble the instruction at ``address``, prefixed by the address."""
        code = disasm.Code(
            op=self.read(address),
            a1=self.read((address + 1) & 0xFFFF),
            a2=self.read((address + 2) & 0xFFFF),
        )
        return f"${address:04X}   {disasm.disassemble(code)}"

    def close(self) -> None:
        """Release the loaded ROM."""
        self._release_rom()

    def __enter__(self) -> "Famicom":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()