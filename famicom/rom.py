"""iNES ROM images: header parsing and loading."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag
from os import PathLike
from typing import Optional, Union

HEADER_SIZE = 16
NES_TAG = b"NES\x1a"
TRAINER_SIZE = 512
PRG_BANK_SIZE = 16 * 1024
CHR_BANK_SIZE = 8 * 1024

_HEADER_STRUCT = struct.Struct("<4sBBBB8s")


class RomError(ValueError):
    """Raised when data is not a valid iNES image."""


class Flags6(IntFlag):
    """Bit flags of header byte 6."""

    VMIRROR = 0x01
    SAVERAM = 0x02
    TRAINER = 0x04
    FOUR_SCREEN = 0x08


class Flags7(IntFlag):
    """Bit flags of header byte 7."""

    VS_UNISYSTEM = 0x01
    PLAYCHOICE10 = 0x02


@dataclass(frozen=True)
class RomHeader:
    """The raw 16-byte iNES header."""

    tag: bytes
    count_prgrom_16kb: int
    count_chrrom_8kb: int
    flags6: int
    flags7: int
    reserved: bytes


@dataclass(frozen=True)
class RomInfo:
    """Information decoded from the header."""

    count_prgrom_16kb: int
    count_chrrom_8kb: int
    mapper_number: int
    four_screen_flag: bool
    trainer_flag: bool
    sram_flag: bool
    mirror_flag: bool
    playchoice10_flag: bool
    vs_unisystem_flag: bool


@dataclass
class Rom:
    """A loaded cartridge image."""

    info: RomInfo
    prg_rom: bytearray
    chr_rom: bytearray
    trainer_rom: Optional[bytearray] = None


def parse_header(data: bytes) -> RomHeader:
    """Parse the iNES header at the start of ``data``."""
    if len(data) < HEADER_SIZE:
        raise RomError("file too short for an iNES header")
    header = RomHeader(*_HEADER_STRUCT.unpack_from(data))
    if header.tag != NES_TAG:
        raise RomError("missing iNES tag")
    return header


def _info_from_header(header: RomHeader) -> RomInfo:
    flags6 = Flags6(header.flags6 & 0x0F)
    flags7 = Flags7(header.flags7 & 0x03)
    return RomInfo(
        count_prgrom_16kb=header.count_prgrom_16kb,
        count_chrrom_8kb=header.count_chrrom_8kb,
        mapper_number=(header.flags7 & 0xF0) | (header.flags6 >> 4),
        four_screen_flag=Flags6.FOUR_SCREEN in flags6,
        trainer_flag=Flags6.TRAINER in flags6,
        sram_flag=Flags6.SAVERAM in flags6,
        mirror_flag=Flags6.VMIRROR in flags6,
        playchoice10_flag=Flags7.PLAYCHOICE10 in flags7,
        vs_unisystem_flag=Flags7.VS_UNISYSTEM in flags7,
    )


def _take(data: bytes, offset: int, size: int) -> bytearray:
    """Return ``size`` bytes from ``offset``, zero-filled past the end of data."""
    chunk = bytearray(data[offset:offset + size])
    chunk.extend(bytes(size - len(chunk)))
    return chunk


def parse_rom(data: bytes) -> Rom:
    """Parse a complete iNES image."""
    header = parse_header(data)
    info = _info_from_header(header)
    offset = HEADER_SIZE

    trainer = None
    if info.trainer_flag:
        trainer = _take(data, offset, TRAINER_SIZE)
        offset += TRAINER_SIZE

    prg_size = PRG_BANK_SIZE * info.count_prgrom_16kb
    prg_rom = _take(data, offset, prg_size)
    offset += prg_size

    chr_rom = _take(data, offset, CHR_BANK_SIZE * info.count_chrrom_8kb)
    return Rom(info=info, prg_rom=prg_rom, chr_rom=chr_rom, trainer_rom=trainer)


def load_rom(path: Union[str, PathLike]) -> Rom:
    """Read and parse the iNES image stored at ``path``."""
    with open(path, "rb") as stream:
        return parse_rom(stream.read())