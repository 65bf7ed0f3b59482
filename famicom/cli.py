"""Command line: show a ROM's header and its interrupt vectors."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .console import Famicom, Vector
from .mapper import MapperNotFoundError
from .rom import RomError

DEFAULT_ROM = "nestest.nes"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print ROM information and disassemble the vector targets."""
    parser = argparse.ArgumentParser(description="Inspect an iNES ROM image.")
    parser.add_argument("rom", nargs="?", default=DEFAULT_ROM, help="path to a .nes file")
    args = parser.parse_args(argv)

    try:
        console = Famicom(args.rom)
    except (OSError, RomError, MapperNotFoundError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    with console:
        info = console.rom.info
        print(f"ROM: PRG-ROM: {info.count_prgrom_16kb} x 16kb")
        print(f"CHR-ROM {info.count_chrrom_8kb} x 8kb")
        print(f"Mapper: {info.mapper_number:03d}")
        labels = (("NMI:     ", Vector.NMI), ("RESET:   ", Vector.RESET), ("IRQ/BRK: ", Vector.IRQBRK))
        for label, vector in labels:
            print(label + console.disassemble(console.read_word(vector)))
    return 0


if __name__ == "__main__":
    sys.exit(main())