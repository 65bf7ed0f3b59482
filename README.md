# famicom

A small Python library and command for inspecting NES/Famicom cartridge
images in the iNES format. It can:

- read the 16-byte iNES header and the trainer, PRG-ROM and CHR-ROM data.
  Data missing at the end of a short file is filled with zero bytes.
- map the CPU address space: 2 KiB of work RAM mirrored over $0000-$1FFF,
  8 KiB of save RAM at $6000-$7FFF, and PRG-ROM at $8000-$FFFF laid out by
  mapper 000 (NROM).
- disassemble single 6502 instructions, undocumented opcodes included.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
famicom path/to/game.nes
```

When no path is given, the command reads `nestest.nes` in the current
directory. It prints the PRG-ROM and CHR-ROM bank counts and the mapper
number (three digits). After that it prints the interrupt vectors NMI,
RESET and IRQ/BRK, each with the instruction at the vector's target
address. Each line has this shape:

```
RESET:   $C004   SEI                           ;
```

If the file cannot be read or is not a valid image, or its mapper is not
supported, the command prints `error: ...` to standard error and exits
with status 1.

## Library use

```python
from famicom.console import Famicom, Vector

with Famicom("game.nes") as console:
    info = console.rom.info
    print(info.count_prgrom_16kb, info.count_chrrom_8kb, info.mapper_number)

    reset = console.read_word(Vector.RESET)
    print(console.disassemble(reset))

    console.write(0x0000, 0x42)
    assert console.read(0x0800) == 0x42  # work RAM is mirrored
```

`Famicom.read` and `Famicom.write` raise `ValueError` for addresses outside
$0000-$FFFF and for values outside 0-255. They raise `LookupError` for the
range $2000-$5FFF and for any region that has no bank mapped. `close()`,
which also runs on leaving the `with` block, releases the ROM.
`load_new_rom()` loads the ROM again from the same source.

The console can read images from somewhere other than the file system. To
do this, pass a `loader` to `Famicom`: a callable that takes the `source`
argument and returns a `Rom`. If no loader is given, `default_loader` is
used, which reads the file at `source`.

The lower-level pieces can be used on their own:

- `famicom.rom`: `parse_header(data)`, `parse_rom(data)` and
  `load_rom(path)` return `RomHeader` and `Rom` objects. A `Rom`'s `info`
  is a `RomInfo` with the mapper number and the header flags. These
  functions raise `RomError` for data that is too short or lacks the
  `NES\x1a` tag. `Flags6` and `Flags7` are the header's bit flags.
- `famicom.disasm`: `disassemble(Code(op, a1, a2))` formats one
  instruction as a 31-character line that ends in `;`. For example,
  `disassemble(Code(0x4C, 0x04, 0xC0))` gives `"JMP $C004"` padded with
  spaces, and `disassemble(Code(0xD0, 0xFE))` gives `"BNE *-002"` padded
  the same way. `byte_to_hex` and `byte_to_signed_decimal` are the number
  formatters it uses. `AddressingMode` and `Instruction` list the
  addressing modes and the mnemonics. `OPNAMES` and `OPMODES` are the
  per-opcode tables.
- `famicom.mapper`: `load_mapper(number)` returns a `Mapper`. It raises
  `MapperNotFoundError` for any other number. Only `Mapper000` is
  supported.

## What it does not do

This package does not run games. It has no CPU that executes
instructions, no picture or audio processing unit, no controller input
and no display. The PPU and APU register ranges cannot be read or
written. CHR-ROM is loaded but never used. Images that need a mapper
other than 000 are refused.