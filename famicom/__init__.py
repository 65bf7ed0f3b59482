"""iNES cartridge loading, Famicom CPU address mapping and 6502 disassembly."""

__version__ = "0.1.0"
__all__ = ["cli", "console", "disasm", "mapper", "rom"]