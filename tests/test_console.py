import pytest

from famicom.console import Famicom, Vector, default_loader
from famicom.disasm import Code, disassemble
from famicom.mapper import MapperNotFoundError
from famicom.rom import PRG_BANK_SIZE, RomError, parse_rom


def _image(flags6: int = 0, prg_count: int = 1, tag: bytes = b"NES\x1a") -> bytes:
    header = tag + bytes([prg_count, 1, flags6, 0]) + bytes(8)
    prg = bytearray(PRG_BANK_SIZE * prg_count)
    prg[0:3] = bytes([0x4C, 0x00, 0x80])
    prg[3] = 0xEA
    vectors = len(prg) - 6
    prg[vectors:] = bytes([0x00, 0x80, 0x03, 0x80, 0x06, 0x80])
    return header + bytes(prg) + bytes(8 * 1024)


@pytest.fixture
def rom_path(tmp_path):
    path = tmp_path / "test.nes"
    path.write_bytes(_image())
    return path


def test_default_loader_reads_file(rom_path):
    rom = default_loader(rom_path)
    assert rom.info.count_prgrom_16kb == 1
    assert rom.prg_rom[0] == 0x4C


def test_vectors(rom_path):
    with Famicom(rom_path) as console:
        assert console.read_word(Vector.NMI) == 0x8000
        assert console.read_word(Vector.RESET) == 0x8003
        assert console.read_word(Vector.IRQBRK) == 0x8006


def test_single_prg_bank_mirrored(rom_path):
    with Famicom(rom_path) as console:
        for offset in (0, 1, 2, 0x1FFF, 0x2000, 0x3FFF):
            assert console.read(0x8000 + offset) == console.read(0xC000 + offset)


def test_main_memory_mirrors(rom_path):
    with Famicom(rom_path) as console:
        console.write(0x0001, 0x42)
        assert console.read(0x0801) == 0x42
        assert console.read(0x1801) == 0x42
        assert console.main_memory[1] == 0x42


def test_save_memory_round_trip(rom_path):
    with Famicom(rom_path) as console:
        console.write(0x6123, 0x99)
        assert console.read(0x6123) == 0x99
        assert console.save_memory[0x123] == 0x99


def test_write_into_prg_changes_rom(rom_path):
    with Famicom(rom_path) as console:
        console.write(0xC005, 0x77)
        assert console.read(0x8005) == 0x77
        assert console.rom.prg_rom[5] == 0x77


def test_disassemble(rom_path):
    with Famicom(rom_path) as console:
        line = console.disassemble(0x8000)
        assert line.startswith("$8000   JMP $8000")
        assert line.endswith(";")
        assert line[8:] == disassemble(Code(0x4C, 0x00, 0x80))
        assert console.disassemble(0x8003)[8:] == disassemble(Code(0xEA, 0x00, 0x00))


def test_register_space_unavailable(rom_path):
    with Famicom(rom_path) as console:
        with pytest.raises(LookupError):
            console.read(0x2000)
        with pytest.raises(LookupError):
            console.write(0x4016, 1)


def test_address_and_value_ranges(rom_path):
    with Famicom(rom_path) as console:
        with pytest.raises(ValueError):
            console.read(0x10000)
        with pytest.raises(ValueError):
            console.write(0x0000, 0x100)


def test_close_releases_rom(rom_path):
    with Famicom(rom_path) as console:
        assert console.read(0x8000) == 0x4C
    assert console.rom is None
    with pytest.raises(LookupError):
        console.read(0x8000)


def test_custom_loader():
    seen = []

    def loader(source):
        seen.append(source)
        return parse_rom(_image(prg_count=2))

    with Famicom("cartridge", loader) as console:
        assert seen == ["cartridge"]
        assert console.rom.info.count_prgrom_16kb == 2
        assert console.read_word(Vector.RESET) == 0x8003


def test_load_new_rom_reloads(rom_path):
    with Famicom(rom_path) as console:
        console.write(0x8000, 0x00)
        console.load_new_rom()
        assert console.read(0x8000) == 0x4C


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Famicom(tmp_path / "missing.nes")


def test_bad_tag(tmp_path):
    path = tmp_path / "bad.nes"
    path.write_bytes(_image(tag=b"NEZ\x1a"))
    with pytest.raises(RomError):
        Famicom(path)


def test_unknown_mapper(tmp_path):
    path = tmp_path / "mmc1.nes"
    path.write_bytes(_image(flags6=0x10))
    with pytest.raises(MapperNotFoundError):
        Famicom(path)