from types import SimpleNamespace

import pytest

from famicom.mapper import Mapper, Mapper000, MapperNotFoundError, load_mapper
from famicom.rom import PRG_BANK_SIZE, Rom, RomInfo


def _info(prg_count: int) -> RomInfo:
    return RomInfo(
        count_prgrom_16kb=prg_count,
        count_chrrom_8kb=0,
        mapper_number=0,
        four_screen_flag=False,
        trainer_flag=False,
        sram_flag=False,
        mirror_flag=False,
        playchoice10_flag=False,
        vs_unisystem_flag=False,
    )


def _console(prg_count: int) -> SimpleNamespace:
    prg = bytearray(i % 251 for i in range(PRG_BANK_SIZE * prg_count))
    rom = Rom(info=_info(prg_count), prg_rom=prg, chr_rom=bytearray())
    return SimpleNamespace(rom=rom, prg_banks=[None] * 8)


def test_load_mapper_zero_resets_banks():
    mapper = load_mapper(0)
    assert isinstance(mapper, Mapper000)
    assert isinstance(mapper, Mapper)
    console = _console(2)
    mapper.reset(console)
    assert bytes(console.prg_banks[4]) == bytes(console.rom.prg_rom[0:0x2000])


def test_two_banks_map_linearly():
    console = _console(2)
    Mapper000().reset(console)
    prg = console.rom.prg_rom
    for index, region in enumerate(range(4, 8)):
        start = index * 0x2000
        assert bytes(console.prg_banks[region]) == bytes(prg[start:start + 0x2000])


def test_single_bank_is_mirrored():
    console = _console(1)
    Mapper000().reset(console)
    assert bytes(console.prg_banks[4]) == bytes(console.prg_banks[6])
    assert bytes(console.prg_banks[5]) == bytes(console.prg_banks[7])
    assert bytes(console.prg_banks[4]) != bytes(console.prg_banks[5])


def test_banks_share_storage_with_rom():
    console = _console(1)
    Mapper000().reset(console)
    console.prg_banks[6][3] = 0xAB
    assert console.rom.prg_rom[3] == 0xAB
    assert console.prg_banks[4][3] == 0xAB


def test_other_banks_untouched():
    console = _console(1)
    Mapper000().reset(console)
    assert console.prg_banks[:4] == [None, None, None, None]


def test_unknown_mapper_raises():
    with pytest.raises(MapperNotFoundError) as info:
        load_mapper(1)
    assert info.value.number == 1


def test_empty_prg_rejected():
    console = _console(0)
    with pytest.raises(ValueError):
        Mapper000().reset(console)