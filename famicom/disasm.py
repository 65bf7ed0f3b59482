"""6502 opcode tables and single-instruction disassembly."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DISASSEMBLY_WIDTH = 31


class AddressingMode(IntEnum):
    """6502 addressing modes."""

    UNK = 0
    ACC = 1
    IMP = 2
    IMM = 3
    ABS = 4
    ABX = 5
    ABY = 6
    ZPG = 7
    ZPX = 8
    ZPY = 9
    INX = 10
    INY = 11
    IND = 12
    REL = 13


Instruction = IntEnum(
    "Instruction",
    "UNK ADC AHX ALR ANC AND ARR ASL AXS BCC BCS BEQ BIT BMI BNE BPL BRK "
    "BVC BVS CLC CLD CLI CLV CMP CPX CPY DCP DEC DEX DEY EOR INC INX INY "
    "ISC JMP JSR LAS LAX LDA LDX LDY LSR NOP ORA PHA PHP PLA PLP RLA ROL "
    "ROR RRA RTI RTS SAX SBC SEC SED SEI SHX SHY SLO SRE STA STP STX STY "
    "TAS TAX TAY TSX TXA TXS TYA XAA",
    start=0,
)
Instruction.__doc__ = "6502 instruction mnemonics, official and unofficial."

_NAME_ROWS = (
    "BRK ORA STP SLO NOP ORA ASL SLO PHP ORA ASL ANC NOP ORA ASL SLO "
    "BPL ORA STP SLO NOP ORA ASL SLO CLC ORA NOP SLO NOP ORA ASL SLO",
    "JSR AND STP RLA BIT AND ROL RLA PLP AND ROL ANC BIT AND ROL RLA "
    "BMI AND STP RLA NOP AND ROL RLA SEC AND NOP RLA NOP AND ROL RLA",
    "RTI EOR STP SRE NOP EOR LSR SRE PHA EOR LSR ALR JMP EOR LSR SRE "
    "BVC EOR STP SRE NOP EOR LSR SRE CLI EOR NOP SRE NOP EOR LSR SRE",
    "RTS ADC STP RRA NOP ADC ROR RRA PLA ADC ROR ARR JMP ADC ROR RRA "
    "BVS ADC STP RRA NOP ADC ROR RRA SEI ADC NOP RRA NOP ADC ROR RRA",
    "NOP STA NOP SAX STY STA STX SAX DEY NOP TXA XAA STY STA STX SAX "
    "BCC STA STP AHX STY STA STX SAX TYA STA TXS TAS SHY STA SHX AHX",
    "LDY LDA LDX LAX LDY LDA LDX LAX TAY LDA TAX LAX LDY LDA LDX LAX "
    "BCS LDA STP LAX LDY LDA LDX LAX CLV LDA TSX LAS LDY LDA LDX LAX",
    "CPY CMP NOP DCP CPY CMP DEC DCP INY CMP DEX AXS CPY CMP DEC DCP "
    "BNE CMP STP DCP NOP CMP DEC DCP CLD CMP NOP DCP NOP CMP DEC DCP",
    "CPX SBC NOP ISC CPX SBC INC ISC INX SBC NOP SBC CPX SBC INC ISC "
    "BEQ SBC STP ISC NOP SBC INC ISC SED SBC NOP ISC NOP SBC INC ISC",
)

_MODE_ROWS = (
    "IMP INX UNK INX ZPG ZPG ZPG ZPG IMP IMM ACC IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
    "ABS INX UNK INX ZPG ZPG ZPG ZPG IMP IMM ACC IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
    "IMP INX UNK INX ZPG ZPG ZPG ZPG IMP IMM ACC IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
    "IMP INX UNK INX ZPG ZPG ZPG ZPG IMP IMM ACC IMM IND ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
    "IMM INX IMM INX ZPG ZPG ZPG ZPG IMP IMM IMP IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPY ZPY IMP ABY IMP ABY ABX ABX ABY ABY",
    "IMM INX IMM INX ZPG ZPG ZPG ZPG IMP IMM IMP IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPY ZPY IMP ABY IMP ABY ABX ABX ABY ABY",
    "IMM INX IMM INX ZPG ZPG ZPG ZPG IMP IMM IMP IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
    "IMM INX IMM INX ZPG ZPG ZPG ZPG IMP IMM IMP IMM ABS ABS ABS ABS "
    "REL INY UNK INY ZPX ZPX ZPX ZPX IMP ABY IMP ABY ABX ABX ABX ABX",
)

OPNAMES: tuple[str, ...] = tuple(name for row in _NAME_ROWS for name in row.split())
OPMODES: tuple[AddressingMode, ...] = tuple(
    AddressingMode[name] for row in _MODE_ROWS for name in row.split()
)


@dataclass(frozen=True)
class Code:
    """An opcode with its two operand bytes and a control byte."""

    op: int
    a1: int = 0
    a2: int = 0
    ctrl: int = 0

    def __post_init__(self) -> None:
        for field_name in ("op", "a1", "a2", "ctrl"):
            value = getattr(self, field_name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{field_name} out of byte range: {value}")


def byte_to_hex(value: int) -> str:
    """Format a byte as two upper-case hex digits."""
    return f"{value & 0xFF:02X}"


def byte_to_signed_decimal(value: int) -> str:
    """Format a byte as a signed decimal: a sign then three digits."""
    value &= 0xFF
    if value >= 0x80:
        return f"-{0x100 - value:03d}"
    return f"+{value:03d}"


def _operand(mode: AddressingMode, code: Code) -> str:
    low = byte_to_hex(code.a1)
    word = byte_to_hex(code.a2) + low
    match mode:
        case AddressingMode.UNK | AddressingMode.IMP:
            return ""
        case AddressingMode.ACC:
            return "A"
        case AddressingMode.IMM:
            return "#" + low
        case AddressingMode.ABS:
            return "$" + word
        case AddressingMode.ABX:
            return f"${word},X"
        case AddressingMode.ABY:
            return f"${word},Y"
        case AddressingMode.ZPG:
            return "$" + low
        case AddressingMode.ZPX:
            return f"${low},X"
        case AddressingMode.ZPY:
            return f"${low},Y"
        case AddressingMode.INX:
            return f"(${low},X)"
        case AddressingMode.INY:
            return f"(${low}),Y"
        case AddressingMode.IND:
            return f"(${word})"
        case AddressingMode.REL:
            return "*" + byte_to_signed_decimal(code.a1)
    raise ValueError(f"invalid addressing mode: {mode!r}")


def disassemble(code: Code) -> str:
    """Disassemble one instruction into a fixed-width line ending in ';'."""
    text = f"{OPNAMES[code.op]} {_operand(OPMODES[code.op], code)}"
    return f"{text:<{DISASSEMBLY_WIDTH - 1}};"