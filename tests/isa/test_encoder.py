import pytest

import ttasm.common.ops as ops
from ttasm.isa.encoded import Byte, Word
from ttasm.isa.encoder import encode, encode_all, image_size
from ttasm.isa.instructions import (
    RawByte, Nop, Halt, Push, Pop, Not, OutputLow, SetDataPointer, LoadIndirect,
    Load, Store, Add, Subtract, And, Or, Xor, Branch, If
)
from ttasm.isa.operands import (
    ByteInWord, AddressingMode, BaseRegister,
    Constant, ExternalData, Memory, Target, Condition
)

LO = ByteInWord.LO

FIXED = [
    (Nop, 0x00),
    (Halt, 0x01),
    (Push, 0x04),
    (Pop, 0x05),
    (Not, 0x07),
    (OutputLow, 0x08),
    (SetDataPointer, 0x0A),
    (LoadIndirect, 0x44),
]

UNARY = [
    (Load, 0x80),
    (Store, 0x90),
    (Add, 0x88),
    (Subtract, 0x98),
    (And, 0xA0),
    (Or, 0xA8),
    (Xor, 0xB0),
]

SOURCES = [
    Constant(LO, 0x00),
    Constant(ByteInWord.HI, 0xFF),
    ExternalData(LO),
    Memory(AddressingMode.DIRECT, 0x20),
    Memory(AddressingMode.INDIRECT, 0xFF, BaseRegister.STACK_POINTER),
]

SAMPLE = [
    RawByte(0xAB),
    *[instruction for instruction, _ in FIXED],
    *[kind(source) for kind, _ in UNARY for source in SOURCES],
    Branch(Target(0)),
    Branch(Target(-0x400)),
    *[If(condition) for condition in Condition],
]


@pytest.mark.parametrize('instruction,opcode', FIXED)
def test_fixed_opcodes(instruction, opcode):
    assert encode(instruction) == Byte(opcode)


@pytest.mark.parametrize('kind,prefix', UNARY)
def test_unary_prefixes(kind, prefix):
    encoded = encode(kind(Constant(LO, 0x5A)))
    assert encoded == Word((prefix << 8) | 0x5A)


def test_raw_byte_verbatim():
    assert encode(RawByte(0x1E)) == Byte(0x1E)
    assert encode(RawByte(0x100)) == Byte(0x00)


def test_branch():
    assert encode(Branch(Target(0x10))) == Word(0xC010)
    assert encode(Branch(Target(-0x08))) == Word(0xC7F8)


def test_if():
    assert encode(If(Condition.NOT_ZERO)) == Word(0xF001)
    assert encode(If(Condition.ELSE)) == Word(0xF002)


def test_load_memory_scenario():
    assert encode(Load(Memory(AddressingMode.DIRECT, 0x20))) == Word(0x8420)
    stack = Memory(AddressingMode.DIRECT, 0x00, BaseRegister.STACK_POINTER)
    assert encode(Load(stack)) == Word(0x8600)


def test_opcode_separation():
    prefixes = [prefix for _, prefix in UNARY]
    assert len(set(prefixes)) == len(prefixes)
    assert not set(prefixes) & set(ops.FIXED)
    assert set(prefixes) == set(ops.UNARY)


@pytest.mark.parametrize('instruction', SAMPLE, ids=str)
def test_deterministic(instruction):
    assert encode(instruction) == encode(instruction)


@pytest.mark.parametrize('instruction', SAMPLE, ids=str)
def test_width_follows_variant(instruction):
    encoded = encode(instruction)
    assert encoded.size == instruction.size
    assert isinstance(encoded, Word) == (instruction.size == 2)
    assert encoded.value < 1 << (8 * encoded.size)


def test_encode_all_keeps_order():
    program = [Load(Constant(LO, 0x14)), Add(Constant(LO, 0x1E)), OutputLow, Nop]
    assert encode_all(program) == [Word(0x8014), Word(0x881E), Byte(0x08), Byte(0x00)]


def test_image_size():
    program = [Load(Constant(LO, 0x14)), Add(Constant(LO, 0x1E)), OutputLow, Nop]
    assert image_size(program) == 6
    assert image_size([]) == 0


def test_unary_kinds_are_distinct():
    source = Constant(LO, 1)
    assert Load(source) == Load(source)
    assert Load(source) != Store(source)


def test_instruction_json():
    data = Store(Memory(AddressingMode.DIRECT, 0x50)).json()
    assert data['Class'] == 'Unary'
    assert data['Mnemonic'] == 'st'
    assert data['Source']['Address'] == 0x50


def test_instruction_str():
    assert str(Load(Constant(LO, 0x14))) == 'ld #14.lo'
    assert str(Branch(Target(-8))) == 'br -8'
    assert str(If(Condition.NOT_ZERO)) == 'if not_zero'
    assert str(encode(Branch(Target(-8)))) == '0xC7F8'
    assert str(encode(Nop)) == '0x00'
