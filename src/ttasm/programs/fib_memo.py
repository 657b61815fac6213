''' Memoised Fibonacci of the input value

The cache is a table of 16-bit cells; each step reads the two previous cells
through a pointer kept in CURSOR.
'''

from ttasm.isa.instructions import (
    Nop, Halt, OutputLow, LoadIndirect, Load, Store, Add, Subtract, Branch, If
)
from ttasm.isa.operands import (
    ByteInWord, AddressingMode, Constant, ExternalData, Memory, Target, Condition
)

LO = ByteInWord.LO
DIRECT = AddressingMode.DIRECT
INDIRECT = AddressingMode.INDIRECT

# Data cells, in bytes from the start of the image
TARGET = 0x50
CURRENT = 0x52
CURSOR = 0x54
CACHE = 0x58
CACHE_SIZE = 25  # bytes reserved after CURSOR

# Code offsets
BR0 = 0x12
BR1 = 0x18
LOOP = 0x1C
BR2 = 0x3C
BR3 = 0x44
DONE = 0x44


def cell(offset: int) -> Memory:
    return Memory(DIRECT, offset)


def via(offset: int) -> Memory:
    return Memory(INDIRECT, offset)


PROGRAM = [
    Load(ExternalData(LO)),
    Store(cell(TARGET)),
    Load(Constant(LO, 1)),
    Store(cell(CACHE)),
    Load(Constant(LO, 1)),
    Store(cell(CACHE + 2)),
    Load(cell(TARGET)),
    If(Condition.ZERO),
    Branch(Target(DONE - BR0)),
    Subtract(Constant(LO, 1)),
    If(Condition.ZERO),
    Branch(Target(DONE - BR1)),
    Load(Constant(LO, 2)),
    Store(cell(CURRENT)),
    # LOOP
    Load(cell(CURRENT)),
    Add(cell(CURRENT)),
    Add(Constant(LO, CACHE)),
    Store(cell(CURSOR)),
    Subtract(Constant(LO, 2)),
    LoadIndirect,
    Store(via(CURSOR)),
    Load(cell(CURSOR)),
    Subtract(Constant(LO, 4)),
    LoadIndirect,
    Add(via(CURSOR)),
    Store(via(CURSOR)),
    OutputLow,
    Nop,
    Load(cell(TARGET)),
    Subtract(cell(CURRENT)),
    If(Condition.ZERO),
    Branch(Target(DONE - BR2)),
    Load(cell(CURRENT)),
    Add(Constant(LO, 1)),
    Store(cell(CURRENT)),
    Branch(Target(LOOP - BR3)),
    # DONE
    Load(cell(TARGET)),
    Add(cell(TARGET)),
    Add(Constant(LO, CACHE)),
    LoadIndirect,
    OutputLow,
    Halt,
    # TARGET
    Nop,
    Nop,
    # CURRENT
    Nop,
    Nop,
    # CURSOR
    Nop,
    Nop,
    # CACHE
    *([Nop] * CACHE_SIZE),
]
