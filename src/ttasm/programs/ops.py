''' Instruction-set smoke program

Each block ends with OUTL so the simulator can check the accumulator after a
fixed number of steps. Branch displacements are literal byte offsets.
'''

from ttasm.isa.instructions import (
    RawByte, Nop, Not, OutputLow, LoadIndirect,
    Load, Store, Add, Subtract, And, Or, Xor, Branch, If
)
from ttasm.isa.operands import (
    ByteInWord, AddressingMode, Constant, ExternalData, Memory, Target, Condition
)

LO = ByteInWord.LO
DIRECT = AddressingMode.DIRECT
INDIRECT = AddressingMode.INDIRECT

PROGRAM = [
    Nop,
    Nop,
    Nop,
    Nop,
    # Immediates: 0x14 + 0x1E
    Load(Constant(LO, 0x14)),
    Add(Constant(LO, 0x1E)),
    OutputLow,
    Nop,
    # External input
    Load(ExternalData(LO)),
    Add(Constant(LO, 0x1E)),
    OutputLow,
    Nop,
    # RAM operands, read from the data block below
    Load(Memory(DIRECT, 0x20)),
    Add(Memory(DIRECT, 0x22)),
    OutputLow,
    Nop,
    # Skip the data block
    Branch(Target(0x10)),
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    RawByte(0x00),
    RawByte(0x14),
    RawByte(0x00),
    RawByte(0x1E),
    # Forward branch over the second load
    Load(Constant(LO, 0x5A)),
    Branch(Target(0x08)),
    Load(Constant(LO, 0xA5)),
    OutputLow,
    Nop,
    # Backward branch into the OUTL above
    Load(Constant(LO, 0x00)),
    Branch(Target(-0x0C)),
    OutputLow,
    Nop,
    # Loop while the input is non-zero
    Load(ExternalData(LO)),
    If(Condition.NOT_ZERO),
    Branch(Target(-0x08)),
    # Store, then read it back
    Load(Constant(LO, 0x09)),
    Store(Memory(DIRECT, 0x20)),
    Load(Constant(LO, 0x33)),
    Load(Memory(DIRECT, 0x20)),
    Add(Memory(DIRECT, 0x22)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Load(Constant(LO, 0xFF)),
    Subtract(Constant(LO, 0xEE)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Load(Constant(LO, 0xF0)),
    And(Constant(LO, 0x3C)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Load(Constant(LO, 0xF0)),
    Or(Constant(LO, 0x3C)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Load(Constant(LO, 0xF0)),
    Xor(Constant(LO, 0x3C)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Load(Constant(LO, 0xA5)),
    Not,
    OutputLow,
    # Pointer in the accumulator
    Load(Constant(LO, 0x20)),
    LoadIndirect,
    OutputLow,
    # Pointer in RAM
    Load(Constant(LO, 0x22)),
    Store(Memory(DIRECT, 0x1E)),
    Load(Constant(LO, 0)),
    Load(Memory(INDIRECT, 0x1E)),
    OutputLow,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
    Nop,
]
