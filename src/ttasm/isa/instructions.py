''' Instruction forms, one class per encoding rule '''

from dataclasses import dataclass
from typing import ClassVar, Sequence

import ttasm.common.ops as ops
import ttasm.common.isaconf as conf
from ttasm.isa.encoded import Encoded, Byte, Word
from ttasm.isa.operands import JSON, Source, Target, Condition


class Instruction:
    size: ClassVar[int]

    def encode(self) -> Encoded:
        raise NotImplementedError()

    def json(self) -> JSON:
        return {'Class': 'Instruction'}


type Instructions = Sequence[Instruction]


@dataclass(frozen=True)
class RawByte(Instruction):
    ''' Literal byte spliced into the stream (inline data, text) '''
    value: int
    size: ClassVar[int] = conf.BYTE_SIZE

    def encode(self) -> Encoded:
        return Byte(self.value & conf.BYTE_MASK)

    def json(self) -> JSON:
        data = Instruction.json(self)
        data.update({'Class': 'RawByte', 'Value': self.value})
        return data

    def __str__(self) -> str:
        return f'.byte {self.value:02X}'


@dataclass(frozen=True)
class Fixed(Instruction):
    mnemonic: str
    opcode: int
    size: ClassVar[int] = conf.BYTE_SIZE

    def encode(self) -> Encoded:
        return Byte(self.opcode)

    def json(self) -> JSON:
        data = Instruction.json(self)
        data.update({'Class': 'Fixed', 'Mnemonic': self.mnemonic})
        return data

    def __str__(self) -> str:
        return self.mnemonic


Nop = Fixed('nop', ops.NOP)
Halt = Fixed('hlt', ops.HLT)
Push = Fixed('push', ops.PSH)
Pop = Fixed('pop', ops.POP)
Not = Fixed('not', ops.NOT)
OutputLow = Fixed('outl', ops.OUTL)
SetDataPointer = Fixed('sdp', ops.SDP)
# Addressing mode for LDI is not assigned yet; always the plain opcode
LoadIndirect = Fixed('ldi', ops.LDI)


@dataclass(frozen=True)
class Unary(Instruction):
    mnemonic: str
    prefix: int
    source: Source
    size: ClassVar[int] = conf.WORD_SIZE

    def encode(self) -> Encoded:
        return Word(self.source.encode(self.prefix))

    def json(self) -> JSON:
        data = Instruction.json(self)

        data.update({
            'Class': 'Unary',
            'Mnemonic': self.mnemonic,
            'Source': self.source.json()
        })

        return data

    def __str__(self) -> str:
        return f'{self.mnemonic} {self.source}'


@dataclass(frozen=True)
class Load(Unary):
    def __init__(self, source: Source):
        super().__init__('ld', ops.LD, source)


@dataclass(frozen=True)
class Store(Unary):
    def __init__(self, source: Source):
        super().__init__('st', ops.ST, source)


@dataclass(frozen=True)
class Add(Unary):
    def __init__(self, source: Source):
        super().__init__('add', ops.ADD, source)


@dataclass(frozen=True)
class Subtract(Unary):
    def __init__(self, source: Source):
        super().__init__('sub', ops.SUB, source)


@dataclass(frozen=True)
class And(Unary):
    def __init__(self, source: Source):
        super().__init__('and', ops.AND, source)


@dataclass(frozen=True)
class Or(Unary):
    def __init__(self, source: Source):
        super().__init__('or', ops.OR, source)


@dataclass(frozen=True)
class Xor(Unary):
    def __init__(self, source: Source):
        super().__init__('xor', ops.XOR, source)


@dataclass(frozen=True)
class Branch(Instruction):
    target: Target
    size: ClassVar[int] = conf.WORD_SIZE

    def encode(self) -> Encoded:
        return Word(self.target.encode(ops.BR))

    def json(self) -> JSON:
        data = Instruction.json(self)
        data.update({'Class': 'Branch', 'Target': self.target.json()})
        return data

    def __str__(self) -> str:
        return f'br {self.target}'


@dataclass(frozen=True)
class If(Instruction):
    ''' Gates the Branch that immediately follows it '''
    condition: Condition
    size: ClassVar[int] = conf.WORD_SIZE

    def encode(self) -> Encoded:
        return Word(self.condition.encode(ops.IF))

    def json(self) -> JSON:
        data = Instruction.json(self)
        data.update({'Class': 'If', 'Condition': self.condition.json()})
        return data

    def __str__(self) -> str:
        return f'if {self.condition.name.lower()}'
