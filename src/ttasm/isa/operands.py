''' Operand sources, branch targets and conditions '''

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

import ttasm.common.isaconf as conf


type JSON = Dict[str, Any]


class ByteInWord(Enum):
    ''' Half of the operand word an immediate or port value lands in '''
    LO = 0
    HI = 1

    def encode(self) -> int:
        return conf.HIGH_BYTE_BIT if self is ByteInWord.HI else 0


class AddressingMode(Enum):
    DIRECT = 0
    INDIRECT = 1

    def encode(self) -> int:
        return conf.INDIRECT_BIT if self is AddressingMode.INDIRECT else 0


class BaseRegister(Enum):
    ''' Register a RAM address is offset from '''
    DATA_POINTER = 0
    STACK_POINTER = 1

    def encode(self) -> int:
        return conf.STACK_BASE_BIT if self is BaseRegister.STACK_POINTER else 0


class Source:
    ''' Operand of a load, store or ALU instruction '''

    def operand(self) -> int:
        raise NotImplementedError()

    def encode(self, op: int) -> int:
        return (op << conf.OPCODE_SHIFT) | self.operand()

    def json(self) -> JSON:
        return {'Class': 'Source'}


@dataclass(frozen=True)
class Constant(Source):
    byte: ByteInWord
    value: int

    def operand(self) -> int:
        return self.byte.encode() | (self.value & conf.BYTE_MASK)

    def json(self) -> JSON:
        data = Source.json(self)

        data.update({
            'Class': 'Constant',
            'Byte': self.byte.name,
            'Value': self.value
        })

        return data

    def __str__(self) -> str:
        return f'#{self.value:02X}.{self.byte.name.lower()}'


@dataclass(frozen=True)
class ExternalData(Source):
    byte: ByteInWord

    def operand(self) -> int:
        return conf.EXT_DATA_BIT | self.byte.encode()

    def json(self) -> JSON:
        data = Source.json(self)
        data.update({'Class': 'ExternalData', 'Byte': self.byte.name})
        return data

    def __str__(self) -> str:
        return f'in.{self.byte.name.lower()}'


@dataclass(frozen=True)
class Memory(Source):
    mode: AddressingMode
    address: int
    # Earlier revisions have no base selection; DP contributes no bits
    base: BaseRegister = BaseRegister.DATA_POINTER

    def operand(self) -> int:
        return conf.MEMORY_BIT \
            | self.base.encode() \
            | self.mode.encode() \
            | (self.address & conf.BYTE_MASK)

    def json(self) -> JSON:
        data = Source.json(self)

        data.update({
            'Class': 'Memory',
            'Mode': self.mode.name,
            'Base': self.base.name,
            'Address': self.address
        })

        return data

    def __str__(self) -> str:
        reg = 'sp' if self.base is BaseRegister.STACK_POINTER else 'dp'
        cell = f'{reg}+{self.address:02X}'

        if self.mode is AddressingMode.INDIRECT:
            return f'[[{cell}]]'

        return f'[{cell}]'


@dataclass(frozen=True)
class Target:
    ''' Signed displacement, in encoded bytes, from the branch to its destination '''
    offset: int

    def encode(self, op: int) -> int:
        # Two's complement, truncated to the field
        return (op << conf.OPCODE_SHIFT) | (self.offset & conf.TARGET_MASK)

    def in_range(self) -> bool:
        return conf.TARGET_MIN <= self.offset <= conf.TARGET_MAX

    def json(self) -> JSON:
        return {'Class': 'Target', 'Offset': self.offset}

    def __str__(self) -> str:
        return f'{self.offset:+d}'


class Condition(Enum):
    ''' Gate for the branch that follows an IF '''
    ZERO = 0
    NOT_ZERO = 1
    # Reserved for the flag-based branch family
    ELSE = 2
    NOT_ELSE = 3

    def encode(self, op: int) -> int:
        return (op << conf.OPCODE_SHIFT) | (self.value & conf.CONDITION_MASK)

    def json(self) -> JSON:
        return {'Class': 'Condition', 'Condition': self.name}
