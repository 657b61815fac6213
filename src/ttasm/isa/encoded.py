from dataclasses import dataclass
from typing import ClassVar

import ttasm.common.isaconf as conf


@dataclass(frozen=True)
class Encoded:
    ''' Bit value of one encoded instruction '''
    value: int
    size: ClassVar[int]

    def __str__(self) -> str:
        return f'0x{self.value:0{self.size * 2}X}'


@dataclass(frozen=True)
class Byte(Encoded):
    size: ClassVar[int] = conf.BYTE_SIZE


@dataclass(frozen=True)
class Word(Encoded):
    size: ClassVar[int] = conf.WORD_SIZE
