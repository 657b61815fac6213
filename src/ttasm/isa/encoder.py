import logging as lg
from typing import List

from ttasm.isa.encoded import Encoded
from ttasm.isa.instructions import Instruction, Instructions


def encode(instruction: Instruction) -> Encoded:
    encoded = instruction.encode()
    lg.debug(f'Encoding {instruction} -> {encoded}')
    return encoded


def encode_all(instructions: Instructions) -> List[Encoded]:
    return [encode(instruction) for instruction in instructions]


def image_size(instructions: Instructions) -> int:
    ''' Image length in bytes, known before encoding '''
    return sum(instruction.size for instruction in instructions)
