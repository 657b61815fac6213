''' Encoded instructions to a flat byte stream '''

import struct
from typing import Sequence

from ttasm.isa.encoded import Encoded, Byte, Word


def pack_byte(byte: int) -> bytes:
    return struct.pack('>B', byte)


def pack_word(word: int) -> bytes:
    # High byte first; the listing renderer reverses each group again
    return struct.pack('>H', word)


def pack_one(encoded: Encoded) -> bytes:
    match encoded:
        case Byte(value):
            return pack_byte(value)
        case Word(value):
            return pack_word(value)

    raise TypeError(f'Unsupported encoded unit {encoded!r}')


def pack(encoded: Sequence[Encoded]) -> bytes:
    bytestr = bytearray()

    for unit in encoded:
        bytestr += pack_one(unit)

    return bytes(bytestr)
