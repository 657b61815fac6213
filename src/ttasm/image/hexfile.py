''' Memory-image listing: one little-endian 32-bit word per line '''

import struct
import logging as lg
from pathlib import Path
from typing import Iterator, List

import ttasm.common.isaconf as conf
from ttasm.image.packer import pack
from ttasm.isa.encoder import encode_all
from ttasm.isa.instructions import Instructions


def groups(bytestr: bytes) -> Iterator[bytes]:
    for start in range(0, len(bytestr), conf.GROUP_SIZE):
        yield bytestr[start:start + conf.GROUP_SIZE]


def render_group(group: bytes) -> str:
    ''' Renders up to four stream bytes as b3 b2 b1 b0

    A short final group is padded with zero bytes at the end of the stream,
    so every line stays eight digits wide.
    '''
    if len(group) > conf.GROUP_SIZE:
        raise ValueError(f'Group of {len(group)} bytes exceeds {conf.GROUP_SIZE}')

    padded = group.ljust(conf.GROUP_SIZE, bytes([conf.GROUP_PAD]))
    (word,) = struct.unpack('<I', padded)
    return f'{word:0{conf.GROUP_DIGITS}X}'


def render_lines(bytestr: bytes) -> List[str]:
    return [render_group(group) for group in groups(bytestr)]


def render_listing(bytestr: bytes) -> str:
    return ''.join(f'{line}\n' for line in render_lines(bytestr))


def build_image(instructions: Instructions) -> bytes:
    return pack(encode_all(instructions))


def write_listing(path: Path, bytestr: bytes):
    lg.info(f'Writing {len(bytestr)} bytes to {path}')
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_listing(bytestr))
