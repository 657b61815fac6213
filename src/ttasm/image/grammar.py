''' Listing reader grammar '''

import struct
import logging as lg
from pathlib import Path

import pyparsing as pp

import ttasm.common.isaconf as conf


class ListingError(Exception):
    def __init__(self, message: str, line: int = 0):
        self.line = line
        super().__init__(f'Line {line}: {message}' if line else message)


def word_bytes(tokens: pp.ParseResults) -> bytes:
    word = int(tokens[0], 16)
    return struct.pack('<I', word)


comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)
hex_word = pp.Regex(f'[0-9A-Fa-f]{{{conf.GROUP_DIGITS}}}').set_parse_action(
    lambda r: word_bytes(r)
)
line = pp.Optional(hex_word) + pp.Optional(comment) + pp.StringEnd()


def parse_line(text: str, lineno: int) -> bytes:
    try:
        tokens = line.parse_string(text.strip(), parse_all=True)
    except pp.ParseException as e:
        raise ListingError(f'Malformed listing word {text.strip()!r}', lineno) from e

    return b''.join(tokens)


def parse_listing(text: str) -> bytes:
    bytestr = bytearray()

    for lineno, text_line in enumerate(text.splitlines(), start=1):
        bytestr += parse_line(text_line, lineno)

    return bytes(bytestr)


def read_listing(path: Path) -> bytes:
    lg.debug(f'Reading listing {path}')

    try:
        text = path.read_text(encoding='ascii')
    except UnicodeDecodeError as e:
        raise ListingError(f'Listing {path} is not text: {e.reason}') from e

    return parse_listing(text)
