'''
fixed_code.py

Fixed-width code tables, the baseline the Huffman code is compared against.

A table file holds one entry per line: the symbol, a comma and a space, then
the bits, e.g.

    a, 01100001
    ,, 00101100

The first character of the line is always the symbol, so ',' and ' ' can be
listed like any other character.
'''

import logging

from .errors import FixedTableError

log = logging.getLogger(__name__)

SEPARATOR = ', '
DEFAULT_WIDTH = 8
ASCII_SIZE = 128
MIN_ASCII_WIDTH = 7


def parse_fixed_line(line, lineno=0):
    '''
    Parses one table line into a (symbol, bits) pair.

    Raises:
        FixedTableError: the separator is missing or the bits are not a
            non-empty string of '0' and '1'
    '''

    if line[1:1 + len(SEPARATOR)] != SEPARATOR:
        raise FixedTableError(lineno, line, f'expected {SEPARATOR!r} after symbol')

    symbol = line[0]
    bits = line[1 + len(SEPARATOR):].strip()
    if not bits or set(bits) - {'0', '1'}:
        raise FixedTableError(lineno, line, 'code must be a string of 0s and 1s')
    return symbol, bits


def read_fixed_table(path, encoding='utf-8'):
    '''
    Reads a fixed-width code table file.

    Blank lines are skipped. A symbol listed twice keeps its last code.

    Args:
        path: string
            table file

    Returns:
        table: dict
            symbol -> bit string
    '''

    table = dict()
    with open(path, encoding=encoding) as f:
        for lineno, line in enumerate(f, start=1):
            line = line.rstrip('\r\n')
            if not line.strip() and SEPARATOR not in line:
                continue
            symbol, bits = parse_fixed_line(line, lineno)
            table[symbol] = bits

    log.info('%s: %d fixed codes', path, len(table))
    return table


def ascii_table(width=DEFAULT_WIDTH):
    '''
    Returns the table mapping every 7-bit ASCII character to its code point,
    written as a width-bit binary string.
    '''

    if width < MIN_ASCII_WIDTH:
        raise ValueError(
            f'ASCII needs at least {MIN_ASCII_WIDTH} bits, got {width}')
    return {chr(i): f'{i:0{width}b}' for i in range(ASCII_SIZE)}
