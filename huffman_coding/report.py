'''
report.py

Renders text with a code table and compares a Huffman code against a
fixed-width baseline.

Bits are produced as strings of '0' and '1' characters; nothing is packed
into bytes.
'''

from collections import namedtuple

from humanize import intcomma, naturalsize
import numpy as np

from .errors import MissingSymbolError

CompressionStats = namedtuple('CompressionStats', [
    'fixed_bits',       # bits used by the fixed-width code
    'huffman_bits',     # bits used by the Huffman code
    'ratio',            # fixed_bits / huffman_bits
    'savings',          # fraction of fixed_bits saved
    'expected_length',  # Huffman bits per symbol
    'entropy',          # Shannon entropy in bits per symbol
])


def encode_lines(lines, codes, fold_case=True):
    '''
    Replaces every character of every line with its code.

    Args:
        lines: iterable of strings
            text to encode; trailing newlines are dropped
        codes: dict
            symbol -> bit string
        fold_case: boolean
            whether characters are lower-cased first; must match the
            setting the frequencies were counted with

    Returns:
        (rendered, total_bits): (list of strings, int) tuple
            one bit string per input line, and the number of bits in all

    Raises:
        MissingSymbolError: a character has no code
    '''

    rendered = []
    total_bits = 0
    for line in lines:
        line = line.rstrip('\r\n')
        if fold_case:
            line = line.lower()
        try:
            bits = ''.join([codes[char] for char in line])
        except KeyError as e:
            raise MissingSymbolError(e.args[0]) from None
        rendered.append(bits)
        total_bits += len(bits)
    return rendered, total_bits


def total_code_bits(codes):
    '''Sum of the lengths of all codes in a table.'''
    return sum(len(code) for code in codes.values())


def expected_length(codes, frequencies):
    '''
    Average code length in bits per symbol, weighted by frequency.
    '''

    symbols = list(frequencies)
    weights = np.array([frequencies[s] for s in symbols], dtype=np.float64)
    lengths = np.array([len(codes[s]) for s in symbols], dtype=np.float64)
    return float(np.dot(weights, lengths) / weights.sum())


def entropy(frequencies):
    '''
    Shannon entropy of a frequency table in bits per symbol; a lower bound
    for the expected length of any prefix-free code.
    '''

    p = np.fromiter(frequencies.values(), dtype=np.float64)
    p = p / p.sum()
    return float(-np.sum(p * np.log2(p)))


def compression_stats(fixed_bits, huffman_bits, codes, frequencies):
    '''
    Collects the figures printed at the end of a report.

    Args:
        fixed_bits: int
            bits used by the text under the fixed-width code
        huffman_bits: int
            bits used by the text under the Huffman code
        codes: dict
            Huffman code table
        frequencies: dict
            frequency table the codes were built from

    Returns:
        stats: CompressionStats
    '''

    if huffman_bits:
        ratio = fixed_bits / huffman_bits
    else:
        ratio = float('nan')
    if fixed_bits:
        savings = 1 - huffman_bits / fixed_bits
    else:
        savings = 0.0

    return CompressionStats(fixed_bits, huffman_bits, ratio, savings,
        expected_length(codes, frequencies), entropy(frequencies))


def format_frequencies(frequencies, root):
    lines = ['Frequencies']
    for symbol, p in frequencies.items():
        lines.append(f'\t{symbol!r}: {p:.6f}')
    lines.append(f'Root frequency: {root}')
    return '\n'.join(lines)


def format_codes(codes, frequencies=None):
    '''
    One line per symbol, most frequent first when frequencies are given,
    followed by the summed length of all codes.
    '''

    symbols = list(codes)
    if frequencies is not None:
        symbols.sort(key=lambda s: (-frequencies[s], codes[s]))

    lines = ['Huffman codes']
    for symbol in symbols:
        lines.append(f'\t{symbol!r}: {codes[symbol]}')
    lines.append(f'Total bits: {total_code_bits(codes)}')
    return '\n'.join(lines)


def format_output(title, rendered, total_bits, show_bits=False):
    lines = [f'{title} output']
    if show_bits:
        lines.extend(rendered)
    lines.append(f'Total bits used: {intcomma(total_bits)} ' + \
        f'({naturalsize(total_bits / 8)})')
    return '\n'.join(lines)


def format_stats(stats):
    return '\n'.join([
        'Compression',
        f'\tFixed-width: {intcomma(stats.fixed_bits)} bits',
        f'\tHuffman: {intcomma(stats.huffman_bits)} bits',
        f'\tRatio: {stats.ratio:.3f}',
        f'\tSavings: {stats.savings:.1%}',
        f'\tExpected length: {stats.expected_length:.4f} bits/symbol',
        f'\tEntropy: {stats.entropy:.4f} bits/symbol',
    ])
