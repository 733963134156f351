'''
frequencies.py

Turns text into the frequency table the tree builder consumes.

Text is taken line by line; line terminators are not symbols. By default
every character is lower-cased first, so 'A' and 'a' share a code.
'''

import logging

import numpy as np

from .errors import InvalidInputError

log = logging.getLogger(__name__)


def count_symbols(lines, fold_case=True):
    '''
    Counts how often each character occurs.

    Args:
        lines: iterable of strings
            text to count, e.g. an open file; trailing newlines are dropped
        fold_case: boolean
            whether characters are lower-cased before counting

    Returns:
        counts: dict
            character -> number of occurrences, in order of first occurrence
    '''

    counts = dict()
    for line in lines:
        line = line.rstrip('\r\n')
        if fold_case:
            line = line.lower()
        for char in line:
            try:
                counts[char] += 1
            except KeyError:
                counts[char] = 1
    return counts


def frequency_table(counts):
    '''
    Normalizes symbol counts into probabilities.

    Args:
        counts: dict
            symbol -> count, as returned by count_symbols

    Returns:
        frequencies: dict
            symbol -> probability in (0, 1], keeping the order of counts
    '''

    if not counts:
        raise InvalidInputError('no symbols to count')

    weights = np.fromiter(counts.values(), dtype=np.float64, count=len(counts))
    probabilities = weights / weights.sum()
    return {symbol: float(p) for symbol, p in zip(counts, probabilities)}


def read_frequency_table(path, fold_case=True, encoding='utf-8'):
    '''
    Reads a text file and returns its frequency table together with the
    total number of characters counted.
    '''

    with open(path, encoding=encoding) as f:
        counts = count_symbols(f, fold_case=fold_case)

    total = sum(counts.values())
    log.info('%s: %d characters, %d distinct', path, total, len(counts))
    return frequency_table(counts), total


def root_frequency(frequencies):
    '''
    Sum of all probabilities in a table; 1.0 up to rounding for a table
    made by frequency_table.
    '''

    return float(np.sum(np.fromiter(frequencies.values(), dtype=np.float64)))
