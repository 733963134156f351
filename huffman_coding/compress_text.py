#!/usr/bin/env python3

'''
compress_text.py

Command-line driver: builds the Huffman code for a text file and reports how
many bits it saves over a fixed-width code.
'''

import argparse
from datetime import timedelta
import logging
from timeit import default_timer as timer

from .codes import extract_codes
from .errors import HuffmanError
from .fixed_code import DEFAULT_WIDTH, MIN_ASCII_WIDTH, ascii_table, \
    read_fixed_table
from .frequencies import count_symbols, frequency_table, root_frequency
from .report import compression_stats, encode_lines, format_codes, \
    format_frequencies, format_output, format_stats
from .tree import build_tree

log = logging.getLogger(__name__)


def make_parser():
    parser = argparse.ArgumentParser(prog='huffman-report',
        description='Huffman code a text file and compare it against a ' + \
            'fixed-width code.')
    parser.add_argument('infile', type=str, help='text file to encode')
    parser.add_argument('--table', type=str, dest='table',
        help='fixed-width code table file, one "<char>, <bits>" per line; ' + \
            'defaults to ASCII')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
        help='code width of the default ASCII table (default: %(default)s)')
    parser.add_argument('--encoding', type=str, default='utf-8',
        help='text encoding of infile and the table (default: %(default)s)')
    parser.add_argument('--no-fold-case', action='store_false',
        dest='fold_case', help='keep upper and lower case apart')
    parser.add_argument('--show-bits', action='store_true',
        help='print the encoded text, one line of bits per input line')
    parser.add_argument('-v', '--verbose', action='count', default=0,
        help='more log output (-v info, -vv debug)')
    return parser


def report(args):
    '''
    Runs the whole pipeline for parsed arguments and prints the report.

    Args:
        args: Namespace
            command-line argument namespace, as built by make_parser()

    Returns:
        stats: CompressionStats
    '''

    if args.table:
        fixed = read_fixed_table(args.table, encoding=args.encoding)
    else:
        fixed = ascii_table(args.width)

    with open(args.infile, encoding=args.encoding) as f:
        lines = f.readlines()

    counts = count_symbols(lines, fold_case=args.fold_case)
    frequencies = frequency_table(counts)
    log.info('%s: %d characters, %d distinct', args.infile,
        sum(counts.values()), len(counts))
    print(format_frequencies(frequencies, root_frequency(frequencies)))
    print()

    root = build_tree(frequencies)
    codes = extract_codes(root)
    if len(codes) == 1:
        log.warning('single-symbol alphabet, using one-bit code %r',
            next(iter(codes.values())))
    print(format_codes(codes, frequencies))
    print()

    fixed_lines, fixed_bits = encode_lines(lines, fixed, args.fold_case)
    print(format_output('Fixed-width', fixed_lines, fixed_bits,
        args.show_bits))
    print()

    huffman_lines, huffman_bits = encode_lines(lines, codes, args.fold_case)
    print(format_output('Huffman', huffman_lines, huffman_bits,
        args.show_bits))
    print()

    stats = compression_stats(fixed_bits, huffman_bits, codes, frequencies)
    print(format_stats(stats))
    return stats


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.width < MIN_ASCII_WIDTH:
        parser.error(f'--width must be at least {MIN_ASCII_WIDTH} for ASCII')

    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level,
        format='%(levelname)s %(name)s: %(message)s')

    start = timer()
    try:
        report(args)
    except (HuffmanError, OSError, UnicodeError, LookupError) as e:
        parser.exit(1, f'{parser.prog}: error: {e}\n')
    end = timer()

    print(f'\nReport completed in {timedelta(seconds=(round(end - start)))}.')
    return 0


if __name__ == '__main__':
    main()
