'''
tree.py

Builds a Huffman code tree from a frequency table by repeatedly merging the
two lightest nodes held in a FourWayHeap.
'''

import logging
from math import isfinite
from numbers import Integral, Real

from .errors import InvalidInputError
from .heap import FourWayHeap
from .node import Internal, Leaf

log = logging.getLogger(__name__)


def check_frequencies(frequencies):
    '''
    Raises InvalidInputError unless frequencies is a non-empty mapping of
    symbols to positive, finite real weights.

    The weights are not required to sum to 1; callers normally pass
    probabilities, but raw counts build the same tree.
    '''

    if not frequencies:
        raise InvalidInputError('empty frequency table')

    for symbol, weight in frequencies.items():
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise InvalidInputError(
                f'weight of {symbol!r} is not a number: {weight!r}')
        # ints may exceed the float range, they are always finite
        finite = isinstance(weight, Integral) or isfinite(weight)
        if not finite or weight <= 0:
            raise InvalidInputError(
                f'weight of {symbol!r} must be positive and finite, ' + \
                f'got {weight!r}')


def build_tree(frequencies):
    '''
    Builds the Huffman tree for a frequency table.

    Leaves enter the heap in the table's iteration order. At every step the
    first node removed becomes the left child and the second the right child
    of a new internal node, which goes back into the heap. Equal weights are
    resolved by the heap, so for a given table the tree is always the same,
    but reordering a table with ties may change which of the tied symbols
    gets which code.

    Args:
        frequencies: dict
            symbol -> weight, usually a probability in (0, 1]

    Returns:
        root: Node
            root of the tree; a Leaf when the table holds a single symbol

    Raises:
        InvalidInputError: the table is empty or holds a bad weight
    '''

    check_frequencies(frequencies)

    heap = FourWayHeap()
    for symbol, weight in frequencies.items():
        heap.insert(Leaf(symbol, weight))

    while heap.size() > 1:
        left = heap.delete_min()
        right = heap.delete_min()
        parent = Internal(left, right)
        log.debug('merged %r + %r -> %r', left, right, parent.weight)
        heap.insert(parent)

    root = heap.delete_min()
    log.info('built tree over %d symbols, root weight %r', len(frequencies),
        root.weight)
    return root
