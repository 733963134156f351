'''
Huffman coding of text, with a 4-ary heap as the priority queue.
'''

from .codes import code_lengths, extract_codes, is_prefix_free
from .errors import FixedTableError, HuffmanError, InvalidInputError, \
    MissingSymbolError
from .heap import FourWayHeap
from .node import Internal, Leaf, Node
from .tree import build_tree

__version__ = '1.0.0'


def huffman_codes(frequencies):
    '''
    Builds the tree for a frequency table and returns its code table.
    '''

    return extract_codes(build_tree(frequencies))
