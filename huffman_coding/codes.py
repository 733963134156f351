'''
codes.py

Derives the code table from a Huffman tree.

The left child of an internal node extends its parent's path with '1' and
the right child with '0'.
'''

from itertools import combinations

LEFT_BIT = '1'
RIGHT_BIT = '0'

# Code given to the only symbol of a one-symbol alphabet. The tree is then a
# bare leaf with an empty path, but every code must hold at least one bit.
SINGLE_SYMBOL_CODE = '0'


def extract_codes(root):
    '''
    Walks a tree as returned by build_tree and returns its code table.

    Args:
        root: Node
            root of a Huffman tree

    Returns:
        codes: dict
            symbol -> string of '0' and '1' characters, one entry per leaf
    '''

    if root.is_leaf:
        return {root.symbol: SINGLE_SYMBOL_CODE}

    # explicit stack, a lopsided tree can be deeper than the recursion limit
    codes = dict()
    stack = [(root, '')]
    while stack:
        node, path = stack.pop()
        for child, bit in ((node.right, RIGHT_BIT), (node.left, LEFT_BIT)):
            if child.is_leaf:
                codes[child.symbol] = path + bit
            else:
                stack.append((child, path + bit))
    return codes


def code_lengths(codes):
    return {symbol: len(code) for symbol, code in codes.items()}


def is_prefix_free(codes):
    '''
    Checks that no code in the table is a prefix of another one.
    '''

    for a, b in combinations(codes.values(), 2):
        if a.startswith(b) or b.startswith(a):
            return False
    return True
