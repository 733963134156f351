'''
node.py

Nodes of a Huffman code tree.

A Leaf carries a symbol and its weight. An Internal node carries exactly two
children and no symbol; its weight is the sum of theirs. Keeping the two
kinds apart means no symbol value is reserved to mark internal nodes.
'''


class Node:
    '''
    Common base for tree nodes. Nodes are ordered by weight only, which is
    all the priority queue needs.
    '''

    __slots__ = ('weight',)

    is_leaf = False

    def __lt__(self, other):
        return self.weight < other.weight

    def leaves(self):
        '''
        Yields the leaves below (and including) this node, left to right.
        '''

        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)


class Leaf(Node):

    __slots__ = ('symbol',)

    is_leaf = True

    def __init__(self, symbol, weight):
        self.symbol = symbol
        self.weight = weight

    def __repr__(self):
        return f'Leaf(symbol={self.symbol!r}, weight={self.weight!r})'


class Internal(Node):

    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    def __repr__(self):
        return f'Internal(weight={self.weight!r})'
