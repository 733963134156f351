'''
errors.py

Exceptions raised by the Huffman coding package.

An empty heap is not an error: FourWayHeap.peek() and delete_min() return
None instead of raising.
'''


class HuffmanError(Exception):
    '''Base class for every error raised by this package.'''


class InvalidInputError(HuffmanError, ValueError):
    '''
    Raised when a frequency table cannot be turned into a code tree, e.g. it
    is empty or holds a weight that is not a positive real number.
    '''


class FixedTableError(HuffmanError, ValueError):
    '''
    Raised when a fixed-width code table file holds a malformed line.
    '''

    def __init__(self, lineno, line, reason):
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f'line {lineno}: {reason}: {line!r}')


class MissingSymbolError(HuffmanError, KeyError):
    '''
    Raised when text holds a symbol that the code table has no code for.
    '''

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self):
        return f'no code for symbol {self.symbol!r}'
