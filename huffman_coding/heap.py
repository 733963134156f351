'''
heap.py

Array-backed 4-ary min-heap used as the priority queue of the Huffman tree
builder.

Elements only need to support the < operator. The heap never looks inside
them and never modifies them.

For a node at index p its children live at 4p + 1 ... 4p + 4, and the parent
of index c is (c - 1) // 4.
'''

BRANCHING = 4
DEFAULT_CAPACITY = 10


class FourWayHeap:
    '''
    Min-heap where every node has up to four children.

    Args:
        elements: iterable (optional)
            initial elements; each one is inserted in turn, so the result
            is the same as calling insert() on them one at a time
    '''

    def __init__(self, elements=None):
        if elements is None:
            self._capacity = DEFAULT_CAPACITY
        else:
            elements = list(elements)
            self._capacity = max(len(elements), 1)
        self._heap = [None] * self._capacity
        self._size = 0

        if elements is not None:
            for element in elements:
                self.insert(element)

    @property
    def capacity(self):
        return self._capacity

    def insert(self, element):
        '''
        Adds element to the heap and swims it up to its place.

        Args:
            element: any
                value supporting the < operator against the other elements

        Returns:
            None
        '''

        if self._size == self._capacity:
            self._grow()

        self._heap[self._size] = element
        self._size += 1
        self._swim(self._size - 1)

    def peek(self):
        '''
        Returns the minimum element without removing it, or None if the heap
        is empty.
        '''

        if self._size == 0:
            return None
        return self._heap[0]

    def delete_min(self):
        '''
        Removes and returns the minimum element, or None if the heap is empty.

        The last element is moved into the root slot and sunk down until
        none of its children compares less than it.
        '''

        if self.is_empty():
            return None

        last = self._size - 1
        minimum = self._heap[0]
        self._swap(0, last)
        self._heap[last] = None
        self._size -= 1
        self._sink(0)
        return minimum

    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        '''Removes every element, keeping the current capacity.'''
        self._heap[:self._size] = [None] * self._size
        self._size = 0

    def contains(self, element):
        '''
        Checks whether this very object is in the heap.

        Membership is by identity: an equal but distinct object is not
        contained. O(n).
        '''

        for i in range(self._size):
            if self._heap[i] is element:
                return True
        return False

    def _grow(self):
        self._heap.extend([None] * self._capacity)
        self._capacity *= 2

    def _swim(self, index):
        heap = self._heap
        while index > 0:
            parent = (index - 1) // BRANCHING
            if not heap[index] < heap[parent]:
                break
            self._swap(index, parent)
            index = parent

    def _sink(self, index):
        heap = self._heap
        while True:
            first = BRANCHING * index + 1
            if first >= self._size:
                return

            # leftmost of the minimal children wins ties
            smallest = first
            for child in range(first + 1, min(first + BRANCHING, self._size)):
                if heap[child] < heap[smallest]:
                    smallest = child

            if not heap[smallest] < heap[index]:
                return
            self._swap(index, smallest)
            index = smallest

    def _swap(self, first, second):
        heap = self._heap
        heap[first], heap[second] = heap[second], heap[first]

    def __repr__(self):
        return f'FourWayHeap(heap={self._heap[:self._size]!r}, ' + \
            f'capacity={self._capacity}, size={self._size})'
