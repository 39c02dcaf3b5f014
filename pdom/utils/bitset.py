""" Fixed size bit set implementation.

A bit set stores a subset of the integers in the range [0, size) as the
bits of a single python integer. This makes intersection, union and
comparison of dense sets of graph nodes cheap.

Bit sets are immutable values: operations return new sets.
"""


class BitSet:
    """ A set of integers in the range [0, size) """
    __slots__ = ('size', 'bits')

    def __init__(self, size, bits=0):
        assert size >= 0
        assert bits >> size == 0, 'Bits outside of set size'
        self.size = size
        self.bits = bits

    @classmethod
    def empty(cls, size):
        """ Create a set without any element """
        return cls(size)

    @classmethod
    def filled(cls, size):
        """ Create a set containing every integer in the range """
        return cls(size, (1 << size) - 1)

    @classmethod
    def single(cls, size, index):
        """ Create a set with exactly one element """
        return cls.empty(size).add(index)

    @classmethod
    def from_iterable(cls, size, values):
        s = cls.empty(size)
        for value in values:
            s = s.add(value)
        return s

    def __repr__(self):
        inner = ", ".join(map(str, self))
        return "BitSet({}, {{{}}})".format(self.size, inner)

    def _check_index(self, index):
        if not 0 <= index < self.size:
            raise IndexError(
                "Index {} out of range [0, {})".format(index, self.size))

    def _check_other(self, other):
        if not isinstance(other, BitSet):
            raise TypeError("Expected BitSet, got {}".format(type(other)))
        if other.size != self.size:
            raise ValueError(
                "Cannot combine sets of size {} and {}".format(
                    self.size, other.size))

    def add(self, index):
        """ Return a copy of this set with index included """
        self._check_index(index)
        return BitSet(self.size, self.bits | (1 << index))

    def discard(self, index):
        """ Return a copy of this set with index excluded """
        self._check_index(index)
        return BitSet(self.size, self.bits & ~(1 << index))

    def __contains__(self, index):
        if not 0 <= index < self.size:
            return False
        return bool((self.bits >> index) & 1)

    def __len__(self):
        return bin(self.bits).count('1')

    def __bool__(self):
        return self.bits != 0

    def __iter__(self):
        bits = self.bits
        index = 0
        while bits:
            if bits & 1:
                yield index
            bits >>= 1
            index += 1

    def intersection(self, other):
        self._check_other(other)
        return BitSet(self.size, self.bits & other.bits)

    def __and__(self, other):
        return self.intersection(other)

    def union(self, other):
        self._check_other(other)
        return BitSet(self.size, self.bits | other.bits)

    def __or__(self, other):
        return self.union(other)

    def __eq__(self, other):
        if isinstance(other, BitSet):
            return self.size == other.size and self.bits == other.bits
        else:
            return False

    def __hash__(self):
        return hash((self.size, self.bits))
