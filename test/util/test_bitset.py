import unittest
from pdom.utils.bitset import BitSet


class BitSetTestCase(unittest.TestCase):
    def test_filled(self):
        s = BitSet.filled(5)
        self.assertEqual(5, len(s))
        self.assertEqual([0, 1, 2, 3, 4], list(s))
        self.assertNotIn(5, s)
        self.assertNotIn(-1, s)

    def test_empty(self):
        s = BitSet.empty(7)
        self.assertFalse(s)
        self.assertEqual(0, len(s))
        self.assertEqual([], list(s))
        self.assertFalse(BitSet.empty(0))
        self.assertFalse(BitSet.filled(0))

    def test_add_discard(self):
        s = BitSet.single(70, 65)
        self.assertIn(65, s)
        t = s.add(3)
        self.assertEqual([3, 65], list(t))
        # Sets are values, the original is unchanged:
        self.assertEqual([65], list(s))
        self.assertEqual([65], list(t.discard(3)))
        self.assertEqual(t, t.discard(4))

    def test_out_of_range(self):
        s = BitSet.empty(4)
        with self.assertRaises(IndexError):
            s.add(4)
        with self.assertRaises(IndexError):
            s.discard(-1)

    def test_intersection_union(self):
        a = BitSet.from_iterable(8, [1, 2, 3])
        b = BitSet.from_iterable(8, [2, 3, 4])
        self.assertEqual([2, 3], list(a & b))
        self.assertEqual([2, 3], list(a.intersection(b)))
        self.assertEqual([1, 2, 3, 4], list(a | b))
        self.assertEqual([1, 2, 3, 4], list(a.union(b)))

    def test_size_mismatch(self):
        with self.assertRaises(ValueError):
            BitSet.filled(3) & BitSet.filled(4)
        with self.assertRaises(TypeError):
            BitSet.filled(3) | {1, 2}

    def test_equality(self):
        self.assertEqual(BitSet.single(3, 1), BitSet.from_iterable(3, [1]))
        self.assertNotEqual(BitSet.empty(3), BitSet.empty(4))
        self.assertNotEqual(BitSet.empty(3), set())
        self.assertEqual(
            {BitSet.single(3, 1)},
            {BitSet.single(3, 1), BitSet.from_iterable(3, [1, 1])})

    def test_repr(self):
        self.assertEqual('BitSet(4, {0, 2})', repr(BitSet.from_iterable(4, [2, 0])))


if __name__ == '__main__':
    unittest.main()
