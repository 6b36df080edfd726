import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from structures.array_stack import MIN_CAPACITY, ArrayStack
from structures.errors import (
    ConcurrentModificationError, EmptyStackError, IteratorExhaustedError,
)
from structures.linked_stack import LinkedStack
from structures.stack import make_stack


class StackContract:
    """Behaviour both backings must share. Mixed into a TestCase per backing."""
    kind = None

    def new(self, items=()):
        return make_stack(self.kind, items)

    def test_new_stack_is_empty(self):
        s = self.new()
        self.assertTrue(s.is_empty())
        self.assertEqual(s.size(), 0)
        self.assertEqual(len(s), 0)

    def test_pop_empty_raises(self):
        with self.assertRaises(EmptyStackError):
            self.new().pop()

    def test_peek_empty_raises(self):
        with self.assertRaises(EmptyStackError):
            self.new().peek()

    def test_empty_stack_error_is_index_error(self):
        with self.assertRaises(IndexError):
            self.new().pop()

    def test_lifo_law(self):
        s = self.new()
        items = list(range(50))
        for x in items:
            s.push(x)
        popped = [s.pop() for _ in items]
        self.assertEqual(popped, items[::-1])
        self.assertTrue(s.is_empty())

    def test_peek_does_not_remove(self):
        s = self.new([1, 2])
        self.assertEqual(s.peek(), 2)
        self.assertEqual(s.size(), 2)

    def test_duplicates_and_mixed_types(self):
        s = self.new(["a", "a", None, 3.5])
        self.assertEqual([s.pop() for _ in range(4)], [3.5, None, "a", "a"])

    def test_size_tracks_pushes_minus_pops(self):
        s = self.new()
        pushes = pops = 0
        for i in range(200):
            if i % 3 == 2:
                s.pop()
                pops += 1
            else:
                s.push(i)
                pushes += 1
            self.assertEqual(s.size(), pushes - pops)

    def test_pop_after_draining_raises(self):
        s = self.new([1])
        s.pop()
        with self.assertRaises(EmptyStackError):
            s.pop()

    def test_iterates_top_to_bottom(self):
        s = self.new([1, 2, 3])
        self.assertEqual(list(s), [3, 2, 1])
        self.assertEqual(s.size(), 3)

    def test_iterator_has_next_and_next(self):
        it = iter(self.new([1, 2]))
        self.assertTrue(it.has_next())
        self.assertEqual(it.next(), 2)
        self.assertTrue(it.has_next())
        self.assertEqual(it.next(), 1)
        self.assertFalse(it.has_next())

    def test_iterator_exhausted_raises(self):
        it = iter(self.new([1]))
        it.next()
        with self.assertRaises(IteratorExhaustedError):
            it.next()

    def test_iterator_on_empty_stack(self):
        it = iter(self.new())
        self.assertFalse(it.has_next())
        with self.assertRaises(IteratorExhaustedError):
            it.next()

    def test_fail_fast_after_push(self):
        s = self.new([1, 2, 3])
        it = iter(s)
        self.assertTrue(it.has_next())
        it.next()
        s.push(4)
        with self.assertRaises(ConcurrentModificationError):
            it.has_next()
        with self.assertRaises(ConcurrentModificationError):
            it.next()

    def test_fail_fast_after_pop(self):
        s = self.new([1, 2, 3])
        it = iter(s)
        s.pop()
        with self.assertRaises(ConcurrentModificationError):
            it.next()

    def test_fail_fast_inside_for_loop(self):
        s = self.new([1, 2, 3])
        with self.assertRaises(ConcurrentModificationError):
            for x in s:
                s.push(x)

    def test_fresh_iterator_after_modification_is_valid(self):
        s = self.new([1, 2])
        iter(s)
        s.push(3)
        self.assertEqual(list(s), [3, 2, 1])

    def test_peek_does_not_invalidate_iterator(self):
        s = self.new([1, 2])
        it = iter(s)
        s.peek()
        self.assertEqual(it.next(), 2)


class TestLinkedStack(StackContract, unittest.TestCase):
    kind = "linked"

    def test_type(self):
        self.assertIsInstance(self.new(), LinkedStack)

    def test_pop_unlinks_node(self):
        s = self.new([1, 2])
        head = s.head
        s.pop()
        self.assertIsNone(head.next)
        self.assertEqual(s.head.value, 1)


class TestArrayStack(StackContract, unittest.TestCase):
    kind = "array"

    def test_type(self):
        self.assertIsInstance(self.new(), ArrayStack)

    def test_resize_correctness_power_of_two_plus_one(self):
        for k in range(0, 11):
            n = 2 ** k + 1
            s = ArrayStack()
            for i in range(n):
                s.push(i)
            self.assertEqual(s.size(), n)
            self.assertEqual([s.pop() for _ in range(n)], list(range(n))[::-1])
            self.assertTrue(s.is_empty())

    def test_capacity_doubles_when_full(self):
        s = ArrayStack()
        self.assertEqual(s.capacity, 1)
        capacities = []
        for i in range(9):
            s.push(i)
            capacities.append(s.capacity)
        self.assertEqual(capacities, [1, 2, 4, 4, 8, 8, 8, 8, 16])

    def test_capacity_halves_at_quarter_occupancy(self):
        s = ArrayStack(range(16))
        self.assertEqual(s.capacity, 16)
        for _ in range(11):
            s.pop()
        self.assertEqual((s.size(), s.capacity), (5, 16))
        s.pop()
        self.assertEqual((s.size(), s.capacity), (4, 8))
        s.pop()
        s.pop()
        self.assertEqual((s.size(), s.capacity), (2, 4))
        s.pop()
        self.assertEqual((s.size(), s.capacity), (1, 2))

    def test_capacity_never_below_minimum(self):
        s = ArrayStack(range(64))
        while not s.is_empty():
            s.pop()
            self.assertGreaterEqual(s.capacity, MIN_CAPACITY)

    def test_popped_slots_are_cleared(self):
        s = ArrayStack(range(8))
        s.pop()
        self.assertTrue(all(v is None for v in s.buffer[s.top + 1:]))

    def test_amortized_copy_work_is_linear(self):
        for n in (1, 7, 100, 1000, 4097):
            s = ArrayStack()
            for i in range(n):
                s.push(i)
            for _ in range(n):
                s.pop()
            self.assertLessEqual(s.copy_work, 3 * n)

    def test_invalid_capacity(self):
        with self.assertRaises(ValueError):
            ArrayStack(capacity=0)


class TestMakeStack(unittest.TestCase):
    def test_default_is_linked(self):
        self.assertIsInstance(make_stack(), LinkedStack)

    def test_prefilled(self):
        s = make_stack("array", [1, 2, 3])
        self.assertEqual(s.peek(), 3)

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            make_stack("deque")


if __name__ == "__main__":
    unittest.main(verbosity=2)
