"""Unit tests for strqueue.collections.queue"""

import random
import unittest
from unittest import mock

import timeout_decorator  # type: ignore

from strqueue.collections import Queue
from strqueue.errors import AllocationFailure, EmptyQueue


def make_queue(values: list[str]) -> Queue:
    queue = Queue()
    for value in values:
        queue.insert_tail(value)
    return queue


class TestInsertRemove(unittest.TestCase):
    def test_new_queue_is_empty(self) -> None:
        queue = Queue()
        self.assertEqual(queue.size(), 0)
        self.assertTrue(queue.is_empty())
        self.assertIsNone(queue.head)
        self.assertIsNone(queue.tail)
        queue.sanity_check()

    def test_insert_tail_then_remove_keeps_order(self) -> None:
        queue = make_queue(["a", "b", "c"])
        queue.sanity_check()
        self.assertEqual(
            [queue.remove_head() for _ in range(3)], ["a", "b", "c"]
        )
        self.assertTrue(queue.is_empty())

    def test_insert_head_then_remove_reverses_order(self) -> None:
        queue = Queue()
        for value in ["a", "b", "c"]:
            queue.insert_head(value)
        queue.sanity_check()
        self.assertEqual(
            [queue.remove_head() for _ in range(3)], ["c", "b", "a"]
        )

    def test_mixed_insertions(self) -> None:
        queue = Queue()
        queue.insert_tail("b")
        queue.insert_head("a")
        queue.insert_tail("c")
        queue.insert_head("z")
        queue.sanity_check()
        self.assertEqual(list(queue.values()), ["z", "a", "b", "c"])
        self.assertEqual(queue.first, "z")
        self.assertEqual(queue.last, "c")

    def test_first_insert_sets_head_and_tail(self) -> None:
        for insert in ("insert_head", "insert_tail"):
            queue = Queue()
            node = getattr(queue, insert)("only")
            self.assertIs(queue.head, node)
            self.assertIs(queue.tail, node)
            self.assertIsNone(node.next)
            self.assertEqual(len(queue), 1)

    def test_size_tracks_insertions_and_removals(self) -> None:
        rng = random.Random(7)
        queue = Queue()
        expected = 0
        for _ in range(500):
            action = rng.choice(["ih", "it", "rh"])
            if action == "ih":
                queue.insert_head(str(rng.random()))
                expected += 1
            elif action == "it":
                queue.insert_tail(str(rng.random()))
                expected += 1
            elif expected > 0:
                queue.remove_head()
                expected -= 1
            self.assertEqual(queue.size(), expected)
        queue.sanity_check()

    def test_remove_from_empty(self) -> None:
        queue = Queue()
        with self.assertRaises(EmptyQueue):
            queue.remove_head()
        self.assertEqual(queue.size(), 0)

    def test_remove_last_element_clears_tail(self) -> None:
        queue = make_queue(["x"])
        self.assertEqual(queue.remove_head(), "x")
        self.assertIsNone(queue.head)
        self.assertIsNone(queue.tail)
        self.assertEqual(queue.size(), 0)

        node = queue.insert_tail("y")
        self.assertIs(queue.head, node)
        self.assertIs(queue.tail, node)
        queue.sanity_check()
        self.assertEqual(list(queue.values()), ["y"])

    def test_insert_copies_str_subclass(self) -> None:
        class Tagged(str):
            pass

        queue = Queue()
        node = queue.insert_tail(Tagged("tag"))
        self.assertIs(type(node.value), str)
        self.assertEqual(node.value, "tag")

    def test_insert_rejects_non_strings(self) -> None:
        queue = Queue()
        with self.assertRaises(TypeError):
            queue.insert_tail(b"bytes")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            queue.insert_head(None)  # type: ignore[arg-type]
        self.assertTrue(queue.is_empty())

    def test_allocation_failure_leaves_queue_unchanged(self) -> None:
        queue = make_queue(["a", "b"])
        with mock.patch(
            "strqueue.collections.queue.Node", side_effect=MemoryError
        ):
            with self.assertRaises(AllocationFailure) as context:
                queue.insert_head("c")
            self.assertIsInstance(context.exception.__cause__, MemoryError)
            with self.assertRaises(AllocationFailure):
                queue.insert_tail("c")
        queue.sanity_check()
        self.assertEqual(list(queue.values()), ["a", "b"])

    def test_empty_string_is_an_element(self) -> None:
        queue = make_queue([""])
        self.assertEqual(queue.size(), 1)
        self.assertEqual(queue.remove_head(), "")


class TestRemoveBuffer(unittest.TestCase):
    def test_buffer_large_enough(self) -> None:
        queue = make_queue(["hello"])
        self.assertEqual(queue.remove_head(6), "hello")

    def test_buffer_truncates(self) -> None:
        queue = make_queue(["hello", "world"])
        self.assertEqual(queue.remove_head(4), "hel")
        self.assertEqual(queue.remove_head(1), "")
        self.assertTrue(queue.is_empty())

    def test_zero_capacity_outputs_nothing(self) -> None:
        queue = make_queue(["hello", "world"])
        self.assertIsNone(queue.remove_head(0))
        self.assertEqual(queue.size(), 1)
        self.assertEqual(queue.first, "world")

    def test_negative_capacity_is_rejected(self) -> None:
        queue = make_queue(["hello"])
        with self.assertRaises(ValueError):
            queue.remove_head(-1)
        self.assertEqual(queue.size(), 1)


class TestClear(unittest.TestCase):
    def test_clear(self) -> None:
        queue = make_queue([str(i) for i in range(100_000)])
        nodes = [queue.head, queue.tail]
        queue.clear()
        self.assertEqual(queue.size(), 0)
        self.assertIsNone(queue.head)
        self.assertIsNone(queue.tail)
        self.assertIsNotNone(nodes[0])
        self.assertIsNone(nodes[0].next)  # type: ignore[union-attr]
        queue.sanity_check()

        queue.insert_head("again")
        self.assertEqual(list(queue.values()), ["again"])


class TestReverse(unittest.TestCase):
    def test_reverse_small(self) -> None:
        for values in ([], ["a"], ["a", "b"], ["a", "b", "c"]):
            queue = make_queue(values)
            queue.reverse()
            queue.sanity_check()
            self.assertEqual(list(queue.values()), values[::-1])

    def test_reverse_swaps_head_and_tail_nodes(self) -> None:
        queue = make_queue(["a", "b", "c", "d"])
        head, tail = queue.head, queue.tail
        nodes = list(queue)
        queue.reverse()
        self.assertIs(queue.head, tail)
        self.assertIs(queue.tail, head)
        self.assertIsNone(head.next)  # type: ignore[union-attr]
        self.assertEqual([id(node) for node in queue], [id(n) for n in nodes[::-1]])

    def test_reverse_is_an_involution(self) -> None:
        values = [str(i) for i in range(1_000)]
        queue = make_queue(values)
        queue.reverse()
        queue.reverse()
        queue.sanity_check()
        self.assertEqual(list(queue.values()), values)

    def test_insert_after_reverse(self) -> None:
        queue = make_queue(["a", "b", "c"])
        queue.reverse()
        queue.insert_tail("z")
        queue.insert_head("0")
        queue.sanity_check()
        self.assertEqual(list(queue.values()), ["0", "c", "b", "a", "z"])


class TestSort(unittest.TestCase):
    def test_example(self) -> None:
        queue = make_queue(["banana", "apple", "cherry"])
        self.assertEqual(queue.size(), 3)
        queue.sort()
        self.assertEqual(list(queue.values()), ["apple", "banana", "cherry"])
        queue.reverse()
        self.assertEqual(list(queue.values()), ["cherry", "banana", "apple"])
        self.assertEqual(queue.remove_head(), "cherry")
        self.assertEqual(queue.size(), 2)

    def test_sort_small(self) -> None:
        for values in ([], ["a"], ["b", "a"], ["a", "b"], ["c", "a", "b"]):
            queue = make_queue(values)
            queue.sort()
            queue.sanity_check()
            self.assertEqual(list(queue.values()), sorted(values))

    def test_sort_random(self) -> None:
        rng = random.Random(42)
        for size in (2, 3, 5, 16, 17, 100, 1_023):
            values = [
                "".join(rng.choice("abcd") for _ in range(rng.randint(0, 4)))
                for _ in range(size)
            ]
            queue = make_queue(values)
            queue.sort()
            queue.sanity_check()
            self.assertEqual(list(queue.values()), sorted(values))
            self.assertIs(queue.tail, list(queue)[-1])

    def test_sorted_result_is_ascending(self) -> None:
        rng = random.Random(3)
        queue = make_queue([str(rng.randint(0, 1_000)) for _ in range(300)])
        queue.sort()
        values = list(queue.values())
        for earlier, later in zip(values, values[1:]):
            self.assertLessEqual(earlier, later)

    def test_sort_is_idempotent(self) -> None:
        queue = make_queue(["d", "b", "a", "c", "b"])
        queue.sort()
        nodes = list(queue)
        queue.sort()
        self.assertEqual([id(node) for node in queue], [id(n) for n in nodes])

    def test_sort_is_stable(self) -> None:
        values = ["b", "a", "b", "a", "c", "a", "b"]
        queue = make_queue(values)
        original = list(queue)
        queue.sort()
        queue.sanity_check()
        expected = sorted(original, key=lambda node: node.value)
        self.assertEqual([id(node) for node in queue], [id(n) for n in expected])

    def test_sort_tail_when_right_half_runs_out_first(self) -> None:
        queue = make_queue(["y", "z", "a", "b"])
        queue.sort()
        self.assertEqual(queue.last, "z")
        queue.insert_tail("end")
        queue.sanity_check()
        self.assertEqual(list(queue.values()), ["a", "b", "y", "z", "end"])

    def test_sort_relinks_without_new_nodes(self) -> None:
        queue = make_queue(["c", "a", "b"])
        ids = {id(node) for node in queue}
        with mock.patch("strqueue.collections.queue.Node") as node_class:
            queue.sort()
            queue.reverse()
            node_class.assert_not_called()
        self.assertEqual({id(node) for node in queue}, ids)

    def test_sort_compares_by_code_point(self) -> None:
        values = ["b", "B", "a", "é", "e", "A", "\U0001f600", "aa", ""]
        queue = make_queue(values)
        queue.sort()
        result = list(queue.values())
        self.assertEqual(result, sorted(values))
        encoded = [value.encode("utf-8") for value in result]
        self.assertEqual(encoded, sorted(encoded))

    @timeout_decorator.timeout(30)
    def test_sort_large(self) -> None:
        rng = random.Random(0)
        values = [str(rng.getrandbits(32)) for _ in range(100_000)]
        queue = make_queue(values)
        queue.sort()
        self.assertEqual(queue.size(), len(values))
        self.assertEqual(list(queue.values()), sorted(values))
        self.assertEqual(queue.last, max(values))


class TestRepresentation(unittest.TestCase):
    def test_str(self) -> None:
        self.assertEqual(str(make_queue(["a", "b", "c"])), "a -> b -> c")
        self.assertEqual(str(Queue()), "")

    def test_repr(self) -> None:
        self.assertEqual(repr(make_queue(["a"])), "Queue(['a'])")
