import io
import itertools
import unittest
from contextlib import redirect_stdout

from lazy_product import FixedRepeatProductIter, ProductConfig, fixed_product_with_repeat, product_with_repeat
from lazy_product.base_product import BaseProductIter


class TestFixedRepeatProduct(unittest.TestCase):

    def test_basic(self):
        result = list(FixedRepeatProductIter[2](["A", "B"]))
        self.assertEqual(result, [("A", "A"), ("A", "B"), ("B", "A"), ("B", "B")])

    def test_class_is_cached(self):
        self.assertIs(FixedRepeatProductIter[3], FixedRepeatProductIter[3])
        self.assertIsNot(FixedRepeatProductIter[3], FixedRepeatProductIter[2])
        self.assertEqual(FixedRepeatProductIter[3].REPEAT, 3)
        self.assertTrue(issubclass(FixedRepeatProductIter[3], BaseProductIter))

    def test_matches_runtime_variant(self):
        for k in range(4):
            src = [chr(ord("a") + i) for i in range(k)]
            for r in range(4):
                self.assertEqual(
                    list(fixed_product_with_repeat(src, r)),
                    list(product_with_repeat(src, r)),
                    msg=f"k={k} r={r}",
                )

    def test_fixed_length_tuples(self):
        items = list(FixedRepeatProductIter[3](range(3)))
        self.assertEqual(len(items), 27)
        self.assertTrue(all(isinstance(t, tuple) and len(t) == 3 for t in items))
        self.assertEqual(items, list(itertools.product(range(3), repeat=3)))

    def test_degenerate(self):
        self.assertEqual(list(FixedRepeatProductIter[3]([])), [])
        self.assertEqual(list(FixedRepeatProductIter[0](["X"])), [()])

    def test_fused(self):
        it = FixedRepeatProductIter[1]("a")
        self.assertEqual(next(it), ("a",))
        for _ in range(3):
            with self.assertRaises(StopIteration):
                next(it)

    def test_missing_repeat(self):
        with self.assertRaises(TypeError):
            FixedRepeatProductIter("ab")

    def test_cannot_resubscript(self):
        with self.assertRaises(TypeError):
            FixedRepeatProductIter[2][3]

    def test_invalid_repeat(self):
        with self.assertRaises(ValueError):
            FixedRepeatProductIter[-1]
        with self.assertRaises(TypeError):
            FixedRepeatProductIter["2"]

    def test_verbose(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            list(FixedRepeatProductIter[2]("ab", ProductConfig(verbose=True)))
        out = buf.getvalue()
        self.assertIn("[Product] repeat=2 (fixed) radix=2 total=4", out)
        self.assertIn("[Product] exhausted after 4 items", out)

    def test_mutation_fails_fast(self):
        src = [1, 2, 3]
        it = FixedRepeatProductIter[2](src)
        next(it)
        src.append(4)
        with self.assertRaises(RuntimeError):
            next(it)

    def test_snapshot_ignores_mutation(self):
        src = [1, 2, 3]
        it = fixed_product_with_repeat(src, 2, ProductConfig(snapshot=True))
        next(it)
        src.clear()
        self.assertEqual(len(list(it)), 8)
        self.assertEqual(it.source, (1, 2, 3))


if __name__ == "__main__":
    unittest.main(verbosity=2)
