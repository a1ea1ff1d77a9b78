import math
import unittest

from insight_notes.errors import DimensionMismatchError
from insight_notes.rag.similarity import cosine_similarity, dot_product, get_scorer


class DotProductTests(unittest.TestCase):
    def test_raw_dot_product(self):
        self.assertEqual(dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]), 32.0)

    def test_not_normalized(self):
        self.assertEqual(dot_product([2.0, 0.0], [3.0, 0.0]), 6.0)

    def test_dimension_mismatch_fails_fast(self):
        with self.assertRaises(DimensionMismatchError) as ctx:
            dot_product([1.0, 2.0], [1.0, 2.0, 3.0])

        self.assertEqual((ctx.exception.left, ctx.exception.right), (2, 3))


class CosineSimilarityTests(unittest.TestCase):
    def test_scale_invariant(self):
        self.assertTrue(math.isclose(cosine_similarity([2.0, 0.0], [3.0, 0.0]), 1.0))

    def test_orthogonal(self):
        self.assertEqual(cosine_similarity([1.0, 0.0], [0.0, 1.0]), 0.0)

    def test_zero_vector_scores_zero(self):
        self.assertEqual(cosine_similarity([0.0, 0.0], [1.0, 1.0]), 0.0)

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            cosine_similarity([1.0], [1.0, 0.0])


class GetScorerTests(unittest.TestCase):
    def test_known_metrics(self):
        self.assertIs(get_scorer("dot"), dot_product)
        self.assertIs(get_scorer("cosine"), cosine_similarity)

    def test_unknown_metric(self):
        with self.assertRaisesRegex(ValueError, "cosine, dot"):
            get_scorer("euclidean")


if __name__ == "__main__":
    unittest.main()
