import unittest
import warnings
import numpy as np
from utils import *


class TestVectors(unittest.TestCase):

    def test_dot(self):
        self.assertEqual(dot(vec([0, 0, 1]), vec([0, 0, 1])), 1.0)
        self.assertEqual(dot(vec([0, 0, 1]), vec([0, 1, 1])), 1.0)
        self.assertEqual(dot(vec([0, 0, 1]), vec([0, 1, 0])), 0.0)

    def test_arithmetic_returns_new_vectors(self):
        a = vec([1, 2, 3])
        b = vec([4, 5, 6])
        np.testing.assert_array_equal(a + b, [5, 7, 9])
        np.testing.assert_array_equal(b - a, [3, 3, 3])
        np.testing.assert_array_equal(a * b, [4, 10, 18])
        np.testing.assert_array_equal(a * 2.0, [2, 4, 6])
        np.testing.assert_array_equal(b / 2.0, [2, 2.5, 3])
        np.testing.assert_array_equal(inverse(a), [-1, -2, -3])
        np.testing.assert_array_equal(a, [1, 2, 3])

    def test_length_and_normalize(self):
        v = vec([3, 4, 0])
        self.assertEqual(length(v), 5.0)
        np.testing.assert_allclose(normalize(v), [0.6, 0.8, 0])
        self.assertAlmostEqual(length(normalize(vec([1, 2, 3]))), 1.0)

    def test_normalize_zero_is_nan(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            self.assertTrue(np.all(np.isnan(normalize(zero()))))

    def test_reflect(self):
        # (0, 2, 2) looking at the origin bounces towards (0, 2, -2)
        np.testing.assert_array_equal(reflect(vec([0, -2, -2]), vec([0, 1, 0])), [0, 2, -2])

    def test_angle(self):
        self.assertAlmostEqual(angle(vec([0, 0, 1]), vec([0, 1, 0])), np.pi / 2)
        self.assertAlmostEqual(angle(vec([0, 0, 1]), vec([0, 3, 3])), np.pi / 4)
        self.assertAlmostEqual(angle(vec([2, 0, 0]), vec([5, 0, 0])), 0.0)
        self.assertAlmostEqual(angle(vec([1, 0, 0]), vec([-1, 0, 0])), np.pi)

    def test_frozen(self):
        v = frozen([1, 2, 3])
        self.assertEqual(v.dtype, np.float64)
        with self.assertRaises(ValueError):
            v[0] = 0

    def test_clamp_color(self):
        np.testing.assert_array_equal(clamp_color(vec([-5, 128, 300])), [0, 128, 255])

    def test_colors(self):
        np.testing.assert_array_equal(red(), [255, 0, 0])
        np.testing.assert_array_equal(orange(), [255, 153, 0])
        np.testing.assert_array_equal(gray(), [127, 127, 127])
        # fresh arrays, so callers cannot alias each other
        self.assertIsNot(red(), red())


if __name__ == '__main__':
    unittest.main()
