"""
Tests for minimum, maximum, median and average
"""

import unittest

import numpy as np

from order_stats import average, maximum, median, minimum


class TestExtremes(unittest.TestCase):
    def test_maximum_and_minimum(self):
        self.assertEqual(maximum([3, 9, -4, 9, 0]), 9)
        self.assertEqual(minimum([3, 9, -4, 9, 0]), -4)

    def test_all_negative(self):
        self.assertEqual(maximum([-5, -2, -9]), -2)
        self.assertEqual(minimum([-5, -2, -9]), -9)

    def test_all_positive(self):
        self.assertEqual(minimum([5, 2, 9]), 2)

    def test_empty_returns_zero(self):
        self.assertEqual(maximum([]), 0)
        self.assertEqual(minimum([]), 0)


class TestMedian(unittest.TestCase):
    def test_odd_length(self):
        self.assertEqual(median([3, 1, 2]), 2)

    def test_even_length_takes_upper_middle(self):
        self.assertEqual(median([4, 3, 2, 1]), 3)

    def test_single_and_empty(self):
        self.assertEqual(median([7]), 7)
        self.assertEqual(median([]), 0)

    def test_does_not_mutate_input(self):
        values = [5, 1, 4, 2, 3]
        median(values)
        self.assertEqual(values, [5, 1, 4, 2, 3])

    def test_numpy_input(self):
        arr = np.array([10, -3, 7, 7, 2], dtype=np.int32)
        self.assertEqual(median(arr), 7)
        self.assertEqual(list(arr), [10, -3, 7, 7, 2])


class TestAverage(unittest.TestCase):
    def test_mean(self):
        self.assertEqual(average([1, 2, 3, 4]), 2.5)

    def test_returns_float(self):
        result = average([2, 4])
        self.assertIsInstance(result, float)
        self.assertEqual(result, 3.0)

    def test_empty(self):
        self.assertEqual(average([]), 0.0)

    def test_wide_int32_values_do_not_overflow(self):
        arr = np.array([2**31 - 1, 2**31 - 1], dtype=np.int32)
        self.assertEqual(average(arr), float(2**31 - 1))


if __name__ == "__main__":
    unittest.main()
