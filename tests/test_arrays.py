import unittest

import numpy as np

from frac import (
    Rational,
    Rational32f,
    as_rational_array,
    evaluate_array,
    zeros,
    zeros_like,
)


class ArrayTests(unittest.TestCase):
    def test_rational_array_helpers(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) for item in arr))

        base = [Rational(1, 2), 0.25, 3]
        arr_from_list = as_rational_array(base)
        self.assertEqual(arr_from_list.shape, (3,))
        self.assertEqual(list(arr_from_list), [Rational(1, 2), Rational(1, 4), Rational(3)])

        arr_like = zeros_like(arr_from_list)
        self.assertEqual(arr_like.shape, arr_from_list.shape)
        self.assertTrue(all(float(item) == 0.0 for item in arr_like))

        with self.assertRaises(ValueError):
            zeros(-1)

    def test_as_rational_array_copy_flag(self):
        arr = as_rational_array([1, 2])
        self.assertIs(as_rational_array(arr, copy=False), arr)
        self.assertIsNot(as_rational_array(arr), arr)
        converted = as_rational_array(arr, cls=Rational32f, copy=False)
        self.assertIsNot(converted, arr)
        self.assertTrue(all(isinstance(item, Rational32f) for item in converted))

    def test_two_dimensional(self):
        arr = as_rational_array(np.array([[0.5, 1.0], [1.5, 2.0]]))
        self.assertEqual(arr.shape, (2, 2))
        self.assertEqual(arr[1, 0], Rational(3, 2))
        self.assertEqual(zeros_like(arr).shape, (2, 2))

    def test_numpy_array_operations_with_scalar(self):
        vector = np.array([0.25, 0.5, 0.75])
        result = Rational(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        np.testing.assert_allclose(evaluate_array(result), [0.5, 0.75, 1.0])

    def test_numpy_array_operations_with_object_array(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = vector + Rational(1, 6)
        np.testing.assert_allclose([float(item) for item in result], [2 / 3, 1 / 2])

    def test_numpy_ufunc_support(self):
        vector = np.array([Rational(1, 2), Rational(3, 4)], dtype=object)
        result = np.add(vector, Rational(1, 4))
        self.assertEqual(list(result), [Rational(3, 4), Rational(1)])
        result = np.negative(Rational(1, 4))
        self.assertEqual(result, Rational(-1, 4))

    def test_evaluate_array_dtype(self):
        values = as_rational_array([1, 3], cls=Rational32f) / 4
        result = evaluate_array(values, cls=Rational32f)
        self.assertEqual(result.dtype, np.float32)
        np.testing.assert_allclose(result, [0.25, 0.75])
        self.assertEqual(evaluate_array([Rational(1, 8)]).dtype, np.float64)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
