import math
import unittest

import numpy as np

from frac import Rational, Rational32d, ceil, floor, round_nearest


class RoundingTests(unittest.TestCase):
    def test_floor_and_ceil(self):
        self.assertEqual(floor(Rational(7, 2)), 3)
        self.assertEqual(ceil(Rational(7, 2)), 4)
        self.assertEqual(floor(Rational(-7, 2)), -4)
        self.assertEqual(ceil(Rational(-7, 2)), -3)
        self.assertEqual(floor(Rational(6, 3)), 2)
        self.assertEqual(ceil(Rational(6, 3)), 2)

    def test_round_nearest(self):
        self.assertEqual(round_nearest(Rational(7, 2)), 4)
        self.assertEqual(round_nearest(Rational(5, 2)), 3)
        self.assertEqual(round_nearest(Rational(7, 3)), 2)
        self.assertEqual(round_nearest(Rational(8, 3)), 3)
        self.assertEqual(round_nearest(Rational(-5, 2)), -2)
        self.assertEqual(round_nearest(Rational(-7, 3)), -2)
        self.assertEqual(round_nearest(Rational()), 0)

    def test_builtin_protocol(self):
        value = Rational(7, 2)
        self.assertEqual(math.floor(value), 3)
        self.assertEqual(math.ceil(value), 4)
        self.assertEqual(round(value), 4)
        self.assertEqual(round(Rational(5, 2)), 3)
        with self.assertRaises(TypeError):
            round(value, 1)

    def test_result_uses_integer_type(self):
        value = Rational32d(7, 2)
        for result in (floor(value), ceil(value), round_nearest(value)):
            self.assertIsInstance(result, np.int32)
        self.assertIsInstance(floor(Rational(7, 2)), int)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
