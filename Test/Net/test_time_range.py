import unittest

from tpnkit.Net.time_range import Bound, BoundKind, TimeRange, show


class TestBound(unittest.TestCase):
    def test_constructors(self):
        self.assertEqual(Bound.open(3).kind, BoundKind.OPEN)
        self.assertEqual(Bound.closed(3).value, 3)
        self.assertTrue(Bound.infinity().is_infinite)
        self.assertIsNone(Bound.infinity().value)

    def test_infinity_ignores_value(self):
        self.assertEqual(Bound(BoundKind.INFINITY, 7), Bound.infinity())

    def test_negative_value_rejected(self):
        with self.assertRaises(ValueError):
            Bound.closed(-1)
        with self.assertRaises(ValueError):
            Bound.open(-0.5)

    def test_non_numeric_value_rejected(self):
        with self.assertRaises(ValueError):
            Bound.closed("3")
        with self.assertRaises(ValueError):
            Bound.open(None)
        with self.assertRaises(ValueError):
            Bound.closed(True)
        with self.assertRaises(ValueError):
            Bound.closed(float("nan"))

    def test_float_values_allowed(self):
        self.assertEqual(Bound.closed(1.5).magnitude(), 1.5)

    def test_repr(self):
        self.assertEqual(repr(Bound.closed(2)), "Closed(2)")
        self.assertEqual(repr(Bound.open(5)), "Open(5)")
        self.assertEqual(repr(Bound.infinity()), "Infinity")


class TestTimeRange(unittest.TestCase):
    def test_default_is_instant(self):
        self.assertEqual(TimeRange(), TimeRange.instant())
        self.assertEqual(str(TimeRange.instant()), "[0, 0]")

    def test_show_all_shapes(self):
        cases = [
            (TimeRange(Bound.closed(2), Bound.open(5)), "[2, 5)"),
            (TimeRange(Bound.open(2), Bound.closed(5)), "(2, 5]"),
            (TimeRange(Bound.open(1), Bound.open(4)), "(1, 4)"),
            (TimeRange(Bound.closed(0), Bound.infinity()), "[0, inf)"),
            (TimeRange(Bound.infinity(), Bound.infinity()), "(inf, inf)"),
            (TimeRange(Bound.closed(1.5), Bound.closed(2.5)), "[1.5, 2.5]"),
        ]
        for tr, expected in cases:
            with self.subTest(expected=expected):
                self.assertEqual(show(tr), expected)

    def test_well_formed(self):
        self.assertTrue(TimeRange.instant().is_well_formed())
        self.assertTrue(TimeRange(Bound.closed(1), Bound.infinity()).is_well_formed())
        self.assertTrue(TimeRange(Bound.infinity(), Bound.infinity()).is_well_formed())
        self.assertFalse(TimeRange(Bound.closed(5), Bound.closed(1)).is_well_formed())
        self.assertFalse(TimeRange(Bound.infinity(), Bound.closed(5)).is_well_formed())

    def test_copy_is_independent(self):
        tr = TimeRange(Bound.closed(1), Bound.closed(2))
        cp = tr.copy()
        self.assertEqual(tr, cp)
        self.assertIsNot(tr, cp)
        cp.start = Bound.open(0)
        self.assertEqual(tr.start, Bound.closed(1))


if __name__ == "__main__":
    unittest.main()
