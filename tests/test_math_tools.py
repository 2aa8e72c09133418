import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms.math_tools import MathTools
from algorithms.weight_converter import WeightConverter


class MathToolsTestCase(unittest.TestCase):
    def test_round_half_up(self) -> None:
        self.assertEqual(MathTools.round_half_up(2.5), 3)
        self.assertEqual(MathTools.round_half_up(2.4999), 2)
        self.assertEqual(MathTools.round_half_up(-2.5), -2)

    def test_clamp(self) -> None:
        self.assertEqual(MathTools.clamp(5, 0, 10), 5)
        self.assertEqual(MathTools.clamp(-1, 0, 10), 0)
        self.assertEqual(MathTools.clamp(11, 0, 10), 10)
        with self.assertRaises(ValueError):
            MathTools.clamp(1, 2, 1)

    def test_round_to_increment(self) -> None:
        self.assertEqual(MathTools.round_to_increment(207, 5), 205)
        self.assertEqual(MathTools.round_to_increment(208, 5), 210)
        self.assertAlmostEqual(MathTools.round_to_increment(101.3, 2.5), 102.5)
        self.assertEqual(MathTools.round_to_increment(101.3, 0), 101.3)

    def test_volume(self) -> None:
        self.assertEqual(MathTools.volume([(100, 10), (150, 6)]), 1900)
        self.assertEqual(MathTools.volume([]), 0)

    def test_overall_percentile(self) -> None:
        self.assertEqual(MathTools.overall_percentile([50, 0, 61]), 56)
        self.assertEqual(MathTools.overall_percentile([0, 0]), 0)
        self.assertEqual(MathTools.overall_percentile([]), 0)

    def test_ordinal_suffix(self) -> None:
        cases = {1: "st", 2: "nd", 3: "rd", 4: "th", 11: "th", 12: "th", 13: "th", 21: "st", 99: "th", 111: "th"}
        for value, suffix in cases.items():
            self.assertEqual(MathTools.ordinal_suffix(value), suffix)


class WeightConverterTestCase(unittest.TestCase):
    def test_conversions(self) -> None:
        self.assertAlmostEqual(WeightConverter.kg_to_lb(100), 220.46)
        self.assertAlmostEqual(WeightConverter.lb_to_kg(100), 45.36)

    def test_whole_unit_conversions(self) -> None:
        self.assertEqual(WeightConverter.to_lbs(100, "kg"), 220)
        self.assertEqual(WeightConverter.to_lbs(225, "lbs"), 225)
        self.assertEqual(WeightConverter.to_kg(225, "lbs"), 102)
        self.assertEqual(WeightConverter.to_kg(80, "kg"), 80)

    def test_unrounded_pounds(self) -> None:
        self.assertAlmostEqual(WeightConverter.as_lbs(81, "kg"), 178.57422)
        self.assertEqual(WeightConverter.as_lbs(180.5, "lbs"), 180.5)

    def test_for_preference(self) -> None:
        self.assertEqual(WeightConverter.for_preference(100, "kg", "lbs"), 220)
        self.assertEqual(WeightConverter.for_preference(225, "lbs", "kg"), 102)


if __name__ == "__main__":
    unittest.main()
