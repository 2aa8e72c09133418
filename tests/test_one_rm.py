import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms.one_rm import OneRMCalculator


class OneRMCalculatorTestCase(unittest.TestCase):
    def test_formulas(self) -> None:
        self.assertEqual(OneRMCalculator.epley(225, 5), 263)
        self.assertEqual(OneRMCalculator.brzycki(225, 5), 253)
        self.assertEqual(OneRMCalculator.lombardi(225, 5), 264)

    def test_estimate_averages_formulas(self) -> None:
        self.assertEqual(OneRMCalculator.estimate(225, 5), 260)
        self.assertEqual(OneRMCalculator.estimate(100, 10), 131)

    def test_single_rep_is_its_own_max(self) -> None:
        self.assertEqual(OneRMCalculator.estimate(315, 1), 315)

    def test_high_reps_not_extrapolated(self) -> None:
        self.assertEqual(OneRMCalculator.estimate(100, 16), 100)
        self.assertEqual(OneRMCalculator.estimate(100, 50), 100)
        self.assertGreater(OneRMCalculator.estimate(100, 15), 100)

    def test_more_reps_never_lower_estimate(self) -> None:
        estimates = [OneRMCalculator.estimate(185, reps) for reps in range(1, 16)]
        self.assertEqual(estimates, sorted(estimates))

    def test_invalid_input_passes_through(self) -> None:
        self.assertEqual(OneRMCalculator.estimate(0, 5), 0)
        self.assertEqual(OneRMCalculator.estimate(100, 0), 100)

    def test_estimate_not_below_weight(self) -> None:
        for reps in range(1, 16):
            self.assertGreaterEqual(OneRMCalculator.estimate(135, reps), 135)

    def test_percentage_table(self) -> None:
        self.assertEqual(OneRMCalculator.get_percentage_for(1), 100)
        self.assertEqual(OneRMCalculator.get_percentage_for(5), 87)
        self.assertEqual(OneRMCalculator.get_percentage_for(8), 80)
        self.assertEqual(OneRMCalculator.get_percentage_for(12), 70)
        self.assertEqual(OneRMCalculator.get_percentage_for(13), 70)
        self.assertEqual(OneRMCalculator.get_percentage_for(0), 70)

    def test_weight_for_percentage(self) -> None:
        self.assertEqual(OneRMCalculator.get_weight_for_percentage(260, 80), 208)
        self.assertEqual(OneRMCalculator.get_weight_for_percentage(315, 87), 274)


if __name__ == "__main__":
    unittest.main()
