# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for rebalancing alerts.
"""

import unittest

from ..allocation.mix import AllocationMix
from ..errors import InvalidInput
from ..rebalancing.alerts import RebalancingAlertGenerator, urgency_for_deviation

TARGET = AllocationMix(60, 20, 15, 3, 1, 1)


class TestRebalancingAlertGenerator(unittest.TestCase):
    """Tests for RebalancingAlertGenerator."""

    def setUp(self):
        self.generator = RebalancingAlertGenerator()

    def test_no_alerts_on_target(self):
        """Holdings on target raise nothing."""
        self.assertEqual(self.generator.generate(TARGET, TARGET), [])

    def test_deviation_equal_to_threshold_is_not_an_alert(self):
        """Only deviations strictly above the threshold alert."""
        current = AllocationMix(65, 20, 10, 3, 1, 1)
        self.assertEqual(self.generator.generate(current, TARGET, 5.0), [])
        self.assertEqual(len(self.generator.generate(current, TARGET, 4.999)), 2)

    def test_alert_contents(self):
        """Alerts carry direction, urgency, action and impact text."""
        current = AllocationMix(66, 20, 9, 3, 1, 1)
        overweight, underweight = self.generator.generate(current, TARGET)

        self.assertEqual(overweight.asset_class, "stocks_domestic")
        self.assertEqual(overweight.alert_type, "overweight")
        self.assertEqual(overweight.current_allocation, 66)
        self.assertEqual(overweight.target_allocation, 60)
        self.assertAlmostEqual(overweight.deviation, 6)
        self.assertEqual(overweight.urgency, "low")
        self.assertEqual(overweight.suggested_action,
                         "Sell Stocks Domestic to reduce allocation by 6.0%")
        self.assertEqual(overweight.potential_impact,
                         "Rebalancing could improve risk-adjusted returns by ~0.6%")

        self.assertEqual(underweight.asset_class, "bonds")
        self.assertEqual(underweight.alert_type, "underweight")
        self.assertEqual(underweight.suggested_action,
                         "Buy Bonds to increase allocation by 6.0%")

    def test_sorted_by_deviation(self):
        """Largest deviation first."""
        current = AllocationMix(72, 14, 8, 3, 2, 1)
        alerts = self.generator.generate(current, TARGET)
        self.assertEqual([a.asset_class for a in alerts],
                         ["stocks_domestic", "bonds", "stocks_international"])
        self.assertEqual([a.urgency for a in alerts], ["high", "low", "low"])

    def test_default_threshold_from_constructor(self):
        """The constructor threshold applies when none is passed."""
        current = AllocationMix(62, 20, 13, 3, 1, 1)
        self.assertEqual(self.generator.generate(current, TARGET), [])
        strict = RebalancingAlertGenerator(deviation_threshold=1.0)
        self.assertEqual(len(strict.generate(current, TARGET)), 2)

    def test_negative_threshold_raises(self):
        """Negative thresholds are rejected by the constructor and per call."""
        with self.assertRaises(InvalidInput):
            self.generator.generate(TARGET, TARGET, -1)
        with self.assertRaises(InvalidInput):
            RebalancingAlertGenerator(deviation_threshold=-0.5)

    def test_urgency_levels(self):
        """High above 10 points, medium above 7, otherwise low."""
        self.assertEqual(urgency_for_deviation(10.01), "high")
        self.assertEqual(urgency_for_deviation(10), "medium")
        self.assertEqual(urgency_for_deviation(7.5), "medium")
        self.assertEqual(urgency_for_deviation(7), "low")

    def test_non_finite_threshold_raises(self):
        """NaN or infinite thresholds are rejected."""
        for threshold in (float("nan"), float("inf")):
            with self.subTest(threshold=threshold):
                with self.assertRaises(InvalidInput):
                    self.generator.generate(TARGET, TARGET, threshold)
                with self.assertRaises(InvalidInput):
                    RebalancingAlertGenerator(deviation_threshold=threshold)

    def test_to_dict(self):
        """Alerts serialize to plain dicts."""
        current = AllocationMix(66, 20, 9, 3, 1, 1)
        data = self.generator.generate(current, TARGET)[0].to_dict()
        self.assertEqual(data["asset_class"], "stocks_domestic")
        self.assertEqual(data["urgency"], "low")


if __name__ == '__main__':
    unittest.main()
