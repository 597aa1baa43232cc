# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for questionnaire scoring, behavioral scoring and risk profiles.
"""

import unittest

from ..errors import InvalidInput
from ..profiling.behavioral import (
    DEFAULT_INCOME_STABILITY,
    DEFAULT_SPENDING_VOLATILITY,
    BehavioralFactors,
    BehavioralScoringConfig,
    behavioral_score,
    derive_behavioral_factors,
)
from ..profiling.questionnaire import (
    RISK_ASSESSMENT_QUESTIONS,
    QuestionResponse,
    build_response,
    build_responses,
    total_weight,
)
from ..profiling.risk_profile import RiskProfileCalculator, category_for_score, round_half_up


def make_factors(**overrides):
    """Factors that leave the neutral behavioral score of 50 untouched."""
    values = dict(age=50, emergency_fund_ratio=4, debt_to_income_ratio=0.3,
                  investment_experience_years=0, income_stability=5,
                  spending_volatility=0)
    values.update(overrides)
    return BehavioralFactors(**values)


class TestQuestionnaire(unittest.TestCase):
    """Tests for the standard question bank."""

    def test_bank_weights_sum_to_one(self):
        """The standard bank's weights sum to 1."""
        self.assertAlmostEqual(sum(q.weight for q in RISK_ASSESSMENT_QUESTIONS), 1.0)

    def test_build_response_maps_option_score(self):
        """An option maps to its sub-score, weight and label."""
        response = build_response("volatility_comfort", 4)
        self.assertEqual(response.sub_score, 80)
        self.assertEqual(response.weight, 0.30)
        self.assertEqual(response.answer, "Buy more while prices are low")

    def test_build_responses_in_bank_order(self):
        """Responses come back in bank order whatever the input order."""
        responses = build_responses({"experience": 1, "time_horizon": 5,
                                     "priority": 2, "volatility_comfort": 1})
        self.assertEqual([r.question_id for r in responses],
                         ["time_horizon", "volatility_comfort", "priority", "experience"])
        self.assertAlmostEqual(total_weight(responses), 1.0)

    def test_unknown_question_or_option_raises(self):
        """Unknown questions and options are rejected."""
        with self.assertRaises(InvalidInput):
            build_response("favorite_color", 1)
        with self.assertRaises(InvalidInput):
            build_response("time_horizon", 9)

    def test_sub_score_out_of_range_raises(self):
        """Sub-scores outside 0-100 and negative weights are rejected."""
        with self.assertRaises(InvalidInput):
            QuestionResponse("q", "a", sub_score=101, weight=1.0)
        with self.assertRaises(ValueError):
            QuestionResponse("q", "a", sub_score=50, weight=-0.1)

    def test_non_finite_response_raises(self):
        """NaN or infinite sub-scores and weights are rejected up front."""
        for kwargs in (dict(sub_score=float("nan"), weight=1.0),
                       dict(sub_score=50, weight=float("nan")),
                       dict(sub_score=50, weight=float("inf"))):
            with self.subTest(**kwargs):
                with self.assertRaises(InvalidInput):
                    QuestionResponse("q", "a", **kwargs)


class TestBehavioralScore(unittest.TestCase):
    """Tests for behavioral scoring."""

    def test_neutral_factors(self):
        """Neutral factors score exactly 50."""
        self.assertEqual(behavioral_score(make_factors()), 50)

    def test_adjustments_accumulate(self):
        """Age, fund, debt, stability, experience and spending adjustments add up."""
        factors = make_factors(age=35, emergency_fund_ratio=6, debt_to_income_ratio=0.15,
                               investment_experience_years=5, income_stability=8,
                               spending_volatility=2)
        # 50 + 10 + 15 + 10 + 9 + 10 - 20
        self.assertAlmostEqual(behavioral_score(factors), 84)

    def test_experience_bonus_is_capped(self):
        """Experience adds 2 points a year up to 10."""
        self.assertEqual(behavioral_score(make_factors(investment_experience_years=3)), 56)
        self.assertEqual(behavioral_score(make_factors(investment_experience_years=30)), 60)

    def test_clamped_to_range(self):
        """Scores are clamped to [10, 90]."""
        worst = make_factors(age=65, emergency_fund_ratio=1, debt_to_income_ratio=0.5,
                             income_stability=0, spending_volatility=10)
        best = make_factors(age=25, emergency_fund_ratio=12, debt_to_income_ratio=0,
                            investment_experience_years=20, income_stability=10)
        self.assertEqual(behavioral_score(worst), 10)
        self.assertEqual(behavioral_score(best), 90)

    def test_invalid_factors_raise(self):
        """Negative or out-of-scale factors are rejected."""
        with self.assertRaises(InvalidInput):
            make_factors(age=-1)
        with self.assertRaises(InvalidInput):
            make_factors(income_stability=11)
        with self.assertRaises(InvalidInput):
            make_factors(spending_volatility=-0.5)

    def test_non_finite_factors_raise(self):
        """Every factor must be a finite number."""
        for name in ("age", "emergency_fund_ratio", "debt_to_income_ratio",
                     "investment_experience_years", "income_stability",
                     "spending_volatility"):
            with self.subTest(factor=name):
                with self.assertRaises(InvalidInput):
                    make_factors(**{name: float("nan")})

    def test_invalid_scoring_config_raises(self):
        """min_score above max_score is rejected."""
        with self.assertRaises(InvalidInput):
            BehavioralScoringConfig(min_score=80, max_score=20)


class TestDeriveBehavioralFactors(unittest.TestCase):
    """Tests for deriving factors from cash-flow history."""

    def test_short_history_uses_defaults(self):
        """Fewer than two observations fall back to default signals."""
        factors = derive_behavioral_factors(
            age=40, monthly_spending=[3000], income_intervals_days=[14],
            emergency_savings=9000, monthly_debt_payments=500,
            monthly_income=5000, investment_experience_years=2)
        self.assertEqual(factors.spending_volatility, DEFAULT_SPENDING_VOLATILITY)
        self.assertEqual(factors.income_stability, DEFAULT_INCOME_STABILITY)
        self.assertAlmostEqual(factors.emergency_fund_ratio, 3.0)
        self.assertAlmostEqual(factors.debt_to_income_ratio, 0.1)

    def test_steady_history(self):
        """Perfectly regular history is maximally stable."""
        factors = derive_behavioral_factors(
            age=40, monthly_spending=[2000, 2000, 2000],
            income_intervals_days=[14, 14, 14], emergency_savings=12000,
            monthly_debt_payments=0, monthly_income=6000,
            investment_experience_years=2)
        self.assertEqual(factors.spending_volatility, 0.0)
        self.assertEqual(factors.income_stability, 10.0)
        self.assertAlmostEqual(factors.emergency_fund_ratio, 6.0)

    def test_zero_denominators_report_zero(self):
        """Ratios against zero spending or income are 0."""
        factors = derive_behavioral_factors(
            age=30, monthly_spending=[], income_intervals_days=[],
            emergency_savings=1000, monthly_debt_payments=200,
            monthly_income=0, investment_experience_years=0)
        self.assertEqual(factors.emergency_fund_ratio, 0.0)
        self.assertEqual(factors.debt_to_income_ratio, 0.0)

    def test_negative_amount_raises(self):
        """Negative cash-flow amounts are rejected."""
        with self.assertRaises(InvalidInput):
            derive_behavioral_factors(
                age=30, monthly_spending=[], income_intervals_days=[],
                emergency_savings=-1, monthly_debt_payments=0,
                monthly_income=1000, investment_experience_years=0)

    def test_non_finite_inputs_raise(self):
        """NaN amounts or series values are rejected."""
        base = dict(age=30, monthly_spending=[2000, 2100], income_intervals_days=[14, 14],
                    emergency_savings=1000, monthly_debt_payments=0,
                    monthly_income=1000, investment_experience_years=0)
        invalid = [
            dict(emergency_savings=float("nan")),
            dict(monthly_income=float("inf")),
            dict(monthly_spending=[2000, float("nan")]),
            dict(income_intervals_days=[14, float("inf")]),
            dict(age=float("nan")),
        ]
        for overrides in invalid:
            with self.subTest(**{k: str(v) for k, v in overrides.items()}):
                with self.assertRaises(InvalidInput):
                    derive_behavioral_factors(**dict(base, **overrides))


class TestRiskProfileCalculator(unittest.TestCase):
    """Tests for RiskProfileCalculator."""

    def setUp(self):
        self.calculator = RiskProfileCalculator()

    def test_worked_example(self):
        """Blend of questionnaire and behavioral scores for a typical investor."""
        responses = build_responses({"time_horizon": 4, "volatility_comfort": 3,
                                     "priority": 3, "experience": 2})
        factors = make_factors(age=35, emergency_fund_ratio=6, debt_to_income_ratio=0.15,
                               investment_experience_years=5, income_stability=8,
                               spending_volatility=2)
        profile = self.calculator.calculate(responses, factors)

        self.assertAlmostEqual(profile.questionnaire_score, 58)
        self.assertAlmostEqual(profile.behavioral_score, 84)
        # 0.7 * 58 + 0.3 * 84 = 65.8
        self.assertEqual(profile.overall_score, 66)
        self.assertEqual(profile.category, "moderate")
        self.assertEqual(profile.confidence_score, 84)
        self.assertEqual(profile.responses, tuple(responses))
        self.assertIs(profile.factors, factors)

    def test_overall_score_rounds_half_up(self):
        """60.5 rounds to 61."""
        responses = [QuestionResponse("q", "a", sub_score=65, weight=1.0)]
        profile = self.calculator.calculate(responses, make_factors())
        # 0.7 * 65 + 0.3 * 50 = 60.5
        self.assertEqual(profile.overall_score, 61)

    def test_round_half_up(self):
        """Halves round up."""
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(0.5), 1)

    def test_category_boundaries(self):
        """Up to 40 conservative, up to 70 moderate, above aggressive."""
        self.assertEqual(category_for_score(0), "conservative")
        self.assertEqual(category_for_score(40), "conservative")
        self.assertEqual(category_for_score(41), "moderate")
        self.assertEqual(category_for_score(70), "moderate")
        self.assertEqual(category_for_score(71), "aggressive")
        self.assertEqual(category_for_score(100), "aggressive")

    def test_confidence_floor(self):
        """Confidence never drops below 60."""
        responses = [QuestionResponse("a", 1, sub_score=0, weight=0.5),
                     QuestionResponse("b", 2, sub_score=100, weight=0.5)]
        factors = make_factors(age=20, debt_to_income_ratio=0.6)
        # 85 - 10 - 15 - 10 = 50, floored
        self.assertEqual(self.calculator.confidence_score(responses, factors), 60)

    def test_confidence_consistent_answers(self):
        """Consistent answers with no penalties score 85."""
        responses = [QuestionResponse("a", 1, sub_score=50, weight=1.0)]
        factors = make_factors(investment_experience_years=3, emergency_fund_ratio=4)
        self.assertEqual(self.calculator.confidence_score(responses, factors), 85)

    def test_empty_responses_raise(self):
        """At least one response is required."""
        with self.assertRaises(InvalidInput):
            self.calculator.calculate([], make_factors())

    def test_weights_must_sum_to_one(self):
        """Questionnaire weights must sum to 1."""
        responses = [QuestionResponse("a", 1, sub_score=50, weight=0.5),
                     QuestionResponse("b", 1, sub_score=50, weight=0.4)]
        with self.assertRaises(InvalidInput):
            self.calculator.calculate(responses, make_factors())

    def test_same_inputs_same_profile(self):
        """Scoring is deterministic."""
        responses = build_responses({"time_horizon": 5, "volatility_comfort": 4,
                                     "priority": 4, "experience": 4})
        first = self.calculator.calculate(responses, make_factors(age=28))
        second = self.calculator.calculate(responses, make_factors(age=28))
        self.assertEqual(first, second)
        self.assertEqual(first.category, "aggressive")


if __name__ == '__main__':
    unittest.main()
