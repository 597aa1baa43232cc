# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Behavioral risk factors and their scoring.

Behavioral factors complement the questionnaire with signals taken from the
investor's finances. Callers either provide them directly or derive them from
simple cash-flow series with :func:`derive_behavioral_factors`.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..errors import InvalidInput, require_finite, safe_ratio


@dataclass(frozen=True)
class BehavioralFactors:
    """Behavioral signals about an investor.

    Attributes:
        age: Age in years
        emergency_fund_ratio: Months of expenses covered by savings
        debt_to_income_ratio: Monthly debt payments / monthly income (0-1+)
        investment_experience_years: Years of investing experience
        income_stability: 0 (erratic) to 10 (very stable)
        spending_volatility: 0 (steady) to 10 (very volatile)
    """
    age: float
    emergency_fund_ratio: float
    debt_to_income_ratio: float
    investment_experience_years: float
    income_stability: float
    spending_volatility: float

    def __post_init__(self):
        for name in ("age", "emergency_fund_ratio", "debt_to_income_ratio",
                     "investment_experience_years"):
            value = require_finite(getattr(self, name), name)
            if value < 0:
                raise InvalidInput(f"{name} cannot be negative: {value}")
        for name in ("income_stability", "spending_volatility"):
            value = require_finite(getattr(self, name), name)
            if not 0 <= value <= 10:
                raise InvalidInput(f"{name} must be within 0-10: {value}")


@dataclass(frozen=True)
class BehavioralScoringConfig:
    """Adjustments applied to the neutral behavioral score.

    Age, emergency fund and debt thresholds are compared in the order given;
    ``income_stability_factor`` multiplies the distance from the neutral 5.
    """
    neutral_score: float = 50.0
    young_age: float = 30
    young_age_bonus: float = 20.0
    mid_age: float = 40
    mid_age_bonus: float = 10.0
    senior_age: float = 60
    senior_age_penalty: float = 20.0
    strong_emergency_fund_months: float = 6
    strong_emergency_fund_bonus: float = 15.0
    weak_emergency_fund_months: float = 3
    weak_emergency_fund_penalty: float = 15.0
    high_debt_to_income: float = 0.4
    high_debt_penalty: float = 20.0
    low_debt_to_income: float = 0.2
    low_debt_bonus: float = 10.0
    income_stability_neutral: float = 5.0
    income_stability_factor: float = 3.0
    experience_points_per_year: float = 2.0
    max_experience_bonus: float = 10.0
    spending_volatility_factor: float = 10.0
    min_score: float = 10.0
    max_score: float = 90.0

    def __post_init__(self):
        if self.min_score > self.max_score:
            raise InvalidInput("min_score cannot exceed max_score")


def behavioral_score(factors: BehavioralFactors,
                     config: Optional[BehavioralScoringConfig] = None) -> float:
    """Score behavioral factors on the [min_score, max_score] scale.

    Args:
        factors: Behavioral signals of the investor
        config: Scoring adjustments. Defaults to BehavioralScoringConfig().

    Returns:
        Score clamped to [10, 90] with the default config
    """
    cfg = config or BehavioralScoringConfig()
    score = cfg.neutral_score

    if factors.age < cfg.young_age:
        score += cfg.young_age_bonus
    elif factors.age < cfg.mid_age:
        score += cfg.mid_age_bonus
    elif factors.age > cfg.senior_age:
        score -= cfg.senior_age_penalty

    if factors.emergency_fund_ratio >= cfg.strong_emergency_fund_months:
        score += cfg.strong_emergency_fund_bonus
    elif factors.emergency_fund_ratio < cfg.weak_emergency_fund_months:
        score -= cfg.weak_emergency_fund_penalty

    if factors.debt_to_income_ratio > cfg.high_debt_to_income:
        score -= cfg.high_debt_penalty
    elif factors.debt_to_income_ratio < cfg.low_debt_to_income:
        score += cfg.low_debt_bonus

    score += (factors.income_stability - cfg.income_stability_neutral) * cfg.income_stability_factor
    score += min(factors.investment_experience_years * cfg.experience_points_per_year,
                 cfg.max_experience_bonus)
    score -= factors.spending_volatility * cfg.spending_volatility_factor

    return max(cfg.min_score, min(cfg.max_score, score))


# Used when there is too little history to measure a signal
DEFAULT_SPENDING_VOLATILITY = 5.0
DEFAULT_INCOME_STABILITY = 7.0


def spending_volatility_from_history(monthly_spending: Sequence[float]) -> float:
    """Scale the coefficient of variation of monthly spending to 0-10."""
    values = np.asarray(monthly_spending, dtype=float)
    if len(values) < 2:
        return DEFAULT_SPENDING_VOLATILITY
    mean = float(np.mean(values))
    cv = safe_ratio(float(np.std(values)), mean)
    return float(min(max(cv * 10, 0.0), 10.0))


def income_stability_from_intervals(income_intervals_days: Sequence[float]) -> float:
    """Score the regularity of paychecks; lower interval dispersion is more stable."""
    intervals = np.asarray(income_intervals_days, dtype=float)
    if len(intervals) < 2:
        return DEFAULT_INCOME_STABILITY
    cv = safe_ratio(float(np.std(intervals)), float(np.mean(intervals)))
    return float(max(1.0, min(10.0, 10.0 - cv * 5)))


def derive_behavioral_factors(age: float,
                              monthly_spending: Sequence[float],
                              income_intervals_days: Sequence[float],
                              emergency_savings: float,
                              monthly_debt_payments: float,
                              monthly_income: float,
                              investment_experience_years: float) -> BehavioralFactors:
    """Derive behavioral factors from simple cash-flow series.

    Args:
        age: Investor age in years
        monthly_spending: Total spending per month, oldest first
        income_intervals_days: Days between consecutive income deposits
        emergency_savings: Liquid savings set aside for emergencies
        monthly_debt_payments: Recurring monthly debt service
        monthly_income: Average monthly income
        investment_experience_years: Years of investing experience

    Returns:
        BehavioralFactors. Ratios against a zero denominator are reported as 0.

    Raises:
        InvalidInput: If an amount is negative or a value is not finite
    """
    for name, value in (("emergency_savings", emergency_savings),
                        ("monthly_debt_payments", monthly_debt_payments),
                        ("monthly_income", monthly_income)):
        if require_finite(value, name) < 0:
            raise InvalidInput(f"{name} cannot be negative: {value}")
    for name, series in (("monthly_spending", monthly_spending),
                         ("income_intervals_days", income_intervals_days)):
        if not np.all(np.isfinite(np.asarray(series, dtype=float))):
            raise InvalidInput(f"{name} must contain only finite numbers")

    average_spending = float(np.mean(monthly_spending)) if len(monthly_spending) else 0.0
    return BehavioralFactors(
        age=age,
        emergency_fund_ratio=safe_ratio(emergency_savings, average_spending),
        debt_to_income_ratio=safe_ratio(monthly_debt_payments, monthly_income),
        investment_experience_years=investment_experience_years,
        income_stability=income_stability_from_intervals(income_intervals_days),
        spending_volatility=spending_volatility_from_history(monthly_spending),
    )
