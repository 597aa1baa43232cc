# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation results aggregation.

Percentiles are order statistics: values are sorted ascending and the value
at index ``floor(n * p)`` is taken, without interpolation.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd

from ..config import HIGH_PERCENTILE, LOW_PERCENTILE, MEDIAN_PERCENTILE
from ..errors import InvalidInput


def order_statistic_index(n: int, p: float) -> int:
    """Index of percentile ``p`` in a sorted sample of size ``n``.

    Raises:
        InvalidInput: If the sample is empty or p is outside [0, 1]
    """
    if n < 1:
        raise InvalidInput("Cannot take a percentile of an empty sample")
    if not 0 <= p <= 1:
        raise InvalidInput(f"Percentile must be within [0, 1]: {p}")
    return min(int(math.floor(n * p)), n - 1)


def percentile_value(sorted_values: np.ndarray, p: float) -> float:
    """Value at percentile ``p`` of values already sorted ascending."""
    return float(sorted_values[order_statistic_index(len(sorted_values), p)])


@dataclass(frozen=True)
class RiskMetrics:
    """Risk metrics derived from a set of trial trajectories.

    Attributes:
        volatility: Coefficient of variation of final values
        max_drawdown: Worst peak-to-trough decline of any single trial
        sharpe_ratio: Excess annualized return over the risk-free rate per
                      unit of volatility
        value_at_risk_5: 5th percentile of final values
    """
    volatility: float
    max_drawdown: float
    sharpe_ratio: float
    value_at_risk_5: float


@dataclass(frozen=True)
class MonthlyProjection:
    """Cross-trial distribution of portfolio value for one month."""
    month: int
    median_value: float
    percentile_10: float
    percentile_90: float
    probability_above_goal: float


@dataclass(frozen=True)
class SimulationResult:
    """Outcome distribution of a Monte Carlo simulation.

    Produced per call and never retained by the engine.

    Attributes:
        probability_of_success: Share of trials whose final value reached the target
        median_outcome: Median final value
        percentile_10: 10th percentile final value
        percentile_90: 90th percentile final value
        monthly_projections: One projection per simulated month, in order
        risk_metrics: Risk metrics derived from all trajectories
        trial_count: Number of trials aggregated
        months_total: Number of simulated months
    """
    probability_of_success: float
    median_outcome: float
    percentile_10: float
    percentile_90: float
    monthly_projections: Tuple[MonthlyProjection, ...]
    risk_metrics: RiskMetrics
    trial_count: int
    months_total: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python types for JSON serialization."""
        data = asdict(self)
        data["monthly_projections"] = [asdict(p) for p in self.monthly_projections]
        return data

    def to_dataframe(self) -> pd.DataFrame:
        """Get monthly projections as a DataFrame with month as index."""
        df = pd.DataFrame([asdict(p) for p in self.monthly_projections],
                          columns=["month", "median_value", "percentile_10",
                                   "percentile_90", "probability_above_goal"])
        return df.set_index("month")

    def __repr__(self) -> str:
        return (f"SimulationResult(probability_of_success={self.probability_of_success:.3f}, "
                f"trial_count={self.trial_count}, months_total={self.months_total})")


def aggregate_trajectories(trajectories: np.ndarray,
                           target_amount: float,
                           risk_metrics: RiskMetrics) -> SimulationResult:
    """Aggregate a ``(trial_count, months_total)`` matrix of trial values.

    The same floor-index rule is applied to the final-value distribution and
    to each month's cross-trial distribution. The result does not depend on
    the order of the trials.
    """
    trial_count, months_total = trajectories.shape
    ordered = np.sort(trajectories, axis=0)

    medians = ordered[order_statistic_index(trial_count, MEDIAN_PERCENTILE)]
    lows = ordered[order_statistic_index(trial_count, LOW_PERCENTILE)]
    highs = ordered[order_statistic_index(trial_count, HIGH_PERCENTILE)]
    above_goal = np.count_nonzero(trajectories >= target_amount, axis=0) / trial_count

    projections: List[MonthlyProjection] = [
        MonthlyProjection(
            month=month + 1,
            median_value=float(medians[month]),
            percentile_10=float(lows[month]),
            percentile_90=float(highs[month]),
            probability_above_goal=float(above_goal[month]),
        )
        for month in range(months_total)
    ]

    final = projections[-1]
    return SimulationResult(
        probability_of_success=final.probability_above_goal,
        median_outcome=final.median_value,
        percentile_10=final.percentile_10,
        percentile_90=final.percentile_90,
        monthly_projections=tuple(projections),
        risk_metrics=risk_metrics,
        trial_count=trial_count,
        months_total=months_total,
    )
