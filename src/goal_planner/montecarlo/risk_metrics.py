# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Risk metrics derived from Monte Carlo trial trajectories.

Max drawdown is the worst peak-to-trough decline observed in any single
trial across the whole trial set, not an average over trials.
"""

import logging
from typing import Optional

import numpy as np

from ..config import DEFAULT_RISK_FREE_RATE, MONTHS_PER_YEAR, VALUE_AT_RISK_PERCENTILE
from ..errors import ArithmeticDomainError, InvalidInput, require_ratio, safe_ratio
from .results import RiskMetrics, percentile_value

logger = logging.getLogger(__name__)


def max_drawdown(trajectories: np.ndarray) -> float:
    """Worst single-trial drawdown over a ``(trials, months)`` matrix.

    The running peak of each trial starts at its first recorded value. Months
    whose running peak is not positive contribute no drawdown.
    """
    peaks = np.maximum.accumulate(trajectories, axis=1)
    drawdowns = np.zeros_like(trajectories, dtype=float)
    np.divide(peaks - trajectories, peaks, out=drawdowns, where=peaks > 0)
    return float(drawdowns.max())


def annualized_returns(final_values: np.ndarray,
                       invested_capital: float,
                       months_total: int) -> np.ndarray:
    """Annualized return implied by each final value on the capital invested.

    A final value of zero or below is a total loss (-100%).

    Raises:
        ArithmeticDomainError: If no capital was invested
    """
    growth = require_ratio(1.0, invested_capital, "annualized return") * final_values
    growth = np.maximum(growth, 0.0)
    return growth ** (MONTHS_PER_YEAR / months_total) - 1.0


class RiskMetricsComputer:
    """Derives volatility, drawdown, Sharpe ratio and VaR from trajectories."""

    def __init__(self, risk_free_rate: Optional[float] = None):
        self.risk_free_rate = DEFAULT_RISK_FREE_RATE if risk_free_rate is None else risk_free_rate

    def compute(self,
                trajectories: np.ndarray,
                initial_investment: float,
                monthly_contribution: float) -> RiskMetrics:
        """Compute risk metrics.

        Args:
            trajectories: ``(trial_count, months_total)`` portfolio values
            initial_investment: Starting balance of every trial
            monthly_contribution: Amount added each month

        Returns:
            RiskMetrics. Ratios against a zero denominator are reported as 0.

        Raises:
            InvalidInput: If trajectories is not a non-empty 2-D matrix
        """
        trajectories = np.asarray(trajectories, dtype=float)
        if trajectories.ndim != 2 or trajectories.size == 0:
            raise InvalidInput("trajectories must be a non-empty (trials, months) matrix",
                               {"shape": list(trajectories.shape)})

        months_total = trajectories.shape[1]
        final_values = trajectories[:, -1]
        mean_final = float(np.mean(final_values))
        volatility = safe_ratio(float(np.std(final_values)), mean_final)

        return RiskMetrics(
            volatility=volatility,
            max_drawdown=max_drawdown(trajectories),
            sharpe_ratio=self._sharpe_ratio(final_values, volatility,
                                            initial_investment + monthly_contribution * months_total,
                                            months_total),
            value_at_risk_5=percentile_value(np.sort(final_values), VALUE_AT_RISK_PERCENTILE),
        )

    def _sharpe_ratio(self, final_values: np.ndarray, volatility: float,
                      invested_capital: float, months_total: int) -> float:
        try:
            mean_return = float(np.mean(annualized_returns(final_values, invested_capital,
                                                           months_total)))
        except ArithmeticDomainError as e:
            logger.warning("Sharpe ratio reported as 0: %s", e.message)
            return 0.0
        return safe_ratio(mean_return - self.risk_free_rate, volatility)
