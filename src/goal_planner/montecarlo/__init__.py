# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation module for probabilistic savings plan outcomes.

This module samples monthly asset class returns, runs independent trial
trajectories of a savings plan and derives outcome percentiles and risk
metrics from them.
"""

from .config import MonteCarloConfig
from .market_assumptions import AssetClassAssumptions, ReturnSampler
from .results import MonthlyProjection, RiskMetrics, SimulationResult
from .risk_metrics import RiskMetricsComputer
from .simulator import MonteCarloSimulator

__all__ = [
    'MonteCarloConfig',
    'AssetClassAssumptions',
    'ReturnSampler',
    'MonthlyProjection',
    'RiskMetrics',
    'SimulationResult',
    'RiskMetricsComputer',
    'MonteCarloSimulator',
]
