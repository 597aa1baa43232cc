# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Configuration for Monte Carlo simulations."""

from dataclasses import dataclass

from ..config import DEFAULT_RISK_FREE_RATE, DEFAULT_TRIAL_COUNT
from ..errors import InvalidInput, require_finite


@dataclass(frozen=True)
class MonteCarloConfig:
    """Configuration for Monte Carlo simulation parameters.
    
    Attributes:
        trial_count: Number of independent trials to run. Default 1000.
        max_workers: Worker threads used to run trials. Default 1 (inline).
            Results do not depend on this value.
        risk_free_rate: Annual risk-free rate used by the Sharpe ratio.
    """
    trial_count: int = DEFAULT_TRIAL_COUNT
    max_workers: int = 1
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE
    
    def __post_init__(self):
        require_finite(self.risk_free_rate, "risk_free_rate")
        if not self.trial_count >= 1:
            raise InvalidInput("trial_count must be at least 1")
        if not self.max_workers >= 1:
            raise InvalidInput("max_workers must be at least 1")
