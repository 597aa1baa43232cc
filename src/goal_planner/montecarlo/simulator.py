# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation of a savings plan.

This module provides the MonteCarloSimulator class which runs independent
trial trajectories of monthly contributions and compounding and aggregates
them into a distribution of outcomes.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import numpy as np

from ..allocation import AllocationMix
from ..config import ALLOCATION_TOTAL, MAX_TRIAL_SEED, SAMPLING_BLOCK_MONTHS
from ..errors import CancelledError, InvalidInput, require_finite
from .config import MonteCarloConfig
from .market_assumptions import ReturnSampler
from .results import SimulationResult, aggregate_trajectories
from .risk_metrics import RiskMetricsComputer

logger = logging.getLogger(__name__)


class MonteCarloSimulator:
    """Runs Monte Carlo trials of contribution plus compounding.

    The workflow:
    1. Draw one seed per trial from the caller's generator
    2. For each trial, add the contribution and compound by a blended
       return of independently sampled asset class returns every month
    3. Aggregate the trajectories into percentiles, success probability
       and risk metrics

    Each trial owns a generator seeded in step 1, so the result is identical
    whatever the order in which trials run or the number of worker threads.

    Example:
        >>> simulator = MonteCarloSimulator(config=MonteCarloConfig(trial_count=1000))
        >>> result = simulator.run(mix, monthly_contribution=1000,
        ...                        initial_investment=50000, months_total=360,
        ...                        target_amount=1000000,
        ...                        rng=np.random.default_rng(42))
        >>> print(f"Success rate: {result.probability_of_success:.1%}")
    """

    def __init__(self,
                 sampler: Optional[ReturnSampler] = None,
                 config: Optional[MonteCarloConfig] = None):
        """Initialize the simulator.

        Args:
            sampler: Return sampler. If None, uses default assumptions.
            config: Simulation configuration. If None, uses defaults.
        """
        self.sampler = sampler or ReturnSampler.create_default()
        self.config = config or MonteCarloConfig()
        self.metrics = RiskMetricsComputer(self.config.risk_free_rate)

    def run(self,
            allocation: AllocationMix,
            monthly_contribution: float,
            initial_investment: float,
            months_total: int,
            target_amount: float,
            rng: np.random.Generator,
            trial_count: Optional[int] = None,
            cancel_event: Optional[threading.Event] = None,
            deadline: Optional[float] = None) -> SimulationResult:
        """Run the simulation and aggregate its outcome distribution.

        Args:
            allocation: Portfolio weights used to blend asset class returns
            monthly_contribution: Amount added at the start of every month
            initial_investment: Starting balance
            months_total: Number of months to simulate
            target_amount: Final value counted as success
            rng: Seeded generator; the engine never seeds itself
            trial_count: Number of trials. Defaults to config.trial_count.
            cancel_event: Set by the caller to stop the run
            deadline: ``time.monotonic()`` value after which the run stops

        Returns:
            SimulationResult over all trials

        Raises:
            InvalidInput: If an argument is not finite or violates its constraints
            CancelledError: If the run was cancelled or passed its deadline
        """
        if require_finite(target_amount, "target_amount") <= 0:
            raise InvalidInput("target_amount must be positive", {"target_amount": target_amount})
        trajectories = self.run_trials(allocation, monthly_contribution, initial_investment,
                                       months_total, rng, trial_count, cancel_event, deadline)
        metrics = self.metrics.compute(trajectories, initial_investment, monthly_contribution)
        result = aggregate_trajectories(trajectories, target_amount, metrics)
        logger.info("Simulated %d trials over %d months: success probability %.3f",
                    result.trial_count, result.months_total, result.probability_of_success)
        return result

    def run_trials(self,
                   allocation: AllocationMix,
                   monthly_contribution: float,
                   initial_investment: float,
                   months_total: int,
                   rng: np.random.Generator,
                   trial_count: Optional[int] = None,
                   cancel_event: Optional[threading.Event] = None,
                   deadline: Optional[float] = None) -> np.ndarray:
        """Run the trials without aggregating them.

        Returns:
            ``(trial_count, months_total)`` matrix; row i is trial i's value
            at the end of each month
        """
        trial_count = self.config.trial_count if trial_count is None else trial_count
        self._validate(monthly_contribution, initial_investment, months_total, trial_count)
        months_total, trial_count = int(months_total), int(trial_count)

        weights = np.array([allocation.weight(name) for name in self.sampler.asset_class_order])
        weights = weights / ALLOCATION_TOTAL
        seeds = rng.integers(0, MAX_TRIAL_SEED, size=trial_count)

        def run_chunk(chunk: Sequence[int]) -> List[np.ndarray]:
            paths = []
            for seed in chunk:
                paths.append(self._run_trial(int(seed), weights, monthly_contribution,
                                             initial_investment, months_total,
                                             cancel_event, deadline))
            return paths

        workers = min(self.config.max_workers, trial_count)
        logger.debug("Running %d trials of %d months on %d worker(s)",
                     trial_count, months_total, workers)
        if workers == 1:
            paths = run_chunk(seeds)
        else:
            chunks = np.array_split(seeds, workers)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                paths = [path for chunk_paths in executor.map(run_chunk, chunks)
                         for path in chunk_paths]

        _check_cancelled(cancel_event, deadline)
        return np.vstack(paths)

    def _run_trial(self, seed: int, weights: np.ndarray, monthly_contribution: float,
                   initial_investment: float, months_total: int,
                   cancel_event: Optional[threading.Event] = None,
                   deadline: Optional[float] = None) -> np.ndarray:
        """Simulate one trajectory from its own generator.

        Returns are sampled in blocks of ``SAMPLING_BLOCK_MONTHS``; the
        generator stream is the same as sampling every month at once.
        """
        trial_rng = np.random.default_rng(seed)
        path = np.empty(months_total)
        value = initial_investment
        for start in range(0, months_total, SAMPLING_BLOCK_MONTHS):
            _check_cancelled(cancel_event, deadline)
            block = min(SAMPLING_BLOCK_MONTHS, months_total - start)
            blended_returns = self.sampler.sample_monthly_returns(trial_rng, block) @ weights
            for offset in range(block):
                value += monthly_contribution
                value *= 1.0 + blended_returns[offset]
                path[start + offset] = value
        return path

    @staticmethod
    def _validate(monthly_contribution: float, initial_investment: float,
                  months_total: int, trial_count: int):
        for name, value in (("monthly_contribution", monthly_contribution),
                            ("initial_investment", initial_investment)):
            if require_finite(value, name) < 0:
                raise InvalidInput(f"{name} cannot be negative", {name: value})
        for name, value in (("months_total", months_total), ("trial_count", trial_count)):
            if (isinstance(value, bool) or require_finite(value, name) != int(value)
                    or value < 1):
                raise InvalidInput(f"{name} must be a positive integer", {name: value})


def _check_cancelled(cancel_event: Optional[threading.Event], deadline: Optional[float]):
    if cancel_event is not None and cancel_event.is_set():
        raise CancelledError("Simulation cancelled by caller")
    if deadline is not None and time.monotonic() >= deadline:
        raise CancelledError("Simulation passed its deadline", {"deadline": deadline})
