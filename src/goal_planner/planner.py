# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Goal-level planning: target allocation, simulated outcome, rebalancing
alerts and instrument recommendations for one goal.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from .allocation import AllocationMix, AllocationResolver
from .goals import DateLike, InvestmentGoal
from .montecarlo import MonteCarloConfig, MonteCarloSimulator, SimulationResult
from .profiling import RiskProfile
from .rebalancing import RebalancingAlert, RebalancingAlertGenerator
from .recommendations import InvestmentRecommendation, RecommendationGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoalPlan:
    """Target allocation for a goal and the simulated outcome of holding it."""
    allocation: AllocationMix
    result: SimulationResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allocation": self.allocation.as_dict(),
            "result": self.result.to_dict(),
        }


class GoalPlanner:
    """Composes allocation resolution and simulation for an InvestmentGoal.

    Example:
        >>> planner = GoalPlanner()
        >>> plan = planner.plan(goal, profile, np.random.default_rng(7),
        ...                     now=date(2025, 1, 1))
        >>> plan.result.probability_of_success
    """

    def __init__(self,
                 config: Optional[MonteCarloConfig] = None,
                 simulator: Optional[MonteCarloSimulator] = None,
                 resolver: Optional[AllocationResolver] = None,
                 alert_generator: Optional[RebalancingAlertGenerator] = None,
                 recommendation_generator: Optional[RecommendationGenerator] = None):
        self.config = config or MonteCarloConfig()
        self.simulator = simulator or MonteCarloSimulator(config=self.config)
        self.resolver = resolver or AllocationResolver()
        self.alert_generator = alert_generator or RebalancingAlertGenerator()
        self.recommendation_generator = recommendation_generator or RecommendationGenerator()

    def target_allocation(self, goal: InvestmentGoal, category: str, now: DateLike) -> AllocationMix:
        """Resolve the allocation for a goal given the investor's risk category.

        Raises:
            InvalidInput: If the goal date is not after ``now`` or the
                          category is unknown
        """
        return self.resolver.resolve(category, goal.years_until(now))

    def simulate(self,
                 goal: InvestmentGoal,
                 allocation: AllocationMix,
                 rng: np.random.Generator,
                 now: DateLike,
                 trial_count: Optional[int] = None,
                 cancel_event: Optional[threading.Event] = None,
                 deadline: Optional[float] = None) -> SimulationResult:
        """Simulate the goal's savings plan from its current amount to its date.

        Raises:
            InvalidInput: If the goal date is not after ``now``
            CancelledError: If the run was cancelled or passed its deadline
        """
        months_total = goal.months_until(now)
        return self.simulator.run(
            allocation,
            monthly_contribution=goal.monthly_contribution,
            initial_investment=goal.current_amount,
            months_total=months_total,
            target_amount=goal.target_amount,
            rng=rng,
            trial_count=trial_count,
            cancel_event=cancel_event,
            deadline=deadline,
        )

    def plan(self,
             goal: InvestmentGoal,
             profile: RiskProfile,
             rng: np.random.Generator,
             now: DateLike,
             **simulate_kwargs) -> GoalPlan:
        """Resolve the goal's target allocation and simulate it."""
        allocation = self.target_allocation(goal, profile.category, now)
        result = self.simulate(goal, allocation, rng, now, **simulate_kwargs)
        logger.info("Planned goal %r: %s allocation, success probability %.3f",
                    goal.name, profile.category, result.probability_of_success)
        return GoalPlan(allocation=allocation, result=result)

    def rebalancing_alerts(self,
                           goal: InvestmentGoal,
                           profile: RiskProfile,
                           current: AllocationMix,
                           now: DateLike,
                           deviation_threshold: Optional[float] = None) -> List[RebalancingAlert]:
        """Compare current holdings against the goal's target allocation."""
        target = self.target_allocation(goal, profile.category, now)
        return self.alert_generator.generate(current, target, deviation_threshold)

    def recommendations(self,
                        goal: InvestmentGoal,
                        profile: RiskProfile,
                        now: DateLike) -> List[InvestmentRecommendation]:
        """Suggest instruments for the goal's target allocation and account type."""
        target = self.target_allocation(goal, profile.category, now)
        return self.recommendation_generator.generate(goal, target, now)
