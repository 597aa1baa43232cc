# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Goal Planning Engine

Scores an investor's risk tolerance, maps it to a target asset allocation for
a goal horizon, simulates the savings plan with Monte Carlo trials and flags
holdings that have drifted from their target. Goals also get instrument
suggestions matched to their account type.

Example usage:
    from datetime import date
    import numpy as np
    from goal_planner import (GoalPlanner, InvestmentGoal, RiskProfileCalculator,
                              BehavioralFactors, build_responses)

    responses = build_responses({'time_horizon': 4, 'volatility_comfort': 3,
                                 'priority': 3, 'experience': 2})
    factors = BehavioralFactors(age=35, emergency_fund_ratio=6,
                                debt_to_income_ratio=0.15,
                                investment_experience_years=5,
                                income_stability=8, spending_volatility=2)
    profile = RiskProfileCalculator().calculate(responses, factors)

    goal = InvestmentGoal(target_amount=1_000_000, target_date=date(2055, 1, 1),
                          current_amount=50_000, monthly_contribution=1_000)
    plan = GoalPlanner().plan(goal, profile, np.random.default_rng(42),
                              now=date(2025, 1, 1))
    df = plan.result.to_dataframe()
"""

# Errors
from .errors import PlannerError, InvalidInput, ArithmeticDomainError, CancelledError

# Risk profiling
from .profiling import (
    QuestionResponse,
    RiskQuestion,
    RISK_ASSESSMENT_QUESTIONS,
    build_response,
    build_responses,
    BehavioralFactors,
    derive_behavioral_factors,
    RiskProfile,
    RiskProfileCalculator,
)

# Allocation
from .allocation import AllocationMix, AllocationResolver

# Monte Carlo Simulation
from .montecarlo import (
    MonteCarloConfig,
    ReturnSampler,
    MonthlyProjection,
    RiskMetrics,
    SimulationResult,
    RiskMetricsComputer,
    MonteCarloSimulator,
)

# Rebalancing
from .rebalancing import RebalancingAlert, RebalancingAlertGenerator

# Recommendations
from .recommendations import (
    BrokerLink,
    Instrument,
    InvestmentRecommendation,
    RecommendationGenerator,
)

# Goals
from .goals import InvestmentGoal
from .planner import GoalPlan, GoalPlanner

# Version
from .__meta__ import __version__

__all__ = [
    # Errors
    'PlannerError', 'InvalidInput', 'ArithmeticDomainError', 'CancelledError',
    # Risk profiling
    'QuestionResponse', 'RiskQuestion', 'RISK_ASSESSMENT_QUESTIONS',
    'build_response', 'build_responses', 'BehavioralFactors',
    'derive_behavioral_factors', 'RiskProfile', 'RiskProfileCalculator',
    # Allocation
    'AllocationMix', 'AllocationResolver',
    # Monte Carlo
    'MonteCarloConfig', 'ReturnSampler', 'MonthlyProjection', 'RiskMetrics',
    'SimulationResult', 'RiskMetricsComputer', 'MonteCarloSimulator',
    # Rebalancing
    'RebalancingAlert', 'RebalancingAlertGenerator',
    # Recommendations
    'BrokerLink', 'Instrument', 'InvestmentRecommendation', 'RecommendationGenerator',
    # Goals
    'InvestmentGoal', 'GoalPlan', 'GoalPlanner',
    # Version
    '__version__',
]
