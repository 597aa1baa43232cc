# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Investor risk profiling from questionnaire answers and behavioral signals.
"""

from .questionnaire import (
    QuestionResponse,
    QuestionOption,
    RiskQuestion,
    RISK_ASSESSMENT_QUESTIONS,
    build_response,
    build_responses,
)
from .behavioral import (
    BehavioralFactors,
    BehavioralScoringConfig,
    behavioral_score,
    derive_behavioral_factors,
)
from .risk_profile import RiskProfile, RiskProfileCalculator, category_for_score

__all__ = [
    'QuestionResponse',
    'QuestionOption',
    'RiskQuestion',
    'RISK_ASSESSMENT_QUESTIONS',
    'build_response',
    'build_responses',
    'BehavioralFactors',
    'BehavioralScoringConfig',
    'behavioral_score',
    'derive_behavioral_factors',
    'RiskProfile',
    'RiskProfileCalculator',
    'category_for_score',
]
