# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Risk profile scoring.

This module turns questionnaire responses and behavioral factors into a risk
score, a risk category and a confidence score.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from ..config import (
    AGGRESSIVE,
    BASE_CONFIDENCE,
    BEHAVIORAL_BLEND,
    CONSERVATIVE,
    CONSERVATIVE_MAX_SCORE,
    FRAGILE_DEBT_TO_INCOME,
    FRAGILE_EMERGENCY_FUND_MONTHS,
    FRAGILE_FINANCES_PENALTY,
    MAX_CONFIDENCE,
    MAX_OVERALL_SCORE,
    MIN_CONFIDENCE,
    MIN_OVERALL_SCORE,
    MODERATE,
    MODERATE_MAX_SCORE,
    QUESTION_WEIGHT_TOLERANCE,
    QUESTIONNAIRE_BLEND,
    RESPONSE_DISPERSION_PENALTY,
    THIN_HISTORY_AGE,
    THIN_HISTORY_EXPERIENCE_YEARS,
    THIN_HISTORY_PENALTY,
)
from ..errors import InvalidInput
from .behavioral import BehavioralFactors, BehavioralScoringConfig, behavioral_score
from .questionnaire import QuestionResponse, total_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskProfile:
    """Immutable result of a completed risk assessment.

    A new assessment produces a new RiskProfile; profiles are never updated.

    Attributes:
        overall_score: Blended score, 0-100
        category: conservative, moderate or aggressive
        confidence_score: Confidence in the classification, 60-95
        questionnaire_score: Weighted questionnaire score
        behavioral_score: Behavioral score, 10-90
        responses: Snapshot of the responses used
        factors: Snapshot of the behavioral factors used
    """
    overall_score: int
    category: str
    confidence_score: int
    questionnaire_score: float
    behavioral_score: float
    responses: Tuple[QuestionResponse, ...]
    factors: BehavioralFactors


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def category_for_score(score: int) -> str:
    """Classify a score; each boundary belongs to the lower category."""
    if score <= CONSERVATIVE_MAX_SCORE:
        return CONSERVATIVE
    if score <= MODERATE_MAX_SCORE:
        return MODERATE
    return AGGRESSIVE


class RiskProfileCalculator:
    """Computes a RiskProfile from questionnaire responses and behavior.

    Example:
        >>> calc = RiskProfileCalculator()
        >>> profile = calc.calculate(build_responses({...}), factors)
        >>> profile.category
        'moderate'
    """

    def __init__(self, scoring_config: Optional[BehavioralScoringConfig] = None):
        self.scoring_config = scoring_config or BehavioralScoringConfig()

    def calculate(self,
                  responses: Sequence[QuestionResponse],
                  factors: BehavioralFactors) -> RiskProfile:
        """Score a completed assessment.

        Args:
            responses: Non-empty list of responses whose weights sum to 1
            factors: Behavioral factors of the investor

        Returns:
            A new RiskProfile

        Raises:
            InvalidInput: If responses is empty or weights do not sum to 1
        """
        responses = tuple(responses)
        self._validate(responses)

        q_score = self.questionnaire_score(responses)
        b_score = behavioral_score(factors, self.scoring_config)
        overall = round_half_up(QUESTIONNAIRE_BLEND * q_score + BEHAVIORAL_BLEND * b_score)
        overall = max(MIN_OVERALL_SCORE, min(MAX_OVERALL_SCORE, overall))

        profile = RiskProfile(
            overall_score=overall,
            category=category_for_score(overall),
            confidence_score=self.confidence_score(responses, factors),
            questionnaire_score=q_score,
            behavioral_score=b_score,
            responses=responses,
            factors=factors,
        )
        logger.info("Risk profile scored %d (%s), confidence %d",
                    profile.overall_score, profile.category, profile.confidence_score)
        return profile

    @staticmethod
    def _validate(responses: Tuple[QuestionResponse, ...]):
        if not responses:
            raise InvalidInput("At least one questionnaire response is required")
        weight_sum = total_weight(responses)
        if not abs(weight_sum - 1.0) <= QUESTION_WEIGHT_TOLERANCE:
            raise InvalidInput(
                f"Questionnaire weights must sum to 1, got {weight_sum}",
                {"weights": {r.question_id: r.weight for r in responses}},
            )

    @staticmethod
    def questionnaire_score(responses: Sequence[QuestionResponse]) -> float:
        return float(sum(r.sub_score * r.weight for r in responses))

    @staticmethod
    def confidence_score(responses: Sequence[QuestionResponse],
                         factors: BehavioralFactors) -> int:
        """Estimate confidence in the classification.

        Dispersion of sub-scores signals inconsistent answers. Thin history
        and fragile finances make the behavioral signal less reliable.
        """
        confidence = BASE_CONFIDENCE
        dispersion = float(np.std([r.sub_score for r in responses])) / 100
        confidence -= dispersion * RESPONSE_DISPERSION_PENALTY

        if (factors.age < THIN_HISTORY_AGE
                or factors.investment_experience_years < THIN_HISTORY_EXPERIENCE_YEARS):
            confidence -= THIN_HISTORY_PENALTY

        if (factors.debt_to_income_ratio > FRAGILE_DEBT_TO_INCOME
                or factors.emergency_fund_ratio < FRAGILE_EMERGENCY_FUND_MONTHS):
            confidence -= FRAGILE_FINANCES_PENALTY

        return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, round_half_up(confidence)))
