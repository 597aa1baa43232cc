# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Instrument recommendations for a goal's target allocation.

Recommendations are structured records drawn from a static instrument table.
Which instruments are suggested depends on the goal's account type:

- Retirement accounts get one fund per funded equity or bond class
- Taxable brokerage accounts get the same funds with a tax note
- Savings accounts get a single cash product chosen by horizon
- Other account types get no recommendations
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

from ..allocation import AllocationMix
from ..config import (
    RETIREMENT_ACCOUNT_TYPES,
    SAVINGS_ACCOUNT_TYPES,
    SHORT_TERM_SAVINGS_YEARS,
    TAXABLE_ACCOUNT_NOTE,
    TAXABLE_ACCOUNT_TYPES,
    TOTAL_MARKET_THRESHOLD,
)
from ..goals import DateLike, InvestmentGoal
from .instruments import (
    FUND_BY_ASSET_CLASS,
    TOTAL_MARKET_FUND,
    BrokerLink,
    Instrument,
    get_instrument,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvestmentRecommendation:
    """A suggested instrument and the share of the goal it should hold."""
    goal_name: str
    recommendation_type: str
    symbol: str
    name: str
    description: str
    allocation_percentage: float
    expected_annual_return: float
    expense_ratio: float
    risk_level: str
    reasoning: str
    confidence_score: int
    broker_links: Tuple[BrokerLink, ...]

    @classmethod
    def from_instrument(cls, instrument: Instrument, goal: InvestmentGoal,
                        allocation_percentage: float, reasoning: str) -> 'InvestmentRecommendation':
        return cls(
            goal_name=goal.name,
            recommendation_type=instrument.recommendation_type,
            symbol=instrument.symbol,
            name=instrument.name,
            description=instrument.description,
            allocation_percentage=allocation_percentage,
            expected_annual_return=instrument.expected_annual_return,
            expense_ratio=instrument.expense_ratio,
            risk_level=instrument.risk_level,
            reasoning=reasoning,
            confidence_score=instrument.confidence_score,
            broker_links=instrument.broker_links,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["broker_links"] = [asdict(link) for link in self.broker_links]
        return data


class RecommendationGenerator:
    """Turns a goal and its target allocation into instrument suggestions.

    Example:
        >>> generator = RecommendationGenerator()
        >>> recs = generator.generate(goal, allocation, now=date(2025, 1, 1))
        >>> [r.symbol for r in recs]
        ['VOO', 'BND', 'VTIAX']
    """

    def generate(self,
                 goal: InvestmentGoal,
                 allocation: AllocationMix,
                 now: DateLike) -> List[InvestmentRecommendation]:
        """Suggest instruments for the goal's account type.

        Args:
            goal: Goal whose account type selects the product family
            allocation: Target allocation for the goal
            now: Current date, used for the savings horizon

        Returns:
            Recommendations sorted by confidence, highest first

        Raises:
            InvalidInput: If a savings goal's date is not after ``now``
        """
        account_type = goal.account_type
        if account_type in RETIREMENT_ACCOUNT_TYPES:
            recommendations = self._fund_recommendations(goal, allocation)
        elif account_type in TAXABLE_ACCOUNT_TYPES:
            recommendations = self._fund_recommendations(goal, allocation,
                                                         note=TAXABLE_ACCOUNT_NOTE)
        elif account_type in SAVINGS_ACCOUNT_TYPES:
            recommendations = [self._savings_recommendation(goal, now)]
        else:
            recommendations = []

        recommendations.sort(key=lambda rec: rec.confidence_score, reverse=True)
        logger.debug("%d recommendation(s) for %s goal %r",
                     len(recommendations), account_type, goal.name)
        return recommendations

    @staticmethod
    def fund_for(asset_class: str, weight: float) -> Instrument:
        """Fund held for an asset class at the given weight."""
        if asset_class == "stocks_domestic" and weight > TOTAL_MARKET_THRESHOLD:
            return get_instrument(TOTAL_MARKET_FUND)
        return get_instrument(FUND_BY_ASSET_CLASS[asset_class])

    def _fund_recommendations(self, goal: InvestmentGoal, allocation: AllocationMix,
                              note: str = "") -> List[InvestmentRecommendation]:
        recommendations = []
        for asset_class in FUND_BY_ASSET_CLASS:
            weight = allocation.weight(asset_class)
            if weight <= 0:
                continue
            fund = self.fund_for(asset_class, weight)
            reasoning = fund.reasoning.format(account_type=goal.account_type) + note
            recommendations.append(
                InvestmentRecommendation.from_instrument(fund, goal, weight, reasoning))
        return recommendations

    @staticmethod
    def _savings_recommendation(goal: InvestmentGoal, now: DateLike) -> InvestmentRecommendation:
        symbol = "HYSA" if goal.years_until(now) < SHORT_TERM_SAVINGS_YEARS else "CD"
        product = get_instrument(symbol)
        return InvestmentRecommendation.from_instrument(product, goal, 100.0, product.reasoning)
