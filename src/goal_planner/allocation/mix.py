# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Asset allocation mix shared by the resolver, the simulator and rebalancing.

Weights are percentages across six asset classes and always sum to 100.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

from ..config import ALLOCATION_TOLERANCE, ALLOCATION_TOTAL, ASSET_CLASSES
from ..errors import ArithmeticDomainError, InvalidInput, require_finite


@dataclass(frozen=True)
class AllocationMix:
    """Percentage split of a portfolio across asset classes.

    Attributes:
        stocks_domestic: Domestic equities weight (percent)
        stocks_international: International equities weight (percent)
        bonds: Bonds weight (percent)
        real_estate: Real estate weight (percent)
        commodities: Commodities weight (percent)
        cash: Cash weight (percent)

    Raises:
        InvalidInput: If any weight is negative or not finite, or the
            weights do not sum to 100 within ``ALLOCATION_TOLERANCE``.
    """
    stocks_domestic: float
    stocks_international: float
    bonds: float
    real_estate: float
    commodities: float
    cash: float

    def __post_init__(self):
        weights = self.as_dict()
        for name, w in weights.items():
            require_finite(w, name)
        negative = {name: w for name, w in weights.items() if w < 0}
        if negative:
            raise InvalidInput("Allocation weights cannot be negative", {"negative": negative})

        total = sum(weights.values())
        if abs(total - ALLOCATION_TOTAL) > ALLOCATION_TOLERANCE:
            raise InvalidInput(
                f"Allocation weights must sum to {ALLOCATION_TOTAL:g}, got {total}",
                {"total": total},
            )

    def as_dict(self) -> Dict[str, float]:
        """Get weights keyed by asset class, in ``ASSET_CLASSES`` order."""
        return {name: getattr(self, name) for name in ASSET_CLASSES}

    def weight(self, asset_class: str) -> float:
        """Get the weight of a single asset class."""
        if asset_class not in ASSET_CLASSES:
            raise InvalidInput(f"Unknown asset class: {asset_class}")
        return getattr(self, asset_class)

    @classmethod
    def from_mapping(cls, weights: Mapping[str, float]) -> 'AllocationMix':
        """Create a mix from a mapping that names every asset class.

        Raises:
            InvalidInput: If a class is missing or an unknown class is given
        """
        unknown = sorted(set(weights) - set(ASSET_CLASSES))
        if unknown:
            raise InvalidInput(f"Unknown asset classes: {unknown}")
        missing = [name for name in ASSET_CLASSES if name not in weights]
        if missing:
            raise InvalidInput(f"Asset classes missing from allocation: {missing}")
        return cls(**{name: float(weights[name]) for name in ASSET_CLASSES})

    @classmethod
    def normalized(cls, weights: Mapping[str, float]) -> 'AllocationMix':
        """Create a mix by rescaling raw weights proportionally to 100.

        Negative weights are clamped to zero before scaling. Classes absent
        from ``weights`` get zero.

        Raises:
            ArithmeticDomainError: If the clamped weights sum to zero
        """
        unknown = sorted(set(weights) - set(ASSET_CLASSES))
        if unknown:
            raise InvalidInput(f"Unknown asset classes: {unknown}")
        clamped = {name: max(0.0, require_finite(float(weights.get(name, 0.0)), name))
                   for name in ASSET_CLASSES}
        total = sum(clamped.values())
        if total <= 0:
            raise ArithmeticDomainError(
                "Cannot normalize an allocation whose weights sum to zero",
                {"weights": dict(weights)},
            )
        return cls(**{name: w / total * ALLOCATION_TOTAL for name, w in clamped.items()})

    @classmethod
    def from_holdings(cls, holdings: Mapping[str, float]) -> 'AllocationMix':
        """Convert actual dollar holdings per asset class into percentages.

        Args:
            holdings: Dict mapping asset class name to market value held

        Raises:
            InvalidInput: If a holding is negative or the class is unknown
            ArithmeticDomainError: If the portfolio has no value
        """
        negative = {name: v for name, v in holdings.items() if require_finite(v, name) < 0}
        if negative:
            raise InvalidInput("Holdings cannot be negative", {"negative": negative})
        return cls.normalized(holdings)
