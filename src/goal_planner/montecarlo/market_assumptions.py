# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Market assumptions and random monthly return sampling per asset class.

Annualized mean and volatility are converted to monthly parameters and
standard-normal variates are drawn with the Box-Muller transform from an
injected numpy Generator, so callers can reproduce exact trajectories.
"""

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..config import ASSET_CLASSES, MONTHS_PER_YEAR, RETURN_ASSUMPTIONS
from ..errors import InvalidInput, require_finite


@dataclass(frozen=True)
class AssetClassAssumptions:
    """Return and volatility assumptions for a single asset class.

    Attributes:
        name: Asset class identifier (e.g., "stocks_domestic")
        expected_return: Annual expected return as decimal (e.g., 0.105 for 10.5%)
        volatility: Annual standard deviation as decimal (e.g., 0.16 for 16%)
    """
    name: str
    expected_return: float
    volatility: float

    def __post_init__(self):
        require_finite(self.expected_return, "expected_return")
        if require_finite(self.volatility, "volatility") < 0:
            raise InvalidInput(f"Volatility cannot be negative: {self.volatility}")

    @property
    def monthly_mean(self) -> float:
        return self.expected_return / MONTHS_PER_YEAR

    @property
    def monthly_volatility(self) -> float:
        return self.volatility / math.sqrt(MONTHS_PER_YEAR)


def box_muller(u1, u2):
    """Standard-normal variate(s) from uniforms ``u1`` in (0, 1] and ``u2`` in [0, 1)."""
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


class ReturnSampler:
    """Draws random monthly returns per asset class.

    Example:
        >>> sampler = ReturnSampler.create_default()
        >>> rng = np.random.default_rng(42)
        >>> r = sampler.sample_monthly_return("bonds", rng)
    """

    def __init__(self,
                 asset_classes: Mapping[str, AssetClassAssumptions],
                 asset_class_order: Sequence[str] = ASSET_CLASSES):
        """Initialize the sampler.

        Args:
            asset_classes: Dict mapping asset class name to its assumptions
            asset_class_order: Column order used by :meth:`sample_monthly_returns`

        Raises:
            InvalidInput: If an asset class in the order has no assumptions
        """
        self.asset_classes = dict(asset_classes)
        self.asset_class_order = tuple(asset_class_order)
        missing = [name for name in self.asset_class_order
                   if name not in self.asset_classes]
        if missing:
            raise InvalidInput(f"Asset classes missing from assumptions: {missing}")
        self._monthly_means = np.array([self.asset_classes[n].monthly_mean
                                        for n in self.asset_class_order])
        self._monthly_vols = np.array([self.asset_classes[n].monthly_volatility
                                       for n in self.asset_class_order])

    def get(self, asset_class: str) -> AssetClassAssumptions:
        try:
            return self.asset_classes[asset_class]
        except KeyError:
            raise InvalidInput(f"No return assumptions for asset class: {asset_class}") from None

    def sample_monthly_return(self, asset_class: str, rng: np.random.Generator) -> float:
        """Draw one monthly return for an asset class.

        Args:
            asset_class: Asset class name
            rng: Seeded generator; two uniforms are consumed per call

        Returns:
            Monthly return in decimal form
        """
        params = self.get(asset_class)
        # 1 - U maps [0, 1) onto (0, 1] so the logarithm stays finite
        u1 = 1.0 - rng.random()
        u2 = rng.random()
        z = float(box_muller(u1, u2))
        return params.monthly_mean + params.monthly_volatility * z

    def sample_monthly_returns(self, rng: np.random.Generator, months: int) -> np.ndarray:
        """Draw a ``(months, n_asset_classes)`` matrix of monthly returns.

        Uniforms are consumed in the same order as calling
        :meth:`sample_monthly_return` for each class of each month in turn.
        """
        uniforms = rng.random((months, len(self.asset_class_order), 2))
        z = box_muller(1.0 - uniforms[..., 0], uniforms[..., 1])
        return self._monthly_means + self._monthly_vols * z

    def get_returns_vector(self) -> np.ndarray:
        """Get annual expected returns as numpy array in asset_class_order."""
        return np.array([self.asset_classes[name].expected_return
                         for name in self.asset_class_order])

    def get_volatilities_vector(self) -> np.ndarray:
        """Get annual volatilities as numpy array in asset_class_order."""
        return np.array([self.asset_classes[name].volatility
                         for name in self.asset_class_order])

    @classmethod
    def from_table(cls, table: Mapping[str, Tuple[float, float]]) -> 'ReturnSampler':
        """Create a sampler from ``{asset_class: (mean, volatility)}``."""
        return cls({name: AssetClassAssumptions(name, mean, vol)
                    for name, (mean, vol) in table.items()})

    @classmethod
    def create_default(cls, overrides: Optional[Dict[str, Tuple[float, float]]] = None) -> 'ReturnSampler':
        """Create a sampler with the default return assumption table.

        Args:
            overrides: Optional ``{asset_class: (mean, volatility)}`` replacing
                       individual default entries
        """
        table = dict(RETURN_ASSUMPTIONS)
        table.update(overrides or {})
        return cls.from_table(table)
