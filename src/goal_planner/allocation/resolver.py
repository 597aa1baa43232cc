# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Target allocation resolution from risk category and time horizon.
"""

import logging
from typing import Dict, Mapping, Optional, Tuple

from ..config import (
    ALLOCATION_TOLERANCE,
    ALLOCATION_TOTAL,
    ASSET_CLASSES,
    BASE_ALLOCATIONS,
    LONG_HORIZON_SHIFT,
    LONG_HORIZON_YEARS,
    SHORT_HORIZON_SHIFT,
    SHORT_HORIZON_YEARS,
)
from ..errors import InvalidInput, require_finite
from .mix import AllocationMix

logger = logging.getLogger(__name__)


class AllocationResolver:
    """Maps a risk category and years to goal onto a target allocation.

    A base table per category is shifted toward bonds and cash for short
    horizons and toward equities for long ones. Every weight is then clamped
    at zero and the whole mix rescaled proportionally to 100.

    Example:
        >>> resolver = AllocationResolver()
        >>> mix = resolver.resolve("moderate", years_to_goal=10)
        >>> mix.stocks_domestic
        60.0
    """

    def __init__(self,
                 base_allocations: Optional[Mapping[str, Tuple[float, ...]]] = None,
                 short_horizon_shift: Optional[Mapping[str, float]] = None,
                 long_horizon_shift: Optional[Mapping[str, float]] = None):
        """Initialize the resolver.

        Args:
            base_allocations: Category -> six weights in ``ASSET_CLASSES``
                order. Each table must sum to 100. Defaults to config.
            short_horizon_shift: Per-class adjustment below the short horizon
            long_horizon_shift: Per-class adjustment above the long horizon

        Raises:
            InvalidInput: If a base table is malformed
        """
        self.base_allocations = dict(base_allocations or BASE_ALLOCATIONS)
        self.short_horizon_shift = dict(short_horizon_shift or SHORT_HORIZON_SHIFT)
        self.long_horizon_shift = dict(long_horizon_shift or LONG_HORIZON_SHIFT)
        self._validate()

    def _validate(self):
        """Validate that every base table is a complete, exact mix."""
        for category, weights in self.base_allocations.items():
            if len(weights) != len(ASSET_CLASSES):
                raise InvalidInput(
                    f"Base allocation for '{category}' has {len(weights)} weights, "
                    f"expected {len(ASSET_CLASSES)}"
                )
            if abs(sum(weights) - ALLOCATION_TOTAL) > ALLOCATION_TOLERANCE:
                raise InvalidInput(f"Base allocation for '{category}' must sum to 100")
        for shift in (self.short_horizon_shift, self.long_horizon_shift):
            unknown = sorted(set(shift) - set(ASSET_CLASSES))
            if unknown:
                raise InvalidInput(f"Unknown asset classes in horizon shift: {unknown}")

    def resolve(self, category: str, years_to_goal: float) -> AllocationMix:
        """Resolve the target allocation.

        Args:
            category: Risk category (conservative, moderate or aggressive)
            years_to_goal: Years remaining until the goal, may be fractional

        Returns:
            AllocationMix whose weights sum to 100

        Raises:
            InvalidInput: If the category is unknown or years_to_goal is
                negative or not finite
        """
        if category not in self.base_allocations:
            raise InvalidInput(
                f"Unknown risk category: {category}",
                {"known": sorted(self.base_allocations)},
            )
        require_finite(years_to_goal, "years_to_goal")
        if years_to_goal < 0:
            raise InvalidInput(
                "years_to_goal cannot be negative",
                {"years_to_goal": years_to_goal},
            )

        weights: Dict[str, float] = dict(zip(ASSET_CLASSES, self.base_allocations[category]))

        if years_to_goal < SHORT_HORIZON_YEARS:
            shift = self.short_horizon_shift
        elif years_to_goal > LONG_HORIZON_YEARS:
            shift = self.long_horizon_shift
        else:
            shift = {}

        for asset_class, delta in shift.items():
            weights[asset_class] += delta

        mix = AllocationMix.normalized(weights)
        logger.debug("Resolved %s allocation for %.2f years: %s",
                     category, years_to_goal, mix.as_dict())
        return mix
