# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Rebalancing alerts from the drift between actual and target allocations.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..allocation import AllocationMix
from ..config import (
    ASSET_CLASSES,
    DEFAULT_DEVIATION_THRESHOLD,
    HIGH_URGENCY_DEVIATION,
    IMPACT_PER_DEVIATION_POINT,
    MEDIUM_URGENCY_DEVIATION,
)
from ..errors import InvalidInput, require_finite

logger = logging.getLogger(__name__)

OVERWEIGHT = "overweight"
UNDERWEIGHT = "underweight"


@dataclass(frozen=True)
class RebalancingAlert:
    """Deviation of one asset class beyond the rebalancing threshold.

    Alerts are ephemeral; dismissing them is the caller's responsibility.
    """
    asset_class: str
    alert_type: str
    current_allocation: float
    target_allocation: float
    deviation: float
    urgency: str
    suggested_action: str
    potential_impact: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def urgency_for_deviation(deviation: float) -> str:
    if deviation > HIGH_URGENCY_DEVIATION:
        return "high"
    if deviation > MEDIUM_URGENCY_DEVIATION:
        return "medium"
    return "low"


def asset_class_label(asset_class: str) -> str:
    """'stocks_domestic' -> 'Stocks Domestic'"""
    return asset_class.replace("_", " ").title()


def suggested_action(asset_class: str, alert_type: str, deviation: float) -> str:
    if alert_type == OVERWEIGHT:
        verb, direction = "Sell", "reduce"
    else:
        verb, direction = "Buy", "increase"
    return (f"{verb} {asset_class_label(asset_class)} to {direction} "
            f"allocation by {deviation:.1f}%")


def potential_impact(deviation: float) -> str:
    return (f"Rebalancing could improve risk-adjusted returns by "
            f"~{deviation * IMPACT_PER_DEVIATION_POINT:.1f}%")


class RebalancingAlertGenerator:
    """Compares an actual allocation to its target and emits deviation alerts."""

    def __init__(self, deviation_threshold: float = DEFAULT_DEVIATION_THRESHOLD):
        if require_finite(deviation_threshold, "deviation_threshold") < 0:
            raise InvalidInput("deviation_threshold cannot be negative",
                               {"deviation_threshold": deviation_threshold})
        self.deviation_threshold = deviation_threshold

    def generate(self,
                 current: AllocationMix,
                 target: AllocationMix,
                 deviation_threshold: Optional[float] = None) -> List[RebalancingAlert]:
        """Emit one alert per asset class deviating strictly more than the threshold.

        Args:
            current: Actual holdings as percentages
            target: Target allocation
            deviation_threshold: Percentage points. Defaults to the
                                 generator's threshold.

        Returns:
            Alerts sorted by deviation, largest first
        """
        threshold = self.deviation_threshold if deviation_threshold is None else deviation_threshold
        if require_finite(threshold, "deviation_threshold") < 0:
            raise InvalidInput("deviation_threshold cannot be negative",
                               {"deviation_threshold": threshold})

        alerts = []
        for asset_class in ASSET_CLASSES:
            current_pct = current.weight(asset_class)
            target_pct = target.weight(asset_class)
            deviation = abs(current_pct - target_pct)
            if deviation <= threshold:
                continue

            alert_type = OVERWEIGHT if current_pct > target_pct else UNDERWEIGHT
            alerts.append(RebalancingAlert(
                asset_class=asset_class,
                alert_type=alert_type,
                current_allocation=current_pct,
                target_allocation=target_pct,
                deviation=deviation,
                urgency=urgency_for_deviation(deviation),
                suggested_action=suggested_action(asset_class, alert_type, deviation),
                potential_impact=potential_impact(deviation),
            ))

        alerts.sort(key=lambda alert: alert.deviation, reverse=True)
        logger.debug("%d rebalancing alert(s) above %.2f points", len(alerts), threshold)
        return alerts
