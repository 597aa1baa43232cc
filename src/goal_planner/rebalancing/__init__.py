# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Portfolio rebalancing alerts."""

from .alerts import RebalancingAlert, RebalancingAlertGenerator, urgency_for_deviation

__all__ = [
    'RebalancingAlert',
    'RebalancingAlertGenerator',
    'urgency_for_deviation',
]
