# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Asset allocation mixes and target allocation resolution."""

from .mix import AllocationMix
from .resolver import AllocationResolver

__all__ = [
    'AllocationMix',
    'AllocationResolver',
]
