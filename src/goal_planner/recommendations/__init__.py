# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Instrument recommendations for investment goals."""

from .instruments import INSTRUMENTS, BrokerLink, Instrument, etf_broker_links, get_instrument
from .recommender import InvestmentRecommendation, RecommendationGenerator

__all__ = [
    'INSTRUMENTS',
    'BrokerLink',
    'Instrument',
    'etf_broker_links',
    'get_instrument',
    'InvestmentRecommendation',
    'RecommendationGenerator',
]
