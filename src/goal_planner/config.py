# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Configuration and Parameters for the planning engine

This module contains the named constants used throughout risk profiling,
allocation resolution, return sampling and rebalancing.
"""

# ===== ASSET CLASSES =====
ASSET_CLASSES = (
    "stocks_domestic",
    "stocks_international",
    "bonds",
    "real_estate",
    "commodities",
    "cash",
)
ALLOCATION_TOTAL = 100.0  # Allocation weights are percentages
ALLOCATION_TOLERANCE = 0.001  # Allowed drift of the weight sum from 100

# ===== RISK CATEGORIES =====
CONSERVATIVE = "conservative"
MODERATE = "moderate"
AGGRESSIVE = "aggressive"
RISK_CATEGORIES = (CONSERVATIVE, MODERATE, AGGRESSIVE)
CONSERVATIVE_MAX_SCORE = 40  # Scores <= 40 are conservative
MODERATE_MAX_SCORE = 70  # Scores <= 70 are moderate, above is aggressive

# ===== RISK SCORING =====
QUESTIONNAIRE_BLEND = 0.7  # Share of the overall score from the questionnaire
BEHAVIORAL_BLEND = 0.3  # Share of the overall score from behavioral signals
QUESTION_WEIGHT_TOLERANCE = 1e-6  # Allowed drift of questionnaire weights from 1
MIN_OVERALL_SCORE = 0
MAX_OVERALL_SCORE = 100

# ===== CONFIDENCE SCORING =====
BASE_CONFIDENCE = 85.0
RESPONSE_DISPERSION_PENALTY = 20.0  # Multiplies normalized sub-score stddev
THIN_HISTORY_PENALTY = 15.0  # Very young or inexperienced investors
THIN_HISTORY_AGE = 25
THIN_HISTORY_EXPERIENCE_YEARS = 1
FRAGILE_FINANCES_PENALTY = 10.0  # High debt or no emergency fund
FRAGILE_DEBT_TO_INCOME = 0.5
FRAGILE_EMERGENCY_FUND_MONTHS = 1
MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 95

# ===== ALLOCATION TABLES =====
# Order: stocks_domestic, stocks_international, bonds, real_estate, commodities, cash
BASE_ALLOCATIONS = {
    CONSERVATIVE: (40.0, 10.0, 45.0, 3.0, 1.0, 1.0),
    MODERATE: (60.0, 20.0, 15.0, 3.0, 1.0, 1.0),
    AGGRESSIVE: (70.0, 25.0, 2.0, 2.0, 1.0, 0.0),
}
SHORT_HORIZON_YEARS = 3  # Below this, shift growth assets into bonds and cash
LONG_HORIZON_YEARS = 20  # Above this, shift bonds into growth assets
SHORT_HORIZON_SHIFT = {
    "stocks_domestic": -20.0,
    "stocks_international": -10.0,
    "bonds": 20.0,
    "cash": 10.0,
}
LONG_HORIZON_SHIFT = {
    "stocks_domestic": 10.0,
    "stocks_international": 5.0,
    "bonds": -15.0,
}

# ===== RETURN ASSUMPTIONS =====
# Annualized (mean, volatility) per asset class
RETURN_ASSUMPTIONS = {
    "stocks_domestic": (0.105, 0.16),
    "stocks_international": (0.098, 0.18),
    "bonds": (0.042, 0.04),
    "real_estate": (0.089, 0.20),
    "commodities": (0.065, 0.25),
    "cash": (0.025, 0.01),
}
MONTHS_PER_YEAR = 12
DAYS_PER_YEAR = 365

# ===== SIMULATION PARAMETERS =====
DEFAULT_TRIAL_COUNT = 1000
DEFAULT_RISK_FREE_RATE = 0.02  # Annual risk-free rate used by the Sharpe ratio
MEDIAN_PERCENTILE = 0.5
LOW_PERCENTILE = 0.1
HIGH_PERCENTILE = 0.9
VALUE_AT_RISK_PERCENTILE = 0.05
MAX_TRIAL_SEED = 2 ** 63 - 1
SAMPLING_BLOCK_MONTHS = 120  # Months sampled at once; cancellation is checked between blocks

# ===== SERVICE LIMITS =====
MAX_SERVICE_TRIAL_COUNT = 10000
MAX_SERVICE_MONTHS = 1200  # 100 years

# ===== REBALANCING =====
DEFAULT_DEVIATION_THRESHOLD = 5.0  # Percentage points
HIGH_URGENCY_DEVIATION = 10.0
MEDIUM_URGENCY_DEVIATION = 7.0
IMPACT_PER_DEVIATION_POINT = 0.1  # Rough risk-adjusted improvement per point

# ===== RECOMMENDATIONS =====
ACCOUNT_TYPES = ("roth_ira", "traditional_ira", "401k", "brokerage", "savings", "hsa")
RETIREMENT_ACCOUNT_TYPES = ("roth_ira", "traditional_ira")
TAXABLE_ACCOUNT_TYPES = ("brokerage",)
SAVINGS_ACCOUNT_TYPES = ("savings",)
DEFAULT_ACCOUNT_TYPE = "brokerage"
TOTAL_MARKET_THRESHOLD = 60.0  # Domestic weight above which the total market fund is chosen
SHORT_TERM_SAVINGS_YEARS = 2.0
TAXABLE_ACCOUNT_NOTE = ". Consider tax-efficient index funds for taxable accounts."
