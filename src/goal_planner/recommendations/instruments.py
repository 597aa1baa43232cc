# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Static table of the instruments the recommender can suggest.

Expected returns are annual percentages. ``reasoning`` may contain an
``{account_type}`` placeholder filled in when a recommendation is made.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..errors import InvalidInput


@dataclass(frozen=True)
class BrokerLink:
    """Where an instrument can be bought."""
    broker_name: str
    url: str
    has_commission: bool = False
    minimum_investment: float = 1.0


@dataclass(frozen=True)
class Instrument:
    """A fund or account product with its canned description.

    Attributes:
        symbol: Ticker or product code
        name: Display name
        recommendation_type: 'etf', 'savings_account' or 'bond'
        expense_ratio: Annual fee in percent
        expected_annual_return: Long-run annual return in percent
        risk_level: 'low', 'medium' or 'high'
        description: One-line summary of the exposure
        reasoning: Why it suits the goal
        confidence_score: Fit of the suggestion, 0-100
        broker_links: Places to buy it
    """
    symbol: str
    name: str
    recommendation_type: str
    expense_ratio: float
    expected_annual_return: float
    risk_level: str
    description: str
    reasoning: str
    confidence_score: int
    broker_links: Tuple[BrokerLink, ...] = ()


def etf_broker_links(symbol: str) -> Tuple[BrokerLink, ...]:
    """Commission-free brokers listing an ETF, with a $1 minimum."""
    return (
        BrokerLink("Vanguard", f"https://investor.vanguard.com/etf/profile/{symbol}"),
        BrokerLink("Fidelity", f"https://www.fidelity.com/etfs/{symbol.lower()}"),
        BrokerLink("Schwab", f"https://www.schwab.com/research/etfs/quotes/summary/{symbol}"),
    )


def _etf(symbol, name, focus_description, expense_ratio, expected_annual_return,
         risk_level, reasoning, confidence_score) -> Instrument:
    return Instrument(symbol, name, "etf", expense_ratio, expected_annual_return, risk_level,
                      focus_description, reasoning, confidence_score, etf_broker_links(symbol))


_US_STOCK_REASONING = ("Perfect for {account_type} due to tax efficiency and broad "
                       "diversification")

INSTRUMENTS: Dict[str, Instrument] = {inst.symbol: inst for inst in (
    _etf("VTI", "Vanguard Total Stock Market ETF",
         "Low-cost US Total Market exposure for long-term growth",
         0.03, 10.5, "medium", _US_STOCK_REASONING, 92),
    _etf("VOO", "Vanguard S&P 500 ETF",
         "Low-cost US Large Cap exposure for long-term growth",
         0.03, 10.5, "medium", _US_STOCK_REASONING, 92),
    _etf("VTIAX", "Vanguard Total International Stock Index",
         "International diversification across developed and emerging markets",
         0.11, 9.8, "medium",
         "Provides geographic diversification and exposure to global growth", 88),
    _etf("BND", "Vanguard Total Bond Market ETF",
         "Broad bond market exposure for stability and income",
         0.03, 4.2, "low",
         "Provides portfolio stability and reduces overall volatility", 90),
    Instrument(
        "HYSA", "High-Yield Savings Account", "savings_account", 0.0, 4.5, "low",
        "FDIC-insured savings with competitive interest rates",
        "For short-term goals, prioritize capital preservation and liquidity", 95,
        (BrokerLink("Marcus by Goldman Sachs", "https://marcus.com", minimum_investment=0),
         BrokerLink("Ally Bank", "https://ally.com", minimum_investment=0)),
    ),
    Instrument(
        "CD", "Certificate of Deposit", "bond", 0.0, 5.2, "low",
        "Fixed-rate, FDIC-insured investment for medium-term goals",
        "CDs provide guaranteed returns for specific time horizons", 88,
        (BrokerLink("Fidelity", "https://fidelity.com", minimum_investment=1000),
         BrokerLink("Schwab", "https://schwab.com", minimum_investment=1000)),
    ),
)}

# Fund held for each asset class in investment accounts. Domestic equities
# switch to the total market fund above TOTAL_MARKET_THRESHOLD.
FUND_BY_ASSET_CLASS: Dict[str, str] = {
    "stocks_domestic": "VOO",
    "stocks_international": "VTIAX",
    "bonds": "BND",
}
TOTAL_MARKET_FUND = "VTI"


def get_instrument(symbol: str) -> Instrument:
    try:
        return INSTRUMENTS[symbol]
    except KeyError:
        raise InvalidInput(f"Unknown instrument: {symbol}") from None
