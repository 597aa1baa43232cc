# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Investment goals and the time remaining until them.

The current date is always supplied by the caller; nothing here reads the
system clock.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Union

from .config import ACCOUNT_TYPES, DAYS_PER_YEAR, DEFAULT_ACCOUNT_TYPE, MONTHS_PER_YEAR
from .errors import InvalidInput, require_finite

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInput(f"Expected a date, got {type(value).__name__}")


@dataclass(frozen=True)
class InvestmentGoal:
    """A savings target to be reached by a date.

    Attributes:
        target_amount: Amount to reach, must be positive
        target_date: Date by which the amount should be reached
        current_amount: Amount already saved toward the goal
        monthly_contribution: Amount added every month
        name: Optional label
        account_type: Account holding the goal, one of ``ACCOUNT_TYPES``
    """
    target_amount: float
    target_date: date
    current_amount: float = 0.0
    monthly_contribution: float = 0.0
    name: str = ""
    account_type: str = DEFAULT_ACCOUNT_TYPE

    def __post_init__(self):
        for name in ("target_amount", "current_amount", "monthly_contribution"):
            require_finite(getattr(self, name), name)
        if self.target_amount <= 0:
            raise InvalidInput("target_amount must be positive",
                               {"target_amount": self.target_amount})
        if self.current_amount < 0:
            raise InvalidInput("current_amount cannot be negative",
                               {"current_amount": self.current_amount})
        if self.monthly_contribution < 0:
            raise InvalidInput("monthly_contribution cannot be negative",
                               {"monthly_contribution": self.monthly_contribution})
        if self.account_type not in ACCOUNT_TYPES:
            raise InvalidInput(f"Unknown account type: {self.account_type}",
                               {"known": list(ACCOUNT_TYPES)})
        object.__setattr__(self, "target_date", _as_date(self.target_date))

    def _require_future(self, now: DateLike) -> date:
        today = _as_date(now)
        if self.target_date <= today:
            raise InvalidInput("target_date must be after the current date",
                               {"target_date": self.target_date.isoformat(),
                                "now": today.isoformat()})
        return today

    def years_until(self, now: DateLike) -> float:
        """Fractional years from ``now`` to the target date (days / 365).

        Raises:
            InvalidInput: If the target date is not strictly after ``now``
        """
        today = self._require_future(now)
        return (self.target_date - today).days / DAYS_PER_YEAR

    def months_until(self, now: DateLike) -> int:
        """Whole calendar months from ``now`` to the target date, at least 1.

        A partial final month does not count, except that a target less than
        a month away still gets one month.

        Raises:
            InvalidInput: If the target date is not strictly after ``now``
        """
        today = self._require_future(now)
        months = ((self.target_date.year - today.year) * MONTHS_PER_YEAR
                  + self.target_date.month - today.month)
        if self.target_date.day < today.day:
            months -= 1
        return max(1, months)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "target_amount": self.target_amount,
            "target_date": self.target_date.isoformat(),
            "current_amount": self.current_amount,
            "monthly_contribution": self.monthly_contribution,
            "account_type": self.account_type,
        }
