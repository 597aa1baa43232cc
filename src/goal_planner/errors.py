# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Exceptions raised by the planning engine.

Every error is reported synchronously to the immediate caller. Callers decide
how to present or recover from it.
"""

import math
from typing import Any, Dict, Optional


class PlannerError(Exception):
    """Base exception for all planning engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidInput(PlannerError, ValueError):
    """Malformed goal, inconsistent questionnaire or out-of-range argument."""
    pass


class ArithmeticDomainError(PlannerError, ArithmeticError):
    """A ratio or power was requested outside its mathematical domain."""
    pass


class CancelledError(PlannerError):
    """A simulation was stopped before completion by caller request."""
    pass


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` instead of NaN/Infinity on a zero denominator."""
    if denominator == 0:
        return default
    return numerator / denominator


def require_ratio(numerator: float, denominator: float, name: str = "ratio") -> float:
    """Divide, raising :class:`ArithmeticDomainError` on a zero denominator."""
    if denominator == 0:
        raise ArithmeticDomainError(
            f"Cannot compute {name} against a zero denominator",
            {"numerator": numerator},
        )
    return numerator / denominator


def require_finite(value: float, name: str) -> float:
    """Return ``value``, raising :class:`InvalidInput` if it is NaN, infinite or not a number."""
    try:
        finite = math.isfinite(value)
    except (TypeError, OverflowError):
        finite = False
    if not finite:
        raise InvalidInput(f"{name} must be a finite number", {name: str(value)})
    return value
