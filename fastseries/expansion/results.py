# fastseries/expansion/results.py
"""
Outcome types shared by the classifier, composer and expander.
"""

from dataclasses import dataclass
from typing import Optional
import sympy as sp


@dataclass(frozen=True)
class Infeasible:
    """The fast path cannot handle this expression; use the general algorithm."""
    reason: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Eligibility:
    """Result of one classification pass"""
    eligible: bool
    variable: Optional[sp.Symbol] = None  # first symbol met, if any
    reason: str = ""

    def __bool__(self) -> bool:
        return self.eligible


class FastSeriesError(Exception):
    """Base class for fast series errors"""


class MalformedExpressionError(FastSeriesError):
    """An expression the classifier should have rejected reached the composer."""


class FastPathInfeasible(FastSeriesError):
    """Raised by the expander when fallback is disabled."""

    def __init__(self, reason: str):
        super().__init__(f"Fast series path infeasible: {reason}")
        self.reason = reason
