# fastseries/series/truncated.py
"""
Exact-rational truncated power series
-------------------------------------
A TruncatedSeries holds the coefficients of degrees 0..N-1 of a series about
the origin in a single variable; everything from degree N upwards is unknown.

Arithmetic is delegated to ``sympy.polys.ring_series`` over the univariate
ring QQ[x], so all coefficients are exact reduced rationals.

The closed-form compositions (exp, log, sqrt, sin, ...) are only defined for a
specific constant term. Callers are expected to verify it first; calling one
outside its domain raises ValueError.
"""

from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Union
import sympy as sp
from sympy.polys.domains import QQ
from sympy.polys.rings import ring
from sympy.polys.ring_series import (
    rs_asin,
    rs_atan,
    rs_atanh,
    rs_cos,
    rs_cosh,
    rs_exp,
    rs_log,
    rs_mul,
    rs_nth_root,
    rs_pow,
    rs_series_inversion,
    rs_sin,
    rs_sinh,
    rs_tan,
    rs_tanh,
    rs_trunc,
)


__all__ = ["TruncatedSeries"]

# One shared ring; series are values of QQ[x] cut at O(x**length).
_RING, _X = ring("x", QQ)

# The ring_series routines work with precision - 1 internally, so the
# compositions are evaluated with at least two terms and cut back afterwards.
_MIN_WORKING_LENGTH = 2

RationalLike = Union[int, sp.Rational]


def _to_qq(value: RationalLike):
    """Convert an int / sympy Rational into a QQ domain element."""
    if isinstance(value, float) or (isinstance(value, sp.Basic) and not value.is_Rational):
        raise TypeError(f"Expected an exact rational, got {value!r}")
    return QQ.from_sympy(sp.Rational(value))


class TruncatedSeries:
    """
    Fixed-length series of exact rationals.

    Example
    -------
    >>> s = TruncatedSeries.identity(4)          # x + O(x**4)
    >>> s.exp().coefficients()
    [1, 1, 1/2, 1/6]
    """

    __slots__ = ("_poly", "length")

    def __init__(self, poly, length: int) -> None:
        if length < 1:
            raise ValueError("Series length must be at least 1")
        self._poly = rs_trunc(poly, _X, length)
        self.length = length

    # --------------------------- Constructors ---------------------------

    @classmethod
    def zero(cls, length: int) -> "TruncatedSeries":
        return cls(_RING.zero, length)

    @classmethod
    def constant(cls, value: RationalLike, length: int) -> "TruncatedSeries":
        """The series c + O(x**length)."""
        return cls(_RING.ground_new(_to_qq(value)), length)

    @classmethod
    def identity(cls, length: int) -> "TruncatedSeries":
        """The series x + O(x**length)."""
        return cls(_X, length)

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[RationalLike],
                          length: Optional[int] = None) -> "TruncatedSeries":
        """Build from dense coefficients, lowest degree first."""
        coefficients = list(coefficients)
        if length is None:
            length = len(coefficients)
        terms = {(k,): _to_qq(c) for k, c in enumerate(coefficients) if c}
        return cls(_RING.from_dict(terms), length)

    # --------------------------- Inspection ------------------------------

    def coefficient(self, degree: int) -> sp.Rational:
        """Coefficient of x**degree as a sympy Rational."""
        if not 0 <= degree < self.length:
            raise IndexError(f"Degree {degree} outside series of length {self.length}")
        return QQ.to_sympy(self._poly.get((degree,), QQ.zero))

    @property
    def constant_term(self) -> sp.Rational:
        return self.coefficient(0)

    def coefficients(self) -> List[sp.Rational]:
        return [self.coefficient(k) for k in range(self.length)]

    def is_zero(self) -> bool:
        return not self._poly

    # --------------------------- Arithmetic ------------------------------

    def truncate(self, length: int) -> "TruncatedSeries":
        if length > self.length:
            raise ValueError(
                f"Cannot lengthen a series of length {self.length} to {length}"
            )
        return TruncatedSeries(self._poly, length)

    def __add__(self, other: "TruncatedSeries") -> "TruncatedSeries":
        if not isinstance(other, TruncatedSeries):
            return NotImplemented
        return TruncatedSeries(self._poly + other._poly, min(self.length, other.length))

    def add_constant(self, value: RationalLike) -> "TruncatedSeries":
        if not value:
            return self
        return TruncatedSeries(self._poly + _to_qq(value), self.length)

    def multiply(self, other: "TruncatedSeries",
                 length: Optional[int] = None) -> "TruncatedSeries":
        """Truncated product; defaults to the shorter of both lengths."""
        if length is None:
            length = min(self.length, other.length)
        return TruncatedSeries(rs_mul(self._poly, other._poly, _X, length), length)

    def scale(self, value: RationalLike) -> "TruncatedSeries":
        return TruncatedSeries(self._poly.mul_ground(_to_qq(value)), self.length)

    def divide(self, value: RationalLike) -> "TruncatedSeries":
        if not value:
            raise ZeroDivisionError("Series division by zero")
        return TruncatedSeries(self._poly.quo_ground(_to_qq(value)), self.length)

    def power(self, n: int) -> "TruncatedSeries":
        """Truncated non-negative integer power."""
        n = int(n)
        if n < 0:
            raise ValueError("Use invert() before raising to a negative power")
        if n == 0:
            return TruncatedSeries.constant(1, self.length)
        return TruncatedSeries(rs_pow(self._poly, n, _X, self.length), self.length)

    def invert(self) -> "TruncatedSeries":
        """Multiplicative inverse; needs a nonzero constant term."""
        if self.constant_term == 0:
            raise ValueError("Cannot invert a series with zero constant term")
        return self._apply(rs_series_inversion)

    # --------------------------- Compositions ----------------------------

    def exp(self) -> "TruncatedSeries":
        self._require_constant(0, "exp")
        return self._apply(rs_exp)

    def log(self) -> "TruncatedSeries":
        self._require_constant(1, "log")
        return self._apply(rs_log)

    def sqrt(self) -> "TruncatedSeries":
        self._require_constant(1, "sqrt")
        return self._apply(lambda p, x, prec: rs_nth_root(p, 2, x, prec))

    def sin(self) -> "TruncatedSeries":
        self._require_constant(0, "sin")
        return self._apply(rs_sin)

    def cos(self) -> "TruncatedSeries":
        self._require_constant(0, "cos")
        return self._apply(rs_cos)

    def tan(self) -> "TruncatedSeries":
        self._require_constant(0, "tan")
        return self._apply(rs_tan)

    def sinh(self) -> "TruncatedSeries":
        self._require_constant(0, "sinh")
        return self._apply(rs_sinh)

    def cosh(self) -> "TruncatedSeries":
        self._require_constant(0, "cosh")
        # rs_cosh returns 0 for a zero argument
        if self.is_zero():
            return TruncatedSeries.constant(1, self.length)
        return self._apply(rs_cosh)

    def tanh(self) -> "TruncatedSeries":
        self._require_constant(0, "tanh")
        return self._apply(rs_tanh)

    def asin(self) -> "TruncatedSeries":
        self._require_constant(0, "asin")
        return self._apply(rs_asin)

    def asinh(self) -> "TruncatedSeries":
        # asinh(a) = log(a + sqrt(1 + a**2))
        self._require_constant(0, "asinh")
        radicand = self.multiply(self).add_constant(1)
        return (self + radicand.sqrt()).log()

    def atan(self) -> "TruncatedSeries":
        self._require_constant(0, "atan")
        return self._apply(rs_atan)

    def atanh(self) -> "TruncatedSeries":
        self._require_constant(0, "atanh")
        return self._apply(rs_atanh)

    # --------------------------- Helpers --------------------------------

    def _require_constant(self, expected: int, name: str) -> None:
        if self.constant_term != expected:
            raise ValueError(
                f"{name} series needs constant term {expected}, got {self.constant_term}"
            )

    def _apply(self, routine: Callable) -> "TruncatedSeries":
        working = max(self.length, _MIN_WORKING_LENGTH)
        return TruncatedSeries(routine(self._poly, _X, working), self.length)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TruncatedSeries):
            return NotImplemented
        return self.length == other.length and self._poly == other._poly

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(str(c) for c in self.coefficients())
        return f"TruncatedSeries([{body}])"
