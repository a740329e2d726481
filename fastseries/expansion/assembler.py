# fastseries/expansion/assembler.py
"""
Conversion of truncated series back to symbolic power series
"""

from dataclasses import dataclass
from typing import List, Tuple
import sympy as sp

from ..series.truncated import TruncatedSeries


@dataclass(frozen=True)
class PowerSeries:
    """
    Sparse power series ``sum(c_k * x**k) + O(x**order)`` about ``x = point``.

    Only nonzero coefficients are stored, in ascending exponent order.
    """
    terms: Tuple[Tuple[sp.Rational, int], ...]
    order: int
    relation: sp.Equality

    @property
    def variable(self) -> sp.Symbol:
        return self.relation.lhs

    @property
    def point(self) -> sp.Expr:
        return self.relation.rhs

    def coefficient(self, exponent: int) -> sp.Rational:
        if not 0 <= exponent < self.order:
            raise IndexError(f"Exponent {exponent} is not below the order {self.order}")
        for c, k in self.terms:
            if k == exponent:
                return c
        return sp.Integer(0)

    def coefficients(self) -> List[sp.Rational]:
        """Dense coefficient list for exponents 0..order-1"""
        dense = [sp.Integer(0)] * self.order
        for c, k in self.terms:
            dense[k] = c
        return dense

    def removeO(self) -> sp.Expr:
        x, x0 = self.variable, self.point
        return sp.Add(*[c * (x - x0)**k for c, k in self.terms])

    def as_expr(self) -> sp.Expr:
        """Same shape as ``sympy.series``: polynomial part plus an Order term"""
        x, x0 = self.variable, self.point
        return self.removeO() + sp.Order((x - x0)**self.order, (x, x0))

    def __str__(self) -> str:
        return str(self.as_expr())


class ResultAssembler:
    """Turns a TruncatedSeries into the PowerSeries value callers expect."""

    def assemble(self, series: TruncatedSeries, relation: sp.Equality, order: int) -> PowerSeries:
        if order > series.length:
            raise ValueError(f"Series of length {series.length} cannot provide order {order}")

        terms = []
        for k in range(order):
            c = series.coefficient(k)
            if c != 0:
                terms.append((c, k))

        return PowerSeries(tuple(terms), order, relation)
