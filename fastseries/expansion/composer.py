# fastseries/expansion/composer.py
"""
Recursive composition of truncated series
==========================================

Builds the truncated series about the origin of an expression accepted by the
EligibilityClassifier, combining the series of its sub-expressions:

* sums add coefficient-wise,
* products multiply with a few guard degrees and are cut back afterwards,
* powers use repeated multiplication / inversion for integer exponents, a
  normalized square root for half-integer exponents and exp(e*log(b))
  otherwise,
* whitelisted functions use their closed-form series composition.

Every numeric precondition of a series primitive is checked first. When one
fails the composer returns an ``Infeasible`` value instead of a series; it is
passed up unchanged so the caller can switch to the general algorithm.
"""

import logging
from typing import Optional, Union
import sympy as sp
from sympy import integer_nthroot

from ..functions.elementary import COMPOSITION_RULES, ElementaryFunction
from ..series.truncated import TruncatedSeries
from ..utils.config import Settings, get_settings
from .results import Infeasible, MalformedExpressionError

logger = logging.getLogger(__name__)

SeriesResult = Union[TruncatedSeries, Infeasible]


class SeriesComposer:
    """
    Computes ``compose(expr, order) -> TruncatedSeries | Infeasible``.

    Args:
        settings: overrides the process-wide settings (product guard degrees)
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.product_guard = self.settings.product_guard_degrees

    def compose(self, expr, order: int) -> SeriesResult:
        if order < 1:
            raise ValueError("order must be at least 1")

        expr = sp.sympify(expr)

        if expr.is_Number:
            if not expr.is_Rational:
                raise MalformedExpressionError(f"Inexact number {expr} reached the composer")
            return TruncatedSeries.constant(expr, order)

        if expr.is_Symbol:
            return TruncatedSeries.identity(order)

        if expr.is_Add:
            return self._compose_sum(expr, order)

        if expr.is_Mul:
            return self._compose_product(expr, order)

        if expr.is_Pow:
            return self._compose_power(expr, order)

        if expr.is_Function:
            return self._compose_function(expr, order)

        raise MalformedExpressionError(
            f"Cannot compose {type(expr).__name__} node {expr}; it should not have been classified eligible"
        )

    # --------------------------- Sums and products -----------------------

    def _compose_sum(self, expr: sp.Add, order: int) -> SeriesResult:
        constant, terms = expr.as_coeff_add()
        self._check_numeric_coefficient(constant, expr)

        total = TruncatedSeries.zero(order)
        for term in terms:
            term_series = self.compose(term, order)
            if isinstance(term_series, Infeasible):
                return term_series
            total = total + term_series

        return total.add_constant(constant)

    def _compose_product(self, expr: sp.Mul, order: int) -> SeriesResult:
        constant, factors = expr.as_coeff_mul()
        self._check_numeric_coefficient(constant, expr)

        guarded = order + self.product_guard
        product = TruncatedSeries.constant(1, guarded)
        for factor in factors:
            factor_series = self.compose(factor, guarded)
            if isinstance(factor_series, Infeasible):
                return factor_series
            product = product.multiply(factor_series, guarded)

        if constant != 1:
            product = product.scale(constant)

        return product.truncate(order)

    # --------------------------- Powers -----------------------------------

    def _compose_power(self, expr: sp.Pow, order: int) -> SeriesResult:
        base, exponent = expr.base, expr.exp

        # b**0 is 1 whatever b is, composable or not
        if exponent.is_Number and exponent == 0:
            return TruncatedSeries.constant(1, order)

        if not exponent.is_Number:
            return self._compose_general_power(base, exponent, order)

        if not exponent.is_Rational:
            raise MalformedExpressionError(f"Inexact exponent in {expr}")

        base_series = self.compose(base, order)
        if isinstance(base_series, Infeasible):
            return base_series

        if exponent.is_Integer:
            return self._integer_power(base_series, int(exponent), expr)

        if exponent.q == 2:
            return self._half_integer_power(base_series, int(exponent.p), expr)

        return self._rational_power(base_series, exponent, expr)

    def _compose_general_power(self, base, exponent, order: int) -> SeriesResult:
        """b**e = exp(e * log(b))"""
        base_series = self.compose(base, order)
        if isinstance(base_series, Infeasible):
            return base_series

        if base_series.constant_term == 0:
            return self._infeasible(f"log of base {base} with zero constant term")

        log_base = self._apply(ElementaryFunction.LOG, base_series, base)
        if isinstance(log_base, Infeasible):
            return log_base

        exponent_series = self.compose(exponent, order)
        if isinstance(exponent_series, Infeasible):
            return exponent_series

        return exponent_series.multiply(log_base).exp()

    def _half_integer_power(self, base_series: TruncatedSeries, numerator: int,
                            expr) -> SeriesResult:
        """b**(n/2) = (s * sqrt(b / c0))**n with c0 = b(0) = s**2"""
        c0 = base_series.constant_term

        if c0 == 0:
            return self._infeasible(f"square root of a series with zero constant term in {expr}")
        if c0 < 0:
            return self._infeasible(f"negative radicand constant {c0} in {expr}")

        root_p, exact_p = integer_nthroot(int(c0.p), 2)
        root_q, exact_q = integer_nthroot(int(c0.q), 2)
        if not (exact_p and exact_q):
            return self._infeasible(f"radicand constant {c0} is not a rational square in {expr}")

        root = base_series.divide(c0).sqrt().scale(sp.Rational(root_p, root_q))

        if numerator < 0:
            root = root.invert()

        return root.power(abs(numerator))

    def _rational_power(self, base_series: TruncatedSeries, exponent: sp.Rational,
                        expr) -> SeriesResult:
        """b**(p/q) = exp((p/q) * log(b)), needs b(0) = 1"""
        log_base = self._apply(ElementaryFunction.LOG, base_series, expr)
        if isinstance(log_base, Infeasible):
            return log_base

        return log_base.scale(exponent).exp()

    def _integer_power(self, base_series: TruncatedSeries, n: int, expr) -> SeriesResult:
        if n > 0:
            return base_series.power(n)

        if base_series.constant_term != 1:
            return self._infeasible(
                f"negative power of a series with constant term {base_series.constant_term} in {expr}"
            )

        return base_series.invert().power(-n)

    # --------------------------- Functions ---------------------------------

    def _compose_function(self, expr, order: int) -> SeriesResult:
        function = ElementaryFunction.from_sympy(expr.func)
        if function is None or len(expr.args) != 1:
            raise MalformedExpressionError(f"Unsupported function call {expr} reached the composer")

        argument = self.compose(expr.args[0], order)
        if isinstance(argument, Infeasible):
            return argument

        return self._apply(function, argument, expr)

    def _apply(self, function: ElementaryFunction, argument: TruncatedSeries,
               expr) -> SeriesResult:
        rule = COMPOSITION_RULES[function]
        if not rule.accepts(argument):
            return self._infeasible(
                f"{function.value} needs argument constant term {rule.required_constant}, "
                f"got {argument.constant_term} in {expr}"
            )
        return rule.compose(argument)

    # --------------------------- Helpers ------------------------------------

    @staticmethod
    def _check_numeric_coefficient(coefficient, expr) -> None:
        if not coefficient.is_Rational:
            raise MalformedExpressionError(f"Non-rational coefficient {coefficient} in {expr}")

    @staticmethod
    def _infeasible(reason: str) -> Infeasible:
        logger.debug(f"Fast series composition infeasible: {reason}")
        return Infeasible(reason)
