# fastseries/expansion/classifier.py
"""
Eligibility check for the fast series path
"""

import logging
from typing import Optional, Tuple
import sympy as sp

from ..functions.elementary import ElementaryFunction
from .results import Eligibility

logger = logging.getLogger(__name__)

# (rejection reason or None, chosen variable so far)
ScanResult = Tuple[Optional[str], Optional[sp.Symbol]]


class EligibilityClassifier:
    """
    Decides, before any series is computed, whether an expression is simple
    enough for the fast path.

    Accepted expressions contain a single symbol, exact rational numbers and
    whitelisted one-argument functions only, combined by sums, products and
    powers. The check approves structure; numeric preconditions that only show
    up once sub-expressions are expanded are left to the composer.

    The classifier holds no state between calls: the variable fixed by the
    first symbol is passed down the recursion and returned from it.
    """

    def classify(self, expr) -> bool:
        return self.inspect(expr).eligible

    def inspect(self, expr) -> Eligibility:
        expr = sp.sympify(expr)
        reason, variable = self._scan(expr, None)

        if reason is not None:
            logger.debug(f"Fast series path rejected {expr}: {reason}")
            return Eligibility(False, variable, reason)

        return Eligibility(True, variable)

    def _scan(self, expr: sp.Basic, variable: Optional[sp.Symbol]) -> ScanResult:
        if expr.is_Number:
            if expr.is_Rational:
                return None, variable
            return f"inexact or non-finite number {expr}", variable

        if expr.is_Symbol:
            if variable is None:
                return None, expr
            if expr != variable:
                return f"second variable {expr} besides {variable}", variable
            return None, variable

        if isinstance(expr, sp.NumberSymbol) or expr is sp.I:
            return f"symbolic constant {expr}", variable

        if expr.is_Function:
            function = ElementaryFunction.from_sympy(expr.func)
            if function is None:
                return f"unsupported function {expr.func}", variable
            if len(expr.args) != 1:
                return f"{function.value} called with {len(expr.args)} arguments", variable
            return self._scan(expr.args[0], variable)

        if expr.is_Pow:
            return self._scan_all((expr.base, expr.exp), variable)

        if expr.is_Add or expr.is_Mul:
            if expr.is_Add:
                constant, operands = expr.as_coeff_add()
            else:
                constant, operands = expr.as_coeff_mul()
            return self._scan_all((constant,) + operands, variable)

        return f"unsupported expression {type(expr).__name__}", variable

    def _scan_all(self, operands, variable: Optional[sp.Symbol]) -> ScanResult:
        for operand in operands:
            reason, variable = self._scan(operand, variable)
            if reason is not None:
                return reason, variable
        return None, variable
