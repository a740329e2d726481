# -*- coding: utf-8 -*-
"""
ElementaryFunction
------------------
The fixed whitelist of one-argument functions the fast series path can
compose, together with the constant term each composition requires of its
argument's series.

API:
- ElementaryFunction.from_sympy(func) -> ElementaryFunction | None
- COMPOSITION_RULES[function] -> CompositionRule
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional
import sympy as sp

from ..series.truncated import TruncatedSeries


__all__ = [
    "ElementaryFunction",
    "CompositionRule",
    "COMPOSITION_RULES",
    "supported_function_names",
]


class ElementaryFunction(Enum):
    EXP = "exp"
    LOG = "log"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASIN = "asin"
    ASINH = "asinh"
    ATAN = "atan"
    ATANH = "atanh"

    @classmethod
    def from_sympy(cls, func) -> Optional["ElementaryFunction"]:
        """Map a sympy function class (``expr.func``) to its member, if any."""
        return _SYMPY_FUNCTIONS.get(func)


_SYMPY_FUNCTIONS: Dict[object, ElementaryFunction] = {
    sp.exp: ElementaryFunction.EXP,
    sp.log: ElementaryFunction.LOG,
    sp.sin: ElementaryFunction.SIN,
    sp.cos: ElementaryFunction.COS,
    sp.tan: ElementaryFunction.TAN,
    sp.sinh: ElementaryFunction.SINH,
    sp.cosh: ElementaryFunction.COSH,
    sp.tanh: ElementaryFunction.TANH,
    sp.asin: ElementaryFunction.ASIN,
    sp.asinh: ElementaryFunction.ASINH,
    sp.atan: ElementaryFunction.ATAN,
    sp.atanh: ElementaryFunction.ATANH,
}


@dataclass(frozen=True)
class CompositionRule:
    """How to compose one whitelisted function with an argument series."""
    function: ElementaryFunction
    required_constant: int  # constant term the argument series must have
    compose: Callable[[TruncatedSeries], TruncatedSeries]

    def accepts(self, argument: TruncatedSeries) -> bool:
        return argument.constant_term == self.required_constant


def _rule(function: ElementaryFunction, required_constant: int = 0) -> CompositionRule:
    method = getattr(TruncatedSeries, function.value)
    return CompositionRule(function, required_constant, method)


COMPOSITION_RULES: Dict[ElementaryFunction, CompositionRule] = {
    function: _rule(function, 1 if function is ElementaryFunction.LOG else 0)
    for function in ElementaryFunction
}


def supported_function_names() -> List[str]:
    return sorted(function.value for function in ElementaryFunction)
