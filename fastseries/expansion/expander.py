# fastseries/expansion/expander.py
"""
Series expansion with a fast exact-rational path.

expand(expr, x, point=0, order=6)
---------------------------------
Try the fast path first: classify the expression, compose its truncated series
and assemble the power series. If any stage reports the expression infeasible,
fall back to ``sympy.series`` (the general algorithm). Both paths return the
same shape, ``polynomial + O(x**order)``.

The fast path only expands about 0; other points go straight to sympy.series.
"""

from dataclasses import dataclass
import logging
from typing import Optional, Union
import sympy as sp

from ..utils.config import Settings, get_settings
from ..utils.validators import RequestValidator
from .assembler import PowerSeries, ResultAssembler
from .classifier import EligibilityClassifier
from .composer import SeriesComposer
from .results import FastPathInfeasible, Infeasible

logger = logging.getLogger(__name__)

FAST_PATH = "fast"
GENERAL_PATH = "general"


@dataclass
class SeriesOutcome:
    """Expansion result and the path that produced it"""
    expr: sp.Expr
    path: str
    power_series: Optional[PowerSeries] = None
    reason: str = ""  # why the fast path was not used

    @property
    def used_fast_path(self) -> bool:
        return self.path == FAST_PATH


class FastSeriesExpander:
    """
    Classifier, composer and assembler wired together with the fallback.

    Args:
        settings: overrides the process-wide settings
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.classifier = EligibilityClassifier()
        self.composer = SeriesComposer(settings=self.settings)
        self.assembler = ResultAssembler()

    def try_fast_path(self, expr, relation, order: int) -> Union[PowerSeries, Infeasible]:
        """
        Fast path only.

        Args:
            expr: sympy expression (or anything sympify accepts)
            relation: ``Eq(x, point)`` or ``(x, point)``
            order: number of coefficients, at least 1

        Returns:
            PowerSeries, or Infeasible with the reason
        """
        variable, point = RequestValidator.validate_relation(relation)
        order = RequestValidator.validate_order(order, self.settings.max_order)
        expr = sp.sympify(expr)

        if point != 0:
            return Infeasible(f"expansion point {point} is not the origin")

        eligibility = self.classifier.inspect(expr)
        if not eligibility:
            return Infeasible(eligibility.reason)

        if eligibility.variable is not None and eligibility.variable != variable:
            return Infeasible(
                f"expression variable {eligibility.variable} differs from expansion variable {variable}"
            )

        series = self.composer.compose(expr, order)
        if isinstance(series, Infeasible):
            return series

        return self.assembler.assemble(series, sp.Eq(variable, point), order)

    def expand(self, expr, x, point=0, order: Optional[int] = None) -> SeriesOutcome:
        """
        Fast path with fallback to sympy.series.

        The fast path always appends the order term, so a constant expression
        comes back as ``5 + O(x**order)`` where ``sympy.series`` returns just
        ``5``. Compare ``removeO()`` of both when mixing paths.
        """
        if order is None:
            order = self.settings.default_order
        x = RequestValidator.validate_variable(x)
        expr = sp.sympify(expr)

        result = self.try_fast_path(expr, (x, point), order)
        if isinstance(result, PowerSeries):
            logger.debug(f"Fast series path expanded {expr} to order {order}")
            return SeriesOutcome(result.as_expr(), FAST_PATH, power_series=result)

        if not self.settings.fallback_enabled:
            raise FastPathInfeasible(result.reason)

        logger.info(f"Fast series path infeasible for {expr} ({result.reason}); using sympy.series")
        general = sp.series(expr, x, sp.sympify(point), order)
        return SeriesOutcome(general, GENERAL_PATH, reason=result.reason)


_default_expander: Optional[FastSeriesExpander] = None


def _get_expander() -> FastSeriesExpander:
    global _default_expander
    if _default_expander is None:
        _default_expander = FastSeriesExpander()
    return _default_expander


def fast_series(expr, x, point=0, order: Optional[int] = None) -> Union[PowerSeries, Infeasible]:
    """Fast path only; never falls back."""
    expander = _get_expander()
    if order is None:
        order = expander.settings.default_order
    return expander.try_fast_path(expr, (x, point), order)


def expand_series(expr, x, point=0, order: Optional[int] = None) -> sp.Expr:
    """Truncated series of expr about x=point, fast path first."""
    return _get_expander().expand(expr, x, point=point, order=order).expr
