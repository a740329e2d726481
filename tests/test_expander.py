"""
Integration tests: fast path with fallback to sympy.series
"""

import pytest
import sympy as sp

from fastseries.expansion.assembler import PowerSeries
from fastseries.expansion.expander import (
    FAST_PATH,
    GENERAL_PATH,
    FastSeriesExpander,
    expand_series,
    fast_series,
)
from fastseries.expansion.results import FastPathInfeasible, Infeasible
from fastseries.utils.config import Settings

R = sp.Rational
x, y = sp.symbols('x y')


@pytest.fixture
def expander(settings):
    return FastSeriesExpander(settings=settings)


@pytest.mark.parametrize("expr, order, coefficients", [
    (sp.exp(x), 4, [1, 1, R(1, 2), R(1, 6)]),
    (sp.sin(x) * sp.cos(x), 4, [0, 1, 0, R(-2, 3)]),
    (sp.sqrt(x + 4), 3, [2, R(1, 4), R(-1, 64)]),
    (1 / (1 - x), 5, [1, 1, 1, 1, 1]),
])
def test_end_to_end_coefficients(expander, expr, order, coefficients):
    outcome = expander.expand(expr, x, 0, order)
    assert outcome.path == FAST_PATH
    assert outcome.used_fast_path
    assert outcome.power_series.coefficients() == coefficients


@pytest.mark.integration
@pytest.mark.parametrize("expr", [
    sp.exp(sp.sin(x)),
    sp.tan(x) * sp.atan(x) + sp.cosh(x),
    sp.log(1 + x) / (1 + x)**2,
    sp.sqrt(x + 9) * sp.asin(x),
    (1 + x)**x,
    (1 + x)**R(2, 3) - sp.tanh(x),
    sp.asinh(x) + sp.atanh(x) + sp.sinh(x),
    R(3, 5) * x**3 - 7,
])
def test_agrees_with_sympy_series(expander, expr):
    order = 7
    outcome = expander.expand(expr, x, 0, order)
    assert outcome.path == FAST_PATH
    general = sp.series(expr, x, 0, order)
    assert sp.expand(outcome.expr.removeO() - general.removeO()) == 0


def test_result_carries_order_term(expander):
    outcome = expander.expand(sp.exp(x), x, 0, 4)
    assert outcome.expr == 1 + x + x**2 / 2 + x**3 / 6 + sp.O(x**4)
    assert outcome.expr.getO() == sp.O(x**4)


@pytest.mark.parametrize("expr, reason", [
    (sp.pi * x, "symbolic constant"),
    (x * y, "second variable"),
    (sp.Float(0.5) * sp.sin(x), "inexact"),
    (sp.log(x + 2), "log"),
    (sp.sqrt(x + 2), "square"),
])
def test_falls_back_to_general_algorithm(expander, expr, reason):
    outcome = expander.expand(expr, x, 0, 4)
    assert outcome.path == GENERAL_PATH
    assert outcome.power_series is None
    assert reason in outcome.reason
    assert sp.simplify(outcome.expr.removeO() - sp.series(expr, x, 0, 4).removeO()) == 0


def test_nonzero_point_uses_general_algorithm(expander):
    outcome = expander.expand(sp.exp(x), x, 1, 3)
    assert outcome.path == GENERAL_PATH
    assert "not the origin" in outcome.reason
    assert outcome.expr == sp.series(sp.exp(x), x, 1, 3)


def test_variable_mismatch_uses_general_algorithm(expander):
    outcome = expander.expand(sp.sin(y), x, 0, 4)
    assert outcome.path == GENERAL_PATH
    assert "differs" in outcome.reason


def test_constant_expression_uses_fast_path(expander):
    outcome = expander.expand(R(3, 2), x, 0, 3)
    assert outcome.path == FAST_PATH
    assert outcome.expr == R(3, 2) + sp.O(x**3)


def test_fallback_disabled_raises():
    expander = FastSeriesExpander(settings=Settings(fallback_enabled=False))
    with pytest.raises(FastPathInfeasible) as excinfo:
        expander.expand(sp.log(x), x, 0, 4)
    assert "log" in excinfo.value.reason


def test_try_fast_path_accepts_relation(expander):
    result = expander.try_fast_path(sp.cos(x), sp.Eq(x, 0), 5)
    assert isinstance(result, PowerSeries)
    assert result.relation == sp.Eq(x, 0)
    assert result.coefficients() == [1, 0, R(-1, 2), 0, R(1, 24)]


def test_log_of_symbol_is_infeasible_not_an_error(expander):
    result = expander.try_fast_path(sp.log(x), (x, 0), 4)
    assert isinstance(result, Infeasible)


@pytest.mark.parametrize("order", [0, -3, 2.5, "six", True])
def test_invalid_order(expander, order):
    with pytest.raises(ValueError):
        expander.expand(sp.exp(x), x, 0, order)


def test_order_above_limit(expander):
    with pytest.raises(ValueError):
        expander.expand(sp.exp(x), x, 0, expander.settings.max_order + 1)


def test_invalid_variable(expander):
    with pytest.raises(ValueError):
        expander.expand(sp.exp(x), x + 1, 0, 3)


def test_default_order_from_settings():
    expander = FastSeriesExpander(settings=Settings(default_order=3))
    outcome = expander.expand(sp.exp(x), x)
    assert outcome.power_series.order == 3


def test_module_helpers():
    assert expand_series(sp.sin(x), x, order=4) == x - x**3 / 6 + sp.O(x**4)
    assert isinstance(fast_series(sp.log(x), x), Infeasible)
    assert fast_series(sp.exp(x), x, order=2).coefficients() == [1, 1]


def test_cosh_of_vanishing_argument_keeps_constant(expander):
    outcome = expander.expand(sp.cosh(x**5) + x, x, 0, 3)
    assert outcome.path == FAST_PATH
    assert outcome.expr == 1 + x + sp.O(x**3)
