# fastseries/expansion/__init__.py
# ============================================================================
"""
Fast truncated series expansion
Classifier -> composer -> assembler, with fallback to sympy.series
"""

from .results import (
    Infeasible,
    Eligibility,
    FastSeriesError,
    MalformedExpressionError,
    FastPathInfeasible
)
from .classifier import EligibilityClassifier
from .composer import SeriesComposer
from .assembler import PowerSeries, ResultAssembler
from .expander import (
    FastSeriesExpander,
    SeriesOutcome,
    fast_series,
    expand_series
)

__all__ = [
    'Infeasible',
    'Eligibility',
    'FastSeriesError',
    'MalformedExpressionError',
    'FastPathInfeasible',
    'EligibilityClassifier',
    'SeriesComposer',
    'PowerSeries',
    'ResultAssembler',
    'FastSeriesExpander',
    'SeriesOutcome',
    'fast_series',
    'expand_series'
]
