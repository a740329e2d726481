# ============================================================================
# fastseries/__init__.py - Package initialization
# ============================================================================
"""
Fast exact-rational truncated power series for SymPy expressions
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core expansion
from .expansion import (
    EligibilityClassifier,
    SeriesComposer,
    ResultAssembler,
    PowerSeries,
    FastSeriesExpander,
    SeriesOutcome,
    fast_series,
    expand_series,
    Infeasible,
    Eligibility,
    FastSeriesError,
    MalformedExpressionError,
    FastPathInfeasible
)

# Series arithmetic and function table
from .series import TruncatedSeries
from .functions import ElementaryFunction

# Utilities
from .utils import Settings, get_settings, RequestValidator, setup_logging

# Define public API
__all__ = [
    # Version info
    '__version__',

    # Expansion
    'EligibilityClassifier',
    'SeriesComposer',
    'ResultAssembler',
    'PowerSeries',
    'FastSeriesExpander',
    'SeriesOutcome',
    'fast_series',
    'expand_series',

    # Outcomes and errors
    'Infeasible',
    'Eligibility',
    'FastSeriesError',
    'MalformedExpressionError',
    'FastPathInfeasible',

    # Building blocks
    'TruncatedSeries',
    'ElementaryFunction',

    # Utilities
    'Settings',
    'get_settings',
    'RequestValidator',
    'setup_logging'
]
