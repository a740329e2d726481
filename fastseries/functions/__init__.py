# fastseries/functions/__init__.py
# ============================================================================
"""
Elementary function whitelist
Maps sympy functions to their truncated-series compositions
"""

from .elementary import (
    ElementaryFunction,
    CompositionRule,
    COMPOSITION_RULES,
    supported_function_names
)

__all__ = [
    'ElementaryFunction',
    'CompositionRule',
    'COMPOSITION_RULES',
    'supported_function_names'
]
