# fastseries/series/__init__.py
# ============================================================================
"""
Exact-rational truncated series arithmetic
"""

from .truncated import TruncatedSeries

__all__ = [
    'TruncatedSeries'
]
