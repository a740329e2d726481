# fastseries/utils/__init__.py
# ============================================================================
"""
Utilities module
"""

from .config import Settings, get_settings
from .validators import RequestValidator
from .logging_config import setup_logging

__all__ = [
    'Settings',
    'get_settings',
    'RequestValidator',
    'setup_logging'
]
