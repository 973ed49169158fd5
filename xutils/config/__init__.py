"""
Configuration package.

This package provides library configuration via the Settings class
loaded from environment variables, plus the fixed pattern and locale
lists used by the date parser.
"""

from .settings import Settings, FALLBACK_PATTERNS, SUPPORTED_LOCALES

__all__ = ['Settings', 'FALLBACK_PATTERNS', 'SUPPORTED_LOCALES']
