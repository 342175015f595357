"""
moneycalc - Monitoring Package
"""

from .logging import disable_logging, setup_logging

__all__ = [
    "setup_logging",
    "disable_logging",
]
