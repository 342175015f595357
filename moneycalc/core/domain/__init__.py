"""
Domain models and value objects.

Contains fundamental domain entities like Rate.
"""

from moneycalc.core.domain.rate import Rate, RateLike

__all__ = [
    "Rate",
    "RateLike",
]
