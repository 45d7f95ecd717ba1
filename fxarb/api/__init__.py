"""
Request and response models for the dashboard API.
"""

from .models import CurrencyInfo, RateCreate

__all__ = [
    "CurrencyInfo",
    "RateCreate",
]
