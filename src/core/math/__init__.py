"""
Core math modules

Positional summation of validated Roman numerals.
"""

from src.core.math.summation import calculate_sum, is_larger_numeral_next

__all__ = [
    "calculate_sum",
    "is_larger_numeral_next",
]
