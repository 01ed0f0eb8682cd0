"""Validator: проверка корректности римских чисел.

- CHECK 0: допустимые символы
- CHECK 1-5: структурные правила записи
"""

from .validator import NumeralValidator

__all__ = [
    "NumeralValidator",
]
