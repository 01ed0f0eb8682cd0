"""
RomanDigit: Таблица римских цифр

Единственное место, где задано соответствие символ → значение.
Все остальные модули обращаются к цифрам только через этот модуль.

Half-measure цифры (V, L, D) обозначают 5×10^k: они не повторяются
и никогда не стоят слева от большей цифры.
"""

from enum import Enum
from typing import Dict, Final

from src.core.domain.errors import UnknownSymbolError


# =============================================================================
# МИНИМАЛЬНЫЕ ДЛИНЫ ДЛЯ СТРУКТУРНЫХ ПРОВЕРОК
# =============================================================================
# Минимальная длина, при которой возможны четыре одинаковые цифры подряд
QUADRUPLE_DIGIT_MIN_LENGTH: Final[int] = 4

# Минимальная длина, при которой цифра может стоять и слева, и справа от большей
DEDUCTIVE_AND_ADDITIVE_MIN_LENGTH: Final[int] = 3

# Минимальная длина, при которой возможны две вычитаемые цифры подряд
MULTIPLE_DEDUCTIVE_MIN_LENGTH: Final[int] = 3

# Минимальная длина, при которой half-measure может стоять в вычитаемой позиции
DEDUCTIVE_HALF_MEASURE_MIN_LENGTH: Final[int] = 2


# =============================================================================
# ENUM
# =============================================================================


class RomanDigit(Enum):
    """
    Римская цифра: символ, целое значение, признак half-measure.

    Значения фиксированы и не изменяются во время работы.
    """

    I = ("I", 1, False)
    V = ("V", 5, True)
    X = ("X", 10, False)
    L = ("L", 50, True)
    C = ("C", 100, False)
    D = ("D", 500, True)
    M = ("M", 1000, False)

    def __init__(self, symbol: str, integer_value: int, half_measure: bool):
        self.symbol = symbol
        self.integer_value = integer_value
        self.half_measure = half_measure


# Строится один раз при импорте
_DIGIT_TABLE: Final[Dict[str, RomanDigit]] = {d.symbol: d for d in RomanDigit}

VALID_SYMBOLS: Final[str] = "".join(d.symbol for d in RomanDigit)


# =============================================================================
# LOOKUP
# =============================================================================


def get_digit(char: str) -> RomanDigit:
    """
    Римская цифра для символа.

    Args:
        char: Один символ в верхнем регистре

    Returns:
        Соответствующая RomanDigit

    Raises:
        UnknownSymbolError: Если символ не является римской цифрой
    """
    digit = _DIGIT_TABLE.get(char)
    if digit is None:
        raise UnknownSymbolError(char)
    return digit


def value_of(char: str) -> int:
    """Целое значение римской цифры."""
    return get_digit(char).integer_value


def is_half_measure(char: str) -> bool:
    """True для V, L, D."""
    return get_digit(char).half_measure


def is_roman_symbol(char: str) -> bool:
    """Проверка принадлежности символа алфавиту без исключения."""
    return char in _DIGIT_TABLE
